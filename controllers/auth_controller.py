import logging

from flask import Blueprint, current_app, jsonify, request, session
from pymongo.errors import PyMongoError

from models.users import User
from utils.auth import login_required, login_user, logout_user
from utils.exceptions import AuthError

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _auth_service():
    return current_app.extensions["auth_service"]


def _payload():
    return request.get_json(silent=True) or request.form


@auth_bp.errorhandler(AuthError)
def handle_auth_error(e):
    return jsonify({"success": False, "error": str(e)}), e.status_code


@auth_bp.errorhandler(PyMongoError)
def handle_storage_error(e):
    logger.error("Storage error in auth route", exc_info=e)
    return jsonify({"success": False, "error": "Internal server error"}), 500


# Request a login code
@auth_bp.route("/send-otp", methods=["POST"])
def send_otp():
    email = _payload().get("email")
    return jsonify(_auth_service().send_otp(email))


# Exchange the code for a session
@auth_bp.route("/verify-otp", methods=["POST"])
def verify_otp():
    data = _payload()
    user = _auth_service().verify_otp(data.get("email"), data.get("otp"))
    login_user(user)
    return jsonify({"success": True, "message": "Login successful.", "user": User.to_public(user)})


# Current user
@auth_bp.route("/me")
@login_required
def me():
    user = _auth_service().get_user(session.get("user_id"))
    if not user:
        session.clear()
        return jsonify({"success": False, "error": "User not found"}), 401
    return jsonify({"success": True, "user": User.to_public(user)})


# Logout
@auth_bp.route("/logout", methods=["POST"])
def logout():
    return logout_user()
