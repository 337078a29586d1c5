from flask import Blueprint, current_app, jsonify

from utils.auth import login_required

system_bp = Blueprint("system", __name__)


@system_bp.route("/")
def health():
    return jsonify({"status": "OK", "message": "API is running"})


# Maps key for the dashboard; logged-in users only
@system_bp.route("/google")
@login_required
def google_maps_key():
    return jsonify({"key": current_app.config.get("GOOGLE_MAPS_API_KEY")})
