import logging

from flask import Blueprint, current_app, jsonify, request, url_for
from bson.errors import BSONError
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

attendance_bp = Blueprint("attendance", __name__)


def _attendance_service():
    return current_app.extensions["attendance_service"]


def _selfie_store():
    return current_app.extensions["selfie_store"]


# ==========================================================
# SUBMIT ATTENDANCE (multipart form, optional selfie)
# ==========================================================
@attendance_bp.route("/attendance", methods=["POST"])
def submit_attendance():
    try:
        filename = _selfie_store().save_from_request(request.files)
        # Public URL built from the request's scheme and host
        selfie_url = url_for("uploads.serve_upload", filename=filename, _external=True) if filename else ""

        # Multipart from the mobile app; plain JSON bodies are accepted too
        fields = request.form
        if not fields and request.is_json:
            fields = request.get_json(silent=True)
            if not isinstance(fields, dict):
                fields = {}
        result = _attendance_service().record(fields, selfie_url=selfie_url)
        return jsonify(result)
    except (PyMongoError, BSONError, OverflowError, OSError):
        logger.exception("Error in POST /attendance")
        return jsonify({"success": False, "error": "Internal server error"}), 500


# ==========================================================
# ATTENDANCE DETAILS (dashboard)
# ==========================================================
@attendance_bp.route("/attendance", methods=["GET"])
def list_attendance():
    employee = request.args.get("employee")
    date = request.args.get("date")

    try:
        records = _attendance_service().list_attendance(employee=employee, date=date)
        return jsonify(records)
    except PyMongoError:
        logger.exception("Error in GET /attendance")
        return jsonify({"error": "Failed to fetch attendance details"}), 500
