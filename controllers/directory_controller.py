import logging

from flask import Blueprint, current_app, jsonify
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

directory_bp = Blueprint("directory", __name__)


def _directory_service():
    return current_app.extensions["directory_service"]


@directory_bp.route("/employees")
def list_employees():
    try:
        return jsonify(_directory_service().list_employees())
    except PyMongoError:
        logger.exception("Error in GET /employees")
        return jsonify({"error": "Failed to fetch employees"}), 500


@directory_bp.route("/offices")
def list_offices():
    try:
        return jsonify(_directory_service().list_offices())
    except PyMongoError:
        logger.exception("Error in GET /offices")
        return jsonify({"error": "Failed to fetch offices"}), 500
