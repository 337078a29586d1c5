from flask import Blueprint, current_app, send_from_directory

uploads_bp = Blueprint("uploads", __name__, url_prefix="/uploads")


# Serve stored selfies
@uploads_bp.route("/<path:filename>")
def serve_upload(filename):
    return send_from_directory(current_app.extensions["selfie_store"].folder, filename)
