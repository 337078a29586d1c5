import logging

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from utils.db import init_db_connection
from utils.mailer import OtpMailer
from utils.uploads import SelfieStore
from services.attendance_service import AttendanceService
from services.directory_service import DirectoryService
from services.auth_service import AuthService
from commands import register_commands

# Import controllers
from controllers.attendance_controller import attendance_bp
from controllers.directory_controller import directory_bp
from controllers.auth_controller import auth_bp
from controllers.system_controller import system_bp
from controllers.uploads_controller import uploads_bp

logger = logging.getLogger(__name__)


def configure_logging(app):
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(config_object=Config, db=None):
    """
    Build the Flask app.

    `db` is the MongoDB database handle the services use; when omitted it
    comes from Flask-PyMongo using MONGO_URI.
    """
    app = Flask(__name__)                   # Initialize Flask app
    app.config.from_object(config_object)   # Load configuration from Config class
    app.json.sort_keys = False              # Keep response field order
    configure_logging(app)
    CORS(app)                               # Allow requests from the mobile app and dashboard

    if db is None:
        db = init_db_connection(app)        # Initialize MongoDB connection

    selfie_store = SelfieStore(app.config["UPLOAD_FOLDER"])
    selfie_store.ensure_folder()
    logger.info("Serving selfies from %s", selfie_store.folder)

    app.extensions["selfie_store"] = selfie_store
    app.extensions["attendance_service"] = AttendanceService(db)
    app.extensions["directory_service"] = DirectoryService(db)
    app.extensions["auth_service"] = AuthService(
        db,
        allowed_emails=app.config["ALLOWED_EMAILS"],
        mailer=OtpMailer.from_config(app.config),
        otp_ttl_minutes=app.config["OTP_TTL_MINUTES"],
    )

    # Register Blueprint
    app.register_blueprint(system_bp)
    app.register_blueprint(attendance_bp)
    app.register_blueprint(directory_bp)
    app.register_blueprint(uploads_bp)
    app.register_blueprint(auth_bp)

    register_commands(app)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"success": False, "error": "Internal server error"}), 500

    @app.errorhandler(413)
    def too_large(e):
        return jsonify({"success": False, "error": "Upload too large"}), 413

    return app


# Run the app
if __name__ == "__main__":
    app = create_app()
    logger.info("Server running at http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
