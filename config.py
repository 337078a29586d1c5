import os

from dotenv import load_dotenv

# Load .env if present
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_list(name, default=""):
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")

    # MongoDB
    MONGO_URI = os.getenv("MONGODB_URL") or os.getenv("MONGO_URI", "mongodb://localhost:27017/attendance")
    MONGO_DEFAULT_DB = os.getenv("MONGO_DEFAULT_DB", "test")

    # Selfie uploads
    UPLOAD_FOLDER = os.path.abspath(os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads")))
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", "0")) or None
    SELFIE_RETENTION_DAYS = int(os.getenv("SELFIE_RETENTION_DAYS", "0"))

    GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY", "")

    # OTP login
    ALLOWED_EMAILS = _env_list("ALLOWED_EMAILS", os.getenv("REACT_APP_ALLOWED_EMAILS", ""))
    OTP_TTL_MINUTES = int(os.getenv("OTP_TTL_MINUTES", "10"))

    MAIL_SERVER = os.getenv("MAIL_SERVER")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USERNAME = os.getenv("MAIL_USERNAME")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD")
    MAIL_USE_TLS = bool(int(os.getenv("MAIL_USE_TLS", "1")))
    MAIL_SENDER = os.getenv("MAIL_SENDER") or MAIL_USERNAME

    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "5000"))
    DEBUG = bool(int(os.getenv("DEBUG", "0")))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    MONGO_URI = "mongodb://localhost:27017/attendance_test"
    GOOGLE_MAPS_API_KEY = "test-maps-key"
    ALLOWED_EMAILS = ["admin@example.com"]
    MAIL_SERVER = None
    LOG_LEVEL = "DEBUG"
