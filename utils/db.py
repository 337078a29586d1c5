"""
utils/db.py
-----------------
This module initializes the MongoDB connection for the Flask application
and exposes the collection names the models live in.
"""

import logging

from flask_pymongo import PyMongo

logger = logging.getLogger(__name__)

# Flask-PyMongo extension, bound to an app by init_db_connection()
mongo = PyMongo()

# Collection names (kept compatible with data written by the earlier Node backend)
ATTENDANCE_COLLECTION = "attendencedatas"
EMPLOYEE_COLLECTION = "employees"
OFFICE_COLLECTION = "offices"
USER_COLLECTION = "users"


def init_db_connection(app):
    """
    Initialize MongoDB connection with Flask app.
    Uses MONGO_URI from the loaded config and returns the database handle.
    A URI without a database path falls back to MONGO_DEFAULT_DB.
    """
    mongo.init_app(app)

    db = mongo.db
    if db is None:
        db = mongo.cx[app.config.get("MONGO_DEFAULT_DB", "test")]

    logger.info("MongoDB connection initialized (db=%s)", db.name)
    return db


# Collection shortcuts
attendance_col = lambda db: db[ATTENDANCE_COLLECTION]
employees_col = lambda db: db[EMPLOYEE_COLLECTION]
offices_col = lambda db: db[OFFICE_COLLECTION]
users_col = lambda db: db[USER_COLLECTION]


def serialize_doc(doc):
    """Return a JSON-safe copy of a Mongo document (ObjectId -> str)."""
    doc = dict(doc)
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc
