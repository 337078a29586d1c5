from functools import wraps
from flask import session, jsonify

# This decorator makes sure that only logged-in users can reach protected endpoints
def login_required(view_function):
    @wraps(view_function)
    def decorated_function(*args, **kwargs):
        # Check if user is logged in
        if "user_id" not in session:
            return jsonify({"success": False, "error": "Authentication required"}), 401
        return view_function(*args, **kwargs)
    return decorated_function


def login_user(user_doc):
    session.clear()
    session["user_id"] = str(user_doc["_id"])
    session["user_email"] = user_doc.get("email")


def logout_user():
    session.clear()
    return jsonify({"success": True, "message": "Logged out successfully."})
