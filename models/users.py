import secrets
from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc)


class User:
    """
    Dashboard user who logs in with an emailed one-time passcode.

    The allowed-email constraint is declared here but only enforced where
    AuthService calls is_allowed_email().
    """

    def __init__(self, email, otp=None, is_verified=False, last_login=None,
                 created_at=None, updated_at=None):
        self.email = email
        self.otp = otp or {}  # {"code": "123456", "expiresAt": datetime}
        self.is_verified = is_verified
        self.last_login = last_login or utcnow()
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or utcnow()

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "email": self.email,
            "otp": self.otp,
            "isVerified": self.is_verified,
            "lastLogin": self.last_login,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @staticmethod
    def normalize_email(email):
        return (email or "").strip().lower()

    @staticmethod
    def is_allowed_email(email, allowed_emails):
        allowed = {User.normalize_email(e) for e in allowed_emails}
        return bool(email) and User.normalize_email(email) in allowed

    @staticmethod
    def otp_matches(user_doc, code, now=None):
        otp = (user_doc or {}).get("otp") or {}
        expires_at = otp.get("expiresAt")
        if not otp.get("code") or not code or expires_at is None:
            return False
        # Mongo returns naive UTC datetimes unless tz_aware is set on the client
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if (now or utcnow()) >= expires_at:
            return False
        return secrets.compare_digest(str(otp["code"]).encode(), str(code).strip().encode())

    @staticmethod
    def to_public(user_doc):
        return {
            "id": str(user_doc["_id"]),
            "email": user_doc.get("email"),
            "isVerified": bool(user_doc.get("isVerified")),
            "lastLogin": user_doc["lastLogin"].isoformat() if user_doc.get("lastLogin") else None,
        }
