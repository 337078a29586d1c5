import logging
import secrets
from datetime import timedelta

from bson import ObjectId
from bson.errors import InvalidId

from models.users import User, utcnow
from utils.db import users_col
from utils.exceptions import EmailNotAllowed, InvalidOtp

logger = logging.getLogger(__name__)

OTP_LENGTH = 6


def generate_otp_code(length=OTP_LENGTH):
    return "".join(secrets.choice("0123456789") for _ in range(length))


class AuthService:

    def __init__(self, db, allowed_emails, mailer, otp_ttl_minutes=10):
        self.db = db
        self.allowed_emails = list(allowed_emails)
        self.mailer = mailer
        self.otp_ttl_minutes = otp_ttl_minutes

    def send_otp(self, email):
        email = User.normalize_email(email)
        if not User.is_allowed_email(email, self.allowed_emails):
            logger.warning("OTP requested for email outside the allow list: %s", email)
            raise EmailNotAllowed("Email is not allowed")

        code = generate_otp_code()
        now = utcnow()
        otp = {"code": code, "expiresAt": now + timedelta(minutes=self.otp_ttl_minutes)}

        collection = users_col(self.db)
        if collection.find_one({"email": email}):
            collection.update_one({"email": email}, {"$set": {"otp": otp, "updatedAt": now}})
        else:
            collection.insert_one(User(email, otp=otp).to_dict())

        if not self.mailer.send_otp(email, code, self.otp_ttl_minutes):
            return {"success": True, "message": "OTP generated, but email delivery is not configured."}
        return {"success": True, "message": "OTP sent to email."}

    def verify_otp(self, email, code):
        email = User.normalize_email(email)
        collection = users_col(self.db)
        user = collection.find_one({"email": email})
        if not User.otp_matches(user, code):
            raise InvalidOtp("Invalid or expired OTP")

        now = utcnow()
        collection.update_one(
            {"_id": user["_id"]},
            {"$set": {"otp": {}, "isVerified": True, "lastLogin": now, "updatedAt": now}},
        )
        user.update({"otp": {}, "isVerified": True, "lastLogin": now})
        logger.info("User %s logged in", email)
        return user

    def get_user(self, user_id):
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
        return users_col(self.db).find_one({"_id": oid})
