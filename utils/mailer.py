import logging
import smtplib
from email.message import EmailMessage

from utils.exceptions import MailDeliveryError

logger = logging.getLogger(__name__)


class OtpMailer:
    """Sends login passcodes over SMTP. Without MAIL_SERVER, delivery is skipped."""

    def __init__(self, server=None, port=587, username=None, password=None, use_tls=True, sender=None):
        self.server = server
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.sender = sender or username

    @classmethod
    def from_config(cls, config):
        return cls(
            server=config.get("MAIL_SERVER"),
            port=config.get("MAIL_PORT", 587),
            username=config.get("MAIL_USERNAME"),
            password=config.get("MAIL_PASSWORD"),
            use_tls=config.get("MAIL_USE_TLS", True),
            sender=config.get("MAIL_SENDER"),
        )

    @property
    def enabled(self):
        return bool(self.server)

    def build_message(self, email, code, ttl_minutes):
        message = EmailMessage()
        message["Subject"] = "Your attendance dashboard login code"
        message["From"] = self.sender or "no-reply@localhost"
        message["To"] = email
        message.set_content(
            f"Your one-time login code is {code}.\n"
            f"It expires in {ttl_minutes} minutes."
        )
        return message

    def send_otp(self, email, code, ttl_minutes):
        if not self.enabled:
            logger.warning("MAIL_SERVER is not configured; OTP email to %s was not sent", email)
            return False

        message = self.build_message(email, code, ttl_minutes)
        try:
            with smtplib.SMTP(self.server, self.port, timeout=10) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password or "")
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.exception("Failed to send OTP email to %s", email)
            raise MailDeliveryError("Could not send OTP email") from e

        logger.info("OTP email sent to %s", email)
        return True
