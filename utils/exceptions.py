class AuthError(Exception):
    """Base exception for login failures surfaced to the client."""

    status_code = 400


class EmailNotAllowed(AuthError):
    """Raised when an email is not on the configured allow list."""

    status_code = 403


class InvalidOtp(AuthError):
    """Raised when an OTP is wrong, missing or expired."""


class MailDeliveryError(AuthError):
    """Raised when the OTP email could not be sent."""

    status_code = 502
