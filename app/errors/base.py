# app/errors/base.py


class GymError(Exception):
    """Base exception for all business-rule errors.

    Carries the HTTP status the error is reported with and a message that is
    safe to show to the caller.
    """
    status_code: int = 400
    default_message: str = "Request could not be processed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(GymError):
    """Raised when a requested record does not exist."""
    status_code = 404
    default_message = "Record not found."


class ForbiddenError(GymError):
    """Raised when the caller may not act on the record."""
    status_code = 403
    default_message = "Access denied."


class UnauthorizedError(GymError):
    """Raised when the caller could not be authenticated."""
    status_code = 401
    default_message = "Unauthorized access."
