# core/exceptions.py


class BookshelfError(Exception):
    """Base class for errors raised by the bookshelf core."""
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class UnauthenticatedError(BookshelfError):
    """Missing, invalid or expired session, or a session for an unknown user."""
    status_code = 401


class ForbiddenError(BookshelfError):
    status_code = 403


class NotFoundError(BookshelfError):
    status_code = 404


class ConflictError(BookshelfError):
    """Duplicate user or duplicate library entry."""
    status_code = 400


class ValidationError(BookshelfError):
    status_code = 400


class ExternalServiceError(BookshelfError):
    """The external catalog lookup failed."""
    status_code = 502


class ConfigurationError(BookshelfError):
    """Raised at startup when the process is misconfigured."""
