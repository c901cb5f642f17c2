"""
Domain error taxonomy.

Services raise these; the exception handlers in app.main render them
through the response envelope with the matching HTTP status.
"""

from typing import List, Optional


class JobHubError(Exception):
    """Base application error."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(JobHubError):
    """Missing or malformed required fields."""

    status_code = 400
    default_message = "Validation error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors


class InvalidIdentifierError(JobHubError):
    """A reference that is not a well-formed ObjectId."""

    status_code = 400
    default_message = "Invalid identifier"


class NotFoundError(JobHubError):
    """Referenced entity does not exist."""

    status_code = 404
    default_message = "Resource not found"


class ConflictError(JobHubError):
    """Write would violate a uniqueness rule (e.g. duplicate application)."""

    status_code = 409
    default_message = "Resource already exists"


__all__ = [
    "ConflictError",
    "InvalidIdentifierError",
    "JobHubError",
    "NotFoundError",
    "ValidationError",
]
