"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and error code
- Used by the API layer for consistent error responses
- The public body is always {"error": message}, plus "details" when set
"""
from typing import Optional


class EduPilotError(Exception):
    """
    Base exception for all application errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidInput(EduPilotError):
    """Raised when a required request field is missing or empty."""
    status_code = 400
    error_code = "invalid_input"


class Unauthorized(EduPilotError):
    """Raised when credentials do not match a stored user."""
    status_code = 401
    error_code = "unauthorized"


class NotFound(EduPilotError):
    """Raised when no user matches the lookup."""
    status_code = 404
    error_code = "not_found"


class NotFoundOrUnchanged(NotFound):
    """
    Raised when an update modified zero documents.

    The store reports the same outcome for a missing user and for an
    update whose values equal the stored ones, so the two cannot be told apart.
    """
    error_code = "not_found_or_unchanged"


class InternalError(EduPilotError):
    """Raised when a user store operation fails."""
    status_code = 500
    error_code = "internal_error"


class AIProviderError(EduPilotError):
    """Raised when the LLM provider call fails."""
    status_code = 500
    error_code = "ai_provider_error"
