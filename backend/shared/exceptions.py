"""
Base exception classes for the VideoCut backend.

Each module defines its own exceptions that inherit from these bases,
so route handlers can map whole families of errors at once.
"""

from typing import Optional, Any


class VideoCutError(Exception):
    """
    Base exception for all VideoCut errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(VideoCutError):
    """Resource not found."""

    pass


class ValidationError(VideoCutError):
    """Input validation failed."""

    pass


class AuthenticationError(VideoCutError):
    """Caller has no valid session (missing, expired or malformed token)."""

    pass


class ExternalServiceError(VideoCutError):
    """
    Error talking to an external service (Stripe, Supabase).

    The service name is kept in details so log lines and API payloads
    say which upstream failed.
    """

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
