"""
Authentication module exceptions.

Every message starts with "User not authenticated" so the billing
endpoints can pass it straight through to the caller.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, reason: str = "invalid token"):
        super().__init__(f"User not authenticated: {reason}", code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self):
        super().__init__("User not authenticated: token has expired", code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self):
        super().__init__("User not authenticated: missing token", code="MISSING_TOKEN")


class MissingEmailError(AuthenticationError):
    """Raised when a valid token carries no email (needed for Stripe lookups)."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not authenticated: user email or ID not found",
            code="MISSING_EMAIL",
            details={"user_id": user_id},
        )
