"""
Authentication module.

Validates Supabase JWTs and turns them into an AuthenticatedUser.

Public API:
- IAuthService: Interface for auth operations
- JWTPayload: Decoded Supabase token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    MissingEmailError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "MissingEmailError",
]
