"""
Shared infrastructure for the VideoCut backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, get_supabase_user_client, reset_client_cache
from .exceptions import (
    VideoCutError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_user_client",
    "reset_client_cache",
    "VideoCutError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
    "AuthenticatedUser",
]
