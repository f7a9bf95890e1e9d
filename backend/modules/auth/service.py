"""
Authentication service implementation.

Validates Supabase JWT tokens locally with the project's JWT secret.
"""

from datetime import datetime, timezone
from typing import Optional
import logging

import jwt

from shared.config import get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    MissingEmailError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Validates Supabase access tokens (HS256, audience "authenticated")."""

    def __init__(self):
        self._settings = get_settings()

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Raises MissingEmailError for tokens without an email claim, since
        every billing operation keys the Stripe customer on it.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise InvalidTokenError("server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        jwt_payload = JWTPayload(**payload)
        if not jwt_payload.email or not jwt_payload.sub:
            raise MissingEmailError(jwt_payload.sub)

        logger.debug(f"Validated token for user {jwt_payload.sub}")
        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            email_verified=jwt_payload.email_confirmed_at is not None,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            role=jwt_payload.role if jwt_payload.role != "authenticated" else "user",
        )

