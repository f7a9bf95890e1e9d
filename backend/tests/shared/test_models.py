"""
Tests for shared models.
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_required_fields(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        assert user.id == "user-123"
        assert user.email == "test@example.com"
        assert user.email_verified is False
        assert user.role == "user"
        assert user.last_sign_in is None

    def test_all_fields(self):
        now = datetime.now(timezone.utc)
        user = AuthenticatedUser(
            id="user-123",
            email="test@example.com",
            email_verified=True,
            last_sign_in=now,
            role="service_role",
        )
        assert user.email_verified is True
        assert user.last_sign_in == now
        assert user.role == "service_role"

    def test_email_is_required(self):
        """Stripe customers are keyed on email, so it cannot be missing."""
        with pytest.raises(ValidationError):
            AuthenticatedUser(id="user-123")

    def test_email_validation(self):
        with pytest.raises(ValidationError):
            AuthenticatedUser(id="user-123", email="not-an-email")

    def test_is_frozen(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        with pytest.raises(ValidationError):
            user.email = "other@example.com"

    def test_ignores_extra_fields(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com", tier="pro")
        assert not hasattr(user, "tier")
