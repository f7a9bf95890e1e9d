"""Tests for the profile endpoints."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, patch

from api import app
from api.dependencies import get_profile_service
from modules.billing.models import SubscriptionTier
from modules.profiles.exceptions import EmptyProfileUpdateError, ProfileNotFoundError
from modules.profiles.models import Profile, PublicProfile

from tests.conftest import TEST_JWT_SECRET

client = TestClient(app)


@pytest.fixture
def service():
    service = AsyncMock()
    app.dependency_overrides[get_profile_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def jwt_secret():
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield


class TestMyProfile:
    def test_requires_auth(self, service):
        response = client.get("/api/profiles/me")
        assert response.status_code == 401

    def test_get(self, service, auth_headers, test_user_id):
        service.get_profile.return_value = Profile(id=test_user_id, subscription_tier=SubscriptionTier.PREMIUM)

        response = client.get("/api/profiles/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["subscription_tier"] == "premium"
        service.get_profile.assert_awaited_once_with(test_user_id)

    def test_get_missing(self, service, auth_headers):
        service.get_profile.side_effect = ProfileNotFoundError("test-user-123")
        response = client.get("/api/profiles/me", headers=auth_headers)
        assert response.status_code == 404

    def test_patch(self, service, auth_headers):
        service.update_profile.return_value = Profile(id="test-user-123", bio="Motion designer")

        response = client.patch("/api/profiles/me", json={"bio": "Motion designer"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["bio"] == "Motion designer"

    def test_patch_empty(self, service, auth_headers):
        service.update_profile.side_effect = EmptyProfileUpdateError()
        response = client.patch("/api/profiles/me", json={}, headers=auth_headers)
        assert response.status_code == 400


class TestPublicProfile:
    def test_no_auth_needed(self, service):
        service.get_public_profile.return_value = PublicProfile(id="editor-1", name="Ada")

        response = client.get("/api/profiles/editor-1")

        assert response.status_code == 200
        assert response.json()["name"] == "Ada"
        assert "email" not in response.json()

    def test_missing(self, service):
        service.get_public_profile.side_effect = ProfileNotFoundError("editor-1")
        response = client.get("/api/profiles/editor-1")
        assert response.status_code == 404
