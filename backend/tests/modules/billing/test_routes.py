"""Tests for the billing endpoints."""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, patch

from api import app
from api.dependencies import get_subscription_service
from modules.billing.exceptions import (
    NoCustomerError,
    PaymentProviderError,
    PlanMetadataError,
    ProviderRequestError,
)
from modules.billing.models import CheckoutSession, Entitlement, PortalSession, SubscriptionTier

from tests.conftest import TEST_JWT_SECRET, create_test_token

client = TestClient(app)

CHECKOUT_BODY = {
    "planId": "pro",
    "planName": "Pro",
    "planPriceInCents": 1999,
    "successUrl": "https://app.example.com/dashboard?checkout=success",
    "cancelUrl": "https://app.example.com/pricing",
}


@pytest.fixture
def service():
    service = AsyncMock()
    app.dependency_overrides[get_subscription_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def jwt_secret():
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield


class TestListPlans:
    def test_lists_catalog(self):
        response = client.get("/api/billing/plans")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()["plans"]] == ["free", "premium", "pro"]


class TestCreateCheckout:
    def test_returns_session(self, service, auth_headers):
        service.create_checkout.return_value = CheckoutSession(
            session_id="cs_1", url="https://checkout.stripe.com/cs_1"
        )

        response = client.post("/api/billing/create-checkout", json=CHECKOUT_BODY, headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"sessionId": "cs_1", "url": "https://checkout.stripe.com/cs_1"}
        user, request = service.create_checkout.call_args.args
        assert user.email == "test@example.com"
        assert request.plan_id == "pro"

    def test_missing_token_is_401(self, service):
        response = client.post("/api/billing/create-checkout", json=CHECKOUT_BODY)

        assert response.status_code == 401
        assert response.json()["error"].startswith("User not authenticated")
        service.create_checkout.assert_not_called()

    def test_expired_token_is_401(self, service):
        token = create_test_token(expired=True)
        response = client.post(
            "/api/billing/create-checkout",
            json=CHECKOUT_BODY,
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401

    def test_token_without_email_is_400(self, service):
        token = create_test_token(email=None)
        response = client.post(
            "/api/billing/create-checkout",
            json=CHECKOUT_BODY,
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 400
        assert "email" in response.json()["error"]

    @pytest.mark.parametrize("field", ["planId", "planPriceInCents", "cancelUrl"])
    def test_missing_field_is_400(self, service, auth_headers, field):
        body = {k: v for k, v in CHECKOUT_BODY.items() if k != field}

        response = client.post("/api/billing/create-checkout", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Missing or invalid required parameters")

    def test_non_json_body_is_400(self, service, auth_headers):
        response = client.post(
            "/api/billing/create-checkout",
            content=b"not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_stripe_request_error_keeps_status(self, service, auth_headers):
        service.create_checkout.side_effect = ProviderRequestError("No such customer", status_code=404)

        response = client.post("/api/billing/create-checkout", json=CHECKOUT_BODY, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Stripe API Error: No such customer"}

    def test_other_errors_are_500(self, service, auth_headers):
        service.create_checkout.side_effect = PaymentProviderError("Stripe is unreachable")

        response = client.post("/api/billing/create-checkout", json=CHECKOUT_BODY, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Stripe is unreachable"}


class TestCustomerPortal:
    def test_returns_url(self, service, auth_headers):
        service.create_portal.return_value = PortalSession(url="https://billing.stripe.com/p/1")

        response = client.post(
            "/api/billing/customer-portal",
            json={"returnUrl": "https://app.example.com/dashboard"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"url": "https://billing.stripe.com/p/1"}

    def test_missing_return_url_is_500(self, service, auth_headers):
        response = client.post("/api/billing/customer-portal", json={}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Missing required parameter: returnUrl."}

    def test_no_customer(self, service, auth_headers):
        service.create_portal.side_effect = NoCustomerError("test@example.com")

        response = client.post(
            "/api/billing/customer-portal",
            json={"returnUrl": "https://app.example.com/dashboard"},
            headers=auth_headers,
        )

        assert response.status_code == 500
        assert "Please subscribe to a plan first" in response.json()["error"]

    def test_missing_token_is_500(self, service):
        response = client.post("/api/billing/customer-portal", json={"returnUrl": "https://x"})
        assert response.status_code == 500
        assert response.json()["error"].startswith("User not authenticated")


class TestCheckSubscription:
    @pytest.mark.parametrize("method", ["GET", "POST"])
    def test_subscribed(self, service, auth_headers, method):
        service.check_subscription.return_value = Entitlement(
            subscribed=True,
            tier=SubscriptionTier.PRO,
            status="active",
            current_period_end=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )

        response = client.request(method, "/api/billing/check-subscription", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "subscribed": True,
            "subscription_tier": "pro",
            "current_period_end": "2030-01-01T00:00:00Z",
            "status": "active",
        }

    def test_not_subscribed_is_200(self, service, auth_headers):
        service.check_subscription.return_value = Entitlement.inactive()

        response = client.post("/api/billing/check-subscription", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "subscribed": False,
            "subscription_tier": None,
            "current_period_end": None,
            "status": "inactive",
        }

    def test_missing_token_is_500(self, service):
        response = client.post("/api/billing/check-subscription")

        assert response.status_code == 500
        assert response.json()["error"].startswith("User not authenticated")

    def test_plan_metadata_error_is_500(self, service, auth_headers):
        service.check_subscription.side_effect = PlanMetadataError(
            "Subscription item price is missing.", "sub_1"
        )

        response = client.post("/api/billing/check-subscription", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Subscription item price is missing."}
