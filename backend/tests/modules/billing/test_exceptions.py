"""Tests for billing module exceptions."""

from modules.billing.exceptions import (
    BillingError,
    InvalidCheckoutRequestError,
    InvalidPortalRequestError,
    NoCustomerError,
    PaymentProviderError,
    PlanMetadataError,
    ProviderRequestError,
)
from shared.exceptions import ExternalServiceError, ValidationError


class TestBillingExceptions:
    def test_invalid_checkout_request_lists_parameters(self):
        error = InvalidCheckoutRequestError()
        assert isinstance(error, ValidationError)
        assert error.message.startswith("Missing or invalid required parameters")
        assert "planPriceInCents (number)" in error.message

    def test_invalid_portal_request(self):
        error = InvalidPortalRequestError()
        assert error.message == "Missing required parameter: returnUrl."

    def test_no_customer(self):
        error = NoCustomerError("a@x.com")
        assert isinstance(error, BillingError)
        assert "Please subscribe to a plan first" in error.message
        assert error.details == {"email": "a@x.com"}

    def test_provider_error_is_external(self):
        error = PaymentProviderError("Stripe is down", status_code=503)
        assert isinstance(error, ExternalServiceError)
        assert error.service == "stripe"
        assert error.status_code == 503

    def test_provider_request_error_defaults_to_400(self):
        error = ProviderRequestError("No such price")
        assert isinstance(error, PaymentProviderError)
        assert error.status_code == 400
        assert error.code == "PROVIDER_REQUEST_ERROR"

    def test_plan_metadata_error(self):
        error = PlanMetadataError("Subscription item price is missing.", "sub_1")
        assert error.details == {"subscription_id": "sub_1", "service": "stripe"}
