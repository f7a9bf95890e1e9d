"""
Billing module exceptions.

These exceptions are raised by the billing module and mapped to the
`{"error": message}` payloads by the billing routes.
"""

from typing import Optional

from shared.exceptions import VideoCutError, ValidationError, ExternalServiceError


class BillingError(VideoCutError):
    """Base exception for billing-related errors."""

    pass


class InvalidCheckoutRequestError(ValidationError):
    """Raised when a checkout request body is missing or malformed."""

    def __init__(self):
        super().__init__(
            "Missing or invalid required parameters: planId (string), planName (string), "
            "planPriceInCents (number), successUrl (string), cancelUrl (string).",
            code="INVALID_CHECKOUT_REQUEST",
        )


class InvalidPortalRequestError(ValidationError):
    """Raised when the portal request has no returnUrl."""

    def __init__(self):
        super().__init__(
            "Missing required parameter: returnUrl.",
            code="INVALID_PORTAL_REQUEST",
        )


class NoCustomerError(BillingError):
    """Raised when a portal session is requested by a user Stripe has never seen."""

    def __init__(self, email: str):
        super().__init__(
            "No Stripe customer account found for this user. Please subscribe to a plan first.",
            code="NO_CUSTOMER",
            details={"email": email},
        )


class PaymentProviderError(ExternalServiceError):
    """Stripe was unreachable or answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, service="stripe", code="PAYMENT_PROVIDER_ERROR")
        self.status_code = status_code


class ProviderRequestError(PaymentProviderError):
    """Stripe rejected the request itself (bad parameters)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code or 400)
        self.code = "PROVIDER_REQUEST_ERROR"


class PlanMetadataError(ExternalServiceError):
    """A selected subscription has no usable price or plan_id metadata."""

    def __init__(self, message: str, subscription_id: str):
        super().__init__(
            message,
            service="stripe",
            code="PLAN_METADATA_ERROR",
            details={"subscription_id": subscription_id},
        )
