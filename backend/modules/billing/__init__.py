"""
Billing module.

Handles Stripe checkout, the billing portal, and subscription
entitlement reconciliation.

Public API:
- ISubscriptionService: Interface for billing operations
- IPaymentProvider: Interface the service uses to reach Stripe
- Plan catalog: PLANS, get_plan, can_upload_video
- Entitlement: What a user is currently allowed to access
- Billing exceptions: NoCustomerError, PaymentProviderError, etc.
"""

from .interfaces import ISubscriptionService, IPaymentProvider
from .models import (
    SubscriptionTier,
    SubscriptionStatus,
    Plan,
    PLANS,
    get_plan,
    can_upload_video,
    Entitlement,
    SubscriberRecord,
    CheckoutRequest,
    CheckoutSession,
    PortalRequest,
    PortalSession,
    SubscriptionStatusResponse,
)
from .exceptions import (
    BillingError,
    InvalidCheckoutRequestError,
    InvalidPortalRequestError,
    NoCustomerError,
    PaymentProviderError,
    ProviderRequestError,
    PlanMetadataError,
)

__all__ = [
    # Interfaces
    "ISubscriptionService",
    "IPaymentProvider",
    # Models
    "SubscriptionTier",
    "SubscriptionStatus",
    "Plan",
    "PLANS",
    "get_plan",
    "can_upload_video",
    "Entitlement",
    "SubscriberRecord",
    "CheckoutRequest",
    "CheckoutSession",
    "PortalRequest",
    "PortalSession",
    "SubscriptionStatusResponse",
    # Exceptions
    "BillingError",
    "InvalidCheckoutRequestError",
    "InvalidPortalRequestError",
    "NoCustomerError",
    "PaymentProviderError",
    "ProviderRequestError",
    "PlanMetadataError",
]
