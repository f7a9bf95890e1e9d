"""
Billing module data models.

These models define the data structures used by the billing module
and exposed to other modules through the interface.
"""

import math
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator


class SubscriptionTier(str, Enum):
    """User subscription tiers."""

    FREE = "free"
    PREMIUM = "premium"
    PRO = "pro"


class SubscriptionStatus(str, Enum):
    """
    Stripe subscription statuses the reconciler acts on.

    Stripe has more (incomplete, unpaid, paused); those are stored as-is
    but never selected. INACTIVE is ours: no qualifying subscription.
    """

    ACTIVE = "active"
    TRIALING = "trialing"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    INACTIVE = "inactive"


# ---------------------------------------------------------------------------
# Plan catalog
# ---------------------------------------------------------------------------


class Plan(BaseModel):
    """A static catalog entry. Prices are in USD per month."""

    id: SubscriptionTier = Field(..., description="Plan ID (same as the tier)")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Short pitch")
    price: Decimal = Field(..., description="Monthly price")
    features: list[str] = Field(default_factory=list)
    popular: bool = Field(default=False, description="Whether to highlight this plan")
    video_limit: Optional[int] = Field(
        None,
        description="Maximum uploaded videos, None for unlimited",
    )

    model_config = {"frozen": True}

    @property
    def price_in_cents(self) -> int:
        return int(self.price * 100)


PLANS: list[Plan] = [
    Plan(
        id=SubscriptionTier.FREE,
        name="Free",
        description="Perfect for beginners",
        price=Decimal("0"),
        features=[
            "Upload up to 5 videos",
            "Basic portfolio page",
            "Community access",
        ],
        video_limit=5,
    ),
    Plan(
        id=SubscriptionTier.PREMIUM,
        name="Premium",
        description="For serious creators",
        price=Decimal("9.99"),
        popular=True,
        features=[
            "Upload up to 30 videos",
            "Custom portfolio page",
            "Category organization",
            "Analytics dashboard",
            "Priority support",
        ],
        video_limit=30,
    ),
    Plan(
        id=SubscriptionTier.PRO,
        name="Pro",
        description="For professional editors",
        price=Decimal("19.99"),
        features=[
            "Unlimited video uploads",
            "Advanced customization",
            "Client collaboration tools",
            "Detailed analytics",
            "Custom domain",
            "Premium support",
            "Featured on homepage",
        ],
    ),
]


def get_plan(tier: Union[SubscriptionTier, str, None]) -> Plan:
    """Look up a plan by tier. Unknown or missing tiers get the free plan."""
    for plan in PLANS:
        if plan.id == tier:
            return plan
    return PLANS[0]


def can_upload_video(tier: Union[SubscriptionTier, str, None], current_count: int) -> bool:
    """Whether a user on this tier may upload one more video."""
    limit = get_plan(tier).video_limit
    return limit is None or current_count < limit


# ---------------------------------------------------------------------------
# Payment provider view
# ---------------------------------------------------------------------------


class ProviderCustomer(BaseModel):
    """The parts of a Stripe customer we use."""

    id: str
    email: Optional[str] = None


class ProviderSubscription(BaseModel):
    """
    A Stripe subscription flattened to what the reconciler needs.

    plan_id comes from the first item's price metadata (or the expanded
    product's metadata). has_price is False when the item carried no price.
    """

    id: str
    status: str
    created: int = Field(..., description="Creation time, unix seconds")
    current_period_end: int = Field(..., description="Period end, unix seconds")
    plan_id: Optional[str] = None
    has_price: bool = True


# ---------------------------------------------------------------------------
# Entitlement
# ---------------------------------------------------------------------------


class Entitlement(BaseModel):
    """What a user is currently allowed to access, derived from Stripe."""

    subscribed: bool
    tier: Optional[SubscriptionTier] = None
    status: str = SubscriptionStatus.INACTIVE.value
    current_period_end: Optional[datetime] = None

    @classmethod
    def inactive(cls) -> "Entitlement":
        return cls(subscribed=False)


class SubscriberRecord(BaseModel):
    """A row of the subscribers table."""

    id: str
    user_id: str
    email: Optional[str] = None
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    subscription_status: Optional[str] = None
    subscription_tier: Optional[str] = None
    current_period_end: Optional[datetime] = None
    # Kept as the raw database string for the optimistic update check
    updated_at: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoint payloads (camelCase on the wire, as the SPA sends them)
# ---------------------------------------------------------------------------


class CheckoutRequest(BaseModel):
    """Request to start a hosted Stripe Checkout for a plan."""

    model_config = ConfigDict(populate_by_name=True)

    plan_id: str = Field(..., min_length=1, alias="planId")
    plan_name: str = Field(..., min_length=1, alias="planName")
    plan_price_in_cents: Union[StrictInt, StrictFloat] = Field(..., alias="planPriceInCents")
    success_url: str = Field(..., min_length=1, alias="successUrl")
    cancel_url: str = Field(..., min_length=1, alias="cancelUrl")

    @field_validator("plan_price_in_cents")
    @classmethod
    def _non_negative(cls, value: Union[int, float]) -> Union[int, float]:
        if value < 0:
            raise ValueError("planPriceInCents must not be negative")
        return value

    @property
    def rounded_price_in_cents(self) -> int:
        """Price rounded half up to whole cents."""
        return math.floor(self.plan_price_in_cents + 0.5)


class CheckoutSession(BaseModel):
    """Stripe checkout session info."""

    session_id: str = Field(..., serialization_alias="sessionId")
    url: str = Field(..., description="Checkout URL to redirect user to")


class PortalRequest(BaseModel):
    """Request for a Stripe billing portal session."""

    model_config = ConfigDict(populate_by_name=True)

    return_url: str = Field(..., min_length=1, alias="returnUrl")


class PortalSession(BaseModel):
    """Billing portal URL."""

    url: str


class SubscriptionStatusResponse(BaseModel):
    """Response of check-subscription."""

    subscribed: bool
    subscription_tier: Optional[str] = None
    current_period_end: Optional[datetime] = None
    status: str

    @classmethod
    def from_entitlement(cls, entitlement: Entitlement) -> "SubscriptionStatusResponse":
        return cls(
            subscribed=entitlement.subscribed,
            subscription_tier=entitlement.tier.value if entitlement.tier else None,
            current_period_end=entitlement.current_period_end,
            status=entitlement.status,
        )


class PlanListResponse(BaseModel):
    """Response of the plan catalog endpoint."""

    plans: list[Plan]
