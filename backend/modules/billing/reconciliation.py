"""
Subscription selection rules.

Pure functions over ProviderSubscription lists; no I/O. The service
layer feeds them what Stripe returned and acts on the result.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from .models import ProviderSubscription, SubscriptionStatus

# Statuses that keep access on regardless of the period end
ENTITLED_STATUSES = frozenset(
    {
        SubscriptionStatus.ACTIVE.value,
        SubscriptionStatus.TRIALING.value,
        SubscriptionStatus.PAST_DUE.value,
    }
)


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


def in_grace_period(subscription: ProviderSubscription, now: Optional[datetime] = None) -> bool:
    """A canceled subscription whose paid period has not ended yet."""
    return (
        subscription.status == SubscriptionStatus.CANCELED.value
        and subscription.current_period_end > _now(now).timestamp()
    )


def select_subscription(
    subscriptions: Sequence[ProviderSubscription],
    now: Optional[datetime] = None,
) -> Optional[ProviderSubscription]:
    """
    Pick the subscription that decides a user's entitlement.

    Precedence:
    1. the first active subscription
    2. else the first trialing one
    3. else the most recently created one, but only if it is past_due
       or canceled and still inside its paid period

    Returns None when nothing qualifies.
    """
    for status in (SubscriptionStatus.ACTIVE, SubscriptionStatus.TRIALING):
        for subscription in subscriptions:
            if subscription.status == status.value:
                return subscription

    if not subscriptions:
        return None

    most_recent = max(subscriptions, key=lambda s: s.created)
    if most_recent.status == SubscriptionStatus.PAST_DUE.value or in_grace_period(most_recent, now):
        return most_recent
    return None


def is_effectively_subscribed(
    subscription: ProviderSubscription,
    now: Optional[datetime] = None,
) -> bool:
    """Whether the subscription grants paid access right now."""
    return subscription.status in ENTITLED_STATUSES or in_grace_period(subscription, now)
