"""
Subscription service implementation.

Starts hosted checkouts and portal sessions, and reconciles a user's
entitlement from the payment provider's view of their subscriptions.
Provider calls and database writes run one after another; nothing here
spans a transaction.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import AuthenticatedUser
from modules.profiles.interfaces import IProfileService

from .interfaces import IPaymentProvider, ISubscriptionService
from .models import (
    CheckoutRequest,
    CheckoutSession,
    Entitlement,
    PortalRequest,
    PortalSession,
    ProviderSubscription,
    SubscriptionTier,
)
from .repository import SubscriberRepository
from .reconciliation import select_subscription, is_effectively_subscribed
from .exceptions import NoCustomerError, PlanMetadataError

logger = logging.getLogger(__name__)


def log_step(function: str, step: str, details: Optional[dict[str, Any]] = None) -> None:
    """Log one step of an endpoint, labelled with the endpoint name."""
    suffix = f" - {json.dumps(details, default=str)}" if details else ""
    logger.info(f"[{function}] {step}{suffix}")


def _period_end(subscription: ProviderSubscription) -> datetime:
    return datetime.fromtimestamp(subscription.current_period_end, tz=timezone.utc)


def _plan_tier(subscription: ProviderSubscription) -> SubscriptionTier:
    if not subscription.has_price:
        raise PlanMetadataError("Subscription item price is missing.", subscription.id)
    try:
        return SubscriptionTier(subscription.plan_id)
    except ValueError:
        raise PlanMetadataError(
            f"Subscription price has no valid plan_id metadata: {subscription.plan_id!r}",
            subscription.id,
        )


class SubscriptionService(ISubscriptionService):
    """
    Billing operations backed by a payment provider and Supabase.

    The subscriber record is the audit trail of each reconciliation; the
    profile tier is a cache of it for the rest of the app.
    """

    def __init__(
        self,
        provider: IPaymentProvider,
        subscribers: SubscriberRepository,
        profiles: IProfileService,
    ):
        self._provider = provider
        self._subscribers = subscribers
        self._profiles = profiles

    async def create_checkout(
        self,
        user: AuthenticatedUser,
        request: CheckoutRequest,
    ) -> CheckoutSession:
        fn = "create-checkout"
        log_step(fn, "Looking up Stripe customer by email", {"email": user.email})
        customer = self._provider.find_customer(user.email)
        if customer:
            log_step(fn, "Existing Stripe customer found", {"customerId": customer.id})
        else:
            log_step(fn, "No existing Stripe customer, will be created during checkout")

        session = self._provider.create_checkout_session(
            request,
            user_id=user.id,
            customer_id=customer.id if customer else None,
            customer_email=user.email,
        )
        log_step(fn, "Stripe Checkout session created", {"sessionId": session.session_id})
        return session

    async def create_portal(
        self,
        user: AuthenticatedUser,
        request: PortalRequest,
    ) -> PortalSession:
        fn = "customer-portal"
        log_step(fn, "Looking up Stripe customer by email", {"email": user.email})
        customer = self._provider.find_customer(user.email)
        if customer is None:
            log_step(fn, "No Stripe customer found for this user", {"email": user.email})
            raise NoCustomerError(user.email)

        session = self._provider.create_portal_session(customer.id, request.return_url)
        log_step(fn, "Stripe Billing Portal session created", {"customerId": customer.id})
        return session

    async def check_subscription(self, user: AuthenticatedUser) -> Entitlement:
        fn = "check-subscription"
        now = datetime.now(timezone.utc)

        log_step(fn, "Looking up Stripe customer by email", {"email": user.email})
        customer = self._provider.find_customer(user.email)
        if customer is None:
            log_step(fn, "No Stripe customer found", {"email": user.email})
            return await self._deactivate(fn, user)
        log_step(fn, "Stripe customer found", {"customerId": customer.id})

        subscriptions = self._provider.list_subscriptions(customer.id)
        log_step(fn, "Fetched subscriptions from Stripe", {"count": len(subscriptions)})

        selected = select_subscription(subscriptions, now)
        if selected is None:
            log_step(fn, "No relevant subscription found", {"customerId": customer.id})
            return await self._deactivate(fn, user)

        log_step(fn, "Processing subscription", {"subId": selected.id, "status": selected.status})
        tier = _plan_tier(selected)
        period_end = _period_end(selected)

        payload = {
            "email": user.email,
            "stripe_customer_id": customer.id,
            "stripe_subscription_id": selected.id,
            "subscription_status": selected.status,
            "subscription_tier": tier.value,
            "current_period_end": period_end.isoformat(),
        }
        existing = self._subscribers.get_by_user_id(user.id)
        if existing:
            log_step(fn, "Updating existing subscriber record", {"id": existing.id})
            self._subscribers.update(existing, payload)
        else:
            log_step(fn, "Inserting new subscriber record", {"userId": user.id})
            self._subscribers.insert(user.id, payload)

        subscribed = is_effectively_subscribed(selected, now)
        await self._write_profile_tier(fn, user.id, tier if subscribed else SubscriptionTier.FREE)

        return Entitlement(
            subscribed=subscribed,
            tier=tier,
            status=selected.status,
            current_period_end=period_end,
        )

    async def _deactivate(self, fn: str, user: AuthenticatedUser) -> Entitlement:
        existing = self._subscribers.get_by_user_id(user.id)
        if existing:
            self._subscribers.mark_inactive(existing)
            log_step(fn, "Marked subscriber record inactive", {"id": existing.id})
        await self._write_profile_tier(fn, user.id, SubscriptionTier.FREE)
        return Entitlement.inactive()

    async def _write_profile_tier(self, fn: str, user_id: str, tier: SubscriptionTier) -> None:
        # Profile write failures are logged, never raised
        try:
            await self._profiles.set_subscription_tier(user_id, tier)
        except Exception as e:
            logger.warning(f"[{fn}] Error updating profile (non-fatal): {e}")
            return
        log_step(fn, "Profile tier updated", {"userId": user_id, "tier": tier.value})
