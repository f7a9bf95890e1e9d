"""
Client-side entitlement session.

Holds the signed-in user's profile and the last entitlement the server
reconciled for them. There is no background polling: the entitlement is
as fresh as the last refresh() call, and last_fetched_at says when that
was.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from modules.billing.models import Entitlement, Plan, SubscriptionTier
from modules.profiles.models import Profile

from .api_client import VideoCutClient
from .results import FunctionError, Ok, Result, to_error_result

logger = logging.getLogger(__name__)


class EntitlementSession:
    """
    Session-scoped cache of a user's entitlement.

    Usage:
        session = EntitlementSession(VideoCutClient())
        await session.establish(access_token)   # login, registration, resume
        ...
        result = await session.refresh()        # e.g. back from checkout
    """

    def __init__(self, client: VideoCutClient):
        self._client = client
        self.profile: Optional[Profile] = None
        self.is_subscribed: bool = False
        self.tier: Optional[SubscriptionTier] = None
        self.status: Optional[str] = None
        self.current_period_end: Optional[datetime] = None
        self.loading: bool = False
        self.last_fetched_at: Optional[datetime] = None

    @property
    def entitlement(self) -> Entitlement:
        """The cached entitlement as a model."""
        return Entitlement(
            subscribed=self.is_subscribed,
            tier=self.tier,
            status=self.status or "inactive",
            current_period_end=self.current_period_end,
        )

    async def establish(self, access_token: str) -> Result[Entitlement]:
        """
        Start the session for a signed-in user and load their entitlement.

        Called after login, after registration, and when resuming with a
        stored token. A failed profile load does not stop the entitlement
        load; refresh() fetches the profile again.
        """
        self._client.access_token = access_token
        try:
            self.profile = await self._client.get_my_profile()
        except (FunctionError, httpx.HTTPError) as e:
            logger.warning(f"Could not load profile: {e}")
            self.profile = None
        return await self.refresh()

    def clear(self) -> None:
        """Forget everything (logout)."""
        self._client.access_token = None
        self.profile = None
        self._apply(Entitlement.inactive())
        self.status = None
        self.last_fetched_at = None

    async def refresh(self) -> Result[Entitlement]:
        """
        Ask the server to reconcile with Stripe and cache the answer.

        When the returned tier differs from the cached profile's tier the
        profile is re-fetched, so it reflects the tier the server just wrote.
        Nothing is cached unless both calls succeed.
        """
        self.loading = True
        try:
            response = await self._client.check_subscription()
            entitlement = Entitlement(
                subscribed=response.subscribed,
                tier=response.subscription_tier,
                status=response.status,
                current_period_end=response.current_period_end,
            )

            profile = self.profile
            profile_tier = profile.subscription_tier if profile else None
            if profile_tier != (entitlement.tier or SubscriptionTier.FREE):
                profile = await self._client.get_my_profile()
        except (FunctionError, httpx.HTTPError) as e:
            logger.warning(f"Subscription refresh failed: {e}")
            return to_error_result(e)
        finally:
            self.loading = False

        self.profile = profile
        self._apply(entitlement)
        self.last_fetched_at = datetime.now(timezone.utc)
        return Ok(entitlement)

    def _apply(self, entitlement: Entitlement) -> None:
        self.is_subscribed = entitlement.subscribed
        self.tier = entitlement.tier
        self.status = entitlement.status
        self.current_period_end = entitlement.current_period_end


async def start_checkout(
    client: VideoCutClient,
    plan: Plan,
    success_url: str,
    cancel_url: str,
) -> Result[str]:
    """
    Ask the server for a hosted checkout URL for a plan.

    Returns Ok(url) to navigate to. Nothing is cached locally: the
    provider's page owns the checkout from here on.
    """
    try:
        session = await client.create_checkout(plan, success_url, cancel_url)
    except (FunctionError, httpx.HTTPError) as e:
        logger.warning(f"Checkout could not be started: {e}")
        return to_error_result(e)
    return Ok(session.url)


async def open_customer_portal(client: VideoCutClient, return_url: str) -> Result[str]:
    """Ask the server for a billing portal URL. Returns Ok(url)."""
    try:
        session = await client.customer_portal(return_url)
    except (FunctionError, httpx.HTTPError) as e:
        logger.warning(f"Customer portal could not be opened: {e}")
        return to_error_result(e)
    return Ok(session.url)
