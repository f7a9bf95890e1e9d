"""
HTTP client for the VideoCut API.

Thin async wrapper over httpx that returns the server's models and raises
FunctionError for error responses. One request at a time, no retries.
"""

import logging
from typing import Any, Optional

import httpx

from shared.config import get_settings
from modules.billing.models import (
    CheckoutSession,
    Plan,
    PortalSession,
    SubscriptionStatusResponse,
)
from modules.profiles.models import Profile

from .results import FunctionError

logger = logging.getLogger(__name__)


class VideoCutClient:
    """
    Client for the billing and profile endpoints.

    Args:
        base_url: API root, defaults to the API_BASE_URL setting
        access_token: Supabase access token of the signed-in user
        transport: Optional httpx transport (tests pass a MockTransport)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = (base_url or get_settings().api_base_url).rstrip("/")
        self._transport = transport
        self.access_token = access_token

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        async with httpx.AsyncClient(base_url=self._base_url, transport=self._transport) as client:
            response = await client.request(method, path, json=json, headers=self._headers())

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            context = body if isinstance(body, dict) else {}
            message = context.get("error") or context.get("detail") or response.reason_phrase
            logger.debug(f"{method} {path} failed with {response.status_code}: {message}")
            raise FunctionError(str(message), response.status_code, context)

        return body

    async def check_subscription(self) -> SubscriptionStatusResponse:
        data = await self._request("POST", "/api/billing/check-subscription")
        return SubscriptionStatusResponse.model_validate(data)

    async def create_checkout(self, plan: Plan, success_url: str, cancel_url: str) -> CheckoutSession:
        data = await self._request(
            "POST",
            "/api/billing/create-checkout",
            json={
                "planId": plan.id.value,
                "planName": plan.name,
                "planPriceInCents": plan.price_in_cents,
                "successUrl": success_url,
                "cancelUrl": cancel_url,
            },
        )
        return CheckoutSession(session_id=data["sessionId"], url=data["url"])

    async def customer_portal(self, return_url: str) -> PortalSession:
        data = await self._request(
            "POST",
            "/api/billing/customer-portal",
            json={"returnUrl": return_url},
        )
        return PortalSession.model_validate(data)

    async def get_my_profile(self) -> Profile:
        data = await self._request("GET", "/api/profiles/me")
        return Profile.model_validate(data)
