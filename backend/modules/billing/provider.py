"""
Stripe implementation of IPaymentProvider.

Translates Stripe objects into the billing module's own models and
Stripe SDK errors into PaymentProviderError.
"""

import logging
from typing import Any, Optional

import stripe

from shared.config import get_settings

from .interfaces import IPaymentProvider
from .models import (
    CheckoutRequest,
    CheckoutSession,
    PortalSession,
    ProviderCustomer,
    ProviderSubscription,
)
from .exceptions import PaymentProviderError, ProviderRequestError

logger = logging.getLogger(__name__)

SUBSCRIPTION_LIST_LIMIT = 10


def _field(obj: Any, key: str) -> Any:
    """
    Read a key from a Stripe object or a plain dict.

    StripeObject is not a dict in current SDKs, so only item access is
    used. Missing keys, missing objects and unexpanded ids read as None.
    """
    if obj is None or isinstance(obj, str):
        return None
    try:
        return obj[key]
    except KeyError:
        return None


def extract_plan_id(price: Any) -> Optional[str]:
    """
    Read the plan id a price is tagged with.

    The price's own metadata wins. Prices created inline by checkout only
    carry the tag on their product, so an expanded product is the fallback.
    Display names are never looked at.
    """
    if not price:
        return None

    plan_id = _field(_field(price, "metadata"), "plan_id")
    if plan_id:
        return plan_id

    # An unexpanded product is just its id
    return _field(_field(_field(price, "product"), "metadata"), "plan_id") or None


def to_provider_subscription(raw: Any) -> ProviderSubscription:
    """Flatten a Stripe subscription into a ProviderSubscription."""
    items = _field(_field(raw, "items"), "data") or []
    first_item = items[0] if items else None
    price = _field(first_item, "price")

    # Newer API versions moved the period onto the items
    period_end = _field(raw, "current_period_end") or _field(first_item, "current_period_end") or 0

    return ProviderSubscription(
        id=raw["id"],
        status=raw["status"],
        created=_field(raw, "created") or 0,
        current_period_end=period_end,
        plan_id=extract_plan_id(price),
        has_price=price is not None,
    )


def _translate_error(error: stripe.StripeError) -> PaymentProviderError:
    message = error.user_message or str(error)
    if isinstance(error, stripe.InvalidRequestError):
        return ProviderRequestError(message, status_code=error.http_status)
    return PaymentProviderError(message, status_code=error.http_status)


class StripeProvider(IPaymentProvider):
    """
    Payment provider backed by the Stripe API.

    Every request passes the configured key and API version explicitly
    instead of mutating the stripe module globals.
    """

    def __init__(self, api_key: Optional[str] = None, api_version: Optional[str] = None):
        settings = get_settings()
        self._api_key = api_key or settings.stripe_secret_key
        self._api_version = api_version or settings.stripe_api_version
        self._currency = settings.checkout_currency

    @property
    def _request_options(self) -> dict[str, Any]:
        return {"api_key": self._api_key, "stripe_version": self._api_version}

    def find_customer(self, email: str) -> Optional[ProviderCustomer]:
        try:
            customers = stripe.Customer.list(email=email, limit=1, **self._request_options)
        except stripe.StripeError as e:
            raise _translate_error(e)

        if not customers.data:
            return None
        customer = customers.data[0]
        return ProviderCustomer(id=customer["id"], email=_field(customer, "email"))

    def list_subscriptions(self, customer_id: str) -> list[ProviderSubscription]:
        try:
            subscriptions = stripe.Subscription.list(
                customer=customer_id,
                status="all",
                limit=SUBSCRIPTION_LIST_LIMIT,
                expand=["data.items.data.price.product"],
                **self._request_options,
            )
        except stripe.StripeError as e:
            raise _translate_error(e)

        return [to_provider_subscription(s) for s in subscriptions.data]

    def create_checkout_session(
        self,
        request: CheckoutRequest,
        user_id: str,
        customer_id: Optional[str],
        customer_email: str,
    ) -> CheckoutSession:
        try:
            session = stripe.checkout.Session.create(
                payment_method_types=["card"],
                mode="subscription",
                customer=customer_id,
                customer_email=None if customer_id else customer_email,
                line_items=[
                    {
                        "price_data": {
                            "currency": self._currency,
                            "product_data": {
                                "name": request.plan_name,
                                "metadata": {"plan_id": request.plan_id},
                            },
                            "unit_amount": request.rounded_price_in_cents,
                            "recurring": {"interval": "month"},
                        },
                        "quantity": 1,
                    }
                ],
                metadata={"user_id": user_id, "plan_id": request.plan_id},
                success_url=request.success_url,
                cancel_url=request.cancel_url,
                **self._request_options,
            )
        except stripe.StripeError as e:
            raise _translate_error(e)

        return CheckoutSession(session_id=session["id"], url=session["url"])

    def create_portal_session(self, customer_id: str, return_url: str) -> PortalSession:
        try:
            session = stripe.billing_portal.Session.create(
                customer=customer_id,
                return_url=return_url,
                **self._request_options,
            )
        except stripe.StripeError as e:
            raise _translate_error(e)

        logger.debug(f"Created billing portal session {session['id']}")
        return PortalSession(url=session["url"])
