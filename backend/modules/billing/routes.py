"""
Billing API endpoints.

The three endpoints the SPA calls around Stripe (create-checkout,
customer-portal, check-subscription) answer errors with a flat
`{"error": message}` body instead of FastAPI's `{"detail": ...}`, and
authenticate inside the handler so auth failures get the same shape.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import ValidationError as PydanticValidationError

from api.middleware.auth import bearer_scheme
from api.models.errors import error_response
from api.dependencies import get_auth_service, get_subscription_service
from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import MissingEmailError
from shared.exceptions import AuthenticationError, ValidationError, VideoCutError
from shared.models import AuthenticatedUser

from .interfaces import ISubscriptionService
from .models import (
    PLANS,
    CheckoutRequest,
    CheckoutSession,
    PlanListResponse,
    PortalRequest,
    PortalSession,
    SubscriptionStatusResponse,
)
from .exceptions import (
    InvalidCheckoutRequestError,
    InvalidPortalRequestError,
    ProviderRequestError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _message(error: Exception) -> str:
    if isinstance(error, VideoCutError):
        return error.message
    return str(error) or "An unknown error occurred."


async def _authenticate(
    credentials: Optional[HTTPAuthorizationCredentials],
    auth: IAuthService,
) -> AuthenticatedUser:
    return await auth.validate_token(credentials.credentials if credentials else None)


async def _json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


def checkout_error_status(error: Exception) -> int:
    """
    HTTP status for a create-checkout failure.

    Stripe request errors keep Stripe's status, missing sessions are 401,
    bad input and sessions without an email are 400, the rest 500.
    """
    if isinstance(error, ProviderRequestError):
        return error.status_code or 400
    if isinstance(error, MissingEmailError):
        return 400
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, ValidationError):
        return 400
    return 500


@router.get("/plans", response_model=PlanListResponse)
async def list_plans() -> PlanListResponse:
    """
    Get the static plan catalog.
    """
    return PlanListResponse(plans=PLANS)


@router.post("/create-checkout", response_model=CheckoutSession)
async def create_checkout(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
    service: ISubscriptionService = Depends(get_subscription_service),
):
    """
    Create a Stripe Checkout session for a plan.

    Body: `{planId, planName, planPriceInCents, successUrl, cancelUrl}`.
    Returns `{sessionId, url}`; the client redirects to `url`.
    """
    try:
        user = await _authenticate(credentials, auth)

        body = await _json_body(request)
        try:
            checkout_request = CheckoutRequest.model_validate(body)
        except PydanticValidationError:
            raise InvalidCheckoutRequestError()

        return await service.create_checkout(user, checkout_request)
    except Exception as e:
        logger.exception(f"[create-checkout] Error in function: {e}")
        message = _message(e)
        if isinstance(e, ProviderRequestError):
            message = f"Stripe API Error: {message}"
        return error_response(message, checkout_error_status(e))


@router.post("/customer-portal", response_model=PortalSession)
async def customer_portal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
    service: ISubscriptionService = Depends(get_subscription_service),
):
    """
    Create a Stripe billing portal session.

    Body: `{returnUrl}`. Fails for users Stripe has no customer for.
    """
    try:
        user = await _authenticate(credentials, auth)

        body = await _json_body(request)
        try:
            portal_request = PortalRequest.model_validate(body)
        except PydanticValidationError:
            raise InvalidPortalRequestError()

        return await service.create_portal(user, portal_request)
    except Exception as e:
        logger.exception(f"[customer-portal] Error in function: {e}")
        return error_response(_message(e))


@router.api_route(
    "/check-subscription",
    methods=["GET", "POST"],
    response_model=SubscriptionStatusResponse,
)
async def check_subscription(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
    service: ISubscriptionService = Depends(get_subscription_service),
):
    """
    Reconcile the caller's entitlement with Stripe.

    Returns 200 for every recognized outcome, including "not subscribed".
    """
    try:
        user = await _authenticate(credentials, auth)
        entitlement = await service.check_subscription(user)
        return SubscriptionStatusResponse.from_entitlement(entitlement)
    except Exception as e:
        logger.exception(f"[check-subscription] Error in function: {e}")
        return error_response(_message(e))
