"""
Billing module interfaces.

Routes depend on ISubscriptionService, and the service depends on
IPaymentProvider, so neither needs to know about the Stripe SDK.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    CheckoutRequest,
    CheckoutSession,
    Entitlement,
    PortalRequest,
    PortalSession,
    ProviderCustomer,
    ProviderSubscription,
)


@runtime_checkable
class IPaymentProvider(Protocol):
    """
    The payment provider calls the billing module makes.

    All calls are blocking and issued one at a time.
    """

    def find_customer(self, email: str) -> Optional[ProviderCustomer]:
        """
        Look up a customer by email.

        Returns:
            The first matching customer, or None if the provider has never
            seen this email
        """
        ...

    def list_subscriptions(self, customer_id: str) -> list[ProviderSubscription]:
        """
        List a customer's subscriptions in every status (most recent 10).
        """
        ...

    def create_checkout_session(
        self,
        request: CheckoutRequest,
        user_id: str,
        customer_id: Optional[str],
        customer_email: str,
    ) -> CheckoutSession:
        """
        Create a hosted checkout session for a monthly plan subscription.

        When customer_id is None the provider creates the customer during
        checkout from customer_email.
        """
        ...

    def create_portal_session(self, customer_id: str, return_url: str) -> PortalSession:
        """Create a self-service billing portal session."""
        ...


@runtime_checkable
class ISubscriptionService(Protocol):
    """
    Interface for checkout, portal and entitlement reconciliation.
    """

    async def create_checkout(
        self,
        user: AuthenticatedUser,
        request: CheckoutRequest,
    ) -> CheckoutSession:
        """
        Start a hosted checkout for the selected plan.

        Raises:
            PaymentProviderError: If the provider call fails
        """
        ...

    async def create_portal(
        self,
        user: AuthenticatedUser,
        request: PortalRequest,
    ) -> PortalSession:
        """
        Open the billing portal for an existing customer.

        Raises:
            NoCustomerError: If the user has never checked out
            PaymentProviderError: If the provider call fails
        """
        ...

    async def check_subscription(self, user: AuthenticatedUser) -> Entitlement:
        """
        Re-derive the user's entitlement from the provider and persist it.

        Writes the subscriber record and the profile tier. Provider state
        is the only input; nothing the client sends is trusted.

        Raises:
            PaymentProviderError: If the provider call fails
            PlanMetadataError: If the selected subscription has no plan_id
        """
        ...
