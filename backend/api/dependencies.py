"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.billing.interfaces import ISubscriptionService, IPaymentProvider
    from modules.billing.repository import SubscriberRepository
    from modules.profiles.interfaces import IProfileService
    from modules.profiles.repository import ProfileRepository
    from modules.favorites.interfaces import IFavoriteService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._payment_provider: "IPaymentProvider | None" = None
        self._subscriber_repository: "SubscriberRepository | None" = None
        self._subscription_service: "ISubscriptionService | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._profile_service: "IProfileService | None" = None
        self._favorite_service: "IFavoriteService | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def payment_provider(self) -> "IPaymentProvider":
        """Get the Stripe-backed payment provider."""
        if self._payment_provider is None:
            from modules.billing.provider import StripeProvider
            self._payment_provider = StripeProvider()
        return self._payment_provider

    @property
    def subscriber_repository(self) -> "SubscriberRepository":
        """Get the subscriber repository instance (service role)."""
        if self._subscriber_repository is None:
            from modules.billing.repository import SubscriberRepository
            from shared.database import get_supabase_client
            self._subscriber_repository = SubscriberRepository(get_supabase_client())
        return self._subscriber_repository

    @property
    def profile_repository(self) -> "ProfileRepository":
        """Get the profile repository instance (service role)."""
        if self._profile_repository is None:
            from modules.profiles.repository import ProfileRepository
            from shared.database import get_supabase_client
            self._profile_repository = ProfileRepository(get_supabase_client())
        return self._profile_repository

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(self.profile_repository)
        return self._profile_service

    @property
    def subscriptions(self) -> "ISubscriptionService":
        """Get the subscription service instance."""
        if self._subscription_service is None:
            from modules.billing.service import SubscriptionService
            self._subscription_service = SubscriptionService(
                provider=self.payment_provider,
                subscribers=self.subscriber_repository,
                profiles=self.profiles,
            )
        return self._subscription_service

    @property
    def favorites(self) -> "IFavoriteService":
        """Get the favorite service instance."""
        if self._favorite_service is None:
            from modules.favorites.service import FavoriteService
            self._favorite_service = FavoriteService()
        return self._favorite_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._payment_provider = None
        self._subscriber_repository = None
        self._subscription_service = None
        self._profile_repository = None
        self._profile_service = None
        self._favorite_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_subscription_service() -> "ISubscriptionService":
    """FastAPI dependency for subscription service."""
    return get_container().subscriptions


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_favorite_service() -> "IFavoriteService":
    """FastAPI dependency for favorite service."""
    return get_container().favorites
