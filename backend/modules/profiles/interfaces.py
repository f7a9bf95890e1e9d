"""
Profiles module interface.

The billing module writes tiers through IProfileService.
"""

from typing import Protocol, runtime_checkable

from modules.billing.models import SubscriptionTier

from .models import Profile, ProfileUpdate, PublicProfile


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile reads and writes.
    """

    async def get_profile(self, user_id: str) -> Profile:
        """
        Get the full profile of a user.

        Raises:
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def get_public_profile(self, user_id: str) -> PublicProfile:
        """
        Get the publicly visible part of a profile.

        Raises:
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def update_profile(self, user_id: str, update: ProfileUpdate) -> Profile:
        """
        Apply a user's own edits (name, bio, avatar).

        Raises:
            EmptyProfileUpdateError: If the update carries no fields
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def set_subscription_tier(self, user_id: str, tier: SubscriptionTier) -> None:
        """
        Record the tier derived by the subscription reconciler.
        """
        ...
