"""
Profile service implementation.
"""

import logging

from modules.billing.models import SubscriptionTier

from .interfaces import IProfileService
from .models import Profile, ProfileUpdate, PublicProfile
from .repository import ProfileRepository
from .exceptions import EmptyProfileUpdateError, ProfileNotFoundError

logger = logging.getLogger(__name__)


class ProfileService(IProfileService):
    """Profile operations on top of ProfileRepository."""

    def __init__(self, repository: ProfileRepository):
        self._repository = repository

    async def get_profile(self, user_id: str) -> Profile:
        profile = self._repository.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def get_public_profile(self, user_id: str) -> PublicProfile:
        return PublicProfile.from_profile(await self.get_profile(user_id))

    async def update_profile(self, user_id: str, update: ProfileUpdate) -> Profile:
        changes = update.changes()
        if not changes:
            raise EmptyProfileUpdateError()

        profile = self._repository.update(user_id, changes)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        logger.info(f"Updated profile {user_id}: {sorted(changes)}")
        return profile

    async def set_subscription_tier(self, user_id: str, tier: SubscriptionTier) -> None:
        self._repository.set_subscription_tier(user_id, tier)
        logger.debug(f"Set subscription tier of {user_id} to {tier.value}")
