"""
Profile repository for database access.

Encapsulates Supabase queries for the profiles table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from modules.billing.models import SubscriptionTier, get_plan

from .models import Profile, UserRole

TABLE = "profiles"


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for user profiles.

    Does not perform authorization checks; the service decides who may
    write what.
    """

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        """Get a profile by user ID, or None if it does not exist."""
        result = self._db.table(TABLE).select("*").eq("id", user_id).execute()
        row = self._first(result)
        return self._map_to_profile(row) if row else None

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[Profile]:
        """
        Update profile columns.

        Returns:
            The updated profile, or None if no row matched.
        """
        result = self._db.table(TABLE).update(data).eq("id", user_id).execute()
        row = self._first(result)
        return self._map_to_profile(row) if row else None

    def set_subscription_tier(self, user_id: str, tier: SubscriptionTier) -> None:
        """Write the tier column only."""
        self._db.table(TABLE).update({"subscription_tier": tier.value}).eq("id", user_id).execute()

    @staticmethod
    def _map_to_profile(row: dict[str, Any]) -> Profile:
        role = row.get("role")
        return Profile(
            id=str(row["id"]),
            name=row.get("name"),
            email=row.get("email"),
            avatar_url=row.get("avatar_url"),
            bio=row.get("bio"),
            # Unknown or empty tiers read as free
            subscription_tier=get_plan(row.get("subscription_tier")).id,
            likes=row.get("likes") or 0,
            portfolio_views=row.get("portfolio_views") or 0,
            role=UserRole(role) if role in UserRole._value2member_map_ else UserRole.EDITOR,
            created_at=row.get("created_at"),
        )
