"""
Profiles module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from modules.billing.models import SubscriptionTier


class UserRole(str, Enum):
    """Who a user is on the platform."""

    EDITOR = "editor"
    CLIENT = "client"


class Profile(BaseModel):
    """
    A row of the profiles table.

    subscription_tier is written only by the subscription reconciler.
    """

    id: str = Field(..., description="User ID (same as the auth user)")
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE
    likes: int = 0
    portfolio_views: int = 0
    role: UserRole = UserRole.EDITOR
    created_at: Optional[datetime] = None


class PublicProfile(BaseModel):
    """What anyone may see of an editor."""

    id: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE
    likes: int = 0
    role: UserRole = UserRole.EDITOR

    @classmethod
    def from_profile(cls, profile: Profile) -> "PublicProfile":
        return cls(**profile.model_dump(include=set(cls.model_fields)))


class ProfileUpdate(BaseModel):
    """
    Fields a user may change on their own profile.

    Tier, likes and role are deliberately absent.
    """

    model_config = {"extra": "ignore"}

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    bio: Optional[str] = Field(None, max_length=2000)
    avatar_url: Optional[str] = None

    def changes(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)
