"""
Profiles module.

User profiles: the user's own name/bio/avatar edits, public editor
views, and the subscription tier the billing module writes.

Public API:
- IProfileService: Interface for profile operations
- Profile, PublicProfile, ProfileUpdate: Profile models
- Profile exceptions: ProfileNotFoundError, EmptyProfileUpdateError
"""

from .interfaces import IProfileService
from .models import Profile, PublicProfile, ProfileUpdate, UserRole
from .exceptions import ProfileNotFoundError, EmptyProfileUpdateError

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "Profile",
    "PublicProfile",
    "ProfileUpdate",
    "UserRole",
    # Exceptions
    "ProfileNotFoundError",
    "EmptyProfileUpdateError",
]
