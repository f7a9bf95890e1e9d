"""
Profiles module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class ProfileNotFoundError(NotFoundError):
    """Raised when a profile row does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Profile not found: {user_id}",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmptyProfileUpdateError(ValidationError):
    """Raised when a profile update carries no fields."""

    def __init__(self):
        super().__init__(
            "Nothing to update: provide at least one of name, bio, avatar_url",
            code="EMPTY_PROFILE_UPDATE",
        )
