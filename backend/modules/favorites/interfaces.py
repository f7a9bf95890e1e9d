"""
Favorites module interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IFavoriteService(Protocol):
    """
    Interface for favorite lookups.
    """

    async def is_favorite(self, access_token: str, user_id: str, editor_id: str) -> bool:
        """
        Whether user_id has favorited editor_id.

        The lookup runs as the caller (access_token), so row level
        security decides which favorites are visible.
        """
        ...
