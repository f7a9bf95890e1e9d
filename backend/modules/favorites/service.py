"""
Favorite service implementation.
"""

from typing import Callable

from supabase import Client

from shared.database import get_supabase_user_client

from .interfaces import IFavoriteService
from .repository import FavoriteRepository


class FavoriteService(IFavoriteService):
    """
    Favorite lookups through a per-request, user-scoped Supabase client.
    """

    def __init__(self, client_factory: Callable[[str], Client] = get_supabase_user_client):
        self._client_factory = client_factory

    async def is_favorite(self, access_token: str, user_id: str, editor_id: str) -> bool:
        repository = FavoriteRepository(self._client_factory(access_token))
        return repository.exists(user_id, editor_id)
