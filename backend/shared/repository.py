"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import Any, Generic, Optional, TypeVar
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement table-specific methods and map rows to
    Pydantic models internally.

    Example:
        class ProfileRepository(BaseRepository[Profile]):
            def get_by_id(self, user_id: str) -> Optional[Profile]:
                result = self._db.table("profiles").select("*").eq("id", user_id).execute()
                row = self._first(result)
                return self._map_to_profile(row) if row else None
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _first(result: Any) -> Optional[dict[str, Any]]:
        """Return the first row of a query result, or None when empty."""
        if not result.data:
            return None
        return result.data[0]
