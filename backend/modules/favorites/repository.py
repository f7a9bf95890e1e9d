"""
Favorite repository for database access.
"""

from shared.repository import BaseRepository

TABLE = "editor_favorites"


class FavoriteRepository(BaseRepository[dict]):
    """Queries on the editor_favorites table."""

    def exists(self, user_id: str, editor_id: str) -> bool:
        result = (
            self._db.table(TABLE)
            .select("id")
            .eq("user_id", user_id)
            .eq("editor_id", editor_id)
            .limit(1)
            .execute()
        )
        return self._first(result) is not None
