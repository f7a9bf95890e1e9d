"""
Favorites module data models.
"""

from typing import Optional

from pydantic import BaseModel


class FavoriteCheckRequest(BaseModel):
    """Body of the favorite check. Field names follow the SPA's RPC call."""

    user_id_param: Optional[str] = None
    editor_id_param: Optional[str] = None
