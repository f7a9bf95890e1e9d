"""
Favorites module.

Answers whether a client has favorited an editor.

Public API:
- IFavoriteService: Interface for favorite lookups
- FavoriteCheckRequest: Request body of the check endpoint
"""

from .interfaces import IFavoriteService
from .models import FavoriteCheckRequest
from .exceptions import MissingFavoriteParametersError

__all__ = [
    "IFavoriteService",
    "FavoriteCheckRequest",
    "MissingFavoriteParametersError",
]
