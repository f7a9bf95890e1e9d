"""
Favorites module exceptions.
"""

from shared.exceptions import ValidationError


class MissingFavoriteParametersError(ValidationError):
    """Raised when the check request lacks a user or editor id."""

    def __init__(self):
        super().__init__("Missing required parameters", code="MISSING_FAVORITE_PARAMETERS")
