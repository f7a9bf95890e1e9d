"""
Favorite API endpoints.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.middleware.auth import get_bearer_token
from api.dependencies import get_favorite_service
from modules.auth.exceptions import MissingTokenError
from api.models.errors import error_response

from .interfaces import IFavoriteService
from .models import FavoriteCheckRequest
from .exceptions import MissingFavoriteParametersError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/check")
async def check_favorite(
    request: FavoriteCheckRequest,
    token: Optional[str] = Depends(get_bearer_token),
    service: IFavoriteService = Depends(get_favorite_service),
) -> Any:
    """
    Check whether a user has favorited an editor.

    Body: `{user_id_param, editor_id_param}`. Returns a bare JSON boolean.
    """
    if not request.user_id_param or not request.editor_id_param:
        return error_response(MissingFavoriteParametersError().message, 400)
    if token is None:
        return error_response(MissingTokenError().message, 401)

    try:
        favorited = await service.is_favorite(token, request.user_id_param, request.editor_id_param)
    except Exception as e:
        logger.exception(f"Error checking favorite status: {e}")
        return error_response(str(e))

    return JSONResponse(content=favorited)
