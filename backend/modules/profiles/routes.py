"""
Profile API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import Profile, ProfileUpdate, PublicProfile
from .exceptions import EmptyProfileUpdateError, ProfileNotFoundError

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Get the current user's profile, including their subscription tier.
    """
    try:
        return await service.get_profile(user.id)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")


@router.patch("/me", response_model=Profile)
async def update_my_profile(
    update: ProfileUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Update name, bio or avatar of the current user.

    Any other field in the body (subscription_tier included) is ignored.
    """
    try:
        return await service.update_profile(user.id, update)
    except EmptyProfileUpdateError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")


@router.get("/{user_id}", response_model=PublicProfile)
async def get_public_profile(
    user_id: str,
    service: IProfileService = Depends(get_profile_service),
) -> PublicProfile:
    """
    Get the public portfolio view of an editor. No authentication needed.
    """
    try:
        return await service.get_public_profile(user_id)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")
