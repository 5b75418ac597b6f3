"""
Router for the current user's profile.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session as DBSession

from ..dependencies import get_db, get_user_id, get_user_service
from ..services.user_service import UserService
from .dto.requests import UpdateProfileRequest
from .dto.responses import UserResponse

router = APIRouter()


@router.get("/users/me", response_model=UserResponse)
async def get_current_user_profile(
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    """The caller's profile; only the id is returned when no profile is stored."""
    user = user_service.get_profile(db, user_id)
    if user is None:
        return UserResponse(id=user_id)
    return UserResponse.model_validate(user)


@router.put("/users/me", response_model=UserResponse)
async def update_current_user_profile(
    request: UpdateProfileRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    user = user_service.update_profile(db, user_id, name=request.name, email=request.email)
    return UserResponse.model_validate(user)
