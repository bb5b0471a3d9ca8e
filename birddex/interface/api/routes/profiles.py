"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from birddex.application.usecase.profile import (
    FindProfileRequest,
    FindProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from birddex.application.usecase.quest import (
    GetAwardsRequest,
    GetAwardsResponse,
    GetAwardsUseCase,
)
from birddex.domain.service import JWTService
from birddex.interface.api.session import SessionToken, require_user

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    display_name: str


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Get the signed-in user's profile, creating it on first access."""
    user_id = require_user(jwt_service, token, "view your profile")
    return await get_profile_use_case.execute(GetProfileRequest(user_id=user_id))


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> ProfileResponse:
    """Change the signed-in user's display name.

    Raises:
        ValidationError: If the name is blank or too long (400)
        DuplicateActionError: If the name is taken (409)
    """
    user_id = require_user(jwt_service, token, "edit your profile")
    return await update_profile_use_case.execute(
        UpdateProfileRequest(user_id=user_id, display_name=request.display_name)
    )


@router.get("/me/awards", response_model=GetAwardsResponse)
async def get_my_awards(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_awards_use_case: FromDishka[GetAwardsUseCase],
) -> GetAwardsResponse:
    """Quest awards earned by the signed-in user."""
    user_id = require_user(jwt_service, token, "view your awards")
    return await get_awards_use_case.execute(GetAwardsRequest(user_id=user_id))


@router.get("/by-name/{display_name}", response_model=ProfileResponse)
async def find_profile(
    display_name: str,
    find_profile_use_case: FromDishka[FindProfileUseCase],
) -> ProfileResponse:
    """Look up a public profile by display name (case-insensitive)."""
    return await find_profile_use_case.execute(FindProfileRequest(display_name=display_name))
