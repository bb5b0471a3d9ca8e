"""Leaderboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from birddex.application.usecase.leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)
from birddex.domain.service import JWTService
from birddex.interface.api.session import SessionToken

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"], route_class=DishkaRoute)


@router.get("", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
) -> GetLeaderboardResponse:
    """Users ranked by unique species, then total photos.

    ``viewer_rank`` is included when signed in.
    """
    viewer_id = jwt_service.get_user_id_from_token(token)
    return await get_leaderboard_use_case.execute(GetLeaderboardRequest(viewer_id=viewer_id))
