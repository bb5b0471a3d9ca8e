"""Get leaderboard use case."""

from pydantic import BaseModel

from birddex.domain.service import LeaderboardService
from birddex.domain.value import UserId

from ..base import parse_id


class LeaderboardItem(BaseModel):
    user_id: str
    display_name: str
    unique_species_count: int
    total_photos_count: int
    rank: int


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetLeaderboardResponse(BaseModel):
    """Ranked users.

    ``available`` is False when the data could not be loaded; ``entries``
    is then empty.
    """

    entries: list[LeaderboardItem]
    viewer_rank: int | None
    available: bool


class GetLeaderboardUseCase:
    """Use case for the species leaderboard."""

    def __init__(self, leaderboard_service: LeaderboardService) -> None:
        """Initialize get leaderboard use case.

        Args:
            leaderboard_service: Ranking service
        """
        self.leaderboard_service = leaderboard_service

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        leaderboard = await self.leaderboard_service.get_leaderboard()
        viewer_rank = None
        if request.viewer_id:
            viewer_rank = leaderboard.rank_of(parse_id(request.viewer_id, "User", UserId))

        return GetLeaderboardResponse(
            entries=[
                LeaderboardItem(
                    user_id=str(e.user_id),
                    display_name=e.display_name,
                    unique_species_count=e.unique_species_count,
                    total_photos_count=e.total_photos_count,
                    rank=e.rank,
                )
                for e in leaderboard.entries
            ],
            viewer_rank=viewer_rank,
            available=leaderboard.available,
        )
