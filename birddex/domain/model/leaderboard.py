"""Leaderboard entry (derived, never persisted)."""

from pydantic import Field

from birddex.domain.model.common import DomainModel
from birddex.domain.value import UserId


class LeaderboardEntry(DomainModel):
    """One ranked row of the leaderboard."""

    user_id: UserId
    display_name: str
    unique_species_count: int = Field(ge=0)
    total_photos_count: int = Field(ge=0)
    rank: int = Field(ge=1)
