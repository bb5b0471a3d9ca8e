"""Leaderboard use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    LeaderboardItem,
)

__all__ = [
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "LeaderboardItem",
]
