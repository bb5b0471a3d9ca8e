"""Domain model entities for BirdDex."""

from birddex.domain.model.comment import Comment
from birddex.domain.model.dex import DexState
from birddex.domain.model.friendship import Friendship
from birddex.domain.model.leaderboard import LeaderboardEntry
from birddex.domain.model.photo import Photo
from birddex.domain.model.quest import Quest, QuestEntry, QuestVote
from birddex.domain.model.top_species import TopSpeciesEntry
from birddex.domain.model.user_profile import UNKNOWN_USER, UserProfile

__all__ = [
    "Comment",
    "DexState",
    "Friendship",
    "LeaderboardEntry",
    "Photo",
    "Quest",
    "QuestEntry",
    "QuestVote",
    "TopSpeciesEntry",
    "UNKNOWN_USER",
    "UserProfile",
]
