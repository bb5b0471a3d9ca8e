"""Repository interfaces for BirdDex domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from birddex.domain.repository.comment import CommentRepository
from birddex.domain.repository.friendship import FriendshipRepository
from birddex.domain.repository.photo import PhotoRepository
from birddex.domain.repository.quest import QuestRepository
from birddex.domain.repository.quest_entry import QuestEntryRepository
from birddex.domain.repository.quest_vote import QuestVoteRepository
from birddex.domain.repository.top_species import TopSpeciesRepository
from birddex.domain.repository.user_profile import UserProfileRepository

__all__ = [
    "CommentRepository",
    "FriendshipRepository",
    "PhotoRepository",
    "QuestRepository",
    "QuestEntryRepository",
    "QuestVoteRepository",
    "TopSpeciesRepository",
    "UserProfileRepository",
]
