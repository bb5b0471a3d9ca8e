"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .friendship import InMemoryFriendshipRepository
from .photo import InMemoryPhotoRepository
from .quest import (
    InMemoryQuestEntryRepository,
    InMemoryQuestRepository,
    InMemoryQuestVoteRepository,
)
from .top_species import InMemoryTopSpeciesRepository
from .user_profile import InMemoryUserProfileRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFriendshipRepository",
    "InMemoryPhotoRepository",
    "InMemoryQuestEntryRepository",
    "InMemoryQuestRepository",
    "InMemoryQuestVoteRepository",
    "InMemoryTopSpeciesRepository",
    "InMemoryUserProfileRepository",
]
