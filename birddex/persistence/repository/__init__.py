"""PostgreSQL repository implementations."""

from birddex.persistence.repository.comment import PostgresCommentRepository
from birddex.persistence.repository.friendship import PostgresFriendshipRepository
from birddex.persistence.repository.photo import PostgresPhotoRepository
from birddex.persistence.repository.quest import (
    PostgresQuestEntryRepository,
    PostgresQuestRepository,
    PostgresQuestVoteRepository,
)
from birddex.persistence.repository.top_species import PostgresTopSpeciesRepository
from birddex.persistence.repository.user_profile import PostgresUserProfileRepository

__all__ = [
    "PostgresUserProfileRepository",
    "PostgresPhotoRepository",
    "PostgresCommentRepository",
    "PostgresFriendshipRepository",
    "PostgresQuestRepository",
    "PostgresQuestEntryRepository",
    "PostgresQuestVoteRepository",
    "PostgresTopSpeciesRepository",
]
