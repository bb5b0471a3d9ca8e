"""Mock persistence providers for testing."""

from dishka import Scope, provide

from birddex.domain.repository import (
    CommentRepository,
    FriendshipRepository,
    PhotoRepository,
    QuestEntryRepository,
    QuestRepository,
    QuestVoteRepository,
    TopSpeciesRepository,
    UserProfileRepository,
)
from birddex.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryFriendshipRepository,
    InMemoryPhotoRepository,
    InMemoryQuestEntryRepository,
    InMemoryQuestRepository,
    InMemoryQuestVoteRepository,
    InMemoryTopSpeciesRepository,
    InMemoryUserProfileRepository,
)
from birddex.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that state survives across requests made against one
    container (API tests issue several requests). Each test builds its own
    container, so tests stay isolated.

    The photo and quest repositories are wired to their siblings so that
    deletes cascade and the hidden-top-photo rule is enforced.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_profile_repository(self) -> UserProfileRepository:
        return InMemoryUserProfileRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_friendship_repository(self) -> FriendshipRepository:
        return InMemoryFriendshipRepository()

    @provide(scope=Scope.APP)
    def get_top_species_repository(self) -> TopSpeciesRepository:
        return InMemoryTopSpeciesRepository()

    @provide(scope=Scope.APP)
    def get_quest_entry_repository(self) -> QuestEntryRepository:
        return InMemoryQuestEntryRepository()

    @provide(scope=Scope.APP)
    def get_quest_vote_repository(self) -> QuestVoteRepository:
        return InMemoryQuestVoteRepository()

    @provide(scope=Scope.APP)
    def get_photo_repository(
        self,
        top_species_repository: TopSpeciesRepository,
        comment_repository: CommentRepository,
        quest_entry_repository: QuestEntryRepository,
    ) -> PhotoRepository:
        """Provide in-memory photo repository behaving like the database."""
        return InMemoryPhotoRepository(
            top_species_repository=top_species_repository,
            comment_repository=comment_repository,
            quest_entry_repository=quest_entry_repository,
        )

    @provide(scope=Scope.APP)
    def get_quest_repository(
        self,
        quest_entry_repository: QuestEntryRepository,
        quest_vote_repository: QuestVoteRepository,
    ) -> QuestRepository:
        return InMemoryQuestRepository(
            entry_repository=quest_entry_repository,
            vote_repository=quest_vote_repository,
        )
