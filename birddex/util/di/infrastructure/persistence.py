"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from birddex.config import Settings
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
from birddex.persistence.database import create_engine, create_session_factory
from birddex.persistence.repository import (
    PostgresCommentRepository,
    PostgresFriendshipRepository,
    PostgresPhotoRepository,
    PostgresQuestEntryRepository,
    PostgresQuestRepository,
    PostgresQuestVoteRepository,
    PostgresTopSpeciesRepository,
    PostgresUserProfileRepository,
)
from birddex.util.di.base import ProviderBase
from birddex.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_profile_repository(self, session: AsyncSession) -> UserProfileRepository:
        return PostgresUserProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_photo_repository(self, session: AsyncSession) -> PhotoRepository:
        return PostgresPhotoRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_friendship_repository(self, session: AsyncSession) -> FriendshipRepository:
        return PostgresFriendshipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_quest_repository(self, session: AsyncSession) -> QuestRepository:
        return PostgresQuestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_quest_entry_repository(self, session: AsyncSession) -> QuestEntryRepository:
        return PostgresQuestEntryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_quest_vote_repository(self, session: AsyncSession) -> QuestVoteRepository:
        return PostgresQuestVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_top_species_repository(self, session: AsyncSession) -> TopSpeciesRepository:
        return PostgresTopSpeciesRepository(session)
