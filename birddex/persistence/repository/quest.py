"""PostgreSQL implementations of the quest repositories."""

from typing import Optional, Sequence

from sqlalchemy import and_, delete, exists, select
from sqlalchemy.dialects.postgresql import insert

from birddex.domain.model import Quest, QuestEntry, QuestVote
from birddex.domain.repository import (
    QuestEntryRepository,
    QuestRepository,
    QuestVoteRepository,
)
from birddex.domain.value import PhotoId, QuestEntryId, QuestId, UserId
from birddex.persistence.mappers import (
    quest_entry_to_dict,
    quest_to_dict,
    quest_vote_to_dict,
    row_to_quest,
    row_to_quest_entry,
    row_to_quest_vote,
)
from birddex.persistence.repository.base import PostgresRepository
from birddex.persistence.tables import (
    quest_entries_table,
    quest_votes_table,
    quests_table,
)


class PostgresQuestRepository(PostgresRepository, QuestRepository):
    """PostgreSQL implementation of QuestRepository."""

    async def find_by_id(self, quest_id: QuestId) -> Optional[Quest]:
        stmt = select(quests_table).where(quests_table.c.id == quest_id)
        row = (await self._execute(stmt)).fetchone()
        return row_to_quest(row._asdict()) if row else None

    async def find_all(self) -> list[Quest]:
        """List quests by start time, earliest first."""
        stmt = select(quests_table).order_by(quests_table.c.start_time.asc())
        result = await self._execute(stmt)
        return [row_to_quest(row._asdict()) for row in result.fetchall()]

    async def save(self, quest: Quest) -> Quest:
        """Save a quest (create or update)."""
        values = quest_to_dict(quest)
        stmt = insert(quests_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[quests_table.c.id],
            set_={k: stmt.excluded[k] for k in values if k not in ("id", "created_at")},
        )
        await self._execute(stmt)
        return quest

    async def delete(self, quest_id: QuestId) -> bool:
        """Delete a quest; entries and votes go with it via cascades."""
        result = await self._execute(delete(quests_table).where(quests_table.c.id == quest_id))
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresQuestEntryRepository(PostgresRepository, QuestEntryRepository):
    """PostgreSQL implementation of QuestEntryRepository."""

    async def _find(self, *conditions) -> list[QuestEntry]:
        stmt = (
            select(quest_entries_table)
            .where(and_(*conditions))
            .order_by(quest_entries_table.c.created_at.asc())
        )
        result = await self._execute(stmt)
        return [row_to_quest_entry(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, entry_id: QuestEntryId) -> Optional[QuestEntry]:
        found = await self._find(quest_entries_table.c.id == entry_id)
        return found[0] if found else None

    async def find_by_quest(self, quest_id: QuestId) -> list[QuestEntry]:
        return await self._find(quest_entries_table.c.quest_id == quest_id)

    async def find_by_quest_and_user(
        self, quest_id: QuestId, user_id: UserId
    ) -> Optional[QuestEntry]:
        found = await self._find(
            quest_entries_table.c.quest_id == quest_id,
            quest_entries_table.c.user_id == user_id,
        )
        return found[0] if found else None

    async def find_by_user(self, user_id: UserId) -> list[QuestEntry]:
        return await self._find(quest_entries_table.c.user_id == user_id)

    async def exists_for_photo(self, photo_id: PhotoId) -> bool:
        stmt = select(exists().where(quest_entries_table.c.photo_id == photo_id))
        return bool((await self._execute(stmt)).scalar())

    async def save(self, entry: QuestEntry) -> QuestEntry:
        """Insert an entry; the (quest, user) constraint rejects a second one."""
        await self._execute(
            quest_entries_table.insert().values(**quest_entry_to_dict(entry)),
            duplicate_message="You have already entered this quest",
        )
        return entry

    async def delete(self, entry_id: QuestEntryId) -> bool:
        result = await self._execute(
            delete(quest_entries_table).where(quest_entries_table.c.id == entry_id)
        )
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresQuestVoteRepository(PostgresRepository, QuestVoteRepository):
    """PostgreSQL implementation of QuestVoteRepository."""

    async def upsert(self, vote: QuestVote) -> QuestVote:
        """Insert a vote, or move the voter's existing vote in the quest."""
        stmt = insert(quest_votes_table).values(**quest_vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            index_elements=[quest_votes_table.c.voter_id, quest_votes_table.c.quest_id],
            set_={
                "entry_id": stmt.excluded.entry_id,
                "created_at": stmt.excluded.created_at,
            },
        )
        await self._execute(stmt)
        return vote

    async def find_by_voter_and_quest(
        self, voter_id: UserId, quest_id: QuestId
    ) -> Optional[QuestVote]:
        stmt = select(quest_votes_table).where(
            and_(
                quest_votes_table.c.voter_id == voter_id,
                quest_votes_table.c.quest_id == quest_id,
            )
        )
        row = (await self._execute(stmt)).fetchone()
        return row_to_quest_vote(row._asdict()) if row else None

    async def find_by_quest(self, quest_id: QuestId) -> list[QuestVote]:
        stmt = select(quest_votes_table).where(quest_votes_table.c.quest_id == quest_id)
        result = await self._execute(stmt)
        return [row_to_quest_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_entries(self, entry_ids: Sequence[QuestEntryId]) -> list[QuestVote]:
        if not entry_ids:
            return []
        stmt = select(quest_votes_table).where(quest_votes_table.c.entry_id.in_(entry_ids))
        result = await self._execute(stmt)
        return [row_to_quest_vote(row._asdict()) for row in result.fetchall()]

    async def delete_by_entry(self, entry_id: QuestEntryId) -> int:
        result = await self._execute(
            delete(quest_votes_table).where(quest_votes_table.c.entry_id == entry_id)
        )
        return result.rowcount  # type: ignore[attr-defined]
