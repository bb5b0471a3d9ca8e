"""In-memory quest, entry and vote repositories for testing."""

from typing import Optional, Sequence

from birddex.domain.error import DuplicateActionError
from birddex.domain.model import Quest, QuestEntry, QuestVote
from birddex.domain.repository import (
    QuestEntryRepository,
    QuestRepository,
    QuestVoteRepository,
)
from birddex.domain.value import PhotoId, QuestEntryId, QuestId, UserId


class InMemoryQuestVoteRepository(QuestVoteRepository):
    """In-memory implementation of QuestVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, QuestId], QuestVote] = {}

    async def upsert(self, vote: QuestVote) -> QuestVote:
        self._votes[(vote.voter_id, vote.quest_id)] = vote
        return vote

    async def find_by_voter_and_quest(
        self, voter_id: UserId, quest_id: QuestId
    ) -> Optional[QuestVote]:
        return self._votes.get((voter_id, quest_id))

    async def find_by_quest(self, quest_id: QuestId) -> list[QuestVote]:
        return [v for v in self._votes.values() if v.quest_id == quest_id]

    async def find_by_entries(self, entry_ids: Sequence[QuestEntryId]) -> list[QuestVote]:
        wanted = set(entry_ids)
        return [v for v in self._votes.values() if v.entry_id in wanted]

    async def delete_by_entry(self, entry_id: QuestEntryId) -> int:
        keys = [k for k, v in self._votes.items() if v.entry_id == entry_id]
        for key in keys:
            del self._votes[key]
        return len(keys)

    def delete_by_quest(self, quest_id: QuestId) -> None:
        self._votes = {k: v for k, v in self._votes.items() if v.quest_id != quest_id}


class InMemoryQuestEntryRepository(QuestEntryRepository):
    """In-memory implementation of QuestEntryRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[QuestEntryId, QuestEntry] = {}

    async def find_by_id(self, entry_id: QuestEntryId) -> Optional[QuestEntry]:
        return self._entries.get(entry_id)

    async def find_by_quest(self, quest_id: QuestId) -> list[QuestEntry]:
        entries = [e for e in self._entries.values() if e.quest_id == quest_id]
        return sorted(entries, key=lambda e: e.created_at)

    async def find_by_quest_and_user(
        self, quest_id: QuestId, user_id: UserId
    ) -> Optional[QuestEntry]:
        for entry in self._entries.values():
            if entry.quest_id == quest_id and entry.user_id == user_id:
                return entry
        return None

    async def find_by_user(self, user_id: UserId) -> list[QuestEntry]:
        return [e for e in self._entries.values() if e.user_id == user_id]

    async def exists_for_photo(self, photo_id: PhotoId) -> bool:
        return any(e.photo_id == photo_id for e in self._entries.values())

    async def save(self, entry: QuestEntry) -> QuestEntry:
        """Insert an entry.

        Raises:
            DuplicateActionError: If the user already entered the quest
        """
        if await self.find_by_quest_and_user(entry.quest_id, entry.user_id):
            raise DuplicateActionError("You have already entered this quest")
        self._entries[entry.id] = entry
        return entry

    async def delete(self, entry_id: QuestEntryId) -> bool:
        return self._entries.pop(entry_id, None) is not None

    def delete_by_quest(self, quest_id: QuestId) -> None:
        self._entries = {k: e for k, e in self._entries.items() if e.quest_id != quest_id}


class InMemoryQuestRepository(QuestRepository):
    """In-memory implementation of QuestRepository for testing.

    Deleting a quest also removes its entries and votes when the sibling
    repositories are attached, as the database cascades do.
    """

    def __init__(
        self,
        entry_repository: InMemoryQuestEntryRepository | None = None,
        vote_repository: InMemoryQuestVoteRepository | None = None,
    ) -> None:
        self._quests: dict[QuestId, Quest] = {}
        self.entry_repository = entry_repository
        self.vote_repository = vote_repository

    async def find_by_id(self, quest_id: QuestId) -> Optional[Quest]:
        return self._quests.get(quest_id)

    async def find_all(self) -> list[Quest]:
        return sorted(self._quests.values(), key=lambda q: q.start_time)

    async def save(self, quest: Quest) -> Quest:
        self._quests[quest.id] = quest
        return quest

    async def delete(self, quest_id: QuestId) -> bool:
        if self._quests.pop(quest_id, None) is None:
            return False
        if self.vote_repository:
            self.vote_repository.delete_by_quest(quest_id)
        if self.entry_repository:
            self.entry_repository.delete_by_quest(quest_id)
        return True
