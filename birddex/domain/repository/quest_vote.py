"""Quest vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from birddex.domain.model.quest import QuestVote
from birddex.domain.value import QuestEntryId, QuestId, UserId


class QuestVoteRepository(ABC):
    """Repository for QuestVote entity.

    Votes are keyed by (voter_id, quest_id): there is never more than one
    vote per voter in a quest.
    """

    @abstractmethod
    async def upsert(self, vote: QuestVote) -> QuestVote:
        """Insert a vote, or overwrite the voter's existing vote in the quest.

        Args:
            vote: The vote to record

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def find_by_voter_and_quest(
        self, voter_id: UserId, quest_id: QuestId
    ) -> Optional[QuestVote]:
        """Find the voter's current vote in a quest."""
        pass

    @abstractmethod
    async def find_by_quest(self, quest_id: QuestId) -> list[QuestVote]:
        """List all votes cast in a quest."""
        pass

    @abstractmethod
    async def find_by_entries(self, entry_ids: Sequence[QuestEntryId]) -> list[QuestVote]:
        """List votes cast for any of the given entries (batch query)."""
        pass

    @abstractmethod
    async def delete_by_entry(self, entry_id: QuestEntryId) -> int:
        """Delete every vote for an entry.

        Returns:
            Number of votes deleted
        """
        pass
