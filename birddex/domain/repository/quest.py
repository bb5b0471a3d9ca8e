"""Quest repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from birddex.domain.model.quest import Quest
from birddex.domain.value import QuestId


class QuestRepository(ABC):
    """Repository for Quest aggregate."""

    @abstractmethod
    async def find_by_id(self, quest_id: QuestId) -> Optional[Quest]:
        """Find a quest by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Quest]:
        """List all quests ordered by start time ascending."""
        pass

    @abstractmethod
    async def save(self, quest: Quest) -> Quest:
        """Insert or update a quest."""
        pass

    @abstractmethod
    async def delete(self, quest_id: QuestId) -> bool:
        """Delete a quest together with its entries and votes.

        Returns:
            True if a quest was deleted
        """
        pass
