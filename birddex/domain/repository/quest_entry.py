"""Quest entry repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from birddex.domain.model.quest import QuestEntry
from birddex.domain.value import PhotoId, QuestEntryId, QuestId, UserId


class QuestEntryRepository(ABC):
    """Repository for QuestEntry entity."""

    @abstractmethod
    async def find_by_id(self, entry_id: QuestEntryId) -> Optional[QuestEntry]:
        """Find an entry by ID."""
        pass

    @abstractmethod
    async def find_by_quest(self, quest_id: QuestId) -> list[QuestEntry]:
        """List a quest's entries, oldest first."""
        pass

    @abstractmethod
    async def find_by_quest_and_user(
        self, quest_id: QuestId, user_id: UserId
    ) -> Optional[QuestEntry]:
        """Find a user's entry in a quest.

        Args:
            quest_id: Quest ID
            user_id: Entrant

        Returns:
            The entry if the user has entered, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[QuestEntry]:
        """List every entry a user has submitted."""
        pass

    @abstractmethod
    async def exists_for_photo(self, photo_id: PhotoId) -> bool:
        """Check whether any entry references the photo."""
        pass

    @abstractmethod
    async def save(self, entry: QuestEntry) -> QuestEntry:
        """Create an entry.

        Raises:
            DuplicateActionError: If the user already entered the quest
        """
        pass

    @abstractmethod
    async def delete(self, entry_id: QuestEntryId) -> bool:
        """Delete an entry.

        Returns:
            True if an entry was deleted
        """
        pass
