"""Top-species repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from birddex.domain.model.top_species import TopSpeciesEntry
from birddex.domain.value import PhotoId, SpeciesCode, UserId


class TopSpeciesRepository(ABC):
    """Repository for the (user, species) -> photo mapping."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[TopSpeciesEntry]:
        """List a user's top photos, ordered by species code."""
        pass

    @abstractmethod
    async def find(self, user_id: UserId, species_id: SpeciesCode) -> Optional[TopSpeciesEntry]:
        """Find the top photo of one (user, species) pair."""
        pass

    @abstractmethod
    async def upsert(self, entry: TopSpeciesEntry) -> TopSpeciesEntry:
        """Set the top photo, overwriting any previous one for the pair."""
        pass

    @abstractmethod
    async def delete(
        self,
        user_id: UserId,
        species_id: SpeciesCode,
        photo_id: Optional[PhotoId] = None,
    ) -> bool:
        """Delete the mapping of a (user, species) pair.

        Args:
            user_id: Owner
            species_id: Species code
            photo_id: When given, only delete if the mapping points at this photo

        Returns:
            True if a mapping was deleted
        """
        pass
