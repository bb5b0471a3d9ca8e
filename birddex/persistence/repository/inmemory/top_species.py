"""In-memory top-species repository for testing."""

from typing import Optional

from birddex.domain.model import TopSpeciesEntry
from birddex.domain.repository import TopSpeciesRepository
from birddex.domain.value import PhotoId, SpeciesCode, UserId


class InMemoryTopSpeciesRepository(TopSpeciesRepository):
    """In-memory implementation of TopSpeciesRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[tuple[UserId, SpeciesCode], TopSpeciesEntry] = {}

    async def find_by_user(self, user_id: UserId) -> list[TopSpeciesEntry]:
        entries = [e for (uid, _), e in self._entries.items() if uid == user_id]
        return sorted(entries, key=lambda e: e.species_id.root)

    async def find(self, user_id: UserId, species_id: SpeciesCode) -> Optional[TopSpeciesEntry]:
        return self._entries.get((user_id, species_id))

    async def upsert(self, entry: TopSpeciesEntry) -> TopSpeciesEntry:
        self._entries[(entry.user_id, entry.species_id)] = entry
        return entry

    async def delete(
        self,
        user_id: UserId,
        species_id: SpeciesCode,
        photo_id: Optional[PhotoId] = None,
    ) -> bool:
        entry = self._entries.get((user_id, species_id))
        if entry is None or (photo_id is not None and entry.photo_id != photo_id):
            return False
        del self._entries[(user_id, species_id)]
        return True

    def is_top(self, photo_id: PhotoId) -> bool:
        return any(e.photo_id == photo_id for e in self._entries.values())

    def delete_by_photo(self, photo_id: PhotoId) -> None:
        self._entries = {k: e for k, e in self._entries.items() if e.photo_id != photo_id}
