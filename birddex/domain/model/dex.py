"""Local projection of one user's collection.

``DexState`` holds the top photo per species and the set of photos hidden
from species view for a single user. Callers that display the collection
apply changes to it optimistically: the change is applied before the write
is issued and undone if the write fails.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from birddex.domain.model.top_species import TopSpeciesEntry
from birddex.domain.value import PhotoId, SpeciesCode, UserId

DexSnapshot = tuple[dict[SpeciesCode, PhotoId], frozenset[PhotoId]]


class DexState:
    """Top-photo index and hidden-photo set for one user."""

    def __init__(
        self,
        user_id: UserId,
        top_photos: dict[SpeciesCode, PhotoId] | None = None,
        hidden_photos: set[PhotoId] | None = None,
    ) -> None:
        self.user_id = user_id
        self.top_photos: dict[SpeciesCode, PhotoId] = dict(top_photos or {})
        self.hidden_photos: set[PhotoId] = set(hidden_photos or ())

    @classmethod
    def from_entries(
        cls,
        user_id: UserId,
        entries: list[TopSpeciesEntry],
        hidden_photos: set[PhotoId] | None = None,
    ) -> "DexState":
        """Build state from top-species rows."""
        return cls(
            user_id,
            top_photos={e.species_id: e.photo_id for e in entries},
            hidden_photos=hidden_photos,
        )

    def top_photo_for(self, species_id: SpeciesCode) -> PhotoId | None:
        return self.top_photos.get(species_id)

    def is_top(self, photo_id: PhotoId) -> bool:
        return photo_id in self.top_photos.values()

    def set_top(self, species_id: SpeciesCode, photo_id: PhotoId) -> None:
        self.top_photos[species_id] = photo_id

    def clear_top(self, species_id: SpeciesCode, photo_id: PhotoId | None = None) -> None:
        """Remove the top photo of a species, optionally only if it is ``photo_id``."""
        current = self.top_photos.get(species_id)
        if current is not None and (photo_id is None or current == photo_id):
            del self.top_photos[species_id]

    def set_hidden(self, photo_id: PhotoId, hidden: bool) -> None:
        if hidden:
            self.hidden_photos.add(photo_id)
        else:
            self.hidden_photos.discard(photo_id)

    def snapshot(self) -> DexSnapshot:
        return dict(self.top_photos), frozenset(self.hidden_photos)

    def restore(self, snapshot: DexSnapshot) -> None:
        top_photos, hidden_photos = snapshot
        self.top_photos = dict(top_photos)
        self.hidden_photos = set(hidden_photos)

    @asynccontextmanager
    async def optimistic(
        self, apply: Callable[["DexState"], None]
    ) -> AsyncIterator["DexState"]:
        """Apply a change now and roll it back if the guarded block raises.

        Usage:
            async with state.optimistic(lambda s: s.set_top(species, photo_id)):
                await repository.upsert(...)
        """
        snapshot = self.snapshot()
        apply(self)
        try:
            yield self
        except BaseException:
            self.restore(snapshot)
            raise
