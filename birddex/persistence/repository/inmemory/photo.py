"""In-memory photo repository for testing."""

from typing import Any, Optional, Sequence

from birddex.domain.error import NotFoundError, PersistenceError
from birddex.domain.model import Photo
from birddex.domain.repository import PhotoRepository
from birddex.domain.value import PhotoId, PhotoPrivacy, SpeciesCode, UserId

from .comment import InMemoryCommentRepository
from .quest import InMemoryQuestEntryRepository
from .top_species import InMemoryTopSpeciesRepository

HIDDEN_TOP_PHOTO_MESSAGE = "A hidden photo cannot be the top photo for a species"


class InMemoryPhotoRepository(PhotoRepository):
    """In-memory implementation of PhotoRepository for testing.

    With the sibling repositories attached it behaves like the database:
    hiding a top photo is rejected and ``delete_or_hide`` cascades.
    """

    def __init__(
        self,
        top_species_repository: InMemoryTopSpeciesRepository | None = None,
        comment_repository: InMemoryCommentRepository | None = None,
        quest_entry_repository: InMemoryQuestEntryRepository | None = None,
    ) -> None:
        self._photos: dict[PhotoId, Photo] = {}
        self.top_species_repository = top_species_repository
        self.comment_repository = comment_repository
        self.quest_entry_repository = quest_entry_repository

    def _newest_first(self, photos: list[Photo]) -> list[Photo]:
        return sorted(photos, key=lambda p: p.created_at, reverse=True)

    async def find_by_id(self, photo_id: PhotoId) -> Optional[Photo]:
        return self._photos.get(photo_id)

    async def find_by_ids(self, photo_ids: Sequence[PhotoId]) -> list[Photo]:
        return [self._photos[pid] for pid in photo_ids if pid in self._photos]

    async def find_by_owner(
        self, owner_id: UserId, offset: int = 0, limit: Optional[int] = None
    ) -> list[Photo]:
        photos = self._newest_first(
            [p for p in self._photos.values() if p.owner_id == owner_id]
        )
        end = None if limit is None else offset + limit
        return photos[offset:end]

    async def find_by_owner_and_species(
        self,
        owner_id: UserId,
        species_id: SpeciesCode,
        include_hidden: bool = False,
    ) -> list[Photo]:
        return self._newest_first(
            [
                p
                for p in self._photos.values()
                if p.owner_id == owner_id
                and p.species_id == species_id
                and (include_hidden or not p.hidden_from_species_view)
            ]
        )

    async def find_feed(
        self, owner_ids: Sequence[UserId], offset: int, limit: int
    ) -> list[Photo]:
        owners = set(owner_ids)
        photos = self._newest_first(
            [
                p
                for p in self._photos.values()
                if p.owner_id in owners
                and not p.hidden_from_feed
                and p.privacy != PhotoPrivacy.PRIVATE
            ]
        )
        return photos[offset : offset + limit]

    async def find_all_in_feed(self) -> list[Photo]:
        return [p for p in self._photos.values() if not p.hidden_from_feed]

    async def save(self, photo: Photo) -> Photo:
        self._photos[photo.id] = photo
        return photo

    async def set_hidden_from_species_view(
        self, photo_id: PhotoId, hidden: bool
    ) -> Photo:
        """Set the flag.

        Raises:
            NotFoundError: If the photo does not exist
            PersistenceError: If the photo is still a top photo
        """
        photo = self._photos.get(photo_id)
        if not photo:
            raise NotFoundError("Photo", str(photo_id))
        if hidden and self.top_species_repository and self.top_species_repository.is_top(photo_id):
            raise PersistenceError(HIDDEN_TOP_PHOTO_MESSAGE)
        updated = photo.model_copy(update={"hidden_from_species_view": hidden})
        self._photos[photo_id] = updated
        return updated

    async def delete_or_hide(self, photo_id: PhotoId) -> Optional[dict[str, Any]]:
        """Delete the photo, or hide it when a quest entry references it."""
        photo = self._photos.get(photo_id)
        if not photo:
            return {"message": "Photo not found"}

        if self.top_species_repository:
            self.top_species_repository.delete_by_photo(photo_id)

        if self.quest_entry_repository and await self.quest_entry_repository.exists_for_photo(
            photo_id
        ):
            self._photos[photo_id] = photo.model_copy(
                update={"hidden_from_feed": True, "hidden_from_species_view": True}
            )
            return {"status": "hidden"}

        if self.comment_repository:
            self.comment_repository.delete_by_photo(photo_id)
        del self._photos[photo_id]
        return {"status": "deleted"}
