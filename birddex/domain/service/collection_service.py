"""Collection (dex) domain service.

Keeps the top-photo mapping and the species-view flags of a user's photos
consistent: the top photo of a species is never hidden from species view.
Writes are ordered so that a failure part way through can only leave a
species without a top photo, never with a hidden one.
"""

from dataclasses import dataclass

import logfire

from birddex.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from birddex.domain.model import DexState, Photo, TopSpeciesEntry
from birddex.domain.repository import PhotoRepository, TopSpeciesRepository
from birddex.domain.value import PhotoId, SpeciesCode, UserId

from .base import Service


@dataclass
class DexCell:
    """One species in a user's dex grid."""

    species_id: SpeciesCode
    photo: Photo


@dataclass
class SpeciesPhotos:
    """Photos of one species in a user's dex, newest first."""

    species_id: SpeciesCode
    photos: list[Photo]
    top_photo_id: PhotoId | None

    def is_top(self, photo_id: PhotoId) -> bool:
        return self.top_photo_id == photo_id


class CollectionService(Service):
    """Domain service for top photos and dex visibility.

    Mutating operations accept an optional ``DexState``. When given, the
    change is applied to it before the write and rolled back if the write
    fails; otherwise a fresh state is loaded for the user.
    """

    def __init__(
        self,
        photo_repository: PhotoRepository,
        top_species_repository: TopSpeciesRepository,
    ) -> None:
        """Initialize collection service.

        Args:
            photo_repository: Photo repository
            top_species_repository: Top-photo mapping repository
        """
        self.photo_repository = photo_repository
        self.top_species_repository = top_species_repository

    async def get_state(self, user_id: UserId) -> DexState:
        """Load the user's top photos and hidden photos."""
        entries = await self.top_species_repository.find_by_user(user_id)
        photos = await self.photo_repository.find_by_owner(user_id)
        hidden = {p.id for p in photos if p.hidden_from_species_view}
        return DexState.from_entries(user_id, entries, hidden)

    async def _get_own_photo(self, user_id: UserId, photo_id: PhotoId, action: str) -> Photo:
        photo = await self.photo_repository.find_by_id(photo_id)
        if not photo:
            raise NotFoundError("Photo", str(photo_id))
        if photo.owner_id != user_id:
            logfire.warn(
                "Collection change refused", photo_id=str(photo_id), user_id=str(user_id)
            )
            raise NotAuthorizedError(action, str(user_id))
        return photo

    async def set_top_photo(
        self,
        user_id: UserId,
        species_id: SpeciesCode,
        photo_id: PhotoId,
        state: DexState | None = None,
    ) -> TopSpeciesEntry:
        """Make a photo the top photo of its species, replacing any previous one.

        Args:
            user_id: Acting user, who must own the photo
            species_id: Species the photo is tagged with
            photo_id: New top photo
            state: Local state to update optimistically

        Returns:
            The stored mapping

        Raises:
            NotFoundError: If the photo does not exist
            NotAuthorizedError: If the user does not own the photo
            ValidationError: If the photo has another species or is hidden
        """
        with logfire.span(
            "collection_service.set_top_photo",
            user_id=str(user_id),
            species_id=str(species_id),
            photo_id=str(photo_id),
        ):
            photo = await self._get_own_photo(user_id, photo_id, "set this top photo")
            if photo.species_id != species_id:
                raise ValidationError("Photo is not tagged with this species")
            if photo.hidden_from_species_view:
                raise ValidationError("Restore the photo before making it the top photo")

            state = state or await self.get_state(user_id)
            entry = TopSpeciesEntry(user_id=user_id, species_id=species_id, photo_id=photo_id)
            async with state.optimistic(lambda s: s.set_top(species_id, photo_id)):
                saved = await self.top_species_repository.upsert(entry)
            logfire.info("Top photo set", species_id=str(species_id), photo_id=str(photo_id))
            return saved

    async def hide_photo_from_species_view(
        self,
        user_id: UserId,
        species_id: SpeciesCode,
        photo_id: PhotoId,
        state: DexState | None = None,
    ) -> Photo:
        """Remove a photo from the species view.

        Clears the species' top photo first when it is this photo, then sets
        the hidden flag. The routine can be repeated safely. If the second
        write fails the species is left without a top photo and only the
        hidden flag is rolled back in ``state``.

        Raises:
            NotFoundError: If the photo does not exist
            NotAuthorizedError: If the user does not own the photo
            ValidationError: If the photo has another species
            PersistenceError: If either write is rejected
        """
        with logfire.span(
            "collection_service.hide_photo_from_species_view",
            user_id=str(user_id),
            species_id=str(species_id),
            photo_id=str(photo_id),
        ):
            photo = await self._get_own_photo(user_id, photo_id, "hide this photo")
            if photo.species_id != species_id:
                raise ValidationError("Photo is not tagged with this species")

            state = state or await self.get_state(user_id)
            async with state.optimistic(lambda s: s.clear_top(species_id, photo_id)):
                cleared = await self.top_species_repository.delete(
                    user_id, species_id, photo_id
                )
            if cleared:
                logfire.info("Top photo cleared before hiding", photo_id=str(photo_id))

            async with state.optimistic(lambda s: s.set_hidden(photo_id, True)):
                hidden = await self.photo_repository.set_hidden_from_species_view(
                    photo_id, True
                )
            logfire.info("Photo hidden from species view", photo_id=str(photo_id))
            return hidden

    async def show_photo_in_species_view(
        self, user_id: UserId, photo_id: PhotoId, state: DexState | None = None
    ) -> Photo:
        """Restore a hidden photo to the species view."""
        with logfire.span(
            "collection_service.show_photo_in_species_view",
            user_id=str(user_id),
            photo_id=str(photo_id),
        ):
            await self._get_own_photo(user_id, photo_id, "restore this photo")
            state = state or await self.get_state(user_id)
            async with state.optimistic(lambda s: s.set_hidden(photo_id, False)):
                shown = await self.photo_repository.set_hidden_from_species_view(
                    photo_id, False
                )
            logfire.info("Photo restored to species view", photo_id=str(photo_id))
            return shown

    async def reassign_species(
        self,
        user_id: UserId,
        photo_id: PhotoId,
        species_id: SpeciesCode,
        state: DexState | None = None,
    ) -> Photo:
        """Tag a photo with a different species.

        If the photo was the top photo of its old species, that mapping is
        deleted before the photo is re-tagged.

        Raises:
            NotFoundError: If the photo does not exist
            NotAuthorizedError: If the user does not own the photo
        """
        with logfire.span(
            "collection_service.reassign_species",
            user_id=str(user_id),
            photo_id=str(photo_id),
            species_id=str(species_id),
        ):
            photo = await self._get_own_photo(user_id, photo_id, "change this photo's species")
            if photo.species_id == species_id:
                return photo

            old_species = photo.species_id
            state = state or await self.get_state(user_id)
            async with state.optimistic(lambda s: s.clear_top(old_species, photo_id)):
                await self.top_species_repository.delete(user_id, old_species, photo_id)

            saved = await self.photo_repository.save(
                photo.model_copy(update={"species_id": species_id})
            )
            logfire.info(
                "Photo species changed",
                photo_id=str(photo_id),
                old_species=str(old_species),
                new_species=str(species_id),
            )
            return saved

    async def get_dex(self, user_id: UserId) -> list[DexCell]:
        """Build the dex grid: one cell per species with a top photo.

        Returns:
            Cells ordered by species code
        """
        with logfire.span("collection_service.get_dex", user_id=str(user_id)):
            entries = await self.top_species_repository.find_by_user(user_id)
            photos = await self.photo_repository.find_by_ids([e.photo_id for e in entries])
            by_id = {p.id: p for p in photos}
            cells = [
                DexCell(species_id=e.species_id, photo=by_id[e.photo_id])
                for e in sorted(entries, key=lambda e: e.species_id.root)
                if e.photo_id in by_id
            ]
            logfire.info("Dex retrieved", user_id=str(user_id), species_count=len(cells))
            return cells

    async def get_species_photos(
        self, user_id: UserId, species_id: SpeciesCode
    ) -> SpeciesPhotos:
        """List the user's visible photos of one species, newest first."""
        photos = await self.photo_repository.find_by_owner_and_species(user_id, species_id)
        top = await self.top_species_repository.find(user_id, species_id)
        return SpeciesPhotos(
            species_id=species_id,
            photos=photos,
            top_photo_id=top.photo_id if top else None,
        )

    async def top_photo_ids(self, user_id: UserId) -> set[PhotoId]:
        """Photo ids that are currently a top photo for the user."""
        entries = await self.top_species_repository.find_by_user(user_id)
        return {e.photo_id for e in entries}
