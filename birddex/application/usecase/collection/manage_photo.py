"""Top-photo and species-view visibility use cases."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import CollectionService
from birddex.domain.value import PhotoId, UserId

from ..base import parse_id, parse_species_code


class CollectionPhotoRequest(BaseModel):
    """A collection action on one of the user's photos."""

    user_id: str
    species_id: str
    photo_id: str


class CollectionPhotoResponse(BaseModel):
    """State of the photo after the action."""

    species_id: str
    photo_id: str
    is_top: bool
    hidden_from_species_view: bool


class SetTopPhotoUseCase:
    """Use case for choosing the top photo of a species."""

    def __init__(self, collection_service: CollectionService) -> None:
        self.collection_service = collection_service

    async def execute(self, request: CollectionPhotoRequest) -> CollectionPhotoResponse:
        """Set the photo as top, replacing the previous top photo.

        Raises:
            ValidationError: If the photo is hidden or tagged with another species
        """
        entry = await self.collection_service.set_top_photo(
            UserId(UUID(request.user_id)),
            parse_species_code(request.species_id),
            parse_id(request.photo_id, "Photo", PhotoId),
        )
        return CollectionPhotoResponse(
            species_id=entry.species_id.root,
            photo_id=str(entry.photo_id),
            is_top=True,
            hidden_from_species_view=False,
        )


class HidePhotoUseCase:
    """Use case for removing a photo from the species view.

    A top photo stops being top before it is hidden.
    """

    def __init__(self, collection_service: CollectionService) -> None:
        self.collection_service = collection_service

    async def execute(self, request: CollectionPhotoRequest) -> CollectionPhotoResponse:
        photo = await self.collection_service.hide_photo_from_species_view(
            UserId(UUID(request.user_id)),
            parse_species_code(request.species_id),
            parse_id(request.photo_id, "Photo", PhotoId),
        )
        return CollectionPhotoResponse(
            species_id=photo.species_id.root,
            photo_id=str(photo.id),
            is_top=False,
            hidden_from_species_view=photo.hidden_from_species_view,
        )


class ShowPhotoUseCase:
    """Use case for restoring a hidden photo to the species view."""

    def __init__(self, collection_service: CollectionService) -> None:
        self.collection_service = collection_service

    async def execute(self, request: CollectionPhotoRequest) -> CollectionPhotoResponse:
        user_id = UserId(UUID(request.user_id))
        photo = await self.collection_service.show_photo_in_species_view(
            user_id, parse_id(request.photo_id, "Photo", PhotoId)
        )
        top_ids = await self.collection_service.top_photo_ids(user_id)
        return CollectionPhotoResponse(
            species_id=photo.species_id.root,
            photo_id=str(photo.id),
            is_top=photo.id in top_ids,
            hidden_from_species_view=photo.hidden_from_species_view,
        )
