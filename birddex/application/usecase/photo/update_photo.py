"""Update photo use case."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import CollectionService, PhotoService, StorageService
from birddex.domain.value import PhotoId, PhotoPrivacy, UserId

from ..base import parse_id, parse_location, parse_species_code
from .view import PhotoView, build_photo_views


class UpdatePhotoRequest(BaseModel):
    """Update photo request.

    Location and description are replaced; species and privacy change
    only when given.
    """

    user_id: str
    photo_id: str
    lat: float | None = None
    lng: float | None = None
    description: str | None = None
    species_id: str | None = None
    privacy: PhotoPrivacy | None = None


class UpdatePhotoUseCase:
    """Use case for editing a photo's details."""

    def __init__(
        self,
        photo_service: PhotoService,
        collection_service: CollectionService,
        storage_service: StorageService,
    ) -> None:
        self.photo_service = photo_service
        self.collection_service = collection_service
        self.storage_service = storage_service

    async def execute(self, request: UpdatePhotoRequest) -> PhotoView:
        """Execute update flow.

        A species change goes through the collection so the photo stops
        being the top photo of its old species.

        Raises:
            NotFoundError: If the photo does not exist
            NotAuthorizedError: If the user does not own it
            ValidationError: If a field is invalid
        """
        user_id = UserId(UUID(request.user_id))
        photo_id = parse_id(request.photo_id, "Photo", PhotoId)
        location = parse_location(request.lat, request.lng)

        await self.photo_service.get_owned_photo(user_id, photo_id, "edit this photo")
        if request.species_id:
            await self.collection_service.reassign_species(
                user_id, photo_id, parse_species_code(request.species_id)
            )

        photo = await self.photo_service.update_details(
            user_id,
            photo_id,
            location=location,
            description=(request.description or "").strip() or None,
            privacy=request.privacy,
        )
        top_ids = await self.collection_service.top_photo_ids(user_id)
        [view] = await build_photo_views(
            [photo], self.storage_service, top_photo_ids=top_ids
        )
        return view
