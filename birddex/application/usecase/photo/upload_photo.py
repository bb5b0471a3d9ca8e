"""Upload photo use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from birddex.domain.error import ValidationError
from birddex.domain.service import CollectionService, PhotoService, StorageService
from birddex.domain.value import PhotoPrivacy, UserId

from ..base import parse_location, parse_species_code
from .view import PhotoView, build_photo_views


class UploadPhotoRequest(BaseModel):
    """Upload photo request."""

    user_id: str
    species_id: str | None
    image: bytes
    content_type: str = "image/jpeg"
    thumbnail: bytes | None = None
    privacy: PhotoPrivacy = PhotoPrivacy.FRIENDS
    lat: float | None = None
    lng: float | None = None
    description: str | None = None
    set_as_top: bool = False


class UploadPhotoUseCase:
    """Use case for adding a photo to the user's collection."""

    def __init__(
        self,
        photo_service: PhotoService,
        storage_service: StorageService,
        collection_service: CollectionService,
    ) -> None:
        """Initialize upload photo use case.

        Args:
            photo_service: Photo domain service
            storage_service: Storage service for the image files
            collection_service: Collection service, for ``set_as_top``
        """
        self.photo_service = photo_service
        self.storage_service = storage_service
        self.collection_service = collection_service

    async def execute(self, request: UploadPhotoRequest) -> PhotoView:
        """Execute upload flow.

        Files are stored first, then the photo row is created, then the
        top-photo mapping is set if requested.

        Raises:
            ValidationError: If the photo or species is missing or the file is invalid
            PersistenceError: If storage or the datastore rejects a write
        """
        if not request.image:
            raise ValidationError("Please select a photo.")
        species_id = parse_species_code(request.species_id)
        location = parse_location(request.lat, request.lng)
        user_id = UserId(UUID(request.user_id))

        image_path, thumb_path = await self.storage_service.upload_photo_files(
            user_id,
            species_id,
            request.image,
            request.content_type,
            thumbnail=request.thumbnail,
        )
        photo = await self.photo_service.create_photo(
            owner_id=user_id,
            species_id=species_id,
            url=image_path,
            thumbnail_url=thumb_path,
            privacy=request.privacy,
            location=location,
            description=(request.description or "").strip() or None,
        )

        top_ids = set()
        if request.set_as_top:
            await self.collection_service.set_top_photo(user_id, species_id, photo.id)
            top_ids.add(photo.id)
            logfire.info("Uploaded photo set as top", photo_id=str(photo.id))

        views = await build_photo_views(
            [photo], self.storage_service, top_photo_ids=top_ids
        )
        return views[0]
