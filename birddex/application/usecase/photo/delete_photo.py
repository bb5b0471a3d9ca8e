"""Delete photo use case."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import PhotoService
from birddex.domain.value import PhotoId, UserId

from ..base import parse_id


class DeletePhotoRequest(BaseModel):
    """Delete photo request."""

    user_id: str
    photo_id: str


class DeletePhotoResponse(BaseModel):
    """Delete photo response."""

    success: bool


class DeletePhotoUseCase:
    """Use case for deleting a photo.

    Photos entered in a quest are hidden rather than deleted.
    """

    def __init__(self, photo_service: PhotoService) -> None:
        self.photo_service = photo_service

    async def execute(self, request: DeletePhotoRequest) -> DeletePhotoResponse:
        await self.photo_service.delete_photo(
            UserId(UUID(request.user_id)),
            parse_id(request.photo_id, "Photo", PhotoId),
        )
        return DeletePhotoResponse(success=True)
