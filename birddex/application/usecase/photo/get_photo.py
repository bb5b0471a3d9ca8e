"""Get photo detail use case."""

from datetime import datetime

from pydantic import BaseModel

from birddex.domain.service import (
    CollectionService,
    CommentService,
    LocationService,
    PhotoService,
    StorageService,
    UserProfileService,
)
from birddex.domain.value import PhotoId, UserId

from ..base import parse_id
from .view import PhotoView, build_photo_views


class PhotoCommentView(BaseModel):
    """Comment shown under a photo."""

    comment_id: str
    user_id: str
    display_name: str
    content: str
    created_at: datetime


class GetPhotoRequest(BaseModel):
    """Get photo request."""

    photo_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetPhotoResponse(BaseModel):
    """Photo detail."""

    photo: PhotoView
    location_text: str
    comments: list[PhotoCommentView]
    is_owner: bool


class GetPhotoUseCase:
    """Use case for the photo detail page."""

    def __init__(
        self,
        photo_service: PhotoService,
        storage_service: StorageService,
        comment_service: CommentService,
        user_profile_service: UserProfileService,
        collection_service: CollectionService,
        location_service: LocationService,
    ) -> None:
        self.photo_service = photo_service
        self.storage_service = storage_service
        self.comment_service = comment_service
        self.user_profile_service = user_profile_service
        self.collection_service = collection_service
        self.location_service = location_service

    async def execute(self, request: GetPhotoRequest) -> GetPhotoResponse:
        """Execute get photo flow.

        Raises:
            NotFoundError: If the photo does not exist or the viewer may not see it
        """
        photo_id = parse_id(request.photo_id, "Photo", PhotoId)
        viewer_id = parse_id(request.viewer_id, "User", UserId) if request.viewer_id else None

        photo = await self.photo_service.get_visible_photo(viewer_id, photo_id)
        top_ids = await self.collection_service.top_photo_ids(photo.owner_id)
        [view] = await build_photo_views(
            [photo],
            self.storage_service,
            comment_service=self.comment_service,
            user_profile_service=self.user_profile_service,
            top_photo_ids=top_ids,
        )

        comments = await self.comment_service.get_comments(photo_id)
        names = await self.user_profile_service.get_display_names(
            [c.user_id for c in comments]
        )
        return GetPhotoResponse(
            photo=view,
            location_text=await self.location_service.describe(photo.location),
            comments=[
                PhotoCommentView(
                    comment_id=str(c.id),
                    user_id=str(c.user_id),
                    display_name=names[c.user_id],
                    content=c.content,
                    created_at=c.created_at,
                )
                for c in comments
            ],
            is_owner=viewer_id == photo.owner_id,
        )
