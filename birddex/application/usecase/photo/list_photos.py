"""Photo list use cases: the user's own photos and the friends feed."""

from uuid import UUID

from pydantic import BaseModel, Field

from birddex.config import FeedSettings
from birddex.domain.service import (
    CollectionService,
    CommentService,
    PhotoService,
    StorageService,
    UserProfileService,
)
from birddex.domain.value import UserId

from .view import PhotoView, build_photo_views


class PhotoPageRequest(BaseModel):
    """Paginated photo list request."""

    user_id: str
    page: int = Field(default=0, ge=0)


class PhotoPageResponse(BaseModel):
    """One page of photos, newest first."""

    photos: list[PhotoView]
    page: int
    has_more: bool


class ListMyPhotosUseCase:
    """Use case for listing the signed-in user's photos."""

    def __init__(
        self,
        photo_service: PhotoService,
        collection_service: CollectionService,
        comment_service: CommentService,
        storage_service: StorageService,
        feed_settings: FeedSettings,
    ) -> None:
        self.photo_service = photo_service
        self.collection_service = collection_service
        self.comment_service = comment_service
        self.storage_service = storage_service
        self.page_size = feed_settings.page_size

    async def execute(self, request: PhotoPageRequest) -> PhotoPageResponse:
        user_id = UserId(UUID(request.user_id))
        photos = await self.photo_service.list_own_photos(
            user_id, request.page, self.page_size
        )
        views = await build_photo_views(
            photos,
            self.storage_service,
            comment_service=self.comment_service,
            top_photo_ids=await self.collection_service.top_photo_ids(user_id),
        )
        return PhotoPageResponse(
            photos=views, page=request.page, has_more=len(photos) == self.page_size
        )


class GetFeedUseCase:
    """Use case for the friends activity feed."""

    def __init__(
        self,
        photo_service: PhotoService,
        comment_service: CommentService,
        user_profile_service: UserProfileService,
        storage_service: StorageService,
        feed_settings: FeedSettings,
    ) -> None:
        self.photo_service = photo_service
        self.comment_service = comment_service
        self.user_profile_service = user_profile_service
        self.storage_service = storage_service
        self.page_size = feed_settings.page_size

    async def execute(self, request: PhotoPageRequest) -> PhotoPageResponse:
        """Return one page of friends' photos.

        A user without friends gets an empty page.
        """
        photos = await self.photo_service.get_feed(
            UserId(UUID(request.user_id)), request.page, self.page_size
        )
        views = await build_photo_views(
            photos,
            self.storage_service,
            comment_service=self.comment_service,
            user_profile_service=self.user_profile_service,
        )
        return PhotoPageResponse(
            photos=views, page=request.page, has_more=len(photos) == self.page_size
        )
