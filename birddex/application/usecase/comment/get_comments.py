"""Get comments use case."""

from pydantic import BaseModel

from birddex.domain.service import CommentService, PhotoService, UserProfileService
from birddex.domain.value import PhotoId, UserId

from ..base import parse_id
from .add_comment import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    photo_id: str
    viewer_id: str | None = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    photo_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for listing a photo's comments, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        photo_service: PhotoService,
        user_profile_service: UserProfileService,
    ) -> None:
        self.comment_service = comment_service
        self.photo_service = photo_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        photo_id = parse_id(request.photo_id, "Photo", PhotoId)
        viewer_id = parse_id(request.viewer_id, "User", UserId) if request.viewer_id else None
        await self.photo_service.get_visible_photo(viewer_id, photo_id)

        comments = await self.comment_service.get_comments(photo_id)
        names = await self.user_profile_service.get_display_names(
            [c.user_id for c in comments]
        )
        items = [
            CommentItem(
                comment_id=str(c.id),
                photo_id=str(c.photo_id),
                user_id=str(c.user_id),
                display_name=names[c.user_id],
                content=c.content,
                created_at=c.created_at,
            )
            for c in comments
        ]
        return GetCommentsResponse(photo_id=request.photo_id, comments=items, total=len(items))
