"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import CommentService, PhotoService, UserProfileService
from birddex.domain.value import PhotoId, UserId

from ..base import parse_id


class AddCommentRequest(BaseModel):
    """Add comment request."""

    user_id: str  # User ID from authenticated user
    photo_id: str
    content: str


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    photo_id: str
    user_id: str
    display_name: str
    content: str
    created_at: datetime


class AddCommentUseCase:
    """Use case for commenting on a photo."""

    def __init__(
        self,
        comment_service: CommentService,
        photo_service: PhotoService,
        user_profile_service: UserProfileService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            photo_service: Photo service, for the visibility check
            user_profile_service: Resolves the author's display name
        """
        self.comment_service = comment_service
        self.photo_service = photo_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: AddCommentRequest) -> CommentItem:
        """Execute add comment flow.

        Raises:
            NotFoundError: If the photo does not exist or the author cannot see it
            ValidationError: If the comment is empty or too long
        """
        user_id = UserId(UUID(request.user_id))
        photo_id = parse_id(request.photo_id, "Photo", PhotoId)

        await self.photo_service.get_visible_photo(user_id, photo_id)
        comment = await self.comment_service.add_comment(photo_id, user_id, request.content)
        names = await self.user_profile_service.get_display_names([user_id])

        return CommentItem(
            comment_id=str(comment.id),
            photo_id=str(comment.photo_id),
            user_id=str(comment.user_id),
            display_name=names[user_id],
            content=comment.content,
            created_at=comment.created_at,
        )
