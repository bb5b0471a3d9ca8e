"""Comment domain service."""

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire

from birddex.domain.error import ValidationError
from birddex.domain.model import Comment
from birddex.domain.repository import CommentRepository
from birddex.domain.value import CommentId, PhotoId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def add_comment(self, photo_id: PhotoId, user_id: UserId, content: str) -> Comment:
        """Add a comment to a photo.

        The caller is responsible for checking that the author can see the photo.

        Args:
            photo_id: Photo being commented on
            user_id: Author
            content: Comment text, surrounding whitespace is dropped

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is blank or too long
        """
        text = content.strip()
        if not text:
            raise ValidationError("Comment cannot be empty")
        if len(text) > 2000:
            raise ValidationError("Comment must be 2000 characters or less")

        with logfire.span(
            "comment_service.add_comment", photo_id=str(photo_id), user_id=str(user_id)
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                photo_id=photo_id,
                user_id=user_id,
                content=text,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id), photo_id=str(photo_id))
            return saved

    async def get_comments(self, photo_id: PhotoId) -> list[Comment]:
        """List a photo's comments, oldest first."""
        with logfire.span("comment_service.get_comments", photo_id=str(photo_id)):
            comments = await self.comment_repository.find_by_photo(photo_id)
            logfire.info("Comments retrieved", photo_id=str(photo_id), count=len(comments))
            return comments

    async def count_for_photos(self, photo_ids: Sequence[PhotoId]) -> dict[PhotoId, int]:
        """Count comments per photo; photos without comments map to 0."""
        if not photo_ids:
            return {}
        counts = await self.comment_repository.count_by_photos(photo_ids)
        return {pid: counts.get(pid, 0) for pid in photo_ids}
