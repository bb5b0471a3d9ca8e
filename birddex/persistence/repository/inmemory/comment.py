"""In-memory comment repository for testing."""

from collections import Counter
from typing import Sequence

from birddex.domain.model import Comment
from birddex.domain.repository import CommentRepository
from birddex.domain.value import PhotoId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def find_by_photo(self, photo_id: PhotoId) -> list[Comment]:
        comments = [c for c in self._comments if c.photo_id == photo_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def count_by_photos(self, photo_ids: Sequence[PhotoId]) -> dict[PhotoId, int]:
        wanted = set(photo_ids)
        return dict(Counter(c.photo_id for c in self._comments if c.photo_id in wanted))

    async def save(self, comment: Comment) -> Comment:
        self._comments.append(comment)
        return comment

    def delete_by_photo(self, photo_id: PhotoId) -> None:
        """Drop a photo's comments, as the database cascade does."""
        self._comments = [c for c in self._comments if c.photo_id != photo_id]
