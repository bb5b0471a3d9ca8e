"""PostgreSQL implementation of Comment repository."""

from typing import Sequence

from sqlalchemy import func, select

from birddex.domain.model import Comment
from birddex.domain.repository import CommentRepository
from birddex.domain.value import PhotoId
from birddex.persistence.mappers import comment_to_dict, row_to_comment
from birddex.persistence.repository.base import PostgresRepository
from birddex.persistence.tables import comments_table


class PostgresCommentRepository(PostgresRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    async def find_by_photo(self, photo_id: PhotoId) -> list[Comment]:
        """List a photo's comments, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.photo_id == photo_id)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_photos(self, photo_ids: Sequence[PhotoId]) -> dict[PhotoId, int]:
        """Count comments per photo (batch query)."""
        if not photo_ids:
            return {}
        stmt = (
            select(comments_table.c.photo_id, func.count())
            .where(comments_table.c.photo_id.in_(photo_ids))
            .group_by(comments_table.c.photo_id)
        )
        result = await self._execute(stmt)
        return {PhotoId(photo_id): count for photo_id, count in result.fetchall()}

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        await self._execute(comments_table.insert().values(**comment_to_dict(comment)))
        return comment
