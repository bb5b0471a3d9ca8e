"""Comment entity. Comments are flat and belong to a single photo."""

from datetime import datetime, timezone

from pydantic import Field

from birddex.domain.model.common import DomainModel
from birddex.domain.value import CommentId, PhotoId, UserId


class Comment(DomainModel):
    """Comment on a photo. Deleted together with its photo."""

    id: CommentId
    photo_id: PhotoId
    user_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
