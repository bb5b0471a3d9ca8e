"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from birddex.domain.model.comment import Comment
from birddex.domain.value import PhotoId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_photo(self, photo_id: PhotoId) -> list[Comment]:
        """List a photo's comments, oldest first.

        Args:
            photo_id: Photo the comments belong to

        Returns:
            Comments on the photo
        """
        pass

    @abstractmethod
    async def count_by_photos(self, photo_ids: Sequence[PhotoId]) -> dict[PhotoId, int]:
        """Count comments for several photos (batch query).

        Args:
            photo_ids: Photos to count for

        Returns:
            Mapping of photo ID to count; photos without comments may be absent
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a comment."""
        pass
