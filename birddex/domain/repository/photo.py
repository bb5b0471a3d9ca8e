"""Photo repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from birddex.domain.model.photo import Photo
from birddex.domain.value import PhotoId, SpeciesCode, UserId


class PhotoRepository(ABC):
    """Repository for Photo aggregate.

    Implementations surface collaborator failures as
    ``birddex.domain.error.PersistenceError`` carrying the collaborator's
    message.
    """

    @abstractmethod
    async def find_by_id(self, photo_id: PhotoId) -> Optional[Photo]:
        """Find a photo by ID.

        Args:
            photo_id: The photo's unique identifier

        Returns:
            The photo if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, photo_ids: Sequence[PhotoId]) -> list[Photo]:
        """Find several photos (batch query)."""
        pass

    @abstractmethod
    async def find_by_owner(
        self, owner_id: UserId, offset: int = 0, limit: Optional[int] = None
    ) -> list[Photo]:
        """List a user's photos, newest first.

        Args:
            owner_id: Owner of the photos
            offset: Number of rows to skip
            limit: Maximum number of rows, None for all

        Returns:
            Photos owned by the user
        """
        pass

    @abstractmethod
    async def find_by_owner_and_species(
        self,
        owner_id: UserId,
        species_id: SpeciesCode,
        include_hidden: bool = False,
    ) -> list[Photo]:
        """List a user's photos of one species, newest first.

        Args:
            owner_id: Owner of the photos
            species_id: Species code
            include_hidden: Whether to include photos hidden from species view

        Returns:
            Matching photos
        """
        pass

    @abstractmethod
    async def find_feed(
        self, owner_ids: Sequence[UserId], offset: int, limit: int
    ) -> list[Photo]:
        """List feed photos of the given owners, newest first.

        Only photos with ``hidden_from_feed = false`` and non-private
        privacy are returned.

        Args:
            owner_ids: Owners whose photos make up the feed
            offset: Number of rows to skip
            limit: Page size

        Returns:
            One page of feed photos
        """
        pass

    @abstractmethod
    async def find_all_in_feed(self) -> list[Photo]:
        """List every photo not hidden from feed (for ranking)."""
        pass

    @abstractmethod
    async def save(self, photo: Photo) -> Photo:
        """Insert or update a photo.

        Args:
            photo: Photo to save

        Returns:
            The saved photo
        """
        pass

    @abstractmethod
    async def set_hidden_from_species_view(
        self, photo_id: PhotoId, hidden: bool
    ) -> Photo:
        """Set the species-view flag of a photo.

        The datastore rejects hiding a photo that is still a top photo with
        the message "A hidden photo cannot be the top photo for a species".

        Args:
            photo_id: Photo to update
            hidden: New flag value

        Returns:
            The updated photo

        Raises:
            PersistenceError: If the datastore rejects the update
        """
        pass

    @abstractmethod
    async def delete_or_hide(self, photo_id: PhotoId) -> Optional[dict[str, Any]]:
        """Run the server-side delete-or-hide routine for a photo.

        A photo referenced by a quest entry is hidden from feed and species
        view instead of deleted; otherwise it is deleted with its comments
        and its top-photo mapping.

        Args:
            photo_id: Photo to delete

        Returns:
            The routine's payload. A payload with a ``message`` key is an
            error reported in-band even though the call itself succeeded.

        Raises:
            PersistenceError: If the call itself fails
        """
        pass
