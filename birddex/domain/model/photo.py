"""Photo aggregate root.

A photo is tagged with exactly one species. Two independent flags hide it:
``hidden_from_feed`` removes it from feeds and counts, and
``hidden_from_species_view`` removes it from the owner's dex. Whether a
photo is the *top* photo of its species is not stored on the photo; it is
looked up in the top-species mapping.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from birddex.domain.model.common import DomainModel
from birddex.domain.value import GeoPoint, PhotoId, PhotoPrivacy, SpeciesCode, UserId


class Photo(DomainModel):
    """Photo aggregate root.

    ``url`` and ``thumbnail_url`` are storage paths inside the photo bucket,
    not URLs that can be handed to a browser; those are signed per response.
    """

    id: PhotoId
    owner_id: UserId
    species_id: SpeciesCode
    url: str = Field(min_length=1)
    thumbnail_url: Optional[str] = None
    privacy: PhotoPrivacy = PhotoPrivacy.FRIENDS
    hidden_from_feed: bool = False
    hidden_from_species_view: bool = False
    location: Optional[GeoPoint] = None
    description: Optional[str] = Field(default=None, max_length=2000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_visible_to(self, viewer_id: UserId | None, is_friend: bool) -> bool:
        """Check whether a viewer may see this photo.

        Args:
            viewer_id: Viewing user, None for anonymous
            is_friend: Whether the viewer is an accepted friend of the owner

        Returns:
            True if the photo may be shown
        """
        if viewer_id is not None and viewer_id == self.owner_id:
            return True
        if self.privacy == PhotoPrivacy.PUBLIC:
            return True
        if self.privacy == PhotoPrivacy.FRIENDS:
            return is_friend
        return False
