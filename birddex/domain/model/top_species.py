"""Top-photo mapping.

Exactly one row per (user, species) names the photo shown in that user's
dex grid. The row must never point at a photo hidden from species view.
"""

from birddex.domain.model.common import DomainModel
from birddex.domain.value import PhotoId, SpeciesCode, UserId


class TopSpeciesEntry(DomainModel):
    """Designated top photo for a (user, species) pair."""

    user_id: UserId
    species_id: SpeciesCode
    photo_id: PhotoId
