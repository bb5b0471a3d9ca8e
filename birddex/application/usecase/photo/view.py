"""Photo representation shared by the photo, feed and collection use cases."""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from birddex.domain.model import Photo
from birddex.domain.service import CommentService, StorageService, UserProfileService
from birddex.domain.value import PhotoId, PhotoPrivacy


class PhotoView(BaseModel):
    """A photo as returned to clients.

    ``image_url`` and ``thumbnail_url`` are freshly signed for this
    response. ``is_top`` is derived from the top-photo mapping.
    """

    photo_id: str
    owner_id: str
    owner_display_name: str | None = None
    species_id: str
    image_url: str | None
    thumbnail_url: str | None
    privacy: PhotoPrivacy
    lat: float | None
    lng: float | None
    description: str | None
    is_top: bool = False
    hidden_from_feed: bool
    hidden_from_species_view: bool
    comment_count: int = 0
    created_at: datetime


async def build_photo_views(
    photos: Sequence[Photo],
    storage_service: StorageService,
    comment_service: CommentService | None = None,
    user_profile_service: UserProfileService | None = None,
    top_photo_ids: set[PhotoId] | None = None,
) -> list[PhotoView]:
    """Sign URLs and attach counts, names and top flags to photos.

    Args:
        photos: Photos to present
        storage_service: Signs the image paths
        comment_service: When given, comment counts are included
        user_profile_service: When given, owner display names are included
        top_photo_ids: Photos currently set as a top photo

    Returns:
        Views in the order of ``photos``
    """
    ids = [p.id for p in photos]
    counts = await comment_service.count_for_photos(ids) if comment_service else {}
    names = (
        await user_profile_service.get_display_names([p.owner_id for p in photos])
        if user_profile_service
        else {}
    )
    top_ids = top_photo_ids or set()

    views = []
    for photo in photos:
        views.append(
            PhotoView(
                photo_id=str(photo.id),
                owner_id=str(photo.owner_id),
                owner_display_name=names.get(photo.owner_id),
                species_id=photo.species_id.root,
                image_url=await storage_service.signed_url(photo.url),
                thumbnail_url=await storage_service.signed_url(photo.thumbnail_url),
                privacy=photo.privacy,
                lat=photo.location.lat if photo.location else None,
                lng=photo.location.lng if photo.location else None,
                description=photo.description,
                is_top=photo.id in top_ids,
                hidden_from_feed=photo.hidden_from_feed,
                hidden_from_species_view=photo.hidden_from_species_view,
                comment_count=counts.get(photo.id, 0),
                created_at=photo.created_at,
            )
        )
    return views
