"""Photo domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from birddex.domain.error import NotAuthorizedError, NotFoundError, PersistenceError
from birddex.domain.model import Photo
from birddex.domain.repository import PhotoRepository
from birddex.domain.value import GeoPoint, PhotoId, PhotoPrivacy, SpeciesCode, UserId

from .base import Service
from .friendship_service import FriendshipService


class PhotoService(Service):
    """Domain service for photo records.

    Species changes and visibility in the dex belong to
    ``CollectionService``; this service handles the rest of a photo's
    lifecycle and who may see it.
    """

    def __init__(
        self,
        photo_repository: PhotoRepository,
        friendship_service: FriendshipService,
    ) -> None:
        """Initialize photo service.

        Args:
            photo_repository: Photo repository
            friendship_service: Friendship service for privacy checks and feeds
        """
        self.photo_repository = photo_repository
        self.friendship_service = friendship_service

    async def get_photo(self, photo_id: PhotoId) -> Photo:
        """Get a photo by ID.

        Raises:
            NotFoundError: If the photo does not exist
        """
        photo = await self.photo_repository.find_by_id(photo_id)
        if not photo:
            logfire.warn("Photo not found", photo_id=str(photo_id))
            raise NotFoundError("Photo", str(photo_id))
        return photo

    async def get_photos(self, photo_ids: list[PhotoId]) -> dict[PhotoId, Photo]:
        """Load several photos by ID. Missing photos are left out."""
        photos = await self.photo_repository.find_by_ids(photo_ids)
        return {p.id: p for p in photos}

    async def get_owned_photo(self, user_id: UserId, photo_id: PhotoId, action: str) -> Photo:
        """Get a photo that the user must own.

        Raises:
            NotFoundError: If the photo does not exist
            NotAuthorizedError: If the user does not own it
        """
        photo = await self.get_photo(photo_id)
        if photo.owner_id != user_id:
            logfire.warn(
                "Photo ownership check failed",
                photo_id=str(photo_id),
                user_id=str(user_id),
                action=action,
            )
            raise NotAuthorizedError(action, str(user_id))
        return photo

    async def get_visible_photo(self, viewer_id: UserId | None, photo_id: PhotoId) -> Photo:
        """Get a photo the viewer is allowed to see.

        Photos the viewer may not see are reported as missing.

        Raises:
            NotFoundError: If the photo does not exist or is not visible
        """
        with logfire.span(
            "photo_service.get_visible_photo",
            photo_id=str(photo_id),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            photo = await self.get_photo(photo_id)
            is_friend = False
            if (
                viewer_id is not None
                and viewer_id != photo.owner_id
                and photo.privacy == PhotoPrivacy.FRIENDS
            ):
                is_friend = await self.friendship_service.are_friends(
                    viewer_id, photo.owner_id
                )
            if not photo.is_visible_to(viewer_id, is_friend):
                raise NotFoundError("Photo", str(photo_id))
            return photo

    async def create_photo(
        self,
        owner_id: UserId,
        species_id: SpeciesCode,
        url: str,
        thumbnail_url: str | None = None,
        privacy: PhotoPrivacy = PhotoPrivacy.FRIENDS,
        location: GeoPoint | None = None,
        description: str | None = None,
    ) -> Photo:
        """Record an uploaded photo.

        Args:
            owner_id: Uploading user
            species_id: Species the photo is tagged with
            url: Storage path of the image
            thumbnail_url: Storage path of the thumbnail
            privacy: Audience of the photo
            location: Where it was taken
            description: Free text

        Returns:
            Created photo
        """
        with logfire.span(
            "photo_service.create_photo",
            owner_id=str(owner_id),
            species_id=str(species_id),
        ):
            photo = Photo(
                id=PhotoId(uuid4()),
                owner_id=owner_id,
                species_id=species_id,
                url=url,
                thumbnail_url=thumbnail_url,
                privacy=privacy,
                location=location,
                description=description,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.photo_repository.save(photo)
            logfire.info("Photo created", photo_id=str(saved.id))
            return saved

    async def update_details(
        self,
        user_id: UserId,
        photo_id: PhotoId,
        location: GeoPoint | None,
        description: str | None,
        privacy: PhotoPrivacy | None = None,
    ) -> Photo:
        """Update a photo's location, description and privacy.

        Raises:
            NotFoundError: If the photo does not exist
            NotAuthorizedError: If the user does not own it
        """
        with logfire.span(
            "photo_service.update_details", photo_id=str(photo_id), user_id=str(user_id)
        ):
            photo = await self.get_owned_photo(user_id, photo_id, "edit this photo")
            update: dict = {"location": location, "description": description}
            if privacy is not None:
                update["privacy"] = privacy
            saved = await self.photo_repository.save(photo.model_copy(update=update))
            logfire.info("Photo details updated", photo_id=str(photo_id))
            return saved

    async def delete_photo(self, user_id: UserId, photo_id: PhotoId) -> None:
        """Delete a photo, or hide it if a quest entry still references it.

        The server-side routine may report an error inside a successful
        response; both kinds of failure raise.

        Raises:
            NotFoundError: If the photo does not exist
            NotAuthorizedError: If the user does not own it
            PersistenceError: If the routine fails or reports an error
        """
        with logfire.span(
            "photo_service.delete_photo", photo_id=str(photo_id), user_id=str(user_id)
        ):
            await self.get_owned_photo(user_id, photo_id, "delete this photo")
            result = await self.photo_repository.delete_or_hide(photo_id)
            if result and result.get("message"):
                logfire.warn(
                    "Photo deletion reported an error",
                    photo_id=str(photo_id),
                    error=result["message"],
                )
                raise PersistenceError(str(result["message"]))
            logfire.info("Photo deleted or hidden", photo_id=str(photo_id))

    async def list_own_photos(self, owner_id: UserId, page: int, page_size: int) -> list[Photo]:
        """List one page of the user's photos, newest first."""
        return await self.photo_repository.find_by_owner(
            owner_id, offset=page * page_size, limit=page_size
        )

    async def get_feed(self, user_id: UserId, page: int, page_size: int) -> list[Photo]:
        """List one page of the user's friends' photos, newest first.

        Returns:
            Feed photos; empty when the user has no friends
        """
        with logfire.span(
            "photo_service.get_feed", user_id=str(user_id), page=page, page_size=page_size
        ):
            friend_ids = await self.friendship_service.get_friend_ids(user_id)
            if not friend_ids:
                return []
            photos = await self.photo_repository.find_feed(
                friend_ids, offset=page * page_size, limit=page_size
            )
            logfire.info("Feed retrieved", user_id=str(user_id), count=len(photos))
            return photos
