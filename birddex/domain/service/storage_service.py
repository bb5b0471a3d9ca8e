"""Object storage domain service."""

import re
from datetime import datetime, timezone

import logfire

from birddex.adapter.error import ProviderError
from birddex.config import StorageSettings
from birddex.domain.error import PersistenceError, ValidationError
from birddex.domain.value import SpeciesCode, UserId

from .base import Service


class StorageClient:
    """Hosted object storage interface."""

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str = "image/jpeg",
        upsert: bool = False,
        cache_control: str = "3600",
    ) -> str:
        """Upload an object.

        Returns:
            The stored object's path

        Raises:
            ProviderError: If the upload is rejected
        """
        raise NotImplementedError

    async def create_signed_url(self, bucket: str, path: str, ttl_seconds: int) -> str:
        """Create a time-limited URL for a private object."""
        raise NotImplementedError

    def get_public_url(self, bucket: str, path: str) -> str:
        """Return the permanent URL of an object in a public bucket."""
        raise NotImplementedError

    async def list_buckets(self) -> list[str]:
        """List bucket names."""
        raise NotImplementedError

    async def create_bucket(
        self, name: str, public: bool, allowed_mime_types: list[str]
    ) -> None:
        """Create a bucket."""
        raise NotImplementedError


def _timestamp_ms(now: datetime) -> int:
    return int(now.timestamp() * 1000)


class StorageService(Service):
    """Domain service for photo and award image storage.

    Photos live in a private bucket and are only ever handed out as signed
    URLs, generated fresh for each response. Award images live in a public
    bucket.
    """

    def __init__(self, storage_client: StorageClient, settings: StorageSettings) -> None:
        """Initialize storage service.

        Args:
            storage_client: Hosted storage client
            settings: Storage settings
        """
        self.storage_client = storage_client
        self.settings = settings

    def _check_upload(self, data: bytes, content_type: str) -> None:
        if not data:
            raise ValidationError("Please select a photo.")
        if len(data) > self.settings.max_upload_bytes:
            limit_mb = self.settings.max_upload_bytes // (1024 * 1024)
            raise ValidationError(f"File size must be {limit_mb}MB or less.")
        if content_type not in self.settings.allowed_mime_types:
            raise ValidationError(f"Unsupported image type: {content_type}")

    async def upload_photo_files(
        self,
        user_id: UserId,
        species_id: SpeciesCode,
        image: bytes,
        content_type: str,
        thumbnail: bytes | None = None,
        now: datetime | None = None,
    ) -> tuple[str, str | None]:
        """Upload a photo and its thumbnail to the photo bucket.

        Args:
            user_id: Owner
            species_id: Species the photo is tagged with
            image: Cropped image bytes
            content_type: MIME type of both files
            thumbnail: Thumbnail bytes, if the client produced one
            now: Upload time used in the object names

        Returns:
            (image path, thumbnail path or None)

        Raises:
            ValidationError: If the file is empty, too large or of the wrong type
            PersistenceError: If the storage service rejects an upload
        """
        self._check_upload(image, content_type)
        stamp = _timestamp_ms(now or datetime.now(timezone.utc))
        folder = f"{user_id}/species_{species_id}"
        image_path = f"{folder}/{stamp}_cropped.jpg"
        thumb_path = f"{folder}/{stamp}_thumb.jpg" if thumbnail else None

        with logfire.span(
            "storage_service.upload_photo_files",
            user_id=str(user_id),
            species_id=str(species_id),
            size=len(image),
        ):
            try:
                await self.storage_client.upload(
                    self.settings.photo_bucket, image_path, image, content_type
                )
                if thumbnail and thumb_path:
                    await self.storage_client.upload(
                        self.settings.photo_bucket, thumb_path, thumbnail, content_type
                    )
            except ProviderError as e:
                logfire.error("Photo upload failed", path=image_path, error=e.message)
                raise PersistenceError(e.message)
            logfire.info("Photo uploaded", path=image_path, thumbnail=thumb_path)
            return image_path, thumb_path

    async def upload_award_image(
        self,
        quest_name: str,
        kind: str,
        filename: str,
        data: bytes,
        content_type: str,
        now: datetime | None = None,
    ) -> str:
        """Upload a quest award image to the public award bucket.

        Args:
            quest_name: Quest name, whitespace becomes underscores in the object name
            kind: "top10" or "participation"
            filename: Original file name, only its extension is kept
            data: Image bytes
            content_type: MIME type
            now: Upload time used in the object name

        Returns:
            Public URL of the uploaded image
        """
        self._check_upload(data, content_type)
        ext = filename.rsplit(".", 1)[-1] if "." in filename else "jpg"
        stamp = _timestamp_ms(now or datetime.now(timezone.utc))
        slug = re.sub(r"\s+", "_", quest_name)
        path = f"{slug}_{kind}_{stamp}.{ext}"

        with logfire.span("storage_service.upload_award_image", path=path):
            try:
                await self.storage_client.upload(
                    self.settings.award_bucket, path, data, content_type, upsert=True
                )
            except ProviderError as e:
                logfire.error("Award upload failed", path=path, error=e.message)
                raise PersistenceError(e.message)
            return self.storage_client.get_public_url(self.settings.award_bucket, path)

    async def signed_url(self, path: str | None) -> str | None:
        """Sign a photo path for display.

        Returns:
            Signed URL, or None if there is no path or signing failed
        """
        if not path:
            return None
        try:
            return await self.storage_client.create_signed_url(
                self.settings.photo_bucket, path, self.settings.signed_url_ttl_seconds
            )
        except ProviderError as e:
            logfire.warn("Could not sign photo URL", path=path, error=e.message)
            return None

    async def ensure_buckets(self) -> list[str]:
        """Create the photo and award buckets if they are missing.

        Returns:
            Names of the buckets that were created
        """
        with logfire.span("storage_service.ensure_buckets"):
            try:
                existing = set(await self.storage_client.list_buckets())
                created = []
                for name, public in (
                    (self.settings.photo_bucket, False),
                    (self.settings.award_bucket, True),
                ):
                    if name in existing:
                        continue
                    await self.storage_client.create_bucket(
                        name,
                        public=public,
                        allowed_mime_types=self.settings.allowed_mime_types,
                    )
                    created.append(name)
            except ProviderError as e:
                logfire.error("Bucket setup failed", error=e.message)
                raise PersistenceError(e.message)
            logfire.info("Buckets ready", created=created)
            return created
