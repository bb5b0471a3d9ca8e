"""Test configuration and helpers."""

from datetime import datetime, timezone
from uuid import uuid4

from dishka import AsyncContainer

from birddex.domain.model import Photo, Quest, UserProfile
from birddex.domain.repository import (
    PhotoRepository,
    QuestRepository,
    UserProfileRepository,
)
from birddex.domain.value import PhotoId, PhotoPrivacy, QuestId, SpeciesCode, UserId


def new_user_id() -> UserId:
    return UserId(uuid4())


async def seed_profile(
    env: AsyncContainer,
    display_name: str | None = None,
    is_admin: bool = False,
    user_id: UserId | None = None,
) -> UserProfile:
    """Store a profile directly in the repository."""
    repo = await env.get(UserProfileRepository)
    profile = UserProfile(
        user_id=user_id or new_user_id(),
        display_name=display_name,
        is_admin=is_admin,
    )
    return await repo.save(profile)


async def seed_photo(
    env: AsyncContainer,
    owner_id: UserId,
    species: str = "amerob",
    privacy: PhotoPrivacy = PhotoPrivacy.PUBLIC,
    created_at: datetime | None = None,
    **fields,
) -> Photo:
    """Store a photo directly in the repository.

    The storage path is also uploaded to the mock storage client by tests
    that need signed URLs.
    """
    repo = await env.get(PhotoRepository)
    photo_id = PhotoId(uuid4())
    photo = Photo(
        id=photo_id,
        owner_id=owner_id,
        species_id=SpeciesCode(species),
        url=f"{owner_id}/species_{species}/{photo_id}_cropped.jpg",
        privacy=privacy,
        created_at=created_at or datetime.now(timezone.utc),
        **fields,
    )
    return await repo.save(photo)


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


async def seed_quest(
    env: AsyncContainer,
    start_time: datetime = utc(2024, 1, 1),
    end_time: datetime = utc(2024, 1, 8),
    name: str = "Winter Birds",
    **fields,
) -> Quest:
    """Store a quest running from 2024-01-01 to 2024-01-08 by default."""
    repo = await env.get(QuestRepository)
    quest = Quest(
        id=QuestId(uuid4()),
        name=name,
        start_time=start_time,
        end_time=end_time,
        **fields,
    )
    return await repo.save(quest)
