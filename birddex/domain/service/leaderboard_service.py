"""Leaderboard ranking."""

from dataclasses import dataclass, field
from typing import Iterable

import logfire

from birddex.domain.error import PersistenceError
from birddex.domain.model import LeaderboardEntry, Photo, UserProfile
from birddex.domain.repository import PhotoRepository, UserProfileRepository
from birddex.domain.value import SpeciesCode, UserId

from .base import Service


def compute_leaderboard(
    profiles: Iterable[UserProfile], photos: Iterable[Photo]
) -> list[LeaderboardEntry]:
    """Rank users by unique species, then by total photos.

    Photos hidden from the feed and photos whose owner has no profile are
    ignored. Users with equal scores keep the order of ``profiles``; ranks
    are 1..N with no shared places.

    Args:
        profiles: Profiles in fetch order
        photos: Photo snapshot

    Returns:
        Ranked entries
    """
    ordered: dict[UserId, UserProfile] = {}
    for profile in profiles:
        ordered.setdefault(profile.user_id, profile)

    species: dict[UserId, set[SpeciesCode]] = {uid: set() for uid in ordered}
    totals: dict[UserId, int] = {uid: 0 for uid in ordered}
    for photo in photos:
        if photo.hidden_from_feed or photo.owner_id not in ordered:
            continue
        species[photo.owner_id].add(photo.species_id)
        totals[photo.owner_id] += 1

    # sorted() is stable, so ties keep profile order
    ranked = sorted(
        ordered.values(),
        key=lambda p: (-len(species[p.user_id]), -totals[p.user_id]),
    )
    return [
        LeaderboardEntry(
            user_id=profile.user_id,
            display_name=profile.public_name,
            unique_species_count=len(species[profile.user_id]),
            total_photos_count=totals[profile.user_id],
            rank=index + 1,
        )
        for index, profile in enumerate(ranked)
    ]


@dataclass
class Leaderboard:
    """A computed leaderboard.

    ``available`` is False when the data could not be fetched; the
    entries are then empty rather than stale.
    """

    entries: list[LeaderboardEntry] = field(default_factory=list)
    available: bool = True

    def rank_of(self, user_id: UserId) -> int | None:
        for entry in self.entries:
            if entry.user_id == user_id:
                return entry.rank
        return None


class LeaderboardService(Service):
    """Fetches profiles and photos and ranks them."""

    def __init__(
        self,
        user_profile_repository: UserProfileRepository,
        photo_repository: PhotoRepository,
    ) -> None:
        self.user_profile_repository = user_profile_repository
        self.photo_repository = photo_repository

    async def get_leaderboard(self) -> Leaderboard:
        """Compute the leaderboard from a fresh snapshot.

        Returns:
            The leaderboard, or an empty unavailable one if fetching failed
        """
        with logfire.span("leaderboard_service.get_leaderboard"):
            try:
                profiles = await self.user_profile_repository.find_all()
                photos = await self.photo_repository.find_all_in_feed()
            except PersistenceError as e:
                logfire.error("Leaderboard data unavailable", error=e.message)
                return Leaderboard(entries=[], available=False)

            entries = compute_leaderboard(profiles, photos)
            logfire.info("Leaderboard computed", users=len(entries), photos=len(photos))
            return Leaderboard(entries=entries)
