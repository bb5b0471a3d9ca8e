"""In-memory user profile repository for testing."""

from typing import Optional, Sequence

from birddex.domain.error import DuplicateActionError
from birddex.domain.model import UserProfile
from birddex.domain.repository import UserProfileRepository
from birddex.domain.value import UserId


class InMemoryUserProfileRepository(UserProfileRepository):
    """In-memory implementation of UserProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, UserProfile] = {}

    async def find_by_user_id(self, user_id: UserId) -> Optional[UserProfile]:
        return self._profiles.get(user_id)

    async def find_by_display_name(self, display_name: str) -> Optional[UserProfile]:
        wanted = display_name.lower()
        for profile in self._profiles.values():
            if profile.display_name and profile.display_name.lower() == wanted:
                return profile
        return None

    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> list[UserProfile]:
        wanted = set(user_ids)
        return [p for uid, p in self._profiles.items() if uid in wanted]

    async def find_all(self) -> list[UserProfile]:
        """List profiles oldest first; insertion order breaks ties."""
        return sorted(self._profiles.values(), key=lambda p: p.created_at)

    async def save(self, profile: UserProfile) -> UserProfile:
        """Create or update a profile.

        Raises:
            DuplicateActionError: If another profile has the display name
        """
        if profile.display_name:
            holder = await self.find_by_display_name(profile.display_name)
            if holder and holder.user_id != profile.user_id:
                raise DuplicateActionError("Display name is already taken")
        self._profiles[profile.user_id] = profile
        return profile
