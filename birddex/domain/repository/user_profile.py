"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from birddex.domain.model.user_profile import UserProfile
from birddex.domain.value import UserId


class UserProfileRepository(ABC):
    """Repository for UserProfile entity."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by its user ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_display_name(self, display_name: str) -> Optional[UserProfile]:
        """Find a profile by display name, ignoring case.

        Args:
            display_name: Display name to look up (already trimmed)

        Returns:
            The profile if exactly one matches, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> list[UserProfile]:
        """Find profiles for several users (batch query).

        Args:
            user_ids: User IDs to look up

        Returns:
            Profiles that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[UserProfile]:
        """List every profile in creation order.

        The order is the fetch order the leaderboard uses to break ties.

        Returns:
            All profiles, oldest first
        """
        pass

    @abstractmethod
    async def save(self, profile: UserProfile) -> UserProfile:
        """Create or update a profile (upsert on user_id).

        Args:
            profile: Profile to save

        Returns:
            The saved profile
        """
        pass
