"""Friendship repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from birddex.domain.model.friendship import Friendship
from birddex.domain.value import FriendshipId, UserId


class FriendshipRepository(ABC):
    """Repository for Friendship entity."""

    @abstractmethod
    async def find_by_id(self, friendship_id: FriendshipId) -> Optional[Friendship]:
        """Find a friendship by ID."""
        pass

    @abstractmethod
    async def find_between(self, user_a: UserId, user_b: UserId) -> Optional[Friendship]:
        """Find the record for an unordered pair of users, in either direction.

        Args:
            user_a: One user
            user_b: The other user

        Returns:
            The friendship if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_accepted_for(self, user_id: UserId) -> list[Friendship]:
        """List accepted friendships where the user is either party."""
        pass

    @abstractmethod
    async def find_pending_outgoing(self, user_id: UserId) -> list[Friendship]:
        """List pending requests the user sent."""
        pass

    @abstractmethod
    async def find_pending_incoming(self, user_id: UserId) -> list[Friendship]:
        """List pending requests addressed to the user."""
        pass

    @abstractmethod
    async def save(self, friendship: Friendship) -> Friendship:
        """Insert or update a friendship.

        Raises:
            DuplicateActionError: If a record already exists for the pair
        """
        pass

    @abstractmethod
    async def delete(self, friendship_id: FriendshipId) -> bool:
        """Delete a friendship.

        Returns:
            True if a record was deleted
        """
        pass
