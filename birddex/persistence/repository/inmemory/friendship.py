"""In-memory friendship repository for testing."""

from typing import Optional

from birddex.domain.error import DuplicateActionError
from birddex.domain.model import Friendship
from birddex.domain.repository import FriendshipRepository
from birddex.domain.value import FriendshipId, FriendshipStatus, UserId


class InMemoryFriendshipRepository(FriendshipRepository):
    """In-memory implementation of FriendshipRepository for testing."""

    def __init__(self) -> None:
        self._friendships: dict[FriendshipId, Friendship] = {}

    async def find_by_id(self, friendship_id: FriendshipId) -> Optional[Friendship]:
        return self._friendships.get(friendship_id)

    async def find_between(self, user_a: UserId, user_b: UserId) -> Optional[Friendship]:
        pair = {user_a, user_b}
        for friendship in self._friendships.values():
            if {friendship.requester_id, friendship.addressee_id} == pair:
                return friendship
        return None

    async def find_accepted_for(self, user_id: UserId) -> list[Friendship]:
        return [
            f
            for f in self._friendships.values()
            if f.status == FriendshipStatus.ACCEPTED and f.involves(user_id)
        ]

    async def find_pending_outgoing(self, user_id: UserId) -> list[Friendship]:
        return [
            f
            for f in self._friendships.values()
            if f.status == FriendshipStatus.PENDING and f.requester_id == user_id
        ]

    async def find_pending_incoming(self, user_id: UserId) -> list[Friendship]:
        return [
            f
            for f in self._friendships.values()
            if f.status == FriendshipStatus.PENDING and f.addressee_id == user_id
        ]

    async def save(self, friendship: Friendship) -> Friendship:
        """Create or update a record.

        Raises:
            DuplicateActionError: If another record exists for the pair
        """
        existing = await self.find_between(friendship.requester_id, friendship.addressee_id)
        if existing and existing.id != friendship.id:
            raise DuplicateActionError("A friend request already exists with this user.")
        self._friendships[friendship.id] = friendship
        return friendship

    async def delete(self, friendship_id: FriendshipId) -> bool:
        return self._friendships.pop(friendship_id, None) is not None
