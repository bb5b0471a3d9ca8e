"""PostgreSQL implementation of Friendship repository."""

from typing import Optional

from sqlalchemy import and_, delete, or_, select

from birddex.domain.model import Friendship
from birddex.domain.repository import FriendshipRepository
from birddex.domain.value import FriendshipId, FriendshipStatus, UserId
from birddex.persistence.mappers import friendship_to_dict, row_to_friendship
from birddex.persistence.repository.base import PostgresRepository
from birddex.persistence.tables import friendships_table

_t = friendships_table


class PostgresFriendshipRepository(PostgresRepository, FriendshipRepository):
    """PostgreSQL implementation of FriendshipRepository."""

    async def _find(self, *conditions) -> list[Friendship]:
        stmt = select(_t).where(and_(*conditions)).order_by(_t.c.created_at.asc())
        result = await self._execute(stmt)
        return [row_to_friendship(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, friendship_id: FriendshipId) -> Optional[Friendship]:
        found = await self._find(_t.c.id == friendship_id)
        return found[0] if found else None

    async def find_between(self, user_a: UserId, user_b: UserId) -> Optional[Friendship]:
        """Find the record for an unordered pair of users."""
        found = await self._find(
            or_(
                and_(_t.c.requester_id == user_a, _t.c.addressee_id == user_b),
                and_(_t.c.requester_id == user_b, _t.c.addressee_id == user_a),
            )
        )
        return found[0] if found else None

    async def find_accepted_for(self, user_id: UserId) -> list[Friendship]:
        return await self._find(
            _t.c.status == FriendshipStatus.ACCEPTED.value,
            or_(_t.c.requester_id == user_id, _t.c.addressee_id == user_id),
        )

    async def find_pending_outgoing(self, user_id: UserId) -> list[Friendship]:
        return await self._find(
            _t.c.status == FriendshipStatus.PENDING.value, _t.c.requester_id == user_id
        )

    async def find_pending_incoming(self, user_id: UserId) -> list[Friendship]:
        return await self._find(
            _t.c.status == FriendshipStatus.PENDING.value, _t.c.addressee_id == user_id
        )

    async def save(self, friendship: Friendship) -> Friendship:
        """Create a record or update its status."""
        values = friendship_to_dict(friendship)
        if await self.find_by_id(friendship.id):
            stmt = _t.update().where(_t.c.id == friendship.id).values(status=values["status"])
        else:
            stmt = _t.insert().values(**values)
        await self._execute(
            stmt, duplicate_message="A friend request already exists with this user."
        )
        return friendship

    async def delete(self, friendship_id: FriendshipId) -> bool:
        result = await self._execute(delete(_t).where(_t.c.id == friendship_id))
        return result.rowcount > 0  # type: ignore[attr-defined]
