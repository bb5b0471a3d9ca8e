"""Friendship entity.

A friendship starts as a pending request from requester to addressee and
becomes undirected once accepted. There is at most one record per
unordered pair of users.
"""

from datetime import datetime, timezone

from pydantic import Field

from birddex.domain.model.common import DomainModel
from birddex.domain.value import FriendshipId, FriendshipStatus, UserId


class Friendship(DomainModel):
    """Friendship between two users."""

    id: FriendshipId
    requester_id: UserId
    addressee_id: UserId
    status: FriendshipStatus = FriendshipStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def involves(self, user_id: UserId) -> bool:
        """Check whether the user is either party."""
        return user_id in (self.requester_id, self.addressee_id)

    def other_party(self, user_id: UserId) -> UserId:
        """Return the party that is not ``user_id``."""
        return self.addressee_id if self.requester_id == user_id else self.requester_id

    @property
    def is_accepted(self) -> bool:
        return self.status == FriendshipStatus.ACCEPTED
