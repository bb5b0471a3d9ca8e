"""Friend request use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from birddex.domain.model import Friendship
from birddex.domain.service import FriendshipService
from birddex.domain.value import FriendshipId, FriendshipStatus, UserId

from ..base import parse_id


class FriendshipResponse(BaseModel):
    """Friendship record."""

    friendship_id: str
    requester_id: str
    addressee_id: str
    status: FriendshipStatus
    created_at: datetime

    @classmethod
    def from_friendship(cls, friendship: Friendship) -> "FriendshipResponse":
        return cls(
            friendship_id=str(friendship.id),
            requester_id=str(friendship.requester_id),
            addressee_id=str(friendship.addressee_id),
            status=friendship.status,
            created_at=friendship.created_at,
        )


class SendFriendRequestRequest(BaseModel):
    """Send friend request request."""

    user_id: str
    display_name: str


class SendFriendRequestUseCase:
    """Use case for sending a friend request by display name."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(self, request: SendFriendRequestRequest) -> FriendshipResponse:
        """Send the request.

        Raises:
            NotFoundError: If nobody has the display name
            ValidationError: If the user names themselves
            DuplicateActionError: If the users are already friends or a request exists
        """
        friendship = await self.friendship_service.send_request(
            UserId(UUID(request.user_id)), request.display_name
        )
        return FriendshipResponse.from_friendship(friendship)


class FriendshipActionRequest(BaseModel):
    """Accept, decline or remove request."""

    user_id: str
    friendship_id: str


class FriendshipActionResponse(BaseModel):
    success: bool


class AcceptFriendRequestUseCase:
    """Use case for accepting a pending request. Only the addressee may accept."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(self, request: FriendshipActionRequest) -> FriendshipResponse:
        friendship = await self.friendship_service.accept_request(
            UserId(UUID(request.user_id)),
            parse_id(request.friendship_id, "Friendship", FriendshipId),
        )
        return FriendshipResponse.from_friendship(friendship)


class RemoveFriendUseCase:
    """Use case for declining, cancelling or ending a friendship."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(self, request: FriendshipActionRequest) -> FriendshipActionResponse:
        await self.friendship_service.remove(
            UserId(UUID(request.user_id)),
            parse_id(request.friendship_id, "Friendship", FriendshipId),
        )
        return FriendshipActionResponse(success=True)
