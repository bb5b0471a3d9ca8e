"""List friends use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from birddex.domain.model import Friendship
from birddex.domain.service import FriendshipService, UserProfileService
from birddex.domain.value import UserId


class FriendItem(BaseModel):
    """The other party of a friendship or request."""

    friendship_id: str
    user_id: str
    display_name: str
    created_at: datetime


class ListFriendsRequest(BaseModel):
    user_id: str


class ListFriendsResponse(BaseModel):
    """Friends page contents."""

    friends: list[FriendItem]
    incoming: list[FriendItem]
    outgoing: list[FriendItem]


class ListFriendsUseCase:
    """Use case for listing friends and pending requests."""

    def __init__(
        self,
        friendship_service: FriendshipService,
        user_profile_service: UserProfileService,
    ) -> None:
        self.friendship_service = friendship_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: ListFriendsRequest) -> ListFriendsResponse:
        user_id = UserId(UUID(request.user_id))
        overview = await self.friendship_service.get_overview(user_id)
        everyone = overview.friends + overview.incoming + overview.outgoing
        names = await self.user_profile_service.get_display_names(
            [f.other_party(user_id) for f in everyone]
        )

        def to_items(friendships: list[Friendship]) -> list[FriendItem]:
            return [
                FriendItem(
                    friendship_id=str(f.id),
                    user_id=str(f.other_party(user_id)),
                    display_name=names[f.other_party(user_id)],
                    created_at=f.created_at,
                )
                for f in friendships
            ]

        return ListFriendsResponse(
            friends=to_items(overview.friends),
            incoming=to_items(overview.incoming),
            outgoing=to_items(overview.outgoing),
        )
