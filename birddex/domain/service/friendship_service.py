"""Friendship domain service."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from birddex.domain.error import (
    DuplicateActionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from birddex.domain.model import Friendship
from birddex.domain.repository import FriendshipRepository
from birddex.domain.value import FriendshipId, FriendshipStatus, UserId

from .base import Service
from .user_profile_service import UserProfileService


@dataclass
class FriendsOverview:
    """A user's accepted friendships and pending requests."""

    friends: list[Friendship]
    outgoing: list[Friendship]
    incoming: list[Friendship]


class FriendshipService(Service):
    """Domain service for friend requests and friend lists."""

    def __init__(
        self,
        friendship_repository: FriendshipRepository,
        user_profile_service: UserProfileService,
    ) -> None:
        """Initialize friendship service.

        Args:
            friendship_repository: Friendship repository
            user_profile_service: Profile service used to find users by name
        """
        self.friendship_repository = friendship_repository
        self.user_profile_service = user_profile_service

    async def send_request(self, requester_id: UserId, display_name: str) -> Friendship:
        """Send a friend request to the user with the given display name.

        Args:
            requester_id: User sending the request
            display_name: Display name of the addressee (case-insensitive)

        Returns:
            The pending friendship

        Raises:
            NotFoundError: If no user has that display name
            ValidationError: If the requester names themselves
            DuplicateActionError: If a record already exists for the pair
        """
        with logfire.span(
            "friendship_service.send_request",
            requester_id=str(requester_id),
            display_name=display_name,
        ):
            target = await self.user_profile_service.find_by_display_name(display_name)
            if not target:
                raise NotFoundError(
                    "UserProfile",
                    display_name,
                    "User not found. Please check the display name.",
                )
            if target.user_id == requester_id:
                raise ValidationError("You cannot send a friend request to yourself.")

            existing = await self.friendship_repository.find_between(
                requester_id, target.user_id
            )
            if existing:
                if existing.is_accepted:
                    raise DuplicateActionError("You are already friends with this user.")
                raise DuplicateActionError(
                    "A friend request already exists with this user."
                )

            friendship = Friendship(
                id=FriendshipId(uuid4()),
                requester_id=requester_id,
                addressee_id=target.user_id,
                status=FriendshipStatus.PENDING,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.friendship_repository.save(friendship)
            logfire.info(
                "Friend request sent",
                friendship_id=str(saved.id),
                addressee_id=str(target.user_id),
            )
            return saved

    async def _get_for_party(
        self, friendship_id: FriendshipId, user_id: UserId
    ) -> Friendship:
        friendship = await self.friendship_repository.find_by_id(friendship_id)
        if not friendship or not friendship.involves(user_id):
            raise NotFoundError("Friendship", str(friendship_id))
        return friendship

    async def accept_request(self, user_id: UserId, friendship_id: FriendshipId) -> Friendship:
        """Accept a pending request addressed to the user.

        Raises:
            NotFoundError: If the request does not exist or does not involve the user
            NotAuthorizedError: If the user sent the request
        """
        with logfire.span(
            "friendship_service.accept_request",
            user_id=str(user_id),
            friendship_id=str(friendship_id),
        ):
            friendship = await self._get_for_party(friendship_id, user_id)
            if friendship.addressee_id != user_id:
                raise NotAuthorizedError("accept this friend request", str(user_id))
            if friendship.is_accepted:
                return friendship
            accepted = await self.friendship_repository.save(
                friendship.model_copy(update={"status": FriendshipStatus.ACCEPTED})
            )
            logfire.info("Friend request accepted", friendship_id=str(friendship_id))
            return accepted

    async def remove(self, user_id: UserId, friendship_id: FriendshipId) -> None:
        """Decline, cancel or unfriend. Either party may remove the record.

        Raises:
            NotFoundError: If the record does not exist or does not involve the user
        """
        with logfire.span(
            "friendship_service.remove",
            user_id=str(user_id),
            friendship_id=str(friendship_id),
        ):
            await self._get_for_party(friendship_id, user_id)
            await self.friendship_repository.delete(friendship_id)
            logfire.info("Friendship removed", friendship_id=str(friendship_id))

    async def get_friend_ids(self, user_id: UserId) -> list[UserId]:
        """List the user's accepted friends, whichever side sent the request."""
        friendships = await self.friendship_repository.find_accepted_for(user_id)
        return [f.other_party(user_id) for f in friendships]

    async def are_friends(self, user_a: UserId, user_b: UserId) -> bool:
        friendship = await self.friendship_repository.find_between(user_a, user_b)
        return bool(friendship and friendship.is_accepted)

    async def get_overview(self, user_id: UserId) -> FriendsOverview:
        """Collect friends and pending requests for the friends page."""
        with logfire.span("friendship_service.get_overview", user_id=str(user_id)):
            return FriendsOverview(
                friends=await self.friendship_repository.find_accepted_for(user_id),
                outgoing=await self.friendship_repository.find_pending_outgoing(user_id),
                incoming=await self.friendship_repository.find_pending_incoming(user_id),
            )
