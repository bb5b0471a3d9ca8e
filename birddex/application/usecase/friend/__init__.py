"""Friend use cases."""

from .list_friends import FriendItem, ListFriendsRequest, ListFriendsResponse, ListFriendsUseCase
from .manage_friend import (
    AcceptFriendRequestUseCase,
    FriendshipActionRequest,
    FriendshipActionResponse,
    FriendshipResponse,
    RemoveFriendUseCase,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)

__all__ = [
    "AcceptFriendRequestUseCase",
    "FriendItem",
    "FriendshipActionRequest",
    "FriendshipActionResponse",
    "FriendshipResponse",
    "ListFriendsRequest",
    "ListFriendsResponse",
    "ListFriendsUseCase",
    "RemoveFriendUseCase",
    "SendFriendRequestRequest",
    "SendFriendRequestUseCase",
]
