"""Friend routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from birddex.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    FriendshipActionRequest,
    FriendshipActionResponse,
    FriendshipResponse,
    ListFriendsRequest,
    ListFriendsResponse,
    ListFriendsUseCase,
    RemoveFriendUseCase,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)
from birddex.domain.service import JWTService
from birddex.interface.api.session import SessionToken, require_user

router = APIRouter(prefix="/friends", tags=["friends"], route_class=DishkaRoute)


class SendFriendRequestAPIRequest(BaseModel):
    display_name: str


@router.get("", response_model=ListFriendsResponse)
async def list_friends(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    list_friends_use_case: FromDishka[ListFriendsUseCase],
) -> ListFriendsResponse:
    """Friends plus incoming and outgoing pending requests."""
    user_id = require_user(jwt_service, token, "view your friends")
    return await list_friends_use_case.execute(ListFriendsRequest(user_id=user_id))


@router.post(
    "/requests",
    response_model=FriendshipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_friend_request(
    request: SendFriendRequestAPIRequest,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    send_friend_request_use_case: FromDishka[SendFriendRequestUseCase],
) -> FriendshipResponse:
    """Send a friend request by display name.

    Raises:
        NotFoundError: Unknown display name (404)
        ValidationError: Request to self (400)
        DuplicateActionError: Already friends or already requested (409)
    """
    user_id = require_user(jwt_service, token, "send friend requests")
    return await send_friend_request_use_case.execute(
        SendFriendRequestRequest(user_id=user_id, display_name=request.display_name)
    )


@router.post("/requests/{friendship_id}/accept", response_model=FriendshipResponse)
async def accept_friend_request(
    friendship_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    accept_friend_request_use_case: FromDishka[AcceptFriendRequestUseCase],
) -> FriendshipResponse:
    user_id = require_user(jwt_service, token, "accept friend requests")
    return await accept_friend_request_use_case.execute(
        FriendshipActionRequest(user_id=user_id, friendship_id=friendship_id)
    )


@router.delete("/{friendship_id}", response_model=FriendshipActionResponse)
async def remove_friend(
    friendship_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    remove_friend_use_case: FromDishka[RemoveFriendUseCase],
) -> FriendshipActionResponse:
    """Decline or cancel a request, or remove a friend."""
    user_id = require_user(jwt_service, token, "remove friends")
    return await remove_friend_use_case.execute(
        FriendshipActionRequest(user_id=user_id, friendship_id=friendship_id)
    )
