"""Unit tests for the friend use cases."""

import pytest

from birddex.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    FriendshipActionRequest,
    ListFriendsRequest,
    ListFriendsUseCase,
    RemoveFriendUseCase,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)
from birddex.domain.error import NotFoundError
from birddex.domain.value import FriendshipStatus
from tests.conftest import seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFriendUseCases:
    """Request, accept, list and remove."""

    @pytest.mark.asyncio
    async def test_full_friendship_flow(self, unit_env):
        # Arrange
        ann = await seed_profile(unit_env, "Ann")
        bo = await seed_profile(unit_env, "Bo")
        send = await unit_env.get(SendFriendRequestUseCase)
        accept = await unit_env.get(AcceptFriendRequestUseCase)
        list_friends = await unit_env.get(ListFriendsUseCase)
        remove = await unit_env.get(RemoveFriendUseCase)

        # Act
        request = await send.execute(
            SendFriendRequestRequest(user_id=str(ann.user_id), display_name="bo")
        )
        pending = await list_friends.execute(ListFriendsRequest(user_id=str(bo.user_id)))
        accepted = await accept.execute(
            FriendshipActionRequest(user_id=str(bo.user_id), friendship_id=request.friendship_id)
        )
        listed = await list_friends.execute(ListFriendsRequest(user_id=str(ann.user_id)))
        removed = await remove.execute(
            FriendshipActionRequest(user_id=str(ann.user_id), friendship_id=request.friendship_id)
        )
        after = await list_friends.execute(ListFriendsRequest(user_id=str(ann.user_id)))

        # Assert
        assert [(i.display_name, i.user_id) for i in pending.incoming] == [
            ("Ann", str(ann.user_id))
        ]
        assert accepted.status == FriendshipStatus.ACCEPTED
        assert [i.display_name for i in listed.friends] == ["Bo"]
        assert removed.success is True
        assert after.friends == []

    @pytest.mark.asyncio
    async def test_malformed_friendship_id(self, unit_env):
        ann = await seed_profile(unit_env, "Ann")
        accept = await unit_env.get(AcceptFriendRequestUseCase)

        with pytest.raises(NotFoundError):
            await accept.execute(
                FriendshipActionRequest(user_id=str(ann.user_id), friendship_id="nope")
            )
