"""Unit tests for FriendshipService."""

import pytest

from birddex.domain.error import (
    DuplicateActionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from birddex.domain.service import FriendshipService
from birddex.domain.value import FriendshipStatus
from tests.conftest import new_user_id, seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSendRequest:
    """Tests for send_request."""

    @pytest.mark.asyncio
    async def test_send_request_by_display_name(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        bo = await seed_profile(unit_env, "Bo")

        # Act
        request = await service.send_request(ann.user_id, "  bo ")

        # Assert
        assert request.requester_id == ann.user_id
        assert request.addressee_id == bo.user_id
        assert request.status == FriendshipStatus.PENDING

    @pytest.mark.asyncio
    async def test_unknown_display_name(self, unit_env):
        service = await unit_env.get(FriendshipService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.send_request(new_user_id(), "Nobody")

        assert str(exc_info.value) == "User not found. Please check the display name."

    @pytest.mark.asyncio
    async def test_cannot_befriend_yourself(self, unit_env):
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")

        with pytest.raises(ValidationError, match="You cannot send a friend request to yourself."):
            await service.send_request(ann.user_id, "Ann")

    @pytest.mark.asyncio
    async def test_duplicate_request_in_either_direction(self, unit_env):
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        bo = await seed_profile(unit_env, "Bo")
        await service.send_request(ann.user_id, "Bo")

        with pytest.raises(DuplicateActionError, match="A friend request already exists"):
            await service.send_request(bo.user_id, "Ann")

    @pytest.mark.asyncio
    async def test_already_friends(self, unit_env):
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        bo = await seed_profile(unit_env, "Bo")
        request = await service.send_request(ann.user_id, "Bo")
        await service.accept_request(bo.user_id, request.id)

        with pytest.raises(DuplicateActionError, match="You are already friends with this user."):
            await service.send_request(ann.user_id, "Bo")


class TestRespond:
    """Tests for accept_request and remove."""

    @pytest.mark.asyncio
    async def test_addressee_accepts(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        bo = await seed_profile(unit_env, "Bo")
        request = await service.send_request(ann.user_id, "Bo")

        # Act
        accepted = await service.accept_request(bo.user_id, request.id)

        # Assert
        assert accepted.status == FriendshipStatus.ACCEPTED
        assert await service.are_friends(ann.user_id, bo.user_id)
        assert await service.get_friend_ids(ann.user_id) == [bo.user_id]
        assert await service.get_friend_ids(bo.user_id) == [ann.user_id]

    @pytest.mark.asyncio
    async def test_requester_cannot_accept(self, unit_env):
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        await seed_profile(unit_env, "Bo")
        request = await service.send_request(ann.user_id, "Bo")

        with pytest.raises(NotAuthorizedError):
            await service.accept_request(ann.user_id, request.id)

    @pytest.mark.asyncio
    async def test_outsider_sees_not_found(self, unit_env):
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        await seed_profile(unit_env, "Bo")
        request = await service.send_request(ann.user_id, "Bo")

        with pytest.raises(NotFoundError):
            await service.remove(new_user_id(), request.id)

    @pytest.mark.asyncio
    async def test_either_party_may_remove(self, unit_env):
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        bo = await seed_profile(unit_env, "Bo")
        request = await service.send_request(ann.user_id, "Bo")
        await service.accept_request(bo.user_id, request.id)

        await service.remove(bo.user_id, request.id)

        assert not await service.are_friends(ann.user_id, bo.user_id)

    @pytest.mark.asyncio
    async def test_overview_splits_requests(self, unit_env):
        service = await unit_env.get(FriendshipService)
        ann = await seed_profile(unit_env, "Ann")
        await seed_profile(unit_env, "Bo")
        cy = await seed_profile(unit_env, "Cy")
        outgoing = await service.send_request(ann.user_id, "Bo")
        incoming = await service.send_request(cy.user_id, "Ann")

        overview = await service.get_overview(ann.user_id)

        assert overview.friends == []
        assert [f.id for f in overview.outgoing] == [outgoing.id]
        assert [f.id for f in overview.incoming] == [incoming.id]
