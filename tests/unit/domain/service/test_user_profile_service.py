"""Unit tests for UserProfileService."""

import pytest

from birddex.domain.error import DuplicateActionError, NotAuthorizedError, NotFoundError, ValidationError
from birddex.domain.service import UserProfileService
from tests.conftest import new_user_id, seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUserProfileService:
    """Tests for UserProfileService."""

    @pytest.mark.asyncio
    async def test_ensure_profile_creates_once(self, unit_env):
        service = await unit_env.get(UserProfileService)
        user_id = new_user_id()

        first = await service.ensure_profile(user_id)
        second = await service.ensure_profile(user_id)

        assert first == second
        assert first.display_name is None
        assert first.is_admin is False

    @pytest.mark.asyncio
    async def test_get_missing_profile(self, unit_env):
        service = await unit_env.get(UserProfileService)

        with pytest.raises(NotFoundError):
            await service.get_profile(new_user_id())

    @pytest.mark.asyncio
    async def test_update_display_name_trims(self, unit_env):
        service = await unit_env.get(UserProfileService)
        user_id = new_user_id()

        profile = await service.update_display_name(user_id, "  Birdie  ")

        assert profile.display_name == "Birdie"
        assert (await service.find_by_display_name("BIRDIE")).user_id == user_id

    @pytest.mark.asyncio
    async def test_display_name_taken_ignoring_case(self, unit_env):
        # Arrange
        service = await unit_env.get(UserProfileService)
        await seed_profile(unit_env, "Birdie")

        # Act / Assert
        with pytest.raises(DuplicateActionError):
            await service.update_display_name(new_user_id(), "birdie")

    @pytest.mark.asyncio
    async def test_keeping_own_name_is_allowed(self, unit_env):
        service = await unit_env.get(UserProfileService)
        me = await seed_profile(unit_env, "Birdie")

        profile = await service.update_display_name(me.user_id, "BIRDIE")

        assert profile.display_name == "BIRDIE"

    @pytest.mark.asyncio
    async def test_blank_display_name(self, unit_env):
        service = await unit_env.get(UserProfileService)

        with pytest.raises(ValidationError):
            await service.update_display_name(new_user_id(), "   ")

    @pytest.mark.asyncio
    async def test_display_names_default_to_unknown_user(self, unit_env):
        service = await unit_env.get(UserProfileService)
        named = await seed_profile(unit_env, "Ann")
        nameless = await seed_profile(unit_env)
        missing = new_user_id()

        names = await service.get_display_names([named.user_id, nameless.user_id, missing])

        assert names == {
            named.user_id: "Ann",
            nameless.user_id: "Unknown User",
            missing: "Unknown User",
        }

    @pytest.mark.asyncio
    async def test_require_admin(self, unit_env):
        service = await unit_env.get(UserProfileService)
        admin = await seed_profile(unit_env, "Admin", is_admin=True)
        user = await seed_profile(unit_env, "User")

        await service.require_admin(admin.user_id, "manage quests")
        with pytest.raises(NotAuthorizedError):
            await service.require_admin(user.user_id, "manage quests")
