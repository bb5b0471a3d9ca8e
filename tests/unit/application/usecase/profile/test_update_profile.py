"""Unit tests for the profile use cases."""

import pytest

from birddex.application.usecase.profile import (
    FindProfileRequest,
    FindProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from birddex.domain.error import DuplicateActionError, NotFoundError
from tests.conftest import new_user_id, seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProfileUseCases:
    @pytest.mark.asyncio
    async def test_update_then_get(self, unit_env):
        update = await unit_env.get(UpdateProfileUseCase)
        get = await unit_env.get(GetProfileUseCase)
        user_id = str(new_user_id())

        await update.execute(UpdateProfileRequest(user_id=user_id, display_name="Wren"))
        profile = await get.execute(GetProfileRequest(user_id=user_id))

        assert profile.display_name == "Wren"
        assert profile.user_id == user_id

    @pytest.mark.asyncio
    async def test_update_to_taken_name(self, unit_env):
        update = await unit_env.get(UpdateProfileUseCase)
        await seed_profile(unit_env, "Wren")

        with pytest.raises(DuplicateActionError):
            await update.execute(
                UpdateProfileRequest(user_id=str(new_user_id()), display_name="WREN")
            )

    @pytest.mark.asyncio
    async def test_find_by_display_name(self, unit_env):
        find = await unit_env.get(FindProfileUseCase)
        wren = await seed_profile(unit_env, "Wren")

        found = await find.execute(FindProfileRequest(display_name="wren"))

        assert found.user_id == str(wren.user_id)
        with pytest.raises(NotFoundError):
            await find.execute(FindProfileRequest(display_name="Nobody"))
