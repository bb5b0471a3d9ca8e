"""Unit tests for GetLeaderboardUseCase."""

import pytest

from birddex.application.usecase.leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
)
from tests.conftest import seed_photo, seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetLeaderboardUseCase:
    @pytest.mark.asyncio
    async def test_viewer_rank(self, unit_env):
        # Arrange
        ann = await seed_profile(unit_env, "Ann")
        bo = await seed_profile(unit_env, "Bo")
        await seed_photo(unit_env, ann.user_id, "robin")
        await seed_photo(unit_env, ann.user_id, "jay")
        await seed_photo(unit_env, bo.user_id, "robin")
        use_case = await unit_env.get(GetLeaderboardUseCase)

        # Act
        response = await use_case.execute(GetLeaderboardRequest(viewer_id=str(bo.user_id)))

        # Assert
        assert response.available is True
        assert response.viewer_rank == 2
        assert [(e.display_name, e.rank) for e in response.entries] == [("Ann", 1), ("Bo", 2)]

    @pytest.mark.asyncio
    async def test_anonymous_viewer(self, unit_env):
        await seed_profile(unit_env, "Ann")
        use_case = await unit_env.get(GetLeaderboardUseCase)

        response = await use_case.execute(GetLeaderboardRequest())

        assert response.viewer_rank is None
        assert len(response.entries) == 1
