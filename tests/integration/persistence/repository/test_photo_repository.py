"""Integration tests for the PostgreSQL photo and profile repositories.

These need a migrated database at DATABASE__URL:

    alembic upgrade head
    pytest -m integration
"""

from uuid import uuid4

import pytest

from birddex.domain.model import Comment, TopSpeciesEntry
from birddex.domain.repository import (
    CommentRepository,
    PhotoRepository,
    TopSpeciesRepository,
    UserProfileRepository,
)
from birddex.domain.value import CommentId, SpeciesCode
from tests.conftest import seed_photo, seed_profile
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


class TestPostgresUserProfileRepository:
    @pytest.mark.asyncio
    async def test_find_by_display_name_ignores_case(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserProfileRepository)
        name = f"Birder-{uuid4().hex[:8]}"
        profile = await seed_profile(integration_env, name)

        # Act
        found = await repo.find_by_display_name(name.upper())

        # Assert
        assert found is not None
        assert found.user_id == profile.user_id


class TestPostgresPhotoRepository:
    @pytest.mark.asyncio
    async def test_save_and_list_by_species(self, integration_env):
        repo = await integration_env.get(PhotoRepository)
        owner = await seed_profile(integration_env)
        robin = await seed_photo(integration_env, owner.user_id, species="amerob")
        await seed_photo(integration_env, owner.user_id, species="blujay")

        photos = await repo.find_by_owner_and_species(owner.user_id, SpeciesCode("amerob"))

        assert [p.id for p in photos] == [robin.id]
        assert photos[0].url == robin.url

    @pytest.mark.asyncio
    async def test_top_species_upsert_and_conditional_delete(self, integration_env):
        top_repo = await integration_env.get(TopSpeciesRepository)
        owner = await seed_profile(integration_env)
        first = await seed_photo(integration_env, owner.user_id)
        second = await seed_photo(integration_env, owner.user_id)
        species = SpeciesCode("amerob")

        for photo in (first, second):
            await top_repo.upsert(
                TopSpeciesEntry(user_id=owner.user_id, species_id=species, photo_id=photo.id)
            )
        kept = await top_repo.delete(owner.user_id, species, photo_id=first.id)

        entry = await top_repo.find(owner.user_id, species)
        assert kept is False
        assert entry is not None
        assert entry.photo_id == second.id

    @pytest.mark.asyncio
    async def test_delete_or_hide_removes_photo_and_comments(self, integration_env):
        # Arrange
        repo = await integration_env.get(PhotoRepository)
        comment_repo = await integration_env.get(CommentRepository)
        owner = await seed_profile(integration_env)
        photo = await seed_photo(integration_env, owner.user_id)
        await comment_repo.save(
            Comment(
                id=CommentId(uuid4()), photo_id=photo.id, user_id=owner.user_id, content="Nice"
            )
        )

        # Act
        result = await repo.delete_or_hide(photo.id)

        # Assert
        assert not (result or {}).get("message")
        assert await repo.find_by_id(photo.id) is None
        assert await comment_repo.find_by_photo(photo.id) == []
