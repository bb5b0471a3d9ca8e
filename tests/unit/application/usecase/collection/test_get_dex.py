"""Unit tests for the collection use cases."""

import pytest

from birddex.application.usecase.collection import (
    CollectionPhotoRequest,
    GetDexRequest,
    GetDexUseCase,
    GetSpeciesPhotosRequest,
    GetSpeciesPhotosUseCase,
    HidePhotoUseCase,
    SetTopPhotoUseCase,
    ShowPhotoUseCase,
)
from birddex.domain.error import NotFoundError, ValidationError
from birddex.domain.service import StorageClient
from tests.conftest import new_user_id, seed_photo
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def store_files(env, *photos):
    """Put the photos' files in mock storage so they can be signed."""
    client = await env.get(StorageClient)
    for photo in photos:
        await client.upload("photos", photo.url, b"jpeg")


class TestGetDexUseCase:
    """Tests for GetDexUseCase."""

    @pytest.mark.asyncio
    async def test_dex_counts_species_with_top_photo(self, unit_env):
        # Arrange
        user_id = new_user_id()
        robin = await seed_photo(unit_env, user_id, "robin")
        jay = await seed_photo(unit_env, user_id, "jay")
        await seed_photo(unit_env, user_id, "wren")
        await store_files(unit_env, robin, jay)
        set_top = await unit_env.get(SetTopPhotoUseCase)
        for photo in (robin, jay):
            await set_top.execute(
                CollectionPhotoRequest(
                    user_id=str(user_id),
                    species_id=photo.species_id.root,
                    photo_id=str(photo.id),
                )
            )
        use_case = await unit_env.get(GetDexUseCase)

        # Act
        dex = await use_case.execute(GetDexRequest(user_id=str(user_id)))

        # Assert
        assert dex.species_count == 2
        assert [c.species_id for c in dex.cells] == ["jay", "robin"]
        assert all(c.thumbnail_url for c in dex.cells)

    @pytest.mark.asyncio
    async def test_empty_dex(self, unit_env):
        use_case = await unit_env.get(GetDexUseCase)

        dex = await use_case.execute(GetDexRequest(user_id=str(new_user_id())))

        assert dex.cells == []
        assert dex.species_count == 0


class TestManagePhotoUseCases:
    """Tests for top/hide/show."""

    @pytest.mark.asyncio
    async def test_hide_top_photo_then_show(self, unit_env):
        # Arrange
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        request = CollectionPhotoRequest(
            user_id=str(user_id), species_id="robin", photo_id=str(photo.id)
        )
        await (await unit_env.get(SetTopPhotoUseCase)).execute(request)

        # Act
        hidden = await (await unit_env.get(HidePhotoUseCase)).execute(request)
        shown = await (await unit_env.get(ShowPhotoUseCase)).execute(request)

        # Assert
        assert hidden.hidden_from_species_view is True
        assert hidden.is_top is False
        assert shown.hidden_from_species_view is False
        assert shown.is_top is False

    @pytest.mark.asyncio
    async def test_hidden_photo_cannot_become_top(self, unit_env):
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin", hidden_from_species_view=True)
        use_case = await unit_env.get(SetTopPhotoUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CollectionPhotoRequest(
                    user_id=str(user_id), species_id="robin", photo_id=str(photo.id)
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_photo(self, unit_env):
        use_case = await unit_env.get(HidePhotoUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CollectionPhotoRequest(
                    user_id=str(new_user_id()), species_id="robin", photo_id="missing"
                )
            )


class TestGetSpeciesPhotosUseCase:
    @pytest.mark.asyncio
    async def test_species_view_excludes_hidden_and_marks_top(self, unit_env):
        # Arrange
        user_id = new_user_id()
        top = await seed_photo(unit_env, user_id, "robin")
        await seed_photo(unit_env, user_id, "robin", hidden_from_species_view=True)
        await seed_photo(unit_env, user_id, "jay")
        await (await unit_env.get(SetTopPhotoUseCase)).execute(
            CollectionPhotoRequest(user_id=str(user_id), species_id="robin", photo_id=str(top.id))
        )
        use_case = await unit_env.get(GetSpeciesPhotosUseCase)

        # Act
        response = await use_case.execute(
            GetSpeciesPhotosRequest(user_id=str(user_id), species_id="robin")
        )

        # Assert
        assert response.top_photo_id == str(top.id)
        assert [(p.photo_id, p.is_top) for p in response.photos] == [(str(top.id), True)]
