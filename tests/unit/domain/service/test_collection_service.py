"""Unit tests for CollectionService."""

import pytest

from birddex.domain.error import NotAuthorizedError, PersistenceError, ValidationError
from birddex.domain.model import DexState
from birddex.domain.repository import PhotoRepository, TopSpeciesRepository
from birddex.domain.service import CollectionService
from birddex.domain.value import SpeciesCode
from tests.conftest import new_user_id, seed_photo
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ROBIN = SpeciesCode("robin")
JAY = SpeciesCode("jay")


class TestSetTopPhoto:
    """Tests for set_top_photo."""

    @pytest.mark.asyncio
    async def test_set_top_photo_replaces_previous(self, unit_env):
        # Arrange
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        p1 = await seed_photo(unit_env, user_id, "robin")
        p2 = await seed_photo(unit_env, user_id, "robin")
        state = DexState(user_id)

        # Act
        await service.set_top_photo(user_id, ROBIN, p1.id, state)
        await service.set_top_photo(user_id, ROBIN, p2.id, state)

        # Assert
        assert state.top_photo_for(ROBIN) == p2.id
        assert await service.top_photo_ids(user_id) == {p2.id}

    @pytest.mark.asyncio
    async def test_rejects_photo_of_other_species(self, unit_env):
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "jay")

        with pytest.raises(ValidationError):
            await service.set_top_photo(user_id, ROBIN, photo.id)

    @pytest.mark.asyncio
    async def test_rejects_hidden_photo(self, unit_env):
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin", hidden_from_species_view=True)

        with pytest.raises(ValidationError):
            await service.set_top_photo(user_id, ROBIN, photo.id)

    @pytest.mark.asyncio
    async def test_rejects_other_users_photo(self, unit_env):
        service = await unit_env.get(CollectionService)
        photo = await seed_photo(unit_env, new_user_id(), "robin")

        with pytest.raises(NotAuthorizedError):
            await service.set_top_photo(new_user_id(), ROBIN, photo.id)


class TestHidePhoto:
    """Tests for hide/show in species view."""

    @pytest.mark.asyncio
    async def test_hiding_the_top_photo_clears_it_first(self, unit_env):
        """Hiding a top photo succeeds and leaves the species without one."""
        # Arrange
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, photo.id)
        state = await service.get_state(user_id)

        # Act
        hidden = await service.hide_photo_from_species_view(user_id, ROBIN, photo.id, state)

        # Assert
        assert hidden.hidden_from_species_view is True
        assert state.top_photo_for(ROBIN) is None
        assert photo.id in state.hidden_photos
        assert await service.top_photo_ids(user_id) == set()

    @pytest.mark.asyncio
    async def test_hiding_is_repeatable(self, unit_env):
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")

        await service.hide_photo_from_species_view(user_id, ROBIN, photo.id)
        again = await service.hide_photo_from_species_view(user_id, ROBIN, photo.id)

        assert again.hidden_from_species_view is True

    @pytest.mark.asyncio
    async def test_hidden_top_photo_is_rejected_by_storage(self, unit_env):
        """The repository refuses to hide a photo that is still a top photo."""
        photo_repo = await unit_env.get(PhotoRepository)
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, photo.id)

        with pytest.raises(PersistenceError, match="cannot be the top photo"):
            await photo_repo.set_hidden_from_species_view(photo.id, True)

    @pytest.mark.asyncio
    async def test_failed_hide_rolls_back_only_the_hidden_flag(self, unit_env):
        """If the second write fails the species stays without a top photo."""
        # Arrange
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, photo.id)
        state = await service.get_state(user_id)

        async def reject(photo_id, hidden):
            raise PersistenceError("network down")

        service.photo_repository.set_hidden_from_species_view = reject

        # Act
        with pytest.raises(PersistenceError):
            await service.hide_photo_from_species_view(user_id, ROBIN, photo.id, state)

        # Assert
        assert state.top_photo_for(ROBIN) is None
        assert photo.id not in state.hidden_photos

    @pytest.mark.asyncio
    async def test_failed_set_top_restores_state(self, unit_env):
        service = await unit_env.get(CollectionService)
        top_repo = await unit_env.get(TopSpeciesRepository)
        user_id = new_user_id()
        p1 = await seed_photo(unit_env, user_id, "robin")
        p2 = await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, p1.id)
        state = await service.get_state(user_id)

        async def reject(entry):
            raise PersistenceError("network down")

        top_repo.upsert = reject

        with pytest.raises(PersistenceError):
            await service.set_top_photo(user_id, ROBIN, p2.id, state)

        assert state.top_photo_for(ROBIN) == p1.id

    @pytest.mark.asyncio
    async def test_show_restores_photo(self, unit_env):
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        await service.hide_photo_from_species_view(user_id, ROBIN, photo.id)

        shown = await service.show_photo_in_species_view(user_id, photo.id)
        species = await service.get_species_photos(user_id, ROBIN)

        assert shown.hidden_from_species_view is False
        assert [p.id for p in species.photos] == [photo.id]


class TestReassignSpecies:
    @pytest.mark.asyncio
    async def test_reassigning_a_top_photo_clears_old_mapping(self, unit_env):
        # Arrange
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, photo.id)

        # Act
        moved = await service.reassign_species(user_id, photo.id, JAY)

        # Assert
        assert moved.species_id == JAY
        assert await service.get_dex(user_id) == []

    @pytest.mark.asyncio
    async def test_same_species_is_a_no_op(self, unit_env):
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, photo.id)

        await service.reassign_species(user_id, photo.id, ROBIN)

        assert await service.top_photo_ids(user_id) == {photo.id}


class TestDex:
    @pytest.mark.asyncio
    async def test_dex_has_one_cell_per_top_photo(self, unit_env):
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        robin = await seed_photo(unit_env, user_id, "robin")
        jay = await seed_photo(unit_env, user_id, "jay")
        await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, robin.id)
        await service.set_top_photo(user_id, JAY, jay.id)

        cells = await service.get_dex(user_id)

        assert [(c.species_id, c.photo.id) for c in cells] == [(JAY, jay.id), (ROBIN, robin.id)]

    @pytest.mark.asyncio
    async def test_species_photos_mark_the_top_one(self, unit_env):
        service = await unit_env.get(CollectionService)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id, "robin")
        await seed_photo(unit_env, user_id, "robin")
        await service.set_top_photo(user_id, ROBIN, photo.id)

        species = await service.get_species_photos(user_id, ROBIN)

        assert len(species.photos) == 2
        assert species.is_top(photo.id)
        assert sum(species.is_top(p.id) for p in species.photos) == 1
