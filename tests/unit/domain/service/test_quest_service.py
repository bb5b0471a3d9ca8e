"""Unit tests for QuestService."""

from uuid import uuid4

import pytest

from birddex.domain.error import (
    DuplicateActionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from birddex.domain.repository import QuestEntryRepository, QuestVoteRepository
from birddex.domain.service import QuestService, classify_quest
from birddex.domain.value import AwardType, QuestEntryId, QuestId, QuestPhase
from tests.conftest import new_user_id, seed_photo, seed_quest, utc
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

DURING = utc(2024, 1, 3)
AFTER = utc(2024, 1, 9)
BEFORE = utc(2023, 12, 31)


class TestClassifyQuest:
    """Tests for phase derivation."""

    @pytest.mark.asyncio
    async def test_phase_boundaries(self, unit_env):
        """Start is inclusive, end is exclusive."""
        quest = await seed_quest(unit_env)

        assert classify_quest(quest, utc(2023, 12, 31, 23, 59)) == QuestPhase.UPCOMING
        assert classify_quest(quest, utc(2024, 1, 1)) == QuestPhase.ACTIVE
        assert classify_quest(quest, utc(2024, 1, 7, 23, 59)) == QuestPhase.ACTIVE
        assert classify_quest(quest, utc(2024, 1, 8)) == QuestPhase.ENDED


class TestCreateQuest:
    """Tests for create_quest / update_quest."""

    @pytest.mark.asyncio
    async def test_create_quest(self, unit_env):
        service = await unit_env.get(QuestService)

        quest = await service.create_quest(
            name="  Spring Warblers ",
            start_time=utc(2024, 4, 1),
            end_time=utc(2024, 4, 30),
        )

        assert quest.name == "Spring Warblers"
        assert (await service.get_quest(quest.id)) == quest

    @pytest.mark.asyncio
    async def test_create_quest_requires_name(self, unit_env):
        service = await unit_env.get(QuestService)

        with pytest.raises(ValidationError, match="Name, start time, and end time are required."):
            await service.create_quest(
                name="   ", start_time=utc(2024, 4, 1), end_time=utc(2024, 4, 30)
            )

    @pytest.mark.asyncio
    async def test_create_quest_rejects_empty_window(self, unit_env):
        service = await unit_env.get(QuestService)

        with pytest.raises(ValidationError, match="End time must be after start time."):
            await service.create_quest(
                name="Owls", start_time=utc(2024, 4, 1), end_time=utc(2024, 4, 1)
            )

    @pytest.mark.asyncio
    async def test_update_keeps_award_urls_when_not_replaced(self, unit_env):
        service = await unit_env.get(QuestService)
        quest = await seed_quest(
            unit_env,
            participation_award_url="https://cdn/p.png",
            top10_award_url="https://cdn/t.png",
        )

        updated = await service.update_quest(
            quest.id,
            name="Renamed",
            start_time=quest.start_time,
            end_time=quest.end_time,
            top10_award_url="https://cdn/t2.png",
        )

        assert updated.name == "Renamed"
        assert updated.participation_award_url == "https://cdn/p.png"
        assert updated.top10_award_url == "https://cdn/t2.png"

    @pytest.mark.asyncio
    async def test_delete_unknown_quest(self, unit_env):
        service = await unit_env.get(QuestService)

        with pytest.raises(NotFoundError):
            await service.delete_quest(QuestId(uuid4()))


class TestListQuests:
    @pytest.mark.asyncio
    async def test_split_current_and_past(self, unit_env):
        service = await unit_env.get(QuestService)
        past = await seed_quest(unit_env, name="Past")
        upcoming = await seed_quest(
            unit_env, start_time=utc(2024, 2, 1), end_time=utc(2024, 2, 8), name="Next"
        )
        active = await seed_quest(
            unit_env, start_time=utc(2024, 1, 5), end_time=utc(2024, 1, 20), name="Now"
        )

        listing = await service.list_quests(now=utc(2024, 1, 10))

        assert [q.id for q in listing.current] == [active.id, upcoming.id]
        assert [q.id for q in listing.past] == [past.id]


class TestSubmitEntry:
    """Tests for submit_entry."""

    @pytest.mark.asyncio
    async def test_submit_entry_while_active(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id)

        # Act
        entry = await service.submit_entry(quest.id, user_id, photo.id, now=DURING)

        # Assert
        assert entry.quest_id == quest.id
        assert entry.photo_id == photo.id
        assert (await service.get_user_entry(quest.id, user_id)) == entry

    @pytest.mark.asyncio
    @pytest.mark.parametrize("now", [BEFORE, AFTER])
    async def test_submit_entry_outside_window(self, unit_env, now):
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id)

        with pytest.raises(ValidationError):
            await service.submit_entry(quest.id, user_id, photo.id, now=now)

    @pytest.mark.asyncio
    async def test_second_entry_is_rejected(self, unit_env):
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)
        user_id = new_user_id()
        first = await seed_photo(unit_env, user_id)
        second = await seed_photo(unit_env, user_id)
        await service.submit_entry(quest.id, user_id, first.id, now=DURING)

        with pytest.raises(DuplicateActionError):
            await service.submit_entry(quest.id, user_id, second.id, now=DURING)

    @pytest.mark.asyncio
    async def test_cannot_enter_someone_elses_photo(self, unit_env):
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)
        photo = await seed_photo(unit_env, new_user_id())

        with pytest.raises(NotAuthorizedError):
            await service.submit_entry(quest.id, new_user_id(), photo.id, now=DURING)


class TestRemoveEntry:
    @pytest.mark.asyncio
    async def test_remove_entry_deletes_its_votes(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestService)
        vote_repo = await unit_env.get(QuestVoteRepository)
        quest = await seed_quest(unit_env)
        owner = new_user_id()
        photo = await seed_photo(unit_env, owner)
        entry = await service.submit_entry(quest.id, owner, photo.id, now=DURING)
        await service.cast_vote(quest.id, new_user_id(), entry.id, now=DURING)

        # Act
        await service.remove_entry(quest.id, owner, now=DURING)

        # Assert
        assert await service.get_user_entry(quest.id, owner) is None
        assert await vote_repo.find_by_quest(quest.id) == []

    @pytest.mark.asyncio
    async def test_remove_entry_after_end_is_rejected(self, unit_env):
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)
        owner = new_user_id()
        photo = await seed_photo(unit_env, owner)
        await service.submit_entry(quest.id, owner, photo.id, now=DURING)

        with pytest.raises(ValidationError):
            await service.remove_entry(quest.id, owner, now=AFTER)

    @pytest.mark.asyncio
    async def test_remove_missing_entry(self, unit_env):
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)

        with pytest.raises(NotFoundError):
            await service.remove_entry(quest.id, new_user_id(), now=DURING)


class TestCastVote:
    """Tests for cast_vote and the tally."""

    async def _two_entries(self, env, service):
        quest = await seed_quest(env)
        entries = []
        for _ in range(2):
            owner = new_user_id()
            photo = await seed_photo(env, owner)
            entries.append(await service.submit_entry(quest.id, owner, photo.id, now=DURING))
        return quest, entries

    @pytest.mark.asyncio
    async def test_repeating_a_vote_is_idempotent(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestService)
        quest, (e1, e2) = await self._two_entries(unit_env, service)
        voter = new_user_id()

        # Act
        await service.cast_vote(quest.id, voter, e1.id, now=DURING)
        await service.cast_vote(quest.id, voter, e1.id, now=DURING)

        # Assert
        assert await service.get_vote_counts(quest.id) == {e1.id: 1, e2.id: 0}

    @pytest.mark.asyncio
    async def test_voting_again_moves_the_vote(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestService)
        quest, (e1, e2) = await self._two_entries(unit_env, service)
        voter = new_user_id()

        # Act
        await service.cast_vote(quest.id, voter, e1.id, now=DURING)
        await service.cast_vote(quest.id, voter, e2.id, now=DURING)

        # Assert
        assert await service.get_vote_counts(quest.id) == {e1.id: 0, e2.id: 1}
        vote = await service.get_user_vote(quest.id, voter)
        assert vote is not None and vote.entry_id == e2.id

    @pytest.mark.asyncio
    async def test_voting_closed_after_end(self, unit_env):
        service = await unit_env.get(QuestService)
        quest, (e1, _) = await self._two_entries(unit_env, service)

        with pytest.raises(ValidationError, match="Voting has closed"):
            await service.cast_vote(quest.id, new_user_id(), e1.id, now=AFTER)

    @pytest.mark.asyncio
    async def test_voting_not_open_before_start(self, unit_env):
        service = await unit_env.get(QuestService)
        quest, (e1, e2) = await self._two_entries(unit_env, service)

        with pytest.raises(ValidationError, match="Voting has not opened for this quest"):
            await service.cast_vote(quest.id, new_user_id(), e1.id, now=BEFORE)

        assert await service.get_vote_counts(quest.id) == {e1.id: 0, e2.id: 0}

    @pytest.mark.asyncio
    async def test_vote_for_entry_of_other_quest(self, unit_env):
        service = await unit_env.get(QuestService)
        quest, _ = await self._two_entries(unit_env, service)

        with pytest.raises(NotFoundError):
            await service.cast_vote(quest.id, new_user_id(), QuestEntryId(uuid4()), now=DURING)

    @pytest.mark.asyncio
    async def test_self_vote_allowed_by_default(self, unit_env):
        service = await unit_env.get(QuestService)
        quest, (e1, _) = await self._two_entries(unit_env, service)

        vote = await service.cast_vote(quest.id, e1.user_id, e1.id, now=DURING)

        assert vote.entry_id == e1.id

    @pytest.mark.asyncio
    async def test_self_vote_rejected_when_disabled(self, unit_env):
        service = await unit_env.get(QuestService)
        service.settings = service.settings.model_copy(update={"allow_self_votes": False})
        quest, (e1, _) = await self._two_entries(unit_env, service)

        with pytest.raises(ValidationError):
            await service.cast_vote(quest.id, e1.user_id, e1.id, now=DURING)


class TestWinnerAndAwards:
    """Tests for set_winner and get_awards."""

    @pytest.mark.asyncio
    async def test_winner_only_after_end(self, unit_env):
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)
        owner = new_user_id()
        photo = await seed_photo(unit_env, owner)
        entry = await service.submit_entry(quest.id, owner, photo.id, now=DURING)

        with pytest.raises(ValidationError):
            await service.set_winner(quest.id, entry.id, now=DURING)

    @pytest.mark.asyncio
    async def test_winner_is_not_derived_from_votes(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestService)
        quest = await seed_quest(unit_env)
        owners = [new_user_id(), new_user_id()]
        entries = []
        for owner in owners:
            photo = await seed_photo(unit_env, owner)
            entries.append(await service.submit_entry(quest.id, owner, photo.id, now=DURING))
        for _ in range(3):
            await service.cast_vote(quest.id, new_user_id(), entries[0].id, now=DURING)

        # Act
        ended = await service.get_quest(quest.id)
        chosen = await service.set_winner(quest.id, entries[1].id, now=AFTER)

        # Assert
        assert ended.winner_entry_id is None
        assert chosen.winner_entry_id == entries[1].id

    @pytest.mark.asyncio
    async def test_awards_for_ended_quests(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestService)
        entry_repo = await unit_env.get(QuestEntryRepository)
        winner_quest = await seed_quest(unit_env, top10_award_url="https://cdn/top.png")
        other_quest = await seed_quest(
            unit_env,
            start_time=utc(2024, 1, 2),
            end_time=utc(2024, 1, 5),
            participation_award_url="https://cdn/part.png",
        )
        running = await seed_quest(
            unit_env, start_time=utc(2024, 1, 2), end_time=utc(2024, 3, 1)
        )
        user_id = new_user_id()
        photo = await seed_photo(unit_env, user_id)
        won = await service.submit_entry(winner_quest.id, user_id, photo.id, now=utc(2024, 1, 3))
        await service.submit_entry(other_quest.id, user_id, photo.id, now=utc(2024, 1, 3))
        await service.submit_entry(running.id, user_id, photo.id, now=utc(2024, 1, 3))
        await service.set_winner(winner_quest.id, won.id, now=AFTER)

        # Act
        awards = await service.get_awards(user_id, now=AFTER)

        # Assert
        assert [(a.quest.id, a.award_type) for a in awards] == [
            (winner_quest.id, AwardType.TOP10),
            (other_quest.id, AwardType.PARTICIPATION),
        ]
        assert awards[0].image_url == "https://cdn/top.png"
        assert awards[1].image_url == "https://cdn/part.png"
        assert len(await entry_repo.find_by_user(user_id)) == 3

    @pytest.mark.asyncio
    async def test_delete_quest_removes_entries_and_votes(self, unit_env):
        service = await unit_env.get(QuestService)
        vote_repo = await unit_env.get(QuestVoteRepository)
        quest = await seed_quest(unit_env)
        owner = new_user_id()
        photo = await seed_photo(unit_env, owner)
        entry = await service.submit_entry(quest.id, owner, photo.id, now=DURING)
        await service.cast_vote(quest.id, new_user_id(), entry.id, now=DURING)

        await service.delete_quest(quest.id)

        assert await service.get_entries(quest.id) == []
        assert await vote_repo.find_by_quest(quest.id) == []
        with pytest.raises(NotFoundError):
            await service.get_quest(quest.id)
