"""Unit tests for the quest use cases."""

import pytest

from birddex.application.usecase.quest import (
    AwardImage,
    CastVoteRequest,
    CastVoteUseCase,
    DeleteQuestRequest,
    DeleteQuestUseCase,
    GetAwardsRequest,
    GetAwardsUseCase,
    GetQuestRequest,
    GetQuestUseCase,
    ListQuestsRequest,
    ListQuestsUseCase,
    RemoveEntryRequest,
    RemoveEntryUseCase,
    SaveQuestRequest,
    SaveQuestUseCase,
    SetWinnerRequest,
    SetWinnerUseCase,
    SubmitEntryRequest,
    SubmitEntryUseCase,
)
from birddex.domain.error import NotAuthorizedError, ValidationError
from birddex.domain.value import AwardType, QuestPhase
from tests.conftest import new_user_id, seed_photo, seed_profile, seed_quest, utc
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

DURING = utc(2024, 1, 3)
AFTER = utc(2024, 1, 9)


async def enter(env, quest, display_name: str):
    """Create a user with a photo and enter it into the quest."""
    profile = await seed_profile(env, display_name)
    photo = await seed_photo(env, profile.user_id, "robin")
    submit = await env.get(SubmitEntryUseCase)
    entry = await submit.execute(
        SubmitEntryRequest(
            user_id=str(profile.user_id),
            quest_id=str(quest.id),
            photo_id=str(photo.id),
            now=DURING,
        )
    )
    return profile, entry


class TestSaveQuestUseCase:
    """Tests for quest administration."""

    @pytest.mark.asyncio
    async def test_admin_creates_quest_with_awards(self, unit_env):
        # Arrange
        admin = await seed_profile(unit_env, "Admin", is_admin=True)
        use_case = await unit_env.get(SaveQuestUseCase)

        # Act
        view = await use_case.execute(
            SaveQuestRequest(
                user_id=str(admin.user_id),
                name="Owl Week",
                description="Find an owl",
                start_time=utc(2030, 1, 1),
                end_time=utc(2030, 1, 8),
                top10_award=AwardImage(
                    filename="gold.png", content=b"png", content_type="image/png"
                ),
            )
        )

        # Assert
        assert view.name == "Owl Week"
        assert view.phase == QuestPhase.UPCOMING
        assert view.top10_award_url.startswith(
            "https://storage.test/public/quest-awards/Owl_Week_top10_"
        )
        assert view.participation_award_url is None

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        user = await seed_profile(unit_env, "User")
        use_case = await unit_env.get(SaveQuestUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                SaveQuestRequest(
                    user_id=str(user.user_id),
                    name="Owl Week",
                    start_time=utc(2030, 1, 1),
                    end_time=utc(2030, 1, 8),
                )
            )

    @pytest.mark.asyncio
    async def test_missing_times(self, unit_env):
        admin = await seed_profile(unit_env, "Admin", is_admin=True)
        use_case = await unit_env.get(SaveQuestUseCase)

        with pytest.raises(ValidationError, match="Name, start time, and end time are required."):
            await use_case.execute(SaveQuestRequest(user_id=str(admin.user_id), name="Owls"))

    @pytest.mark.asyncio
    async def test_update_and_delete(self, unit_env):
        admin = await seed_profile(unit_env, "Admin", is_admin=True)
        quest = await seed_quest(unit_env)
        save = await unit_env.get(SaveQuestUseCase)
        delete = await unit_env.get(DeleteQuestUseCase)
        list_quests = await unit_env.get(ListQuestsUseCase)

        updated = await save.execute(
            SaveQuestRequest(
                user_id=str(admin.user_id),
                quest_id=str(quest.id),
                name="Renamed",
                start_time=quest.start_time,
                end_time=quest.end_time,
            )
        )
        deleted = await delete.execute(
            DeleteQuestRequest(user_id=str(admin.user_id), quest_id=str(quest.id))
        )
        listing = await list_quests.execute(ListQuestsRequest(now=DURING))

        assert updated.quest_id == str(quest.id)
        assert updated.name == "Renamed"
        assert deleted.success is True
        assert listing.current == [] and listing.past == []


class TestQuestParticipation:
    """Entering, voting and reading a quest."""

    @pytest.mark.asyncio
    async def test_get_quest_shows_entries_votes_and_viewer_state(self, unit_env):
        # Arrange
        quest = await seed_quest(unit_env)
        ann, ann_entry = await enter(unit_env, quest, "Ann")
        bo, bo_entry = await enter(unit_env, quest, "Bo")
        vote = await unit_env.get(CastVoteUseCase)
        await vote.execute(
            CastVoteRequest(
                user_id=str(bo.user_id),
                quest_id=str(quest.id),
                entry_id=ann_entry.entry_id,
                now=DURING,
            )
        )
        use_case = await unit_env.get(GetQuestUseCase)

        # Act
        response = await use_case.execute(
            GetQuestRequest(quest_id=str(quest.id), viewer_id=str(bo.user_id), now=DURING)
        )

        # Assert
        assert response.quest.phase == QuestPhase.ACTIVE
        counts = {e.display_name: e.vote_count for e in response.entries}
        assert counts == {"Ann": 1, "Bo": 0}
        assert response.viewer_entry_id == bo_entry.entry_id
        assert response.viewer_vote_entry_id == ann_entry.entry_id
        assert all(e.species_id == "robin" for e in response.entries)

    @pytest.mark.asyncio
    async def test_vote_response_has_counts(self, unit_env):
        quest = await seed_quest(unit_env)
        _, ann_entry = await enter(unit_env, quest, "Ann")
        _, bo_entry = await enter(unit_env, quest, "Bo")
        vote = await unit_env.get(CastVoteUseCase)
        voter = str(new_user_id())

        await vote.execute(
            CastVoteRequest(
                user_id=voter, quest_id=str(quest.id), entry_id=ann_entry.entry_id, now=DURING
            )
        )
        response = await vote.execute(
            CastVoteRequest(
                user_id=voter, quest_id=str(quest.id), entry_id=bo_entry.entry_id, now=DURING
            )
        )

        assert response.vote_counts == {ann_entry.entry_id: 0, bo_entry.entry_id: 1}

    @pytest.mark.asyncio
    async def test_remove_entry(self, unit_env):
        quest = await seed_quest(unit_env)
        ann, _ = await enter(unit_env, quest, "Ann")
        remove = await unit_env.get(RemoveEntryUseCase)
        get_quest = await unit_env.get(GetQuestUseCase)

        response = await remove.execute(
            RemoveEntryRequest(user_id=str(ann.user_id), quest_id=str(quest.id), now=DURING)
        )
        detail = await get_quest.execute(GetQuestRequest(quest_id=str(quest.id), now=DURING))

        assert response.success is True
        assert detail.entries == []


class TestWinnerAndAwards:
    @pytest.mark.asyncio
    async def test_admin_sets_winner_and_awards_follow(self, unit_env):
        # Arrange
        admin = await seed_profile(unit_env, "Admin", is_admin=True)
        quest = await seed_quest(
            unit_env,
            participation_award_url="https://cdn/part.png",
            top10_award_url="https://cdn/top.png",
        )
        ann, ann_entry = await enter(unit_env, quest, "Ann")
        bo, _ = await enter(unit_env, quest, "Bo")
        set_winner = await unit_env.get(SetWinnerUseCase)
        awards = await unit_env.get(GetAwardsUseCase)

        # Act
        view = await set_winner.execute(
            SetWinnerRequest(
                user_id=str(admin.user_id),
                quest_id=str(quest.id),
                entry_id=ann_entry.entry_id,
                now=AFTER,
            )
        )
        ann_awards = await awards.execute(GetAwardsRequest(user_id=str(ann.user_id), now=AFTER))
        bo_awards = await awards.execute(GetAwardsRequest(user_id=str(bo.user_id), now=AFTER))

        # Assert
        assert view.winner_entry_id == ann_entry.entry_id
        assert [(a.award_type, a.image_url) for a in ann_awards.awards] == [
            (AwardType.TOP10, "https://cdn/top.png")
        ]
        assert [(a.award_type, a.image_url) for a in bo_awards.awards] == [
            (AwardType.PARTICIPATION, "https://cdn/part.png")
        ]

    @pytest.mark.asyncio
    async def test_non_admin_cannot_set_winner(self, unit_env):
        quest = await seed_quest(unit_env)
        ann, ann_entry = await enter(unit_env, quest, "Ann")
        set_winner = await unit_env.get(SetWinnerUseCase)

        with pytest.raises(NotAuthorizedError):
            await set_winner.execute(
                SetWinnerRequest(
                    user_id=str(ann.user_id),
                    quest_id=str(quest.id),
                    entry_id=ann_entry.entry_id,
                    now=AFTER,
                )
            )
