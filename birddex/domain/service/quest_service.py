"""Quest lifecycle and voting.

A quest's phase is derived from its time window: upcoming before
``start_time``, active from ``start_time`` (inclusive) until ``end_time``
(exclusive), ended from ``end_time`` on. Entries are accepted only while a
quest is active, one per user. Each voter holds at most one vote per quest;
voting again moves it. The winner is an administrator's decision and is
never derived from the tally.
"""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from birddex.config import QuestSettings
from birddex.domain.error import (
    DuplicateActionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from birddex.domain.model import Quest, QuestEntry, QuestVote
from birddex.domain.repository import (
    PhotoRepository,
    QuestEntryRepository,
    QuestRepository,
    QuestVoteRepository,
)
from birddex.domain.value import AwardType, PhotoId, QuestEntryId, QuestId, QuestPhase, UserId

from .base import Service


def classify_quest(quest: Quest, now: datetime) -> QuestPhase:
    """Return the phase of a quest at ``now``."""
    if now < quest.start_time:
        return QuestPhase.UPCOMING
    if now < quest.end_time:
        return QuestPhase.ACTIVE
    return QuestPhase.ENDED


def tally_votes(votes: Iterable[QuestVote]) -> dict[QuestEntryId, int]:
    """Count votes per entry. Equal counts are left unresolved."""
    return dict(Counter(vote.entry_id for vote in votes))


@dataclass
class QuestListing:
    """Quests split by whether they have ended, each ordered by start time."""

    current: list[Quest]
    past: list[Quest]


@dataclass
class QuestAward:
    """An award earned by entering an ended quest."""

    quest: Quest
    entry: QuestEntry
    award_type: AwardType

    @property
    def image_url(self) -> str | None:
        if self.award_type == AwardType.TOP10:
            return self.quest.top10_award_url
        return self.quest.participation_award_url


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuestService(Service):
    """Domain service for quests, entries and votes.

    Operations that depend on the phase accept ``now`` so that callers and
    tests can pin the clock; it defaults to the current UTC time.
    """

    def __init__(
        self,
        quest_repository: QuestRepository,
        quest_entry_repository: QuestEntryRepository,
        quest_vote_repository: QuestVoteRepository,
        photo_repository: PhotoRepository,
        settings: QuestSettings,
    ) -> None:
        """Initialize quest service.

        Args:
            quest_repository: Quest repository
            quest_entry_repository: Entry repository
            quest_vote_repository: Vote repository
            photo_repository: Photo repository, for entry ownership checks
            settings: Quest rules
        """
        self.quest_repository = quest_repository
        self.quest_entry_repository = quest_entry_repository
        self.quest_vote_repository = quest_vote_repository
        self.photo_repository = photo_repository
        self.settings = settings

    async def get_quest(self, quest_id: QuestId) -> Quest:
        """Get a quest by ID.

        Raises:
            NotFoundError: If the quest does not exist
        """
        quest = await self.quest_repository.find_by_id(quest_id)
        if not quest:
            logfire.warn("Quest not found", quest_id=str(quest_id))
            raise NotFoundError("Quest", str(quest_id))
        return quest

    async def list_quests(self, now: datetime | None = None) -> QuestListing:
        """List quests as current (not yet ended) and past."""
        now = now or _utcnow()
        with logfire.span("quest_service.list_quests"):
            quests = await self.quest_repository.find_all()
            current = [q for q in quests if classify_quest(q, now) != QuestPhase.ENDED]
            past = [q for q in quests if classify_quest(q, now) == QuestPhase.ENDED]
            return QuestListing(current=current, past=past)

    def _build_quest(self, quest_id: QuestId, **fields) -> Quest:
        name = (fields.get("name") or "").strip()
        if not name or not fields.get("start_time") or not fields.get("end_time"):
            raise ValidationError("Name, start time, and end time are required.")
        if fields["end_time"] <= fields["start_time"]:
            raise ValidationError("End time must be after start time.")
        fields["name"] = name
        try:
            return Quest(id=quest_id, **fields)
        except PydanticValidationError as e:
            raise ValidationError(str(e.errors()[0]["msg"]))

    async def create_quest(
        self,
        name: str,
        start_time: datetime,
        end_time: datetime,
        description: str | None = None,
        participation_award_url: str | None = None,
        top10_award_url: str | None = None,
    ) -> Quest:
        """Create a quest.

        Raises:
            ValidationError: If a required field is missing or the window is empty
        """
        with logfire.span("quest_service.create_quest", name=name):
            quest = self._build_quest(
                QuestId(uuid4()),
                name=name,
                description=description,
                start_time=start_time,
                end_time=end_time,
                participation_award_url=participation_award_url,
                top10_award_url=top10_award_url,
            )
            saved = await self.quest_repository.save(quest)
            logfire.info("Quest created", quest_id=str(saved.id))
            return saved

    async def update_quest(
        self,
        quest_id: QuestId,
        name: str,
        start_time: datetime,
        end_time: datetime,
        description: str | None = None,
        participation_award_url: str | None = None,
        top10_award_url: str | None = None,
    ) -> Quest:
        """Replace a quest's details. Award URLs left as None are kept.

        Raises:
            NotFoundError: If the quest does not exist
            ValidationError: If a required field is missing or the window is empty
        """
        with logfire.span("quest_service.update_quest", quest_id=str(quest_id)):
            existing = await self.get_quest(quest_id)
            quest = self._build_quest(
                quest_id,
                name=name,
                description=description,
                start_time=start_time,
                end_time=end_time,
                participation_award_url=participation_award_url
                or existing.participation_award_url,
                top10_award_url=top10_award_url or existing.top10_award_url,
                winner_entry_id=existing.winner_entry_id,
                created_at=existing.created_at,
            )
            saved = await self.quest_repository.save(quest)
            logfire.info("Quest updated", quest_id=str(quest_id))
            return saved

    async def delete_quest(self, quest_id: QuestId) -> None:
        """Delete a quest with its entries and votes.

        Raises:
            NotFoundError: If the quest does not exist
        """
        with logfire.span("quest_service.delete_quest", quest_id=str(quest_id)):
            if not await self.quest_repository.delete(quest_id):
                raise NotFoundError("Quest", str(quest_id))
            logfire.info("Quest deleted", quest_id=str(quest_id))

    async def submit_entry(
        self,
        quest_id: QuestId,
        user_id: UserId,
        photo_id: PhotoId,
        now: datetime | None = None,
    ) -> QuestEntry:
        """Enter a photo into an active quest.

        Args:
            quest_id: Quest to enter
            user_id: Entrant, who must own the photo
            photo_id: Photo to submit
            now: Current time

        Returns:
            The new entry

        Raises:
            NotFoundError: If the quest or photo does not exist
            ValidationError: If the quest is not active
            NotAuthorizedError: If the user does not own the photo
            DuplicateActionError: If the user already has an entry
        """
        now = now or _utcnow()
        with logfire.span(
            "quest_service.submit_entry",
            quest_id=str(quest_id),
            user_id=str(user_id),
            photo_id=str(photo_id),
        ):
            quest = await self.get_quest(quest_id)
            if classify_quest(quest, now) != QuestPhase.ACTIVE:
                raise ValidationError("This quest is not accepting entries")

            photo = await self.photo_repository.find_by_id(photo_id)
            if not photo:
                raise NotFoundError("Photo", str(photo_id))
            if photo.owner_id != user_id:
                raise NotAuthorizedError("enter this photo", str(user_id))

            existing = await self.quest_entry_repository.find_by_quest_and_user(
                quest_id, user_id
            )
            if existing:
                logfire.warn(
                    "Duplicate quest entry", quest_id=str(quest_id), user_id=str(user_id)
                )
                raise DuplicateActionError("You have already entered this quest")

            entry = QuestEntry(
                id=QuestEntryId(uuid4()),
                quest_id=quest_id,
                user_id=user_id,
                photo_id=photo_id,
                created_at=now,
            )
            saved = await self.quest_entry_repository.save(entry)
            logfire.info("Quest entry submitted", entry_id=str(saved.id))
            return saved

    async def remove_entry(
        self, quest_id: QuestId, user_id: UserId, now: datetime | None = None
    ) -> None:
        """Withdraw the user's entry. Its votes are deleted first.

        Raises:
            NotFoundError: If the quest or the user's entry does not exist
            ValidationError: If the quest has ended
        """
        now = now or _utcnow()
        with logfire.span(
            "quest_service.remove_entry", quest_id=str(quest_id), user_id=str(user_id)
        ):
            quest = await self.get_quest(quest_id)
            entry = await self.quest_entry_repository.find_by_quest_and_user(
                quest_id, user_id
            )
            if not entry:
                raise NotFoundError("QuestEntry", f"{quest_id}/{user_id}")
            if classify_quest(quest, now) == QuestPhase.ENDED:
                raise ValidationError("Entries cannot be removed after the quest has ended")

            removed_votes = await self.quest_vote_repository.delete_by_entry(entry.id)
            await self.quest_entry_repository.delete(entry.id)
            logfire.info(
                "Quest entry removed", entry_id=str(entry.id), removed_votes=removed_votes
            )

    async def cast_vote(
        self,
        quest_id: QuestId,
        voter_id: UserId,
        entry_id: QuestEntryId,
        now: datetime | None = None,
    ) -> QuestVote:
        """Vote for an entry, replacing the voter's previous vote in the quest.

        Casting the same vote twice leaves the tally unchanged.

        Raises:
            NotFoundError: If the quest or entry does not exist
            ValidationError: If voting is not open or self-votes are disallowed
        """
        now = now or _utcnow()
        with logfire.span(
            "quest_service.cast_vote",
            quest_id=str(quest_id),
            voter_id=str(voter_id),
            entry_id=str(entry_id),
        ):
            quest = await self.get_quest(quest_id)
            phase = classify_quest(quest, now)
            if phase == QuestPhase.ENDED:
                raise ValidationError("Voting has closed for this quest")
            if phase == QuestPhase.UPCOMING:
                raise ValidationError("Voting has not opened for this quest")

            entry = await self.quest_entry_repository.find_by_id(entry_id)
            if not entry or entry.quest_id != quest_id:
                raise NotFoundError("QuestEntry", str(entry_id))
            if entry.user_id == voter_id and not self.settings.allow_self_votes:
                raise ValidationError("You cannot vote for your own entry")

            vote = await self.quest_vote_repository.upsert(
                QuestVote(voter_id=voter_id, quest_id=quest_id, entry_id=entry_id, created_at=now)
            )
            logfire.info("Vote cast", quest_id=str(quest_id), entry_id=str(entry_id))
            return vote

    async def get_entries(self, quest_id: QuestId) -> list[QuestEntry]:
        """List the entries submitted to a quest.

        Args:
            quest_id: Quest to list entries for

        Returns:
            Entries of the quest, empty if there are none
        """
        return await self.quest_entry_repository.find_by_quest(quest_id)

    async def get_user_entry(self, quest_id: QuestId, user_id: UserId) -> Optional[QuestEntry]:
        """Get a user's entry in a quest.

        Args:
            quest_id: Quest to look in
            user_id: Entrant

        Returns:
            The entry, or None if the user has not entered
        """
        return await self.quest_entry_repository.find_by_quest_and_user(quest_id, user_id)

    async def get_user_vote(self, quest_id: QuestId, voter_id: UserId) -> Optional[QuestVote]:
        """Get a voter's current vote in a quest.

        Args:
            quest_id: Quest to look in
            voter_id: Voter

        Returns:
            The vote, or None if the user has not voted
        """
        return await self.quest_vote_repository.find_by_voter_and_quest(voter_id, quest_id)

    async def get_vote_counts(self, quest_id: QuestId) -> dict[QuestEntryId, int]:
        """Vote count per entry of a quest, 0 for entries without votes."""
        entries = await self.quest_entry_repository.find_by_quest(quest_id)
        tally = tally_votes(await self.quest_vote_repository.find_by_quest(quest_id))
        return {entry.id: tally.get(entry.id, 0) for entry in entries}

    async def set_winner(
        self,
        quest_id: QuestId,
        entry_id: QuestEntryId | None,
        now: datetime | None = None,
    ) -> Quest:
        """Record the winning entry of an ended quest, or clear it with None.

        Raises:
            NotFoundError: If the quest or entry does not exist
            ValidationError: If the quest has not ended
        """
        now = now or _utcnow()
        with logfire.span(
            "quest_service.set_winner",
            quest_id=str(quest_id),
            entry_id=str(entry_id) if entry_id else None,
        ):
            quest = await self.get_quest(quest_id)
            if classify_quest(quest, now) != QuestPhase.ENDED:
                raise ValidationError("A winner can only be chosen after the quest has ended")
            if entry_id is not None:
                entry = await self.quest_entry_repository.find_by_id(entry_id)
                if not entry or entry.quest_id != quest_id:
                    raise NotFoundError("QuestEntry", str(entry_id))

            saved = await self.quest_repository.save(
                quest.model_copy(update={"winner_entry_id": entry_id})
            )
            logfire.info("Quest winner set", quest_id=str(quest_id))
            return saved

    async def get_awards(self, user_id: UserId, now: datetime | None = None) -> list[QuestAward]:
        """Awards the user earned from ended quests, most recent first."""
        now = now or _utcnow()
        with logfire.span("quest_service.get_awards", user_id=str(user_id)):
            awards = []
            for entry in await self.quest_entry_repository.find_by_user(user_id):
                quest = await self.quest_repository.find_by_id(entry.quest_id)
                if not quest or classify_quest(quest, now) != QuestPhase.ENDED:
                    continue
                award_type = (
                    AwardType.TOP10
                    if quest.winner_entry_id == entry.id
                    else AwardType.PARTICIPATION
                )
                awards.append(QuestAward(quest=quest, entry=entry, award_type=award_type))
            awards.sort(key=lambda a: a.quest.end_time, reverse=True)
            return awards
