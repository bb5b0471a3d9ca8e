"""Entry and vote use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import QuestService
from birddex.domain.value import PhotoId, QuestEntryId, QuestId, UserId

from ..base import parse_id


class SubmitEntryRequest(BaseModel):
    """Submit entry request."""

    user_id: str
    quest_id: str
    photo_id: str
    now: datetime | None = None


class SubmitEntryResponse(BaseModel):
    entry_id: str
    quest_id: str
    photo_id: str
    created_at: datetime


class SubmitEntryUseCase:
    """Use case for entering one of the user's photos into an active quest."""

    def __init__(self, quest_service: QuestService) -> None:
        self.quest_service = quest_service

    async def execute(self, request: SubmitEntryRequest) -> SubmitEntryResponse:
        """Submit the entry.

        Raises:
            ValidationError: If the quest is not active
            DuplicateActionError: If the user has already entered
            NotAuthorizedError: If the photo belongs to someone else
        """
        entry = await self.quest_service.submit_entry(
            parse_id(request.quest_id, "Quest", QuestId),
            UserId(UUID(request.user_id)),
            parse_id(request.photo_id, "Photo", PhotoId),
            now=request.now,
        )
        return SubmitEntryResponse(
            entry_id=str(entry.id),
            quest_id=str(entry.quest_id),
            photo_id=str(entry.photo_id),
            created_at=entry.created_at,
        )


class RemoveEntryRequest(BaseModel):
    user_id: str
    quest_id: str
    now: datetime | None = None


class RemoveEntryResponse(BaseModel):
    success: bool


class RemoveEntryUseCase:
    """Use case for withdrawing the user's entry before the quest ends."""

    def __init__(self, quest_service: QuestService) -> None:
        self.quest_service = quest_service

    async def execute(self, request: RemoveEntryRequest) -> RemoveEntryResponse:
        await self.quest_service.remove_entry(
            parse_id(request.quest_id, "Quest", QuestId),
            UserId(UUID(request.user_id)),
            now=request.now,
        )
        return RemoveEntryResponse(success=True)


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: str
    quest_id: str
    entry_id: str
    now: datetime | None = None


class CastVoteResponse(BaseModel):
    """The voter's vote and the quest's counts after casting it."""

    quest_id: str
    entry_id: str
    vote_counts: dict[str, int]


class CastVoteUseCase:
    """Use case for voting in an active quest.

    A second vote in the same quest replaces the first.
    """

    def __init__(self, quest_service: QuestService) -> None:
        self.quest_service = quest_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        quest_id = parse_id(request.quest_id, "Quest", QuestId)
        vote = await self.quest_service.cast_vote(
            quest_id,
            UserId(UUID(request.user_id)),
            parse_id(request.entry_id, "QuestEntry", QuestEntryId),
            now=request.now,
        )
        counts = await self.quest_service.get_vote_counts(quest_id)
        return CastVoteResponse(
            quest_id=str(vote.quest_id),
            entry_id=str(vote.entry_id),
            vote_counts={str(k): v for k, v in counts.items()},
        )
