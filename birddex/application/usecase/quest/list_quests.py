"""List quests use case."""

from datetime import datetime, timezone

from pydantic import BaseModel

from birddex.domain.service import QuestService

from .view import QuestView


class ListQuestsRequest(BaseModel):
    now: datetime | None = None


class ListQuestsResponse(BaseModel):
    """Quests not yet ended and ended quests, each by start time."""

    current: list[QuestView]
    past: list[QuestView]


class ListQuestsUseCase:
    """Use case for the quests page."""

    def __init__(self, quest_service: QuestService) -> None:
        self.quest_service = quest_service

    async def execute(self, request: ListQuestsRequest) -> ListQuestsResponse:
        now = request.now or datetime.now(timezone.utc)
        listing = await self.quest_service.list_quests(now)
        return ListQuestsResponse(
            current=[QuestView.from_quest(q, now) for q in listing.current],
            past=[QuestView.from_quest(q, now) for q in listing.past],
        )
