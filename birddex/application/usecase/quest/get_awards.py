"""Get awards use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import QuestService
from birddex.domain.value import AwardType, UserId


class AwardItem(BaseModel):
    quest_id: str
    quest_name: str
    entry_id: str
    award_type: AwardType
    image_url: str | None
    end_time: datetime


class GetAwardsRequest(BaseModel):
    user_id: str
    now: datetime | None = None


class GetAwardsResponse(BaseModel):
    """Awards from ended quests, most recent first."""

    awards: list[AwardItem]


class GetAwardsUseCase:
    """Use case for the user's quest awards."""

    def __init__(self, quest_service: QuestService) -> None:
        self.quest_service = quest_service

    async def execute(self, request: GetAwardsRequest) -> GetAwardsResponse:
        awards = await self.quest_service.get_awards(
            UserId(UUID(request.user_id)), now=request.now
        )
        return GetAwardsResponse(
            awards=[
                AwardItem(
                    quest_id=str(a.quest.id),
                    quest_name=a.quest.name,
                    entry_id=str(a.entry.id),
                    award_type=a.award_type,
                    image_url=a.image_url,
                    end_time=a.quest.end_time,
                )
                for a in awards
            ]
        )
