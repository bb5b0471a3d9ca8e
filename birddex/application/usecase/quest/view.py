"""Quest representation shared by the quest use cases."""

from datetime import datetime

from pydantic import BaseModel

from birddex.domain.model import Quest
from birddex.domain.service import classify_quest
from birddex.domain.value import QuestPhase


class QuestView(BaseModel):
    """A quest with its phase at the time of the request."""

    quest_id: str
    name: str
    description: str | None
    start_time: datetime
    end_time: datetime
    phase: QuestPhase
    participation_award_url: str | None
    top10_award_url: str | None
    winner_entry_id: str | None

    @classmethod
    def from_quest(cls, quest: Quest, now: datetime) -> "QuestView":
        return cls(
            quest_id=str(quest.id),
            name=quest.name,
            description=quest.description,
            start_time=quest.start_time,
            end_time=quest.end_time,
            phase=classify_quest(quest, now),
            participation_award_url=quest.participation_award_url,
            top10_award_url=quest.top10_award_url,
            winner_entry_id=str(quest.winner_entry_id) if quest.winner_entry_id else None,
        )
