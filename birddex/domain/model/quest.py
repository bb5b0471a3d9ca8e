"""Quest aggregate and its entries and votes.

A quest is a time-boxed photo contest. Its phase is never stored: it is
derived from ``start_time``/``end_time`` whenever it is needed. The winner
is designated by an administrator, never inferred from the vote counts.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from birddex.domain.model.common import DomainModel
from birddex.domain.value import PhotoId, QuestEntryId, QuestId, UserId


class Quest(DomainModel):
    """Quest aggregate root."""

    id: QuestId
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    start_time: datetime
    end_time: datetime
    participation_award_url: Optional[str] = None
    top10_award_url: Optional[str] = None
    winner_entry_id: Optional[QuestEntryId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_time_window(self) -> "Quest":
        """End time must come strictly after start time."""
        if self.end_time <= self.start_time:
            raise ValueError("End time must be after start time.")
        return self


class QuestEntry(DomainModel):
    """A user's single submitted photo for a quest."""

    id: QuestEntryId
    quest_id: QuestId
    user_id: UserId
    photo_id: PhotoId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class QuestVote(DomainModel):
    """A voter's choice in a quest, keyed by (voter_id, quest_id)."""

    voter_id: UserId
    quest_id: QuestId
    entry_id: QuestEntryId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
