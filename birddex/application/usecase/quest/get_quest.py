"""Quest detail use case."""

from datetime import datetime, timezone

from pydantic import BaseModel

from birddex.domain.service import (
    PhotoService,
    QuestService,
    StorageService,
    UserProfileService,
)
from birddex.domain.value import QuestId, UserId

from ..base import parse_id
from .view import QuestView


class QuestEntryItem(BaseModel):
    """An entry with its photo and current vote count."""

    entry_id: str
    user_id: str
    display_name: str
    photo_id: str
    image_url: str | None
    thumbnail_url: str | None
    species_id: str | None
    vote_count: int
    is_winner: bool
    created_at: datetime


class GetQuestRequest(BaseModel):
    """Get quest request."""

    quest_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)
    now: datetime | None = None


class GetQuestResponse(BaseModel):
    """Quest detail.

    ``viewer_entry_id`` and ``viewer_vote_entry_id`` are set only for a
    signed-in viewer who has entered or voted.
    """

    quest: QuestView
    entries: list[QuestEntryItem]
    viewer_entry_id: str | None
    viewer_vote_entry_id: str | None


class GetQuestUseCase:
    """Use case for the quest detail page."""

    def __init__(
        self,
        quest_service: QuestService,
        photo_service: PhotoService,
        storage_service: StorageService,
        user_profile_service: UserProfileService,
    ) -> None:
        """Initialize get quest use case.

        Args:
            quest_service: Quest domain service
            photo_service: Loads the entered photos
            storage_service: Signs the photo URLs
            user_profile_service: Resolves entrant display names
        """
        self.quest_service = quest_service
        self.photo_service = photo_service
        self.storage_service = storage_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: GetQuestRequest) -> GetQuestResponse:
        """Execute get quest flow.

        Raises:
            NotFoundError: If the quest does not exist
        """
        now = request.now or datetime.now(timezone.utc)
        quest_id = parse_id(request.quest_id, "Quest", QuestId)
        viewer_id = parse_id(request.viewer_id, "User", UserId) if request.viewer_id else None

        quest = await self.quest_service.get_quest(quest_id)
        entries = await self.quest_service.get_entries(quest_id)
        counts = await self.quest_service.get_vote_counts(quest_id)
        names = await self.user_profile_service.get_display_names([e.user_id for e in entries])
        photos = await self.photo_service.get_photos([e.photo_id for e in entries])

        items = []
        for entry in entries:
            photo = photos.get(entry.photo_id)
            items.append(
                QuestEntryItem(
                    entry_id=str(entry.id),
                    user_id=str(entry.user_id),
                    display_name=names[entry.user_id],
                    photo_id=str(entry.photo_id),
                    image_url=await self.storage_service.signed_url(photo.url) if photo else None,
                    thumbnail_url=(
                        await self.storage_service.signed_url(photo.thumbnail_url)
                        if photo
                        else None
                    ),
                    species_id=photo.species_id.root if photo else None,
                    vote_count=counts.get(entry.id, 0),
                    is_winner=quest.winner_entry_id == entry.id,
                    created_at=entry.created_at,
                )
            )

        viewer_entry = viewer_vote = None
        if viewer_id:
            viewer_entry = await self.quest_service.get_user_entry(quest_id, viewer_id)
            viewer_vote = await self.quest_service.get_user_vote(quest_id, viewer_id)

        return GetQuestResponse(
            quest=QuestView.from_quest(quest, now),
            entries=items,
            viewer_entry_id=str(viewer_entry.id) if viewer_entry else None,
            viewer_vote_entry_id=str(viewer_vote.entry_id) if viewer_vote else None,
        )
