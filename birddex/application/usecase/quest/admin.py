"""Quest administration use cases.

Every operation here requires the acting user to be an administrator.
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import QuestService, StorageService, UserProfileService
from birddex.domain.value import QuestEntryId, QuestId, UserId

from ..base import parse_id
from .view import QuestView


class AwardImage(BaseModel):
    """An uploaded award image."""

    filename: str
    content: bytes
    content_type: str


class SaveQuestRequest(BaseModel):
    """Create or update quest request.

    ``quest_id`` is None for a new quest.
    """

    user_id: str
    quest_id: str | None = None
    name: str
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    participation_award: AwardImage | None = None
    top10_award: AwardImage | None = None


class SaveQuestUseCase:
    """Use case for creating and editing quests."""

    def __init__(
        self,
        quest_service: QuestService,
        storage_service: StorageService,
        user_profile_service: UserProfileService,
    ) -> None:
        """Initialize save quest use case.

        Args:
            quest_service: Quest domain service
            storage_service: Uploads award images
            user_profile_service: Admin check
        """
        self.quest_service = quest_service
        self.storage_service = storage_service
        self.user_profile_service = user_profile_service

    async def _upload(self, name: str, kind: str, image: AwardImage | None) -> str | None:
        if image is None:
            return None
        return await self.storage_service.upload_award_image(
            name.strip(), kind, image.filename, image.content, image.content_type
        )

    async def execute(self, request: SaveQuestRequest) -> QuestView:
        """Create or update the quest.

        Award images are uploaded before the quest is saved. On update, an
        award without a new image keeps its current URL.

        Raises:
            NotAuthorizedError: If the user is not an administrator
            ValidationError: If name or times are missing or the window is empty
            NotFoundError: If the quest to update does not exist
        """
        user_id = UserId(UUID(request.user_id))
        await self.user_profile_service.require_admin(user_id, "manage quests")

        participation_url = await self._upload(
            request.name, "participation", request.participation_award
        )
        top10_url = await self._upload(request.name, "top10", request.top10_award)

        fields = dict(
            name=request.name,
            start_time=request.start_time,
            end_time=request.end_time,
            description=(request.description or "").strip() or None,
            participation_award_url=participation_url,
            top10_award_url=top10_url,
        )
        if request.quest_id:
            quest = await self.quest_service.update_quest(
                parse_id(request.quest_id, "Quest", QuestId), **fields
            )
        else:
            quest = await self.quest_service.create_quest(**fields)
        return QuestView.from_quest(quest, datetime.now(timezone.utc))


class DeleteQuestRequest(BaseModel):
    user_id: str
    quest_id: str


class DeleteQuestResponse(BaseModel):
    success: bool


class DeleteQuestUseCase:
    """Use case for deleting a quest with its entries and votes."""

    def __init__(
        self, quest_service: QuestService, user_profile_service: UserProfileService
    ) -> None:
        self.quest_service = quest_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: DeleteQuestRequest) -> DeleteQuestResponse:
        await self.user_profile_service.require_admin(
            UserId(UUID(request.user_id)), "delete quests"
        )
        await self.quest_service.delete_quest(parse_id(request.quest_id, "Quest", QuestId))
        return DeleteQuestResponse(success=True)


class SetWinnerRequest(BaseModel):
    """Designate the winner of an ended quest. None clears it."""

    user_id: str
    quest_id: str
    entry_id: str | None
    now: datetime | None = None


class SetWinnerUseCase:
    """Use case for recording the externally chosen winner."""

    def __init__(
        self, quest_service: QuestService, user_profile_service: UserProfileService
    ) -> None:
        self.quest_service = quest_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: SetWinnerRequest) -> QuestView:
        await self.user_profile_service.require_admin(
            UserId(UUID(request.user_id)), "choose quest winners"
        )
        entry_id = (
            parse_id(request.entry_id, "QuestEntry", QuestEntryId)
            if request.entry_id
            else None
        )
        quest = await self.quest_service.set_winner(
            parse_id(request.quest_id, "Quest", QuestId), entry_id, now=request.now
        )
        return QuestView.from_quest(quest, request.now or datetime.now(timezone.utc))
