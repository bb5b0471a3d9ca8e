"""Quest routes."""

from datetime import datetime
from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, UploadFile, status
from pydantic import BaseModel

from birddex.application.usecase.quest import (
    AwardImage,
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    DeleteQuestRequest,
    DeleteQuestResponse,
    DeleteQuestUseCase,
    GetQuestRequest,
    GetQuestResponse,
    GetQuestUseCase,
    ListQuestsRequest,
    ListQuestsResponse,
    ListQuestsUseCase,
    QuestView,
    RemoveEntryRequest,
    RemoveEntryResponse,
    RemoveEntryUseCase,
    SaveQuestRequest,
    SaveQuestUseCase,
    SetWinnerRequest,
    SetWinnerUseCase,
    SubmitEntryRequest,
    SubmitEntryResponse,
    SubmitEntryUseCase,
)
from birddex.domain.service import JWTService
from birddex.interface.api.session import SessionToken, require_user

router = APIRouter(prefix="/quests", tags=["quests"], route_class=DishkaRoute)


async def _award_image(upload: UploadFile | None) -> AwardImage | None:
    if upload is None or not upload.filename:
        return None
    return AwardImage(
        filename=upload.filename,
        content=await upload.read(),
        content_type=upload.content_type or "image/png",
    )


@router.get("", response_model=ListQuestsResponse)
async def list_quests(
    list_quests_use_case: FromDishka[ListQuestsUseCase],
) -> ListQuestsResponse:
    """Current and past quests, each ordered by start time."""
    return await list_quests_use_case.execute(ListQuestsRequest())


@router.get("/{quest_id}", response_model=GetQuestResponse)
async def get_quest(
    quest_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_quest_use_case: FromDishka[GetQuestUseCase],
) -> GetQuestResponse:
    """Quest detail with entries and vote counts."""
    viewer_id = jwt_service.get_user_id_from_token(token)
    return await get_quest_use_case.execute(
        GetQuestRequest(quest_id=quest_id, viewer_id=viewer_id)
    )


class SubmitEntryAPIRequest(BaseModel):
    photo_id: str


@router.post(
    "/{quest_id}/entries",
    response_model=SubmitEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_entry(
    quest_id: str,
    request: SubmitEntryAPIRequest,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    submit_entry_use_case: FromDishka[SubmitEntryUseCase],
) -> SubmitEntryResponse:
    """Enter one of the user's photos into an active quest."""
    user_id = require_user(jwt_service, token, "enter quests")
    return await submit_entry_use_case.execute(
        SubmitEntryRequest(user_id=user_id, quest_id=quest_id, photo_id=request.photo_id)
    )


@router.delete("/{quest_id}/entries/mine", response_model=RemoveEntryResponse)
async def remove_entry(
    quest_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    remove_entry_use_case: FromDishka[RemoveEntryUseCase],
) -> RemoveEntryResponse:
    """Withdraw the user's entry and its votes."""
    user_id = require_user(jwt_service, token, "withdraw quest entries")
    return await remove_entry_use_case.execute(
        RemoveEntryRequest(user_id=user_id, quest_id=quest_id)
    )


class CastVoteAPIRequest(BaseModel):
    entry_id: str


@router.put("/{quest_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    quest_id: str,
    request: CastVoteAPIRequest,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote for an entry. Voting again in the same quest moves the vote."""
    user_id = require_user(jwt_service, token, "vote in quests")
    return await cast_vote_use_case.execute(
        CastVoteRequest(user_id=user_id, quest_id=quest_id, entry_id=request.entry_id)
    )


@router.post("", response_model=QuestView, status_code=status.HTTP_201_CREATED)
async def create_quest(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    save_quest_use_case: FromDishka[SaveQuestUseCase],
    name: Annotated[str, Form()],
    start_time: Annotated[datetime | None, Form()] = None,
    end_time: Annotated[datetime | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    participation_award: Annotated[UploadFile | None, File()] = None,
    top10_award: Annotated[UploadFile | None, File()] = None,
) -> QuestView:
    """Create a quest (administrators only, multipart form)."""
    user_id = require_user(jwt_service, token, "manage quests")
    return await save_quest_use_case.execute(
        SaveQuestRequest(
            user_id=user_id,
            name=name,
            description=description,
            start_time=start_time,
            end_time=end_time,
            participation_award=await _award_image(participation_award),
            top10_award=await _award_image(top10_award),
        )
    )


@router.put("/{quest_id}", response_model=QuestView)
async def update_quest(
    quest_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    save_quest_use_case: FromDishka[SaveQuestUseCase],
    name: Annotated[str, Form()],
    start_time: Annotated[datetime | None, Form()] = None,
    end_time: Annotated[datetime | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    participation_award: Annotated[UploadFile | None, File()] = None,
    top10_award: Annotated[UploadFile | None, File()] = None,
) -> QuestView:
    """Edit a quest (administrators only). Omitted award images are kept."""
    user_id = require_user(jwt_service, token, "manage quests")
    return await save_quest_use_case.execute(
        SaveQuestRequest(
            user_id=user_id,
            quest_id=quest_id,
            name=name,
            description=description,
            start_time=start_time,
            end_time=end_time,
            participation_award=await _award_image(participation_award),
            top10_award=await _award_image(top10_award),
        )
    )


@router.delete("/{quest_id}", response_model=DeleteQuestResponse)
async def delete_quest(
    quest_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    delete_quest_use_case: FromDishka[DeleteQuestUseCase],
) -> DeleteQuestResponse:
    user_id = require_user(jwt_service, token, "delete quests")
    return await delete_quest_use_case.execute(
        DeleteQuestRequest(user_id=user_id, quest_id=quest_id)
    )


class SetWinnerAPIRequest(BaseModel):
    entry_id: str | None


@router.put("/{quest_id}/winner", response_model=QuestView)
async def set_winner(
    quest_id: str,
    request: SetWinnerAPIRequest,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    set_winner_use_case: FromDishka[SetWinnerUseCase],
) -> QuestView:
    """Record the winner of an ended quest (administrators only)."""
    user_id = require_user(jwt_service, token, "choose quest winners")
    return await set_winner_use_case.execute(
        SetWinnerRequest(user_id=user_id, quest_id=quest_id, entry_id=request.entry_id)
    )
