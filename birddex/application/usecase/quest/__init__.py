"""Quest use cases."""

from .admin import (
    AwardImage,
    DeleteQuestRequest,
    DeleteQuestResponse,
    DeleteQuestUseCase,
    SaveQuestRequest,
    SaveQuestUseCase,
    SetWinnerRequest,
    SetWinnerUseCase,
)
from .get_awards import AwardItem, GetAwardsRequest, GetAwardsResponse, GetAwardsUseCase
from .get_quest import GetQuestRequest, GetQuestResponse, GetQuestUseCase, QuestEntryItem
from .list_quests import ListQuestsRequest, ListQuestsResponse, ListQuestsUseCase
from .participate import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    RemoveEntryRequest,
    RemoveEntryResponse,
    RemoveEntryUseCase,
    SubmitEntryRequest,
    SubmitEntryResponse,
    SubmitEntryUseCase,
)
from .view import QuestView

__all__ = [
    "AwardImage",
    "AwardItem",
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "DeleteQuestRequest",
    "DeleteQuestResponse",
    "DeleteQuestUseCase",
    "GetAwardsRequest",
    "GetAwardsResponse",
    "GetAwardsUseCase",
    "GetQuestRequest",
    "GetQuestResponse",
    "GetQuestUseCase",
    "ListQuestsRequest",
    "ListQuestsResponse",
    "ListQuestsUseCase",
    "QuestEntryItem",
    "QuestView",
    "RemoveEntryRequest",
    "RemoveEntryResponse",
    "RemoveEntryUseCase",
    "SaveQuestRequest",
    "SaveQuestUseCase",
    "SetWinnerRequest",
    "SetWinnerUseCase",
    "SubmitEntryRequest",
    "SubmitEntryResponse",
    "SubmitEntryUseCase",
]
