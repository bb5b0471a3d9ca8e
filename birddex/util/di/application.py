"""Application layer DI providers."""

from dishka import Scope, provide, provide_all

from birddex.application.usecase.auth import (
    GetCurrentUserUseCase,
    SignInUseCase,
    SignOutUseCase,
    SignUpUseCase,
)
from birddex.application.usecase.collection import (
    GetDexUseCase,
    GetSpeciesPhotosUseCase,
    HidePhotoUseCase,
    SetTopPhotoUseCase,
    ShowPhotoUseCase,
)
from birddex.application.usecase.comment import AddCommentUseCase, GetCommentsUseCase
from birddex.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    ListFriendsUseCase,
    RemoveFriendUseCase,
    SendFriendRequestUseCase,
)
from birddex.application.usecase.leaderboard import GetLeaderboardUseCase
from birddex.application.usecase.photo import (
    DeletePhotoUseCase,
    GetFeedUseCase,
    GetPhotoUseCase,
    ListMyPhotosUseCase,
    UpdatePhotoUseCase,
    UploadPhotoUseCase,
)
from birddex.application.usecase.profile import (
    FindProfileUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from birddex.application.usecase.quest import (
    CastVoteUseCase,
    DeleteQuestUseCase,
    GetAwardsUseCase,
    GetQuestUseCase,
    ListQuestsUseCase,
    RemoveEntryUseCase,
    SaveQuestUseCase,
    SetWinnerUseCase,
    SubmitEntryUseCase,
)
from birddex.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use case provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped like the services they orchestrate; their
    constructor arguments are resolved from the container by type.
    """

    scope = Scope.REQUEST

    auth_use_cases = provide_all(
        SignInUseCase,
        SignUpUseCase,
        SignOutUseCase,
        GetCurrentUserUseCase,
    )

    profile_use_cases = provide_all(
        GetProfileUseCase,
        FindProfileUseCase,
        UpdateProfileUseCase,
    )

    photo_use_cases = provide_all(
        UploadPhotoUseCase,
        GetPhotoUseCase,
        UpdatePhotoUseCase,
        DeletePhotoUseCase,
        ListMyPhotosUseCase,
        GetFeedUseCase,
    )

    collection_use_cases = provide_all(
        GetDexUseCase,
        GetSpeciesPhotosUseCase,
        SetTopPhotoUseCase,
        HidePhotoUseCase,
        ShowPhotoUseCase,
    )

    comment_use_cases = provide_all(AddCommentUseCase, GetCommentsUseCase)

    friend_use_cases = provide_all(
        SendFriendRequestUseCase,
        AcceptFriendRequestUseCase,
        RemoveFriendUseCase,
        ListFriendsUseCase,
    )

    quest_use_cases = provide_all(
        ListQuestsUseCase,
        GetQuestUseCase,
        SubmitEntryUseCase,
        RemoveEntryUseCase,
        CastVoteUseCase,
        SaveQuestUseCase,
        DeleteQuestUseCase,
        SetWinnerUseCase,
        GetAwardsUseCase,
    )

    leaderboard_use_case = provide(GetLeaderboardUseCase)
