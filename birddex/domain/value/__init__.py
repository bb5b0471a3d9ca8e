"""Domain value objects for BirdDex."""

from birddex.domain.value.identifiers import (
    CommentId,
    FriendshipId,
    PhotoId,
    QuestEntryId,
    QuestId,
    UserId,
)
from birddex.domain.value.types import (
    AuthSession,
    AuthUser,
    AwardType,
    DisplayName,
    FriendshipStatus,
    GeoPoint,
    PhotoPrivacy,
    QuestPhase,
    SignUpResult,
    SpeciesCode,
)

__all__ = [
    # Identifiers
    "UserId",
    "PhotoId",
    "CommentId",
    "FriendshipId",
    "QuestId",
    "QuestEntryId",
    # Types
    "AuthSession",
    "AuthUser",
    "AwardType",
    "DisplayName",
    "FriendshipStatus",
    "GeoPoint",
    "PhotoPrivacy",
    "QuestPhase",
    "SignUpResult",
    "SpeciesCode",
]
