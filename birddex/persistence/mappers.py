"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from birddex.domain.model import (
    Comment,
    Friendship,
    Photo,
    Quest,
    QuestEntry,
    QuestVote,
    TopSpeciesEntry,
    UserProfile,
)
from birddex.domain.value import (
    CommentId,
    FriendshipId,
    FriendshipStatus,
    GeoPoint,
    PhotoId,
    PhotoPrivacy,
    QuestEntryId,
    QuestId,
    SpeciesCode,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile domain model."""
    return UserProfile(
        user_id=UserId(_uuid(row["user_id"])),
        display_name=row.get("display_name"),
        is_admin=row.get("is_admin", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_profile_to_dict(profile: UserProfile) -> Dict[str, Any]:
    return profile.model_dump()


def row_to_photo(row: Dict[str, Any]) -> Photo:
    """Convert database row to Photo domain model.

    Coordinates are only mapped when both are present.
    """
    lat, lng = row.get("lat"), row.get("lng")
    return Photo(
        id=PhotoId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["user_id"])),
        species_id=SpeciesCode(row["species_id"]),
        url=row["url"],
        thumbnail_url=row.get("thumbnail_url"),
        privacy=PhotoPrivacy(row["privacy"]),
        hidden_from_feed=row["hidden_from_feed"],
        hidden_from_species_view=row["hidden_from_species_view"],
        location=GeoPoint(lat=lat, lng=lng) if lat is not None and lng is not None else None,
        description=row.get("description"),
        created_at=row["created_at"],
    )


def photo_to_dict(photo: Photo) -> Dict[str, Any]:
    """Convert Photo domain model to database dict.

    Args:
        photo: Photo domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": photo.id,
        "user_id": photo.owner_id,
        "species_id": photo.species_id.root,
        "url": photo.url,
        "thumbnail_url": photo.thumbnail_url,
        "privacy": photo.privacy.value,
        "hidden_from_feed": photo.hidden_from_feed,
        "hidden_from_species_view": photo.hidden_from_species_view,
        "lat": photo.location.lat if photo.location else None,
        "lng": photo.location.lng if photo.location else None,
        "description": photo.description,
        "created_at": photo.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    return Comment(
        id=CommentId(_uuid(row["id"])),
        photo_id=PhotoId(_uuid(row["photo_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump()


def row_to_friendship(row: Dict[str, Any]) -> Friendship:
    return Friendship(
        id=FriendshipId(_uuid(row["id"])),
        requester_id=UserId(_uuid(row["requester_id"])),
        addressee_id=UserId(_uuid(row["addressee_id"])),
        status=FriendshipStatus(row["status"]),
        created_at=row["created_at"],
    )


def friendship_to_dict(friendship: Friendship) -> Dict[str, Any]:
    data = friendship.model_dump()
    data["status"] = friendship.status.value
    return data


def row_to_quest(row: Dict[str, Any]) -> Quest:
    """Convert database row to Quest domain model."""
    winner = row.get("winner_entry_id")
    return Quest(
        id=QuestId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        start_time=row["start_time"],
        end_time=row["end_time"],
        participation_award_url=row.get("participation_award_url"),
        top10_award_url=row.get("top10_award_url"),
        winner_entry_id=QuestEntryId(_uuid(winner)) if winner else None,
        created_at=row["created_at"],
    )


def quest_to_dict(quest: Quest) -> Dict[str, Any]:
    return quest.model_dump()


def row_to_quest_entry(row: Dict[str, Any]) -> QuestEntry:
    return QuestEntry(
        id=QuestEntryId(_uuid(row["id"])),
        quest_id=QuestId(_uuid(row["quest_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        photo_id=PhotoId(_uuid(row["photo_id"])),
        created_at=row["created_at"],
    )


def quest_entry_to_dict(entry: QuestEntry) -> Dict[str, Any]:
    return entry.model_dump()


def row_to_quest_vote(row: Dict[str, Any]) -> QuestVote:
    return QuestVote(
        voter_id=UserId(_uuid(row["voter_id"])),
        quest_id=QuestId(_uuid(row["quest_id"])),
        entry_id=QuestEntryId(_uuid(row["entry_id"])),
        created_at=row["created_at"],
    )


def quest_vote_to_dict(vote: QuestVote) -> Dict[str, Any]:
    return vote.model_dump()


def row_to_top_species(row: Dict[str, Any]) -> TopSpeciesEntry:
    return TopSpeciesEntry(
        user_id=UserId(_uuid(row["user_id"])),
        species_id=SpeciesCode(row["species_id"]),
        photo_id=PhotoId(_uuid(row["photo_id"])),
    )


def top_species_to_dict(entry: TopSpeciesEntry) -> Dict[str, Any]:
    return {
        "user_id": entry.user_id,
        "species_id": entry.species_id.root,
        "photo_id": entry.photo_id,
    }
