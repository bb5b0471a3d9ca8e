"""Domain value objects for BirdDex.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from birddex.domain.value.common import RootValueObject, ValueObject


class PhotoPrivacy(str, Enum):
    """Who may see a photo."""

    PUBLIC = "public"
    FRIENDS = "friends"
    PRIVATE = "private"


class FriendshipStatus(str, Enum):
    """Status of a friendship record."""

    PENDING = "pending"
    ACCEPTED = "accepted"


class QuestPhase(str, Enum):
    """Lifecycle phase of a quest, derived from its time window."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    ENDED = "ended"


class AwardType(str, Enum):
    """Award earned by entering an ended quest."""

    TOP10 = "top10"
    PARTICIPATION = "participation"


class SpeciesCode(RootValueObject[str]):
    """Species code a photo is tagged with (e.g. 'amerob', 'robin').

    Lowercase letters, digits, hyphens and underscores, 1-64 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_species_code(cls, v: str) -> str:
        """Validate species code format."""
        if not re.match(r"^[a-z0-9_-]{1,64}$", v):
            raise ValueError(
                "Species code must be 1-64 characters, lowercase alphanumeric, "
                "hyphens or underscores"
            )
        return v


class DisplayName(RootValueObject[str]):
    """Public display name of a user, used for friend lookup."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Trim and validate length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Display name must be 1-64 characters")
        return v


class GeoPoint(ValueObject):
    """Latitude/longitude pair attached to a photo."""

    lat: float
    lng: float

    @field_validator("lat")
    @classmethod
    def validate_lat(cls, v: float) -> float:
        if not -90 <= v <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        return v

    @field_validator("lng")
    @classmethod
    def validate_lng(cls, v: float) -> float:
        if not -180 <= v <= 180:
            raise ValueError("Longitude must be between -180 and 180")
        return v


class AuthUser(ValueObject):
    """Account as reported by the hosted auth service."""

    id: str
    email: str | None = None


class AuthSession(ValueObject):
    """Session returned by a successful sign-in."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    user: AuthUser


class SignUpResult(ValueObject):
    """Outcome of a sign-up.

    ``is_existing_user`` is set when the hosted service re-sent a
    confirmation to an address that already has an account.
    """

    user_id: str | None = None
    needs_confirmation: bool = False
    is_existing_user: bool = False
