"""User profile entity.

Profiles are created when an account signs up and are edited only by
their owner. The display name doubles as the handle used to find friends.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from birddex.domain.model.common import DomainModel
from birddex.domain.value import UserId

UNKNOWN_USER = "Unknown User"


class UserProfile(DomainModel):
    """User profile aggregate root."""

    user_id: UserId
    display_name: Optional[str] = Field(default=None, max_length=64)
    is_admin: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def public_name(self) -> str:
        """Display name, or a placeholder when it is missing or blank."""
        if self.display_name and self.display_name.strip():
            return self.display_name
        return UNKNOWN_USER
