"""User profile domain service."""

from datetime import datetime, timezone
from typing import Sequence

import logfire

from birddex.domain.error import DuplicateActionError, NotAuthorizedError, NotFoundError, ValidationError
from birddex.domain.model import UNKNOWN_USER, UserProfile
from birddex.domain.repository import UserProfileRepository
from birddex.domain.value import DisplayName, UserId

from .base import Service


class UserProfileService(Service):
    """Domain service for user profile operations."""

    def __init__(self, user_profile_repository: UserProfileRepository) -> None:
        """Initialize user profile service.

        Args:
            user_profile_repository: User profile repository
        """
        self.user_profile_repository = user_profile_repository

    async def get_profile(self, user_id: UserId) -> UserProfile:
        """Get a profile by user ID.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("user_profile_service.get_profile", user_id=str(user_id)):
            profile = await self.user_profile_repository.find_by_user_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("UserProfile", str(user_id))
            return profile

    async def ensure_profile(self, user_id: UserId) -> UserProfile:
        """Return the user's profile, creating an empty one on first use."""
        with logfire.span("user_profile_service.ensure_profile", user_id=str(user_id)):
            profile = await self.user_profile_repository.find_by_user_id(user_id)
            if profile:
                return profile
            profile = await self.user_profile_repository.save(UserProfile(user_id=user_id))
            logfire.info("Profile created", user_id=str(user_id))
            return profile

    async def update_display_name(self, user_id: UserId, display_name: str) -> UserProfile:
        """Set the user's display name.

        Display names are unique ignoring case, since friends are found by name.

        Raises:
            ValidationError: If the name is blank or too long
            DuplicateActionError: If another user already has the name
        """
        try:
            name = DisplayName(display_name)
        except ValueError:
            raise ValidationError("Display name must be 1-64 characters")

        with logfire.span(
            "user_profile_service.update_display_name",
            user_id=str(user_id),
            display_name=name.root,
        ):
            holder = await self.user_profile_repository.find_by_display_name(name.root)
            if holder and holder.user_id != user_id:
                logfire.warn("Display name taken", display_name=name.root)
                raise DuplicateActionError("Display name is already taken")

            existing = await self.user_profile_repository.find_by_user_id(user_id)
            profile = (existing or UserProfile(user_id=user_id)).model_copy(
                update={
                    "display_name": name.root,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.user_profile_repository.save(profile)
            logfire.info("Display name updated", user_id=str(user_id))
            return saved

    async def find_by_display_name(self, display_name: str) -> UserProfile | None:
        """Look up a profile by display name, ignoring case and surrounding space."""
        name = display_name.strip()
        if not name:
            return None
        return await self.user_profile_repository.find_by_display_name(name)

    async def get_display_names(self, user_ids: Sequence[UserId]) -> dict[UserId, str]:
        """Resolve display names for several users.

        Users without a profile or with a blank name map to "Unknown User".
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        profiles = await self.user_profile_repository.find_by_user_ids(unique_ids)
        names = {p.user_id: p.public_name for p in profiles}
        return {uid: names.get(uid, UNKNOWN_USER) for uid in unique_ids}

    async def list_profiles(self) -> list[UserProfile]:
        """List every profile in creation order."""
        return await self.user_profile_repository.find_all()

    async def is_admin(self, user_id: UserId) -> bool:
        profile = await self.user_profile_repository.find_by_user_id(user_id)
        return bool(profile and profile.is_admin)

    async def require_admin(self, user_id: UserId, action: str) -> None:
        """Ensure the user is an administrator.

        Raises:
            NotAuthorizedError: If the user is not an administrator
        """
        if not await self.is_admin(user_id):
            logfire.warn("Admin action refused", user_id=str(user_id), action=action)
            raise NotAuthorizedError(action, str(user_id))
