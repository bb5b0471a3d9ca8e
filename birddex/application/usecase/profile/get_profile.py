"""Profile lookup use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from birddex.domain.error import NotFoundError
from birddex.domain.model import UserProfile
from birddex.domain.service import UserProfileService
from birddex.domain.value import UserId


class ProfileResponse(BaseModel):
    """Profile response."""

    user_id: str
    display_name: str
    is_admin: bool
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileResponse":
        return cls(
            user_id=str(profile.user_id),
            display_name=profile.public_name,
            is_admin=profile.is_admin,
            created_at=profile.created_at,
        )


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str


class GetProfileUseCase:
    """Use case for reading the signed-in user's profile."""

    def __init__(self, user_profile_service: UserProfileService) -> None:
        self.user_profile_service = user_profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        profile = await self.user_profile_service.ensure_profile(
            UserId(UUID(request.user_id))
        )
        return ProfileResponse.from_profile(profile)


class FindProfileRequest(BaseModel):
    """Find profile by display name request."""

    display_name: str


class FindProfileUseCase:
    """Use case for looking up a public profile by display name."""

    def __init__(self, user_profile_service: UserProfileService) -> None:
        self.user_profile_service = user_profile_service

    async def execute(self, request: FindProfileRequest) -> ProfileResponse:
        """Find a profile, ignoring case.

        Raises:
            NotFoundError: If no user has the display name
        """
        profile = await self.user_profile_service.find_by_display_name(request.display_name)
        if not profile:
            raise NotFoundError("UserProfile", request.display_name)
        return ProfileResponse.from_profile(profile)
