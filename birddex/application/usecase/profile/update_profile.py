"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import UserProfileService
from birddex.domain.value import UserId

from .get_profile import ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str
    display_name: str


class UpdateProfileUseCase:
    """Use case for changing the signed-in user's display name."""

    def __init__(self, user_profile_service: UserProfileService) -> None:
        self.user_profile_service = user_profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update flow.

        Raises:
            ValidationError: If the name is blank or too long
            DuplicateActionError: If the name is taken
        """
        profile = await self.user_profile_service.update_display_name(
            UserId(UUID(request.user_id)), request.display_name
        )
        return ProfileResponse.from_profile(profile)
