"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import UserProfileService
from birddex.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified access token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    display_name: str | None
    is_admin: bool


class GetCurrentUserUseCase:
    """Use case for resolving the signed-in user's profile."""

    def __init__(self, user_profile_service: UserProfileService) -> None:
        self.user_profile_service = user_profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        profile = await self.user_profile_service.ensure_profile(
            UserId(UUID(request.user_id))
        )
        return GetCurrentUserResponse(
            user_id=str(profile.user_id),
            display_name=profile.display_name,
            is_admin=profile.is_admin,
        )
