"""Sign up use case."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import AuthService, UserProfileService
from birddex.domain.value import UserId


class SignUpRequest(BaseModel):
    """Sign up request."""

    email: str
    password: str


class SignUpResponse(BaseModel):
    """Sign up response.

    When ``is_existing_user`` is set the address already had an account
    and the client should suggest signing in instead.
    """

    user_id: str | None
    needs_confirmation: bool
    is_existing_user: bool


class SignUpUseCase:
    """Use case for registering an account."""

    def __init__(
        self, auth_service: AuthService, user_profile_service: UserProfileService
    ) -> None:
        self.auth_service = auth_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Execute sign up flow.

        Raises:
            ValidationError: If a field is missing or the password too short
            AuthenticationError: If the hosted service rejects the sign-up
        """
        result = await self.auth_service.sign_up(request.email, request.password)
        if result.user_id and not result.is_existing_user:
            await self.user_profile_service.ensure_profile(UserId(UUID(result.user_id)))
        return SignUpResponse(
            user_id=result.user_id,
            needs_confirmation=result.needs_confirmation,
            is_existing_user=result.is_existing_user,
        )
