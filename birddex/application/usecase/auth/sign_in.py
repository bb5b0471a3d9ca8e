"""Sign in use case."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import AuthService, UserProfileService
from birddex.domain.value import UserId


class SignInRequest(BaseModel):
    """Sign in request."""

    email: str
    password: str


class SignInResponse(BaseModel):
    """Sign in response."""

    access_token: str
    expires_in: int | None
    user_id: str
    email: str | None


class SignInUseCase:
    """Use case for signing in with email and password."""

    def __init__(
        self, auth_service: AuthService, user_profile_service: UserProfileService
    ) -> None:
        """Initialize sign in use case.

        Args:
            auth_service: Auth domain service
            user_profile_service: Profile service, to create missing profiles
        """
        self.auth_service = auth_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign in flow.

        The user's profile is created on first sign in if sign-up did not
        already create it.

        Raises:
            ValidationError: If a field is missing or the password too short
            AuthenticationError: If the credentials are rejected
        """
        session = await self.auth_service.sign_in(request.email, request.password)
        await self.user_profile_service.ensure_profile(UserId(UUID(session.user.id)))
        return SignInResponse(
            access_token=session.access_token,
            expires_in=session.expires_in,
            user_id=session.user.id,
            email=session.user.email,
        )
