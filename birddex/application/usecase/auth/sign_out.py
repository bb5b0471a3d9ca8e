"""Sign out use case."""

from pydantic import BaseModel

from birddex.domain.service import AuthService


class SignOutRequest(BaseModel):
    """Sign out request."""

    access_token: str | None


class SignOutResponse(BaseModel):
    """Sign out response."""

    success: bool


class SignOutUseCase:
    """Use case for ending a session."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: SignOutRequest) -> SignOutResponse:
        """Revoke the session if there is one."""
        if request.access_token:
            await self.auth_service.sign_out(request.access_token)
        return SignOutResponse(success=True)
