"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from birddex.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    SignInRequest,
    SignInUseCase,
    SignOutRequest,
    SignOutResponse,
    SignOutUseCase,
    SignUpRequest,
    SignUpResponse,
    SignUpUseCase,
)
from birddex.config import Settings
from birddex.domain.service import JWTService
from birddex.interface.api.session import SessionToken

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class CredentialsRequest(BaseModel):
    """Email and password."""

    email: str
    password: str


class SessionResponse(BaseModel):
    """Signed-in session.

    The access token is also set as an HTTP-only cookie.
    """

    access_token: str
    user_id: str
    email: str | None


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Returns the current user if authenticated, or indicates the
    unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _set_session_cookie(
    response: Response, settings: Settings, token: str, max_age: int | None
) -> None:
    # Cross-site frontend in production needs SameSite=None, which requires Secure
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        max_age=max_age,
        path="/",
    )


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(
    request: CredentialsRequest,
    response: Response,
    sign_in_use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Sign in with email and password.

    Raises:
        AuthenticationError: On invalid credentials (401)
    """
    result = await sign_in_use_case.execute(
        SignInRequest(email=request.email, password=request.password)
    )
    _set_session_cookie(response, settings, result.access_token, result.expires_in)
    logfire.info("Session cookie set", user_id=result.user_id)
    return SessionResponse(
        access_token=result.access_token, user_id=result.user_id, email=result.email
    )


@router.post(
    "/sign-up", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED
)
async def sign_up(
    request: CredentialsRequest,
    sign_up_use_case: FromDishka[SignUpUseCase],
) -> SignUpResponse:
    """Create an account.

    ``needs_confirmation`` tells the client to ask the user to check their
    email; ``is_existing_user`` that the address is already registered.
    """
    return await sign_up_use_case.execute(
        SignUpRequest(email=request.email, password=request.password)
    )


@router.post("/sign-out", response_model=SignOutResponse)
async def sign_out(
    response: Response,
    token: SessionToken,
    sign_out_use_case: FromDishka[SignOutUseCase],
    settings: FromDishka[Settings],
) -> SignOutResponse:
    """Sign out and clear the session cookie."""
    result = await sign_out_use_case.execute(SignOutRequest(access_token=token))
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return result


@router.get("/me", response_model=AuthStatusResponse)
async def get_me(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> AuthStatusResponse:
    """Get the current user, or ``authenticated: false`` without a session."""
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        return AuthStatusResponse(authenticated=False)
    user = await get_current_user_use_case.execute(GetCurrentUserRequest(user_id=user_id))
    return AuthStatusResponse(authenticated=True, user=user)
