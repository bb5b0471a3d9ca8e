"""Session token resolution for routes.

The access token is read from the session cookie, or from an
``Authorization: Bearer`` header for non-browser clients.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from birddex.domain.service import JWTService
from birddex.interface.error import UnauthenticatedError

DEFAULT_COOKIE_NAME = "auth_token"


def session_token(
    request: Request, authorization: str | None = Header(default=None)
) -> str | None:
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    cookie_name = getattr(request.app.state, "cookie_name", DEFAULT_COOKIE_NAME)
    return request.cookies.get(cookie_name)


SessionToken = Annotated[str | None, Depends(session_token)]


def require_user(jwt_service: JWTService, token: str | None, action: str) -> str:
    """Return the user id of a valid session.

    Raises:
        UnauthenticatedError: If the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise UnauthenticatedError(action)
    return user_id
