"""JWT token utilities.

Access tokens are issued by the hosted auth service; the API only decodes
them. ``create_token`` exists for the mock auth client and tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel

from birddex.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    email: Optional[str] = None
    role: Optional[str] = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    email: str | None,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a JWT access token shaped like the hosted service's tokens.

    Args:
        user_id: User ID (``sub`` claim)
        email: Account email
        settings: Authentication settings
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": user_id,
        "email": email,
        "role": "authenticated",
        "aud": settings.jwt_audience,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
