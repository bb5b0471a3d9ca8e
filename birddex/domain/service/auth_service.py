"""Authentication domain service."""

import logfire

from birddex.adapter.error import ProviderError
from birddex.domain.error import AuthenticationError, ValidationError
from birddex.domain.value import AuthSession, AuthUser, SignUpResult

from .base import Service


class AuthClient:
    """Hosted authentication service interface."""

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password.

        Raises:
            ProviderError: If the credentials are rejected
        """
        raise NotImplementedError

    async def sign_up(self, email: str, password: str) -> SignUpResult:
        """Register a new account.

        Raises:
            ProviderError: If the hosted service rejects the sign-up
        """
        raise NotImplementedError

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""
        raise NotImplementedError

    async def get_user(self, access_token: str) -> AuthUser | None:
        """Return the account for an access token, None if the session is gone."""
        raise NotImplementedError


class AuthService(Service):
    """Domain service for account sessions.

    Wraps the hosted auth client: validates credentials before any network
    call and turns provider failures into ``AuthenticationError`` with the
    provider's message.
    """

    def __init__(self, auth_client: AuthClient, min_password_length: int = 6) -> None:
        """Initialize auth service.

        Args:
            auth_client: Hosted auth client
            min_password_length: Minimum accepted password length
        """
        self.auth_client = auth_client
        self.min_password_length = min_password_length

    def _validate_credentials(self, email: str, password: str) -> str:
        if not email.strip() or not password.strip():
            raise ValidationError("Please fill in all fields")
        if len(password) < self.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.min_password_length} characters"
            )
        return email.strip()

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password.

        Raises:
            ValidationError: If a field is missing or the password too short
            AuthenticationError: If the hosted service rejects the credentials
        """
        email = self._validate_credentials(email, password)
        with logfire.span("auth_service.sign_in", email=email):
            try:
                session = await self.auth_client.sign_in(email, password)
            except ProviderError as e:
                logfire.warn("Sign in rejected", email=email, error=e.message)
                raise AuthenticationError(e.message or "Login failed")
            logfire.info("User signed in", user_id=session.user.id)
            return session

    async def sign_up(self, email: str, password: str) -> SignUpResult:
        """Register a new account.

        Raises:
            ValidationError: If a field is missing or the password too short
            AuthenticationError: If the hosted service rejects the sign-up
        """
        email = self._validate_credentials(email, password)
        with logfire.span("auth_service.sign_up", email=email):
            try:
                result = await self.auth_client.sign_up(email, password)
            except ProviderError as e:
                logfire.warn("Sign up rejected", email=email, error=e.message)
                raise AuthenticationError(e.message or "Sign up failed")
            logfire.info(
                "User signed up",
                user_id=result.user_id,
                needs_confirmation=result.needs_confirmation,
                is_existing_user=result.is_existing_user,
            )
            return result

    async def sign_out(self, access_token: str) -> None:
        """Revoke a session.

        Raises:
            AuthenticationError: If the hosted service rejects the request
        """
        with logfire.span("auth_service.sign_out"):
            try:
                await self.auth_client.sign_out(access_token)
            except ProviderError as e:
                logfire.warn("Sign out failed", error=e.message)
                raise AuthenticationError(e.message)

    async def get_current_user(self, access_token: str | None) -> AuthUser | None:
        """Resolve the account behind an access token.

        Returns:
            The account, or None if there is no token or the session ended
        """
        if not access_token:
            return None
        with logfire.span("auth_service.get_current_user"):
            try:
                return await self.auth_client.get_user(access_token)
            except ProviderError as e:
                logfire.warn("Session lookup failed", error=e.message)
                return None
