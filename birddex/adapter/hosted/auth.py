"""Hosted authentication service client.

Talks to the hosted auth REST API (password grant, sign-up, logout and
user lookup).
"""

from datetime import timedelta
from uuid import uuid4

import httpx
import logfire

from birddex.adapter.error import ProviderError
from birddex.adapter.hosted.http import HostedHTTPClient
from birddex.config import AuthSettings
from birddex.domain.service.auth_service import AuthClient
from birddex.domain.value import AuthSession, AuthUser, SignUpResult
from birddex.util.jwt import JWTError, create_token, verify_token


def _to_user(data: dict) -> AuthUser:
    return AuthUser(id=str(data["id"]), email=data.get("email"))


class HostedAuthClient(HostedHTTPClient, AuthClient):
    """Auth client backed by the hosted auth REST API."""

    def __init__(
        self,
        settings: AuthSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize hosted auth client.

        Args:
            settings: Auth settings with the API URL and anon key
            transport: Optional httpx transport (tests)
        """
        super().__init__(settings.api_url, settings.api_key, transport=transport)

    async def sign_in(self, email: str, password: str) -> AuthSession:
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        data = response.json()
        return AuthSession(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
            expires_in=data.get("expires_in"),
            user=_to_user(data["user"]),
        )

    async def sign_up(self, email: str, password: str) -> SignUpResult:
        """Register an account.

        The service answers a sign-up for an address that already has an
        account with a user that has no identities; that is reported as
        ``is_existing_user``.
        """
        response = await self._request(
            "POST", "/signup", json={"email": email, "password": password}
        )
        data = response.json()
        user = data.get("user", data)
        needs_confirmation = bool(user.get("confirmation_sent_at"))
        identities = user.get("identities")
        result = SignUpResult(
            user_id=str(user["id"]) if user.get("id") else None,
            needs_confirmation=needs_confirmation,
            is_existing_user=needs_confirmation and identities is not None and len(identities) == 0,
        )
        logfire.info(
            "Hosted sign up completed",
            needs_confirmation=result.needs_confirmation,
            is_existing_user=result.is_existing_user,
        )
        return result

    async def sign_out(self, access_token: str) -> None:
        await self._request("POST", "/logout", bearer=access_token)

    async def get_user(self, access_token: str) -> AuthUser | None:
        try:
            response = await self._request("GET", "/user", bearer=access_token)
        except ProviderError as e:
            if e.status_code in (401, 403):
                return None
            raise
        return _to_user(response.json())


class MockAuthClient(AuthClient):
    """In-memory auth client for testing.

    Issues real JWTs signed with the configured secret so that the API's
    token verification works unchanged.
    """

    def __init__(self, settings: AuthSettings) -> None:
        self.settings = settings
        self._accounts: dict[str, tuple[str, str]] = {}
        self._revoked: set[str] = set()

    def register(self, email: str, password: str, user_id: str | None = None) -> str:
        """Add an account directly; returns its id."""
        user_id = user_id or str(uuid4())
        self._accounts[email.lower()] = (user_id, password)
        return user_id

    async def sign_in(self, email: str, password: str) -> AuthSession:
        account = self._accounts.get(email.lower())
        if not account or account[1] != password:
            raise ProviderError("Invalid login credentials", status_code=400)
        user_id = account[0]
        token = create_token(user_id, email, self.settings, expires_in=timedelta(hours=1))
        return AuthSession(
            access_token=token,
            expires_in=3600,
            user=AuthUser(id=user_id, email=email),
        )

    async def sign_up(self, email: str, password: str) -> SignUpResult:
        existing = self._accounts.get(email.lower())
        if existing:
            return SignUpResult(
                user_id=existing[0], needs_confirmation=True, is_existing_user=True
            )
        user_id = self.register(email, password)
        return SignUpResult(user_id=user_id, needs_confirmation=False)

    async def sign_out(self, access_token: str) -> None:
        self._revoked.add(access_token)

    async def get_user(self, access_token: str) -> AuthUser | None:
        if access_token in self._revoked:
            return None
        try:
            payload = verify_token(access_token, self.settings)
        except JWTError:
            return None
        return AuthUser(id=payload.sub, email=payload.email)
