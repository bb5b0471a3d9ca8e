"""Hosted auth infrastructure providers."""

from dishka import Scope, provide

from birddex.adapter.hosted import HostedAuthClient
from birddex.config import AuthSettings
from birddex.domain.service import AuthClient
from birddex.util.di.base import ProviderBase


class AuthClientProvider(ProviderBase):
    """Auth component base."""

    __mock_component__ = "auth"


class ProdAuthClientProvider(AuthClientProvider):
    """Production provider using the hosted auth REST API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_auth_client(self, auth_settings: AuthSettings) -> AuthClient:
        return HostedAuthClient(auth_settings)
