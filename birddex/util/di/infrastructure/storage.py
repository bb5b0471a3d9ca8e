"""Object storage infrastructure providers."""

from dishka import Scope, provide

from birddex.adapter.hosted import HostedStorageClient
from birddex.config import StorageSettings
from birddex.domain.service import StorageClient
from birddex.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production provider using the hosted storage REST API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_storage_client(self, storage_settings: StorageSettings) -> StorageClient:
        return HostedStorageClient(storage_settings)
