"""Mock object storage provider for testing."""

from dishka import Scope, provide

from birddex.adapter.hosted import MockStorageClient
from birddex.domain.service import StorageClient
from birddex.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping objects in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_storage_client(self) -> StorageClient:
        """Provide in-memory storage client."""
        return MockStorageClient()
