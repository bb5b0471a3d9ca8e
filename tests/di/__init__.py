"""Mock providers for testing."""

from .auth import MockAuthClientProvider
from .geocoding import MockGeocodingProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockAuthClientProvider",
    "MockGeocodingProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
