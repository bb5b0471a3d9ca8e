"""Infrastructure providers."""

# Import bases
from .auth import AuthClientProvider
from .geocoding import GeocodingProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .auth import ProdAuthClientProvider  # noqa: F401
from .geocoding import ProdGeocodingProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "AuthClientProvider",
    "GeocodingProvider",
    "PersistenceProvider",
    "ProdAuthClientProvider",
    "ProdGeocodingProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
