"""Dependency injection module."""

from typing import Type

from birddex.util.di.application import ProdApplicationProvider
from birddex.util.di.base import Component, ProviderBase
from birddex.util.di.core import ProdConfigProvider
from birddex.util.di.domain import ProdDomainProvider
from birddex.util.di.infrastructure import (
    AuthClientProvider,
    GeocodingProvider,
    PersistenceProvider,
    ProdAuthClientProvider,
    ProdGeocodingProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    AuthClientProvider,
    StorageProvider,
    GeocodingProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: concrete provider, used directly
    - Has subclasses: mockable component, selected by ``__is_mock__``

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "AuthClientProvider",
    "GeocodingProvider",
    "PersistenceProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdAuthClientProvider",
    "ProdGeocodingProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
