"""Mock geocoding provider for testing."""

from dishka import Scope, provide

from birddex.adapter.nominatim import MockGeocoder
from birddex.domain.service import Geocoder
from birddex.util.di.infrastructure.geocoding import GeocodingProvider


class MockGeocodingProvider(GeocodingProvider):
    """Mock geocoding provider with canned addresses."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_geocoder(self) -> Geocoder:
        return MockGeocoder()
