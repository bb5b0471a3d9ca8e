"""Reverse geocoding infrastructure providers."""

from dishka import Scope, provide

from birddex.adapter.nominatim import NominatimGeocoder
from birddex.config import GeocodingSettings
from birddex.domain.service import Geocoder
from birddex.util.di.base import ProviderBase


class GeocodingProvider(ProviderBase):
    """Geocoding component base."""

    __mock_component__ = "geocoding"


class ProdGeocodingProvider(GeocodingProvider):
    """Production provider using Nominatim."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_geocoder(self, geocoding_settings: GeocodingSettings) -> Geocoder:
        return NominatimGeocoder(geocoding_settings)
