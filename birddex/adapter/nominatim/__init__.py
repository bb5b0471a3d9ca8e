"""Nominatim reverse geocoding adapter."""

from .geocoder import MockGeocoder, NominatimGeocoder

__all__ = ["NominatimGeocoder", "MockGeocoder"]
