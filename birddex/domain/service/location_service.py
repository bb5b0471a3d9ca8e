"""Location description service (reverse geocoding, best-effort)."""

import logfire

from birddex.domain.value import GeoPoint

from .base import Service

UNKNOWN_LOCATION = "Unknown location"
NO_LOCATION = "No location available"


class Geocoder:
    """Reverse geocoding interface."""

    async def reverse(self, lat: float, lng: float) -> str:
        """Return a display address for a coordinate.

        Implementations return ``UNKNOWN_LOCATION`` rather than raising.
        """
        raise NotImplementedError


class LocationService(Service):
    """Turns photo coordinates into display text."""

    def __init__(self, geocoder: Geocoder) -> None:
        self.geocoder = geocoder

    async def describe(self, location: GeoPoint | None) -> str:
        """Describe a photo location.

        Geocoding is best-effort: any failure yields "Unknown location" and
        is never raised to the caller.

        Args:
            location: Photo coordinates, if any

        Returns:
            Display address, "Unknown location" or "No location available"
        """
        if location is None:
            return NO_LOCATION
        try:
            return await self.geocoder.reverse(location.lat, location.lng)
        except Exception as e:
            logfire.warn(
                "Reverse geocoding failed", lat=location.lat, lng=location.lng, error=str(e)
            )
            return UNKNOWN_LOCATION
