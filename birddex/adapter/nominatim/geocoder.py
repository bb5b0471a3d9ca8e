"""Reverse geocoding against a Nominatim server."""

import httpx
import logfire

from birddex.config import GeocodingSettings
from birddex.domain.service.location_service import UNKNOWN_LOCATION, Geocoder


class NominatimGeocoder(Geocoder):
    """Geocoder using the Nominatim ``/reverse`` endpoint."""

    def __init__(
        self,
        settings: GeocodingSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Nominatim geocoder.

        Args:
            settings: Geocoding settings
            transport: Optional httpx transport (tests)
        """
        self.base_url = settings.base_url.rstrip("/")
        self.user_agent = settings.user_agent
        self.timeout = settings.timeout_seconds
        self.transport = transport

    async def reverse(self, lat: float, lng: float) -> str:
        """Look up the display address of a coordinate.

        Returns:
            The address, or "Unknown location" if the lookup fails
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    f"{self.base_url}/reverse",
                    params={"format": "jsonv2", "lat": lat, "lon": lng},
                    headers={"User-Agent": self.user_agent},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.warn("Nominatim request failed", lat=lat, lng=lng, error=str(e))
            return UNKNOWN_LOCATION

        if response.status_code != 200:
            logfire.warn(
                "Nominatim returned an error", status_code=response.status_code
            )
            return UNKNOWN_LOCATION
        try:
            return response.json().get("display_name") or UNKNOWN_LOCATION
        except ValueError:
            return UNKNOWN_LOCATION


class MockGeocoder(Geocoder):
    """Geocoder returning canned addresses for testing."""

    def __init__(self, addresses: dict[tuple[float, float], str] | None = None) -> None:
        self.addresses = addresses or {}

    async def reverse(self, lat: float, lng: float) -> str:
        return self.addresses.get((lat, lng), f"Near {lat:.3f}, {lng:.3f}")
