"""Request parsing helpers shared by the use cases."""

from typing import Callable, TypeVar
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from birddex.domain.error import NotFoundError, ValidationError
from birddex.domain.value import GeoPoint, SpeciesCode

T = TypeVar("T")


def parse_id(value: str, resource: str, id_type: Callable[[UUID], T]) -> T:
    """Parse an id from a request.

    A malformed id cannot name an existing resource, so it is reported as
    not found.
    """
    try:
        return id_type(UUID(value))
    except (TypeError, ValueError):
        raise NotFoundError(resource, value)


def parse_species_code(value: str | None) -> SpeciesCode:
    if not value or not value.strip():
        raise ValidationError("Please select a species.")
    try:
        return SpeciesCode(value.strip())
    except PydanticValidationError:
        raise ValidationError(f"Invalid species code: {value}")


def parse_location(lat: float | None, lng: float | None) -> GeoPoint | None:
    """Build a location when both coordinates are given."""
    if lat is None or lng is None:
        return None
    try:
        return GeoPoint(lat=lat, lng=lng)
    except PydanticValidationError as e:
        raise ValidationError(str(e.errors()[0]["msg"]))
