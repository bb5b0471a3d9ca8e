"""Profile use cases."""

from .get_profile import (
    FindProfileRequest,
    FindProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
)
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "FindProfileRequest",
    "FindProfileUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
