"""Collection (dex) use cases."""

from .get_dex import (
    DexCellView,
    GetDexRequest,
    GetDexResponse,
    GetDexUseCase,
    GetSpeciesPhotosRequest,
    GetSpeciesPhotosResponse,
    GetSpeciesPhotosUseCase,
)
from .manage_photo import (
    CollectionPhotoRequest,
    CollectionPhotoResponse,
    HidePhotoUseCase,
    SetTopPhotoUseCase,
    ShowPhotoUseCase,
)

__all__ = [
    "CollectionPhotoRequest",
    "CollectionPhotoResponse",
    "DexCellView",
    "GetDexRequest",
    "GetDexResponse",
    "GetDexUseCase",
    "GetSpeciesPhotosRequest",
    "GetSpeciesPhotosResponse",
    "GetSpeciesPhotosUseCase",
    "HidePhotoUseCase",
    "SetTopPhotoUseCase",
    "ShowPhotoUseCase",
]
