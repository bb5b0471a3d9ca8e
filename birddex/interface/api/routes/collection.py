"""Collection (dex) routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from birddex.application.usecase.collection import (
    CollectionPhotoRequest,
    CollectionPhotoResponse,
    GetDexRequest,
    GetDexResponse,
    GetDexUseCase,
    GetSpeciesPhotosRequest,
    GetSpeciesPhotosResponse,
    GetSpeciesPhotosUseCase,
    HidePhotoUseCase,
    SetTopPhotoUseCase,
    ShowPhotoUseCase,
)
from birddex.domain.service import JWTService
from birddex.interface.api.session import SessionToken, require_user

router = APIRouter(prefix="/collection", tags=["collection"], route_class=DishkaRoute)


@router.get("", response_model=GetDexResponse)
async def get_dex(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_dex_use_case: FromDishka[GetDexUseCase],
) -> GetDexResponse:
    """The signed-in user's dex grid, one cell per species."""
    user_id = require_user(jwt_service, token, "view your collection")
    return await get_dex_use_case.execute(GetDexRequest(user_id=user_id))


@router.get("/{species_id}", response_model=GetSpeciesPhotosResponse)
async def get_species_photos(
    species_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_species_photos_use_case: FromDishka[GetSpeciesPhotosUseCase],
) -> GetSpeciesPhotosResponse:
    """The user's visible photos of one species."""
    user_id = require_user(jwt_service, token, "view your collection")
    return await get_species_photos_use_case.execute(
        GetSpeciesPhotosRequest(user_id=user_id, species_id=species_id)
    )


@router.put("/{species_id}/top/{photo_id}", response_model=CollectionPhotoResponse)
async def set_top_photo(
    species_id: str,
    photo_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    set_top_photo_use_case: FromDishka[SetTopPhotoUseCase],
) -> CollectionPhotoResponse:
    """Make a photo the top photo of its species."""
    user_id = require_user(jwt_service, token, "change your collection")
    return await set_top_photo_use_case.execute(
        CollectionPhotoRequest(user_id=user_id, species_id=species_id, photo_id=photo_id)
    )


@router.post("/{species_id}/photos/{photo_id}/hide", response_model=CollectionPhotoResponse)
async def hide_photo(
    species_id: str,
    photo_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    hide_photo_use_case: FromDishka[HidePhotoUseCase],
) -> CollectionPhotoResponse:
    """Remove a photo from the species view, clearing its top status first."""
    user_id = require_user(jwt_service, token, "change your collection")
    return await hide_photo_use_case.execute(
        CollectionPhotoRequest(user_id=user_id, species_id=species_id, photo_id=photo_id)
    )


@router.post("/{species_id}/photos/{photo_id}/show", response_model=CollectionPhotoResponse)
async def show_photo(
    species_id: str,
    photo_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    show_photo_use_case: FromDishka[ShowPhotoUseCase],
) -> CollectionPhotoResponse:
    user_id = require_user(jwt_service, token, "change your collection")
    return await show_photo_use_case.execute(
        CollectionPhotoRequest(user_id=user_id, species_id=species_id, photo_id=photo_id)
    )
