"""Photo routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Query, UploadFile, status
from pydantic import BaseModel

from birddex.application.usecase.photo import (
    DeletePhotoRequest,
    DeletePhotoResponse,
    DeletePhotoUseCase,
    GetFeedUseCase,
    GetPhotoRequest,
    GetPhotoResponse,
    GetPhotoUseCase,
    ListMyPhotosUseCase,
    PhotoPageRequest,
    PhotoPageResponse,
    PhotoView,
    UpdatePhotoRequest,
    UpdatePhotoUseCase,
    UploadPhotoRequest,
    UploadPhotoUseCase,
)
from birddex.domain.service import JWTService
from birddex.domain.value import PhotoPrivacy
from birddex.interface.api.session import SessionToken, require_user

router = APIRouter(prefix="/photos", tags=["photos"], route_class=DishkaRoute)


@router.post("", response_model=PhotoView, status_code=status.HTTP_201_CREATED)
async def upload_photo(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    upload_photo_use_case: FromDishka[UploadPhotoUseCase],
    image: Annotated[UploadFile, File()],
    species_id: Annotated[str | None, Form()] = None,
    thumbnail: Annotated[UploadFile | None, File()] = None,
    privacy: Annotated[PhotoPrivacy, Form()] = PhotoPrivacy.FRIENDS,
    lat: Annotated[float | None, Form()] = None,
    lng: Annotated[float | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    set_as_top: Annotated[bool, Form()] = False,
) -> PhotoView:
    """Upload a photo (multipart form).

    The client sends the already cropped image and, optionally, a
    thumbnail.

    Raises:
        ValidationError: If the species is missing or the file is rejected (400)
    """
    user_id = require_user(jwt_service, token, "upload photos")
    return await upload_photo_use_case.execute(
        UploadPhotoRequest(
            user_id=user_id,
            species_id=species_id,
            image=await image.read(),
            content_type=image.content_type or "image/jpeg",
            thumbnail=await thumbnail.read() if thumbnail else None,
            privacy=privacy,
            lat=lat,
            lng=lng,
            description=description,
            set_as_top=set_as_top,
        )
    )


@router.get("/mine", response_model=PhotoPageResponse)
async def list_my_photos(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    list_my_photos_use_case: FromDishka[ListMyPhotosUseCase],
    page: int = Query(default=0, ge=0),
) -> PhotoPageResponse:
    """List the signed-in user's photos, newest first."""
    user_id = require_user(jwt_service, token, "view your photos")
    return await list_my_photos_use_case.execute(PhotoPageRequest(user_id=user_id, page=page))


@router.get("/feed", response_model=PhotoPageResponse)
async def get_feed(
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_feed_use_case: FromDishka[GetFeedUseCase],
    page: int = Query(default=0, ge=0),
) -> PhotoPageResponse:
    """Friends' recent photos, newest first."""
    user_id = require_user(jwt_service, token, "view the feed")
    return await get_feed_use_case.execute(PhotoPageRequest(user_id=user_id, page=page))


@router.get("/{photo_id}", response_model=GetPhotoResponse)
async def get_photo(
    photo_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_photo_use_case: FromDishka[GetPhotoUseCase],
) -> GetPhotoResponse:
    """Photo detail. Anonymous viewers only see public photos."""
    viewer_id = jwt_service.get_user_id_from_token(token)
    return await get_photo_use_case.execute(
        GetPhotoRequest(photo_id=photo_id, viewer_id=viewer_id)
    )


class UpdatePhotoAPIRequest(BaseModel):
    """API request for updating a photo's details."""

    lat: float | None = None
    lng: float | None = None
    description: str | None = None
    species_id: str | None = None
    privacy: PhotoPrivacy | None = None


@router.patch("/{photo_id}", response_model=PhotoView)
async def update_photo(
    photo_id: str,
    request: UpdatePhotoAPIRequest,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    update_photo_use_case: FromDishka[UpdatePhotoUseCase],
) -> PhotoView:
    """Edit location, description, species or privacy. Owner only."""
    user_id = require_user(jwt_service, token, "edit photos")
    return await update_photo_use_case.execute(
        UpdatePhotoRequest(user_id=user_id, photo_id=photo_id, **request.model_dump())
    )


@router.delete("/{photo_id}", response_model=DeletePhotoResponse)
async def delete_photo(
    photo_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    delete_photo_use_case: FromDishka[DeletePhotoUseCase],
) -> DeletePhotoResponse:
    """Delete a photo. Photos entered in a quest are hidden instead."""
    user_id = require_user(jwt_service, token, "delete photos")
    return await delete_photo_use_case.execute(
        DeletePhotoRequest(user_id=user_id, photo_id=photo_id)
    )
