"""Photo use cases."""

from .delete_photo import DeletePhotoRequest, DeletePhotoResponse, DeletePhotoUseCase
from .get_photo import GetPhotoRequest, GetPhotoResponse, GetPhotoUseCase, PhotoCommentView
from .list_photos import GetFeedUseCase, ListMyPhotosUseCase, PhotoPageRequest, PhotoPageResponse
from .update_photo import UpdatePhotoRequest, UpdatePhotoUseCase
from .upload_photo import UploadPhotoRequest, UploadPhotoUseCase
from .view import PhotoView, build_photo_views

__all__ = [
    "DeletePhotoRequest",
    "DeletePhotoResponse",
    "DeletePhotoUseCase",
    "GetFeedUseCase",
    "GetPhotoRequest",
    "GetPhotoResponse",
    "GetPhotoUseCase",
    "ListMyPhotosUseCase",
    "PhotoCommentView",
    "PhotoPageRequest",
    "PhotoPageResponse",
    "PhotoView",
    "UpdatePhotoRequest",
    "UpdatePhotoUseCase",
    "UploadPhotoRequest",
    "UploadPhotoUseCase",
    "build_photo_views",
]
