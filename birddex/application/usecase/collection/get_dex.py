"""Dex grid and species view use cases."""

from uuid import UUID

from pydantic import BaseModel

from birddex.domain.service import CollectionService, CommentService, StorageService
from birddex.domain.value import UserId

from ..base import parse_species_code
from ..photo.view import PhotoView, build_photo_views


class DexCellView(BaseModel):
    """One species cell in the dex grid."""

    species_id: str
    photo_id: str
    thumbnail_url: str | None


class GetDexRequest(BaseModel):
    """Get dex request."""

    user_id: str


class GetDexResponse(BaseModel):
    """The user's dex grid.

    ``species_count`` is the user's score: the number of species with a
    top photo.
    """

    cells: list[DexCellView]
    species_count: int


class GetDexUseCase:
    """Use case for the collection grid."""

    def __init__(
        self, collection_service: CollectionService, storage_service: StorageService
    ) -> None:
        """Initialize get dex use case.

        Args:
            collection_service: Collection domain service
            storage_service: Signs the thumbnails
        """
        self.collection_service = collection_service
        self.storage_service = storage_service

    async def execute(self, request: GetDexRequest) -> GetDexResponse:
        cells = await self.collection_service.get_dex(UserId(UUID(request.user_id)))
        views = [
            DexCellView(
                species_id=cell.species_id.root,
                photo_id=str(cell.photo.id),
                thumbnail_url=await self.storage_service.signed_url(
                    cell.photo.thumbnail_url or cell.photo.url
                ),
            )
            for cell in cells
        ]
        return GetDexResponse(cells=views, species_count=len(views))


class GetSpeciesPhotosRequest(BaseModel):
    """Species view request."""

    user_id: str
    species_id: str


class GetSpeciesPhotosResponse(BaseModel):
    """A user's visible photos of one species, newest first."""

    species_id: str
    top_photo_id: str | None
    photos: list[PhotoView]


class GetSpeciesPhotosUseCase:
    """Use case for the species view of the collection."""

    def __init__(
        self,
        collection_service: CollectionService,
        comment_service: CommentService,
        storage_service: StorageService,
    ) -> None:
        self.collection_service = collection_service
        self.comment_service = comment_service
        self.storage_service = storage_service

    async def execute(self, request: GetSpeciesPhotosRequest) -> GetSpeciesPhotosResponse:
        species = await self.collection_service.get_species_photos(
            UserId(UUID(request.user_id)), parse_species_code(request.species_id)
        )
        top_ids = {species.top_photo_id} if species.top_photo_id else set()
        views = await build_photo_views(
            species.photos,
            self.storage_service,
            comment_service=self.comment_service,
            top_photo_ids=top_ids,
        )
        return GetSpeciesPhotosResponse(
            species_id=species.species_id.root,
            top_photo_id=str(species.top_photo_id) if species.top_photo_id else None,
            photos=views,
        )
