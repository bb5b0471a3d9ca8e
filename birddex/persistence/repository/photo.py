"""PostgreSQL implementation of Photo repository."""

from typing import Any, Optional, Sequence

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import JSONB

from birddex.domain.error import NotFoundError
from birddex.domain.model import Photo
from birddex.domain.repository import PhotoRepository
from birddex.domain.value import PhotoId, PhotoPrivacy, SpeciesCode, UserId
from birddex.persistence.mappers import photo_to_dict, row_to_photo
from birddex.persistence.repository.base import PostgresRepository
from birddex.persistence.tables import photos_table


class PostgresPhotoRepository(PostgresRepository, PhotoRepository):
    """PostgreSQL implementation of PhotoRepository."""

    async def find_by_id(self, photo_id: PhotoId) -> Optional[Photo]:
        """Find a photo by ID."""
        stmt = select(photos_table).where(photos_table.c.id == photo_id)
        row = (await self._execute(stmt)).fetchone()
        return row_to_photo(row._asdict()) if row else None

    async def find_by_ids(self, photo_ids: Sequence[PhotoId]) -> list[Photo]:
        """Find several photos (batch query)."""
        if not photo_ids:
            return []
        stmt = select(photos_table).where(photos_table.c.id.in_(photo_ids))
        result = await self._execute(stmt)
        return [row_to_photo(row._asdict()) for row in result.fetchall()]

    async def find_by_owner(
        self, owner_id: UserId, offset: int = 0, limit: Optional[int] = None
    ) -> list[Photo]:
        """List a user's photos, newest first."""
        stmt = (
            select(photos_table)
            .where(photos_table.c.user_id == owner_id)
            .order_by(photos_table.c.created_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._execute(stmt)
        return [row_to_photo(row._asdict()) for row in result.fetchall()]

    async def find_by_owner_and_species(
        self,
        owner_id: UserId,
        species_id: SpeciesCode,
        include_hidden: bool = False,
    ) -> list[Photo]:
        """List a user's photos of one species, newest first."""
        conditions = [
            photos_table.c.user_id == owner_id,
            photos_table.c.species_id == species_id.root,
        ]
        if not include_hidden:
            conditions.append(photos_table.c.hidden_from_species_view.is_(False))
        stmt = (
            select(photos_table)
            .where(and_(*conditions))
            .order_by(photos_table.c.created_at.desc())
        )
        result = await self._execute(stmt)
        return [row_to_photo(row._asdict()) for row in result.fetchall()]

    async def find_feed(
        self, owner_ids: Sequence[UserId], offset: int, limit: int
    ) -> list[Photo]:
        """List feed photos of the given owners, newest first."""
        if not owner_ids:
            return []
        stmt = (
            select(photos_table)
            .where(
                and_(
                    photos_table.c.user_id.in_(owner_ids),
                    photos_table.c.hidden_from_feed.is_(False),
                    photos_table.c.privacy != PhotoPrivacy.PRIVATE.value,
                )
            )
            .order_by(photos_table.c.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_photo(row._asdict()) for row in result.fetchall()]

    async def find_all_in_feed(self) -> list[Photo]:
        """List every photo not hidden from the feed."""
        stmt = select(photos_table).where(photos_table.c.hidden_from_feed.is_(False))
        result = await self._execute(stmt)
        return [row_to_photo(row._asdict()) for row in result.fetchall()]

    async def save(self, photo: Photo) -> Photo:
        """Save a photo (create or update)."""
        existing = await self.find_by_id(photo.id)
        photo_dict = photo_to_dict(photo)

        if existing:
            stmt = (
                photos_table.update()
                .where(photos_table.c.id == photo.id)
                .values(**photo_dict)
            )
        else:
            stmt = photos_table.insert().values(**photo_dict)
        await self._execute(stmt)
        return photo

    async def set_hidden_from_species_view(
        self, photo_id: PhotoId, hidden: bool
    ) -> Photo:
        """Set the species-view flag; the hidden/top trigger may reject it."""
        stmt = (
            photos_table.update()
            .where(photos_table.c.id == photo_id)
            .values(hidden_from_species_view=hidden)
            .returning(*photos_table.c)
        )
        row = (await self._execute(stmt)).fetchone()
        if not row:
            raise NotFoundError("Photo", str(photo_id))
        return row_to_photo(row._asdict())

    async def delete_or_hide(self, photo_id: PhotoId) -> Optional[dict[str, Any]]:
        """Call the ``delete_or_hide_photo`` database function."""
        stmt = select(func.delete_or_hide_photo(photo_id, type_=JSONB))
        return (await self._execute(stmt)).scalar_one_or_none()
