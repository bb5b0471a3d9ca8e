"""PostgreSQL implementation of TopSpecies repository."""

from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert

from birddex.domain.model import TopSpeciesEntry
from birddex.domain.repository import TopSpeciesRepository
from birddex.domain.value import PhotoId, SpeciesCode, UserId
from birddex.persistence.mappers import row_to_top_species, top_species_to_dict
from birddex.persistence.repository.base import PostgresRepository
from birddex.persistence.tables import top_species_table


class PostgresTopSpeciesRepository(PostgresRepository, TopSpeciesRepository):
    """PostgreSQL implementation of TopSpeciesRepository."""

    async def find_by_user(self, user_id: UserId) -> list[TopSpeciesEntry]:
        stmt = (
            select(top_species_table)
            .where(top_species_table.c.user_id == user_id)
            .order_by(top_species_table.c.species_id.asc())
        )
        result = await self._execute(stmt)
        return [row_to_top_species(row._asdict()) for row in result.fetchall()]

    async def find(self, user_id: UserId, species_id: SpeciesCode) -> Optional[TopSpeciesEntry]:
        stmt = select(top_species_table).where(
            and_(
                top_species_table.c.user_id == user_id,
                top_species_table.c.species_id == species_id.root,
            )
        )
        row = (await self._execute(stmt)).fetchone()
        return row_to_top_species(row._asdict()) if row else None

    async def upsert(self, entry: TopSpeciesEntry) -> TopSpeciesEntry:
        """Set the top photo of a (user, species) pair, last write wins."""
        stmt = insert(top_species_table).values(**top_species_to_dict(entry))
        stmt = stmt.on_conflict_do_update(
            index_elements=[top_species_table.c.user_id, top_species_table.c.species_id],
            set_={"photo_id": stmt.excluded.photo_id},
        )
        await self._execute(stmt)
        return entry

    async def delete(
        self,
        user_id: UserId,
        species_id: SpeciesCode,
        photo_id: Optional[PhotoId] = None,
    ) -> bool:
        conditions = [
            top_species_table.c.user_id == user_id,
            top_species_table.c.species_id == species_id.root,
        ]
        if photo_id is not None:
            conditions.append(top_species_table.c.photo_id == photo_id)
        result = await self._execute(delete(top_species_table).where(and_(*conditions)))
        return result.rowcount > 0  # type: ignore[attr-defined]
