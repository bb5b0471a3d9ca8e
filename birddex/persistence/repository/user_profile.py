"""PostgreSQL implementation of UserProfile repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert

from birddex.domain.model import UserProfile
from birddex.domain.repository import UserProfileRepository
from birddex.domain.value import UserId
from birddex.persistence.mappers import row_to_user_profile, user_profile_to_dict
from birddex.persistence.repository.base import PostgresRepository
from birddex.persistence.tables import user_profiles_table


class PostgresUserProfileRepository(PostgresRepository, UserProfileRepository):
    """PostgreSQL implementation of UserProfileRepository."""

    async def find_by_user_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by user ID."""
        stmt = select(user_profiles_table).where(user_profiles_table.c.user_id == user_id)
        row = (await self._execute(stmt)).fetchone()
        return row_to_user_profile(row._asdict()) if row else None

    async def find_by_display_name(self, display_name: str) -> Optional[UserProfile]:
        """Find a profile by display name, ignoring case."""
        stmt = select(user_profiles_table).where(
            func.lower(user_profiles_table.c.display_name) == display_name.lower()
        )
        row = (await self._execute(stmt)).fetchone()
        return row_to_user_profile(row._asdict()) if row else None

    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> list[UserProfile]:
        """Find profiles for several users (batch query)."""
        if not user_ids:
            return []
        stmt = select(user_profiles_table).where(
            user_profiles_table.c.user_id.in_(user_ids)
        )
        result = await self._execute(stmt)
        return [row_to_user_profile(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> list[UserProfile]:
        """List all profiles, oldest first."""
        stmt = select(user_profiles_table).order_by(
            user_profiles_table.c.created_at.asc(), user_profiles_table.c.user_id.asc()
        )
        result = await self._execute(stmt)
        return [row_to_user_profile(row._asdict()) for row in result.fetchall()]

    async def save(self, profile: UserProfile) -> UserProfile:
        """Create or update a profile."""
        values = user_profile_to_dict(profile)
        stmt = insert(user_profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[user_profiles_table.c.user_id],
            set_={
                "display_name": stmt.excluded.display_name,
                "is_admin": stmt.excluded.is_admin,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self._execute(stmt, duplicate_message="Display name is already taken")
        return profile
