"""Shared plumbing for the PostgreSQL repositories."""

import re
from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from birddex.domain.error import DuplicateActionError, PersistenceError

_DRIVER_PREFIX = re.compile(r"^<class '[^']+'>:\s*")


def database_message(error: DBAPIError) -> str:
    """Extract the database's own message from a driver error."""
    text = str(error.orig) if error.orig is not None else str(error)
    return _DRIVER_PREFIX.sub("", text).strip()


class PostgresRepository:
    """Base for repositories backed by an async SQLAlchemy session.

    Driver errors are raised as ``PersistenceError`` with the database's
    message, and are never retried.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(
        self, stmt: Executable, duplicate_message: str | None = None
    ) -> Result[Any]:
        """Execute a statement and flush.

        Args:
            stmt: Statement to execute
            duplicate_message: Message for a unique violation; when given,
                such violations raise ``DuplicateActionError``

        Raises:
            DuplicateActionError: On a unique violation with ``duplicate_message``
            PersistenceError: On any other driver error
        """
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result
        except IntegrityError as e:
            if duplicate_message:
                raise DuplicateActionError(duplicate_message) from e
            logfire.warn("Database constraint violated", error=database_message(e))
            raise PersistenceError(database_message(e)) from e
        except DBAPIError as e:
            logfire.error("Database error", error=database_message(e))
            raise PersistenceError(database_message(e)) from e
