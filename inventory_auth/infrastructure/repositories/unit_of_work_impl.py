"""Unit of Work implementation using SQLAlchemy."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory_auth.domain.exceptions import StorageException
from inventory_auth.domain.repositories.unit_of_work import IUnitOfWork
from inventory_auth.infrastructure.repositories.account_repository_impl import (
    AccountRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWork(IUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work.

    This class:
    1. Manages the SQLAlchemy async session lifecycle
    2. Provides access to the account repository within a transaction
    3. Commits only when asked, rolls back when the block raises
    4. Turns driver failures into StorageException
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork":
        """
        Start a new database session and initialize repositories.

        Returns:
            Self for context manager usage
        """
        self._session = self._session_factory()
        self.accounts = AccountRepository(self._session)

        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """
        Exit context manager, rolling back on error and closing the session.

        A SQLAlchemyError escaping the block is re-raised as StorageException
        so callers see one infrastructure error type.
        """
        try:
            if exc_type is not None:
                await self.rollback()
        finally:
            if self._session is not None:
                await self._session.close()
                self._session = None

        if isinstance(exc_val, SQLAlchemyError):
            logger.error(f"Credential store failure: {exc_val}")
            raise StorageException() from exc_val

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        await self._session.rollback()
