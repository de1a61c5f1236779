"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inventory_auth.domain.repositories.account_repository import IAccountRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    Every auth operation opens exactly one unit of work, performs at most
    one read and one write through ``accounts`` and commits. Nothing is
    cached between units of work.
    """

    accounts: "IAccountRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """
        Enter async context manager.

        This is where the implementation would start a database
        transaction/session.
        """
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        If an exception escaped the block, rollback. Uncommitted work is
        discarded either way.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """
        Explicitly rollback the current transaction.

        Used when you need to abort without raising an exception.
        """
        pass
