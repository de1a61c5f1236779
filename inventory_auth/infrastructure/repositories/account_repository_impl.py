"""Account repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_auth.domain.entities.account import Account
from inventory_auth.domain.exceptions import (
    AccountNotFoundException,
    DuplicateIdentityException,
)
from inventory_auth.domain.repositories.account_repository import IAccountRepository
from inventory_auth.infrastructure.persistence.models.account_model import AccountModel

logger = logging.getLogger(__name__)


class AccountRepository(IAccountRepository):
    """
    SQLAlchemy implementation of IAccountRepository.

    This class contains all database-specific code and depends on:
    - SQLAlchemy (infrastructure)
    - AccountModel (infrastructure ORM mapping)

    It implements the IAccountRepository interface (domain) and returns
    domain entities, never exposing ORM models to the application layer.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
        """
        self._session = session

    async def find_by_identity(self, identity: str) -> Account | None:
        """Get account by exact identity."""
        result = await self._session.execute(
            select(AccountModel).where(AccountModel.username == identity)
        )
        account_model = result.scalar_one_or_none()

        if account_model is None:
            return None

        return account_model.to_entity()

    async def add(self, account: Account) -> Account:
        """
        Insert a new account.

        The UNIQUE index on ``username`` rejects a second insert of the same
        identity even when both callers passed the existence check.
        """
        account_model = AccountModel.from_entity(account)

        self._session.add(account_model)
        try:
            await self._session.flush()  # Get generated ID without committing
        except IntegrityError as exc:
            logger.debug(f"Insert of '{account.identity}' violated a constraint: {exc.orig}")
            raise DuplicateIdentityException(account.identity) from exc

        return account_model.to_entity()

    async def update(self, account: Account) -> Account:
        """Write the password secret of an existing account."""
        result = await self._session.execute(
            update(AccountModel)
            .where(AccountModel.username == account.identity)
            .values(
                {
                    AccountModel.password_hash: account.password.digest,
                    AccountModel.password_salt: account.password.salt,
                    AccountModel.password_scheme: account.password.scheme,
                }
            )
        )

        if result.rowcount == 0:
            raise AccountNotFoundException(account.identity)

        await self._session.flush()

        return account
