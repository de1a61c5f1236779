"""Repository implementations using SQLAlchemy."""

from inventory_auth.infrastructure.repositories.account_repository_impl import (
    AccountRepository,
)
from inventory_auth.infrastructure.repositories.unit_of_work_impl import UnitOfWork

__all__ = ["AccountRepository", "UnitOfWork"]
