"""Repository interfaces - define contracts for data access."""

from inventory_auth.domain.repositories.account_repository import IAccountRepository
from inventory_auth.domain.repositories.unit_of_work import IUnitOfWork

__all__ = ["IAccountRepository", "IUnitOfWork"]
