"""Domain exceptions - business rule violations."""

from inventory_auth.domain.exceptions.domain_exceptions import (
    AccountNotFoundException,
    DomainException,
    DuplicateIdentityException,
    InvalidEntityStateException,
    StorageException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "DuplicateIdentityException",
    "AccountNotFoundException",
    "StorageException",
]
