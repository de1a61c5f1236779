"""Application layer exceptions."""

from inventory_auth.application.exceptions.exceptions import (
    AccountNotFoundError,
    ApplicationError,
    DuplicateIdentityError,
    InvalidCredentialsError,
    InvalidPinError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "ValidationError",
    "DuplicateIdentityError",
    "AccountNotFoundError",
    "InvalidCredentialsError",
    "InvalidPinError",
]
