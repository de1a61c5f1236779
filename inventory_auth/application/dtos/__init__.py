"""Data Transfer Objects for application layer."""

from inventory_auth.application.dtos.account_dto import AccountDTO
from inventory_auth.application.dtos.auth_dto import (
    LoginDTO,
    RegisterDTO,
    ResetPasswordDTO,
)

__all__ = ["AccountDTO", "LoginDTO", "RegisterDTO", "ResetPasswordDTO"]
