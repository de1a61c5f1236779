"""Authentication DTOs for the application layer.

The input policy for every auth operation lives here as pydantic
validators. Fields are validated in declaration order, so the first error
reported always belongs to the earliest failing field (identity, then
password, then PIN).
"""

import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic_core import PydanticCustomError

from inventory_auth.domain.entities.account import IDENTITY_MAX_LENGTH

PASSWORD_MIN_LENGTH = 6
PIN_MIN_LENGTH = 4
PIN_MAX_LENGTH = 8

_PIN_PATTERN = re.compile(rf"[0-9]{{{PIN_MIN_LENGTH},{PIN_MAX_LENGTH}}}")


def strip_whitespace(v: str | None) -> str | None:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


def require_identity(value: str) -> str:
    """Reject identities that are empty once trimmed or too long to store."""
    if not value:
        raise PydanticCustomError("identity_required", "Username is required")
    if len(value) > IDENTITY_MAX_LENGTH:
        raise PydanticCustomError(
            "identity_too_long",
            "Username must be at most {max_length} characters",
            {"max_length": IDENTITY_MAX_LENGTH},
        )
    return value


def check_password(value: str) -> str:
    """Enforce the minimum password length; whitespace-only never passes.

    Passwords are checked as typed and never trimmed.
    """
    if not value.strip() or len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            "password_too_short",
            "Password must be at least {min_length} characters",
            {"min_length": PASSWORD_MIN_LENGTH},
        )
    return value


def check_pin(value: str) -> str:
    """A recovery PIN is 4 to 8 ASCII digits."""
    if not _PIN_PATTERN.fullmatch(value):
        raise PydanticCustomError(
            "pin_format",
            "PIN must be {min_length}-{max_length} digits",
            {"min_length": PIN_MIN_LENGTH, "max_length": PIN_MAX_LENGTH},
        )
    return value


def require_login_field(value: str) -> str:
    if not value:
        raise PydanticCustomError(
            "login_field_required", "Username and password are required"
        )
    return value


Identity = Annotated[str, BeforeValidator(strip_whitespace), AfterValidator(require_identity)]
Password = Annotated[str, AfterValidator(check_password)]
RecoveryPin = Annotated[str, AfterValidator(check_pin)]


class RegisterDTO(BaseModel):
    """
    DTO for account registration.

    Validation:
    - identity: trimmed, 1-128 characters
    - password: at least 6 characters, not only whitespace
    - pin: 4-8 ASCII digits
    """

    identity: Identity
    password: Password
    pin: RecoveryPin

    model_config = ConfigDict(hide_input_in_errors=True)


class LoginDTO(BaseModel):
    """DTO for login. Both fields must be present; identity is trimmed."""

    identity: Annotated[
        str, BeforeValidator(strip_whitespace), AfterValidator(require_login_field)
    ]
    password: Annotated[str, AfterValidator(require_login_field)]

    model_config = ConfigDict(hide_input_in_errors=True)


class ResetPasswordDTO(BaseModel):
    """
    DTO for password reset.

    The new password is checked before the identity is looked at, so a
    weak password is reported even for an unknown identity.
    """

    new_password: Password
    identity: Annotated[str, BeforeValidator(strip_whitespace)]

    model_config = ConfigDict(hide_input_in_errors=True)
