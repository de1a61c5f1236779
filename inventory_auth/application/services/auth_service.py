"""Authentication service - application layer business logic.

This service orchestrates the account use cases:
1. Register (identity + password + recovery PIN)
2. Login (password check, returns the account)
3. Verify recovery PIN (gate before a password reset)
4. Reset password

DEPENDENCY INVERSION in action:
- AuthService depends on ISecretHasher (abstraction)
- AuthService depends on IUnitOfWork (abstraction)
- No dependencies on cryptography or SQLAlchemy
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inventory_auth.application.dtos.account_dto import AccountDTO
from inventory_auth.application.dtos.auth_dto import (
    LoginDTO,
    RegisterDTO,
    ResetPasswordDTO,
)
from inventory_auth.application.exceptions.exceptions import (
    AccountNotFoundError,
    DuplicateIdentityError,
    InvalidCredentialsError,
    InvalidPinError,
    ValidationError,
)
from inventory_auth.domain.entities.account import Account, HashedSecret
from inventory_auth.domain.exceptions import (
    AccountNotFoundException,
    DuplicateIdentityException,
)
from inventory_auth.domain.repositories.unit_of_work import IUnitOfWork
from inventory_auth.domain.services.secret_hasher import ISecretHasher

logger = logging.getLogger(__name__)

DTO = TypeVar("DTO", bound=BaseModel)

# Verified against on the unknown-identity login path; never matches.
_DUMMY_SECRET = "inventory-auth-timing-equalizer"


class AuthService:
    """
    Authentication service encapsulating account use cases.

    This service:
    1. Depends on abstractions (ISecretHasher, IUnitOfWork)
    2. Holds no per-account state; every call opens its own unit of work
    3. Returns DTOs (or None) on success
    4. Raises application exceptions for every expected failure

    Storage failures surface as ``StorageException`` from the unit of work
    and are not caught here.

    The service does not order calls: ``reset_password`` is only safe after
    a successful ``verify_recovery`` in the same user flow, and sequencing
    those is the caller's job (see ``PasswordRecoveryFlow``).

    Testing:
    - Unit tests use FakeSecretHasher and FakeUnitOfWork
    - No database or real key derivation required in unit tests
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        secret_hasher: ISecretHasher,
        equalize_login_timing: bool = True,
    ):
        """
        Initialize auth service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            secret_hasher: Secret hashing service (abstraction)
            equalize_login_timing: Run one derivation on the unknown-identity
                login path too, so it takes as long as a wrong password
        """
        self._uow_factory = uow_factory
        self._secret_hasher = secret_hasher
        self._dummy_secret: HashedSecret | None = (
            secret_hasher.hash(_DUMMY_SECRET) if equalize_login_timing else None
        )

    async def register(self, identity: str, password: str, pin: str) -> None:
        """
        Create a new account.

        Business rules:
        1. Identity is trimmed and must be non-empty
        2. Password has at least 6 characters, PIN is 4-8 digits
        3. Identity must be unique (checked here and by the store)
        4. Password and PIN are hashed with independent salts

        Args:
            identity: Username
            password: Login password
            pin: Recovery PIN

        Raises:
            ValidationError: If any input breaks the policy
            DuplicateIdentityError: If the identity is already registered
        """
        dto = self._validate(RegisterDTO, identity=identity, password=password, pin=pin)

        async with self._uow_factory() as uow:
            if await uow.accounts.find_by_identity(dto.identity) is not None:
                raise DuplicateIdentityError()

            account = Account(
                identity=dto.identity,
                password=self._secret_hasher.hash(dto.password),
                recovery=self._secret_hasher.hash(dto.pin),
                created_at=datetime.now(UTC),
            )

            try:
                await uow.accounts.add(account)
            except DuplicateIdentityException as exc:
                # Lost a race with a concurrent registration
                logger.info(f"Concurrent registration for '{dto.identity}' rejected by store")
                raise DuplicateIdentityError() from exc

            await uow.commit()

        logger.info(f"Registered account '{dto.identity}'")

    async def login(self, identity: str, password: str) -> AccountDTO:
        """
        Authenticate with identity and password.

        An unknown identity and a wrong password produce the same error.
        Nothing is written on any path.

        Args:
            identity: Username
            password: Login password

        Returns:
            AccountDTO of the authenticated account

        Raises:
            ValidationError: If identity or password is empty
            InvalidCredentialsError: If the identity or password is wrong
        """
        dto = self._validate(LoginDTO, identity=identity, password=password)

        async with self._uow_factory() as uow:
            account = await uow.accounts.find_by_identity(dto.identity)

        if account is None:
            if self._dummy_secret is not None:
                self._secret_hasher.verify(dto.password, self._dummy_secret)
            logger.warning(f"Failed login for '{dto.identity}'")
            raise InvalidCredentialsError()

        if not self._secret_hasher.verify(dto.password, account.password):
            logger.warning(f"Failed login for '{dto.identity}'")
            raise InvalidCredentialsError()

        return AccountDTO.from_entity(account)

    async def verify_recovery(self, identity: str, pin: str) -> None:
        """
        Check the recovery PIN of an account. Read-only.

        Args:
            identity: Username
            pin: Recovery PIN as typed by the user

        Raises:
            AccountNotFoundError: If the identity has no account
            InvalidPinError: If the PIN does not match
        """
        identity = identity.strip()

        async with self._uow_factory() as uow:
            account = await uow.accounts.find_by_identity(identity)

        if account is None:
            raise AccountNotFoundError()

        if not self._secret_hasher.verify(pin, account.recovery):
            logger.warning(f"Invalid recovery PIN for '{identity}'")
            raise InvalidPinError()

    async def reset_password(self, identity: str, new_password: str) -> None:
        """
        Replace an account's password.

        Args:
            identity: Username
            new_password: The new login password

        Raises:
            ValidationError: If the new password is too short
            AccountNotFoundError: If the identity has no account
        """
        dto = self._validate(ResetPasswordDTO, identity=identity, new_password=new_password)

        async with self._uow_factory() as uow:
            account = await uow.accounts.find_by_identity(dto.identity)

            if account is None:
                raise AccountNotFoundError()

            account.change_password(self._secret_hasher.hash(dto.new_password))

            try:
                await uow.accounts.update(account)
            except AccountNotFoundException as exc:
                raise AccountNotFoundError() from exc

            await uow.commit()

        logger.info(f"Password reset for '{dto.identity}'")

    @staticmethod
    def _validate(dto_class: type[DTO], **data: str) -> DTO:
        """
        Build a DTO, reporting only the first policy violation.

        Raises:
            ValidationError: With the message of the earliest failing field
        """
        try:
            return dto_class(**data)
        except PydanticValidationError as exc:
            first_error = exc.errors(include_input=False)[0]
            raise ValidationError(first_error["msg"]) from exc
