"""Account domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from inventory_auth.domain.exceptions import InvalidEntityStateException

DIGEST_LENGTH = 32
SALT_LENGTH = 16
IDENTITY_MAX_LENGTH = 128


@dataclass(frozen=True)
class HashedSecret:
    """
    Stored, non-reversible form of a secret (login password or recovery PIN).

    ``scheme`` names the derivation parameters the digest was produced with
    (for example ``"pbkdf2_sha256$100000"``) so that a stronger scheme can be
    introduced later while older digests still verify.
    """

    digest: bytes
    salt: bytes
    scheme: str

    def __post_init__(self):
        if len(self.digest) != DIGEST_LENGTH:
            raise InvalidEntityStateException(
                f"Secret digest must be {DIGEST_LENGTH} bytes, got {len(self.digest)}."
            )

        if len(self.salt) != SALT_LENGTH:
            raise InvalidEntityStateException(
                f"Secret salt must be {SALT_LENGTH} bytes, got {len(self.salt)}."
            )

        if not self.scheme:
            raise InvalidEntityStateException("Secret scheme tag is required.")

    def __repr__(self) -> str:
        return f"HashedSecret(scheme={self.scheme!r})"


@dataclass
class Account:
    """
    Account domain entity: one local login for the ledger.

    This is a pure Python class with NO dependencies on SQLAlchemy or any
    framework. The login password and the recovery PIN are two parallel
    ``HashedSecret`` fields with independent salts.

    Lifecycle:
    - created once by registration with every field populated
    - ``password`` replaced only through ``change_password``
    - ``recovery`` and ``created_at`` never change after registration
    """

    identity: str
    password: HashedSecret
    recovery: HashedSecret
    created_at: datetime
    id: Optional[int] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        These are structural validations - they ensure the entity can exist
        in a valid state. Violations indicate the entity cannot be created.
        """
        if not self.identity or len(self.identity.strip()) == 0:
            raise InvalidEntityStateException(
                "Identity cannot be empty. Account must have a username."
            )

        if self.identity != self.identity.strip():
            raise InvalidEntityStateException(
                f"Identity '{self.identity}' must be stored without surrounding whitespace."
            )

        if self.password.salt == self.recovery.salt:
            raise InvalidEntityStateException(
                "Password and recovery secrets must not share a salt."
            )

    def change_password(self, new_password: HashedSecret) -> None:
        """
        Replace the stored password secret.

        Business rule: a new password always comes with a fresh salt.

        Args:
            new_password: The freshly hashed password

        Raises:
            InvalidEntityStateException: If the salt is reused
        """
        if new_password.salt in (self.password.salt, self.recovery.salt):
            raise InvalidEntityStateException(
                "A new password must be hashed with a fresh salt."
            )

        self.password = new_password
