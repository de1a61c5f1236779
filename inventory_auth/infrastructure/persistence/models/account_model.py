"""Account ORM model - infrastructure layer SQLAlchemy mapping.

The table keeps the layout the ledger has always used (``Users`` with
PascalCase columns) so an existing ``inventory.db`` opens unchanged. The
two scheme columns are newer; ``upgrade_users_table`` adds them to
databases created before they existed.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import Connection, DateTime, Index, LargeBinary, String, inspect, text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_auth.domain.entities.account import IDENTITY_MAX_LENGTH, Account, HashedSecret
from inventory_auth.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

# Rows written before scheme tags existed were derived with these parameters
LEGACY_SCHEME = "pbkdf2_sha256$100000"

TABLE_NAME = "Users"
SCHEME_COLUMNS = ("PasswordScheme", "MasterPinScheme")


class AccountModel(Base):
    """
    SQLAlchemy ORM model for the Users table.

    This is an INFRASTRUCTURE detail that maps domain entities to database rows.
    The domain layer never imports this class.
    """

    __tablename__ = TABLE_NAME
    __table_args__ = (
        # Identity - uniqueness is enforced here, not only in application code
        Index("IX_Users_Username", "Username", unique=True),
        {"sqlite_autoincrement": True},
    )

    # Primary key
    id: Mapped[int] = mapped_column("Id", primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        "Username", String(IDENTITY_MAX_LENGTH), nullable=False
    )

    # Login password
    password_hash: Mapped[bytes] = mapped_column("PasswordHash", LargeBinary, nullable=False)
    password_salt: Mapped[bytes] = mapped_column("PasswordSalt", LargeBinary, nullable=False)
    password_scheme: Mapped[str] = mapped_column(
        "PasswordScheme",
        String(64),
        nullable=False,
        default=LEGACY_SCHEME,
        server_default=LEGACY_SCHEME,
    )

    # Recovery PIN
    recovery_hash: Mapped[bytes] = mapped_column("MasterPinHash", LargeBinary, nullable=False)
    recovery_salt: Mapped[bytes] = mapped_column("MasterPinSalt", LargeBinary, nullable=False)
    recovery_scheme: Mapped[str] = mapped_column(
        "MasterPinScheme",
        String(64),
        nullable=False,
        default=LEGACY_SCHEME,
        server_default=LEGACY_SCHEME,
    )

    created_at: Mapped[datetime] = mapped_column(
        "CreatedAt", DateTime(timezone=True), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of AccountModel."""
        return f"AccountModel(id={self.id!r}, username={self.username!r})"

    def to_entity(self) -> Account:
        """
        Convert ORM model to domain entity.

        SQLite hands timestamps back without tzinfo; they were written as
        UTC, so UTC is reattached.

        Returns:
            Account domain entity
        """
        created_at = self.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)

        return Account(
            id=self.id,
            identity=self.username,
            password=HashedSecret(
                digest=self.password_hash,
                salt=self.password_salt,
                scheme=self.password_scheme,
            ),
            recovery=HashedSecret(
                digest=self.recovery_hash,
                salt=self.recovery_salt,
                scheme=self.recovery_scheme,
            ),
            created_at=created_at,
        )

    @staticmethod
    def from_entity(account: Account) -> "AccountModel":
        """
        Create ORM model from domain entity.

        Args:
            account: Domain entity

        Returns:
            ORM model ready for persistence
        """
        model = AccountModel(
            username=account.identity,
            password_hash=account.password.digest,
            password_salt=account.password.salt,
            password_scheme=account.password.scheme,
            recovery_hash=account.recovery.digest,
            recovery_salt=account.recovery.salt,
            recovery_scheme=account.recovery.scheme,
            created_at=account.created_at,
        )

        if account.id is not None:
            model.id = account.id

        return model


def upgrade_users_table(connection: Connection) -> None:
    """Add the scheme columns to a Users table that predates them.

    Existing rows pick up ``LEGACY_SCHEME`` through the column default.
    Runs inside ``AsyncConnection.run_sync``.

    Args:
        connection: Synchronous connection with an open transaction
    """
    existing = {column["name"] for column in inspect(connection).get_columns(TABLE_NAME)}

    for name in SCHEME_COLUMNS:
        if name in existing:
            continue

        logger.info(f"Adding column {TABLE_NAME}.{name} (default {LEGACY_SCHEME})")
        connection.execute(
            text(
                f'ALTER TABLE "{TABLE_NAME}" ADD COLUMN "{name}" VARCHAR(64) '
                f"NOT NULL DEFAULT '{LEGACY_SCHEME}'"
            )
        )
