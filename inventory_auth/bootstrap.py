"""Composition root - where concrete dependencies are wired up.

This module:
1. Lives in the outermost layer
2. Creates concrete implementations (SQLAlchemy store, PBKDF2 hasher)
3. Injects them into the application service
4. Is never imported by inner layers

Nothing here is a module-level singleton: the GUI shell builds one
``AuthContainer`` at start-up and hands its ``auth_service`` explicitly to
every form that needs it.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from inventory_auth.application.services.auth_service import AuthService
from inventory_auth.domain.repositories.unit_of_work import IUnitOfWork
from inventory_auth.domain.services.secret_hasher import ISecretHasher
from inventory_auth.infrastructure.config.logging_config import configure_logging
from inventory_auth.infrastructure.config.settings import Settings, get_settings
from inventory_auth.infrastructure.persistence.database import (
    create_database_engine,
    create_schema,
    create_session_factory,
)
from inventory_auth.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from inventory_auth.infrastructure.security.pbkdf2_secret_hasher import Pbkdf2SecretHasher

logger = logging.getLogger(__name__)


@dataclass
class AuthContainer:
    """Every long-lived auth collaborator, built from one Settings object."""

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    secret_hasher: ISecretHasher
    auth_service: AuthService

    async def create_schema(self) -> None:
        """Create the credential tables if the database is new."""
        await create_schema(self.engine)

    async def dispose(self) -> None:
        """Close every pooled database connection."""
        await self.engine.dispose()


def build_container(
    settings: Settings | None = None, configure_logs: bool = True
) -> AuthContainer:
    """
    Build the auth collaborators.

    Dependency graph:
        AuthService
            → uow_factory() → UnitOfWork → session factory → engine → Settings
            → Pbkdf2SecretHasher → Settings.kdf_iterations

    Args:
        settings: Settings to use; loaded from the environment when omitted
        configure_logs: Set up root logging from ``settings``

    Returns:
        AuthContainer with every dependency injected
    """
    settings = settings or get_settings()
    if configure_logs:
        configure_logging(settings)

    engine = create_database_engine(settings)
    session_factory = create_session_factory(engine)
    secret_hasher = Pbkdf2SecretHasher(iterations=settings.kdf_iterations)

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    auth_service = AuthService(
        uow_factory=uow_factory,
        secret_hasher=secret_hasher,
        equalize_login_timing=settings.equalize_login_timing,
    )

    logger.debug(
        f"Auth container ready for {settings.app_name} {settings.app_version} "
        f"({settings.environment}, scheme {secret_hasher.scheme})"
    )

    return AuthContainer(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        secret_hasher=secret_hasher,
        auth_service=auth_service,
    )
