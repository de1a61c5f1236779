"""Integration test fixtures.

Provides a real SQLite database (aiosqlite) and the real PBKDF2 hasher,
wired through the same composition root the application uses. Each test
gets its own database file so concurrent connections behave like the
desktop app's on-disk store.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio

from inventory_auth.bootstrap import AuthContainer, build_container
from inventory_auth.infrastructure.config.settings import Settings
from inventory_auth.infrastructure.repositories.unit_of_work_impl import UnitOfWork


@pytest_asyncio.fixture
async def container(tmp_path) -> AsyncGenerator[AuthContainer]:
    """Build the auth collaborators over a fresh database file."""
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}",
        environment="test",
        _env_file=None,
    )
    container = build_container(settings, configure_logs=False)
    await container.create_schema()

    yield container

    await container.dispose()


@pytest_asyncio.fixture
async def auth_service(container):
    """AuthService backed by the real database and hasher."""
    return container.auth_service


@pytest_asyncio.fixture
async def uow_factory(container):
    """Factory for units of work on the test database."""

    def factory() -> UnitOfWork:
        return UnitOfWork(container.session_factory)

    return factory
