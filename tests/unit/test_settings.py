"""Unit tests for settings, logging setup and the composition root."""

import logging

import pytest
from pydantic import ValidationError

from inventory_auth.bootstrap import build_container
from inventory_auth.infrastructure.config.logging_config import configure_logging
from inventory_auth.infrastructure.config.settings import Settings

pytestmark = pytest.mark.unit


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults():
    settings = make_settings()

    assert settings.database_url == "sqlite+aiosqlite:///./inventory.db"
    assert settings.kdf_iterations == 100_000
    assert settings.equalize_login_timing is True
    assert settings.is_sqlite is True
    assert settings.environment == "dev"


def test_environment_overrides(monkeypatch):
    """Test values are read case-insensitively from the environment."""
    monkeypatch.setenv("KDF_ITERATIONS", "250000")
    monkeypatch.setenv("environment", "prod")
    monkeypatch.setenv("EQUALIZE_LOGIN_TIMING", "false")

    settings = make_settings()

    assert settings.kdf_iterations == 250_000
    assert settings.environment == "prod"
    assert settings.equalize_login_timing is False


def test_rejects_weak_iteration_count():
    with pytest.raises(ValidationError):
        make_settings(kdf_iterations=99_999)


def test_non_sqlite_url():
    settings = make_settings(database_url="postgresql+asyncpg://localhost/ledger")

    assert settings.is_sqlite is False


@pytest.mark.parametrize("db_echo, expected", [(False, logging.WARNING), (True, logging.NOTSET)])
def test_configure_logging_sqlalchemy_level(db_echo, expected):
    """Test the SQLAlchemy engine logger is quieted unless echo is on."""
    engine_logger = logging.getLogger("sqlalchemy.engine")
    previous = engine_logger.level
    engine_logger.setLevel(logging.NOTSET)
    try:
        configure_logging(make_settings(db_echo=db_echo))

        assert engine_logger.level == expected
    finally:
        engine_logger.setLevel(previous)


@pytest.mark.asyncio
async def test_build_container_wires_settings(tmp_path):
    """Test the container's hasher and service follow the given settings."""
    settings = make_settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}",
        kdf_iterations=120_000,
        equalize_login_timing=False,
    )

    container = build_container(settings, configure_logs=False)
    try:
        assert container.settings is settings
        assert container.secret_hasher.scheme == "pbkdf2_sha256$120000"
        assert container.auth_service._dummy_secret is None
    finally:
        await container.dispose()
