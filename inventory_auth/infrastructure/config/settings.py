"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_KDF_ITERATIONS = 100_000


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.database_url)
        print(settings.kdf_iterations)
    """

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./inventory.db")
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    db_busy_timeout: float = Field(default=5.0, gt=0, description="SQLite lock wait in seconds")

    # Security
    kdf_iterations: int = Field(
        default=MIN_KDF_ITERATIONS,
        ge=MIN_KDF_ITERATIONS,
        description="PBKDF2-HMAC-SHA256 iterations for newly hashed secrets. "
        "Existing digests keep verifying with the count stored in their scheme tag.",
    )
    equalize_login_timing: bool = Field(
        default=True,
        description="Run a dummy derivation when the login identity is unknown "
        "so it cannot be told apart from a wrong password by timing.",
    )

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="Inventory Ledger")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        """Check if the credential store is a SQLite database."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
