"""Logging configuration for the ledger process."""

import logging

from inventory_auth.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings.

    Debug mode forces DEBUG level regardless of ``log_level``.

    Args:
        settings: Application settings
    """
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # SQLAlchemy logs through its own loggers; keep them quiet unless echoing
    if not settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
