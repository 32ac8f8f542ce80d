"""Logging setup."""

import logging

from .settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("blog_api").setLevel(level or settings.LOG_LEVEL)

    # SQL echo is controlled by DATABASE_ECHO, not the app log level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
