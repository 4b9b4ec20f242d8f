"""Process-wide logging setup."""

from __future__ import annotations

import logging

from marketplace.core.config import Settings


def configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.logging.level
    logging.basicConfig(level=level, format=settings.logging.format, force=True)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database.echo else logging.WARNING
    )
    logging.getLogger(__name__).debug("Logging configured at level %s", level)


__all__ = ["configure_logging"]
