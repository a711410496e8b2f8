"""Process-wide logging setup."""

from __future__ import annotations

import logging.config

from economy.core.config import Settings


def configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.logging.level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": settings.logging.format},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "economy": {"handlers": ["console"], "level": level, "propagate": False},
                "sqlalchemy.engine": {"level": "INFO" if settings.database.echo else "WARNING"},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }
    )


__all__ = ["configure_logging"]
