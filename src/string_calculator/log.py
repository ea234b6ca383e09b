"""Logging configuration."""

from __future__ import annotations

import logging
from logging.config import dictConfig


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Configure console logging on stderr for the whole process."""
    if isinstance(level, str):
        level = level.upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "stream": "ext://sys.stderr",
                    "level": level,
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": level,
                }
            },
        }
    )
