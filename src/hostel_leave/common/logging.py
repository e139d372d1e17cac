"""Logging setup shared by the server app and the client registry."""

from __future__ import annotations

import logging
import logging.config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "level": level.upper(),
                },
            },
            "loggers": {
                "hostel_leave": {
                    "handlers": ["console"],
                    "level": level.upper(),
                    "propagate": False,
                },
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }
    )
