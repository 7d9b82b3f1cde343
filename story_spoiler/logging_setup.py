"""Central logging configuration for the suite.

Applies a root stdout handler so all module loggers emit INFO-level logs
without requiring per-module setup. Keeps httpx transport chatter at WARNING
and avoids duplicate handlers when test runners configure logging repeatedly.
"""
from __future__ import annotations
import logging
from logging.config import dictConfig

_DICT_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
    },
}

def configure_logging() -> None:
    """Configure suite-wide logging once.

    If the root logger already has handlers, return to prevent duplicate output
    (pytest and behave both install their own capture handlers).
    """
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_DICT_CONFIG)
