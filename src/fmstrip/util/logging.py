"""Logging setup: stderr only, since stdout carries the book JSON"""

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(level: str = "warning") -> None:
    """Configure root logging at level (e.g. 'info', 'debug'), writing to stderr."""
    lvl = logging.getLevelName(level.upper())
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    logging.basicConfig(level=lvl, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
