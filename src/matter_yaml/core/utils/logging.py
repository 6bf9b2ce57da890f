"""Logging setup shared by the library and the CLI"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "warning") -> None:
    """Configure root logging with the package format at the named level."""
    lvl = logging.getLevelName(level.upper())
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, typically called with __name__."""
    return logging.getLogger(name)
