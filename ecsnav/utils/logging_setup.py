"""Logging configuration for the TUI process.

Records go through Textual's ``TextualHandler`` so they land in the devtools
console while the app owns the terminal (stderr otherwise), plus an optional
log file.
"""

from __future__ import annotations

import logging

from textual.logging import TextualHandler

from ecsnav.constants.defaults import LOG_LEVEL_DEFAULT

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(name: str | None) -> int:
    """Map a level name to a logging level.

    Empty means the default (error); an unknown name means debug.
    """
    value = (name or LOG_LEVEL_DEFAULT).strip().upper()
    if value == "WARN":
        value = "WARNING"
    level = logging.getLevelName(value)
    if isinstance(level, int):
        return level
    return logging.DEBUG


def configure_logging(level: str | None = None, log_file: str | None = None) -> int:
    """Install handlers on the ``ecsnav`` logger and return the effective level."""
    numeric_level = parse_log_level(level)
    logger = logging.getLogger("ecsnav")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    textual_handler = TextualHandler()
    textual_handler.setFormatter(formatter)
    logger.addHandler(textual_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(numeric_level)
    logger.propagate = False
    return numeric_level
