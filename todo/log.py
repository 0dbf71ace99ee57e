"""
todo Logging
============
Diagnostics go to stderr through the "todo" logger; stdout is reserved
for the list itself and for prompts.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "todo"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure the package logger. Safe to call more than once."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
