"""Logging configuration for strings_explorer.

Every module obtains its logger through :func:`get_logger`, which places it
under the ``strings_explorer`` hierarchy so that a single call to
:func:`setup_logging` controls the whole package.
"""

import logging
import os
from typing import Optional

LOGGER_NAME = "strings_explorer"
LOG_LEVEL_ENV = "STRINGS_EXPLORER_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure logging for the strings_explorer package.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to the ``STRINGS_EXPLORER_LOG_LEVEL`` environment
            variable, then to WARNING.
        log_file: Optional file path for log output.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)

    log_level = getattr(logging, str(level).upper(), None)
    if not isinstance(log_level, int):
        log_level = getattr(logging, DEFAULT_LEVEL)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module.

    Args:
        name: Logger name, typically ``__name__``.

    Returns:
        Logger nested under the package logger.
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
