"""Logging configuration.

The package logs through ``logging.getLogger(__name__)`` and never installs
handlers on its own. Applications that want to see those records call
``configure_logging``.
"""

import logging
import sys

from outcomes.shared.config import get_settings

PACKAGE_LOGGER = "outcomes"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure logging for the package.

    Attaches a stdout handler to the package logger (once) and sets its level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``Settings.log_level``.

    Returns:
        The configured package logger
    """
    if level is None:
        level = get_settings().log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Add console handler if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
