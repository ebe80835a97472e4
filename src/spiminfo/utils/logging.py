"""Logging utilities."""

import logging
from typing import Union

# Configure Python logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

PACKAGE_LOGGER = "spiminfo"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def set_log_level(level: Union[str, int]) -> logging.Logger:
    """Set the level of the package logger.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level = level.upper()
    logger = get_logger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger
