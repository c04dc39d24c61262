"""Logging configuration for the videoplayer package."""

import logging

from .config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure logging for the package.

    Args:
        level: Name of the log level, e.g. "INFO" or "DEBUG"
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # Force reconfiguration to avoid duplicates
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
