"""Logger configuration for objscan."""

import logging
import os
import sys

__all__ = ["setup_logger", "get_logger"]

LOG_LEVEL_ENV = "OBJSCAN_LOG_LEVEL"


def setup_logger(
    name: str = "objscan",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); falls back
            to the OBJSCAN_LOG_LEVEL environment variable, then WARNING
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Return a child of the package logger for a module."""
    return logging.getLogger(module_name)


# The package logger carries the handler; module loggers propagate to it
setup_logger()
