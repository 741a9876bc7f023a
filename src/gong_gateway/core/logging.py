"""
Logging configuration for the Gong Gateway

The gateway is a library: it only ever configures the ``gong_gateway``
logger tree and leaves the root logger to the host application.
"""

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "gong_gateway"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(level: Optional[str] = None, stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Send gateway logs to a console stream

    Replaces any handler a previous call installed, so calling it again only
    changes the level or stream. Records handled here do not propagate to the
    root logger, which keeps host handlers from printing them a second time.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream, stdout by default

    Returns:
        The ``gong_gateway`` logger
    """
    from .config import get_settings

    log_level = level or get_settings().log_level

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for handler in logger.handlers[:]:
        if getattr(handler, "_gong_gateway_console", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler._gong_gateway_console = True
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module

    Args:
        name: Module name, either relative (``integrations``) or a
            ``__name__`` already inside the package

    Returns:
        Logger instance under ``gong_gateway``
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
