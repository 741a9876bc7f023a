"""Core module for configuration, logging, and exceptions"""

from .config import get_settings, GongSettings, DEFAULT_GONG_API_BASE_URL
from .logging import setup_logging, get_logger
from .exceptions import (
    GongGatewayException,
    GongAPIError,
    MissingCredentialsError
)

__all__ = [
    # Config
    "get_settings",
    "GongSettings",
    "DEFAULT_GONG_API_BASE_URL",
    # Logging
    "setup_logging",
    "get_logger",
    # Exceptions
    "GongGatewayException",
    "GongAPIError",
    "MissingCredentialsError"
]
