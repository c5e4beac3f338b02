"""Common utilities and shared functionality."""

from .exceptions import (
    ConfigurationError,
    TunnelMismatchError,
    TunnelUpdateError,
    ValidationError,
    Violation,
)
from .logging import get_logger, setup_logging
from .utils import format_location

__all__ = [
    # Exceptions
    "TunnelUpdateError",
    "ValidationError",
    "Violation",
    "ConfigurationError",
    "TunnelMismatchError",
    # Logging
    "get_logger",
    "setup_logging",
    # Utils
    "format_location",
]
