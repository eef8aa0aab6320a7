"""Utility functions for the media query sorter."""

from .error_handlers import (
    ConfigurationError,
    MediaQuerySortError,
    log_error_with_context,
)

__all__ = [
    "ConfigurationError",
    "MediaQuerySortError",
    "log_error_with_context",
]
