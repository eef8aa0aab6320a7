"""
Error handling utilities for the media query sorter.

The comparison engine itself never raises: every query string, however
malformed, produces a definite ordering. Errors only exist at the edges of
the package, where configuration is loaded and sort policies are resolved.

Classes:
    MediaQuerySortError: Base exception for all package errors.
    ConfigurationError: Exception for configuration and policy errors.

Functions:
    log_error_with_context: Log error with full context for debugging.
"""

import logging
import traceback
from typing import Any, Dict, Optional


class MediaQuerySortError(Exception):
    """
    Base exception for media query sorting errors.

    Attributes:
        message: Error message describing what went wrong.
        stage: Optional stage where the error occurred.
        original_error: Optional underlying exception that was wrapped.
    """

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize MediaQuerySortError.

        Args:
            message: Error message describing the issue.
            stage: Optional stage name.
            original_error: Optional underlying exception that caused this error.
        """
        self.message = message
        self.stage = stage
        self.original_error = original_error
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for logging.

        Returns:
            Dictionary containing error_type, message, stage and original
            error information if available.
        """
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "stage": self.stage,
        }

        if self.original_error:
            result["original_error_type"] = type(self.original_error).__name__
            result["original_error_message"] = str(self.original_error)

        return result


class ConfigurationError(MediaQuerySortError):
    """
    Exception for configuration errors.

    Raised for unreadable config files and for sort policy names that do
    not resolve to a comparator.

    Attributes:
        config_key: Optional configuration key that caused the error.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Error message describing configuration issue.
            config_key: Optional configuration key that is invalid.
            original_error: Optional underlying exception that caused this error.
        """
        super().__init__(
            message=message,
            stage="configuration",
            original_error=original_error,
        )
        self.config_key = config_key

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary including config key.

        Returns:
            Dictionary with all base fields plus config_key.
        """
        result = super().to_dict()
        result["config_key"] = self.config_key
        return result


def log_error_with_context(
    error: Exception, logger: logging.Logger, context: Dict[str, Any]
) -> None:
    """
    Log error with context information for debugging.

    Logs error type, message, and every context entry. In DEBUG mode, also
    logs the full stack trace.

    Args:
        error: The exception that occurred.
        logger: Logger instance to use for logging.
        context: Dictionary with contextual information (stage, path, etc.).
    """
    error_type = type(error).__name__
    stage = context.get("stage", "unknown")

    logger.error(f"Error in {stage}: [{error_type}] {error}")

    if isinstance(error, MediaQuerySortError) and error.original_error:
        original_type = type(error.original_error).__name__
        logger.error(f"  Original error: [{original_type}] {error.original_error}")

    for key, value in context.items():
        if key != "stage":
            logger.error(f"  {key}: {value}")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Stack trace:")
        logger.debug(traceback.format_exc())
