"""Centralized error handling module."""

import inspect
from enum import Enum
from functools import wraps
from typing import Any, Dict, Optional

from mailpane.utils.logging import get_logger

_logger = None


def _get_logger():
    """Get logger with lazy initialisation."""
    global _logger
    if _logger is None:
        _logger = get_logger(__name__)
    return _logger


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    DATABASE = "database"
    VALIDATION = "validation"
    FILE_SYSTEM = "file_system"
    CONFIGURATION = "configuration"
    NAVIGATION = "navigation"
    UNKNOWN = "unknown"


## Custom Exceptions


class MailpaneError(Exception):
    """Base exception for all mailpane errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Database Errors


class DatabaseError(MailpaneError):
    """Base exception for database-related errors."""

    category = ErrorCategory.DATABASE
    user_message = "A database error occurred"


class DatabaseConnectionError(DatabaseError):
    """Exception for database connection failures."""

    user_message = "Failed to connect to the database"


class MessageNotFoundError(DatabaseError):
    """Exception when a message is not found in the database."""

    user_message = "Message not found"


## Validation Errors


class ValidationError(MailpaneError):
    """Base exception for validation-related errors."""

    category = ErrorCategory.VALIDATION
    user_message = "Invalid input"


class InvalidFolderError(ValidationError):
    """Exception for folder names that cannot be used for an operation."""

    user_message = "Invalid mail folder specified"


## Badge Errors


class BadgeRegistryError(ValidationError):
    """Base exception for badge supplier registration errors."""

    user_message = "Invalid badge supplier registration"


class DuplicateBadgeSupplierError(BadgeRegistryError):
    """Exception when a folder already has a badge supplier."""

    user_message = "Folder already has a badge supplier"


class BadgeRegistryFrozenError(BadgeRegistryError):
    """Exception when registering after startup has finished."""

    user_message = "Badge suppliers can no longer be registered"


## Navigation Errors


class NavigationError(MailpaneError):
    """Exception for routes that cannot be resolved to a view."""

    category = ErrorCategory.NAVIGATION
    user_message = "Unable to open the requested view"


## File System Errors


class FileSystemError(MailpaneError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


## Configuration Errors


class ConfigurationError(MailpaneError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class MissingConfigError(ConfigurationError):
    """Exception for missing configuration settings."""

    user_message = "Missing configuration settings"


class InvalidConfigError(ConfigurationError):
    """Exception for invalid configuration settings."""

    user_message = "Invalid configuration settings"


## Error Handler


class ErrorHandler:
    """Centralized error handling and logging."""

    @staticmethod
    def handle(
        error: Exception, context: str = "", log_traceback: bool = True
    ) -> Dict[str, Any]:
        """Handle errors with logging and user-friendly message."""
        if isinstance(error, MailpaneError):
            _get_logger().error(f"{context}: {error.message}")
            if log_traceback:
                _get_logger().exception(error)
            return error.to_dict()
        else:
            _get_logger().error(f"{context}: {str(error)}")
            if log_traceback:
                _get_logger().exception(error)
            return {
                "error_type": "UnknownError",
                "category": ErrorCategory.UNKNOWN.value,
                "message": str(error),
                "details": {"context": context},
            }

    @staticmethod
    def wrap(func):
        """Decorator turning unexpected exceptions into MailpaneError."""
        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)

                except MailpaneError:
                    raise

                except Exception as e:
                    _get_logger().exception(f"Unexpected error in {func.__name__}")
                    raise MailpaneError(
                        message=f"Unexpected error: {str(e)}",
                        details={"function": func.__name__},
                    ) from e

            return async_wrapper
        else:

            @wraps(func)
            def sync_wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)

                except MailpaneError:
                    raise

                except Exception as e:
                    _get_logger().exception(f"Unexpected error in {func.__name__}")
                    raise MailpaneError(
                        message=f"Unexpected error: {str(e)}",
                        details={"function": func.__name__},
                    ) from e

            return sync_wrapper


## Utility Functions


def format_error_message(error: Optional[Exception]) -> str:
    """Format an error message for display."""
    if isinstance(error, MailpaneError):
        return error.message
    return "An unexpected error occurred - check logs for details."
