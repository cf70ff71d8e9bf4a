"""
Common exception classes for textops.

This module defines custom exception classes used throughout the package
for better error handling and categorization.
"""

from __future__ import annotations


class TextOpsError(Exception):
    """Base exception class for all textops errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        # Attach any extra attributes provided by callers
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include any additional attributes that were set via kwargs
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class InvalidArgumentError(TextOpsError, ValueError):
    """Raised when a function receives an argument it cannot work with."""

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
        self.argument = argument


class ConfigurationError(TextOpsError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
