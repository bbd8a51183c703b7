"""PropStore Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the PropStore system. I/O
failures are not part of it: ``OSError`` and its subclasses propagate to the
caller unchanged.
"""

from typing import Optional, Any, Dict


class PropStoreError(Exception):
    """Base exception for all PropStore-specific errors.

    This is the root exception class that all other PropStore exceptions
    inherit from. It carries optional context and the underlying cause.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize PropStore error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., file paths, keys)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class ValidationError(PropStoreError):
    """Raised when data validation fails."""

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class ParsingError(PropStoreError):
    """Raised when a data line of a property stream cannot be parsed.

    A data line is any line that is neither blank nor a comment. The only
    way such a line can be malformed is by lacking the ``=`` separator.
    """

    def __init__(
        self,
        line: str,
        line_number: Optional[int] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize parsing error.

        Args:
            line: The offending line, without its terminator
            line_number: 1-based position of the line in its stream, if known
            reason: Description of what went wrong
            context: Optional additional context
        """
        prefix = f"Parsing error (line={line_number})" if line_number else "Parsing error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context)
        self.line = line
        self.line_number = line_number
        self.reason = reason


class ConfigurationError(PropStoreError):
    """Raised when configuration is invalid or missing.

    This exception is used for errors related to configuration files,
    environment variables, or backend selection.
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
