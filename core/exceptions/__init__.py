"""PropStore Core Exceptions Package - Core exception classes for error handling.

The exception hierarchy is designed to:
- Provide specific exception types for different error categories
- Leave I/O errors (``OSError``) to propagate untouched
- Support structured error messages and context
"""

from .core import (
    ConfigurationError,
    ParsingError,
    PropStoreError,
    ValidationError,
)

__all__ = [
    # Base exception
    "PropStoreError",

    # Domain-specific exceptions
    "ValidationError",
    "ParsingError",
    "ConfigurationError",
]
