"""PropStore Core Types Package - Common type definitions and aliases.

The types are organized into logical groups:
- Backend and load mode enumerations
- Key, value and line number aliases
- Wire format constants
"""

from .common import (
    COMMENT_PREFIXES,
    KEY_VALUE_SEPARATOR,
    LINE_TERMINATOR,
    LIST_SEPARATOR,
    Backend,
    Key,
    LineNumber,
    LoadMode,
    Value,
)

__all__ = [
    # Enums
    "Backend",
    "LoadMode",

    # String types
    "Key",
    "Value",

    # Numeric types
    "LineNumber",

    # Constants
    "COMMENT_PREFIXES",
    "KEY_VALUE_SEPARATOR",
    "LINE_TERMINATOR",
    "LIST_SEPARATOR",
]
