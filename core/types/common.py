"""PropStore Core Types - Common type definitions and aliases.

This module contains type definitions, enums, constants and type aliases used
throughout the PropStore system.
"""

from enum import Enum
from typing import NewType


# String-based type aliases for better semantic clarity
Key = NewType("Key", str)                   # Property name, e.g. "HttpPort"
Value = NewType("Value", str)               # Raw stored value, possibly comma-joined

# Numeric type aliases
LineNumber = NewType("LineNumber", int)     # 1-based line numbers


# Wire format constants
KEY_VALUE_SEPARATOR = "="
LIST_SEPARATOR = ","
LINE_TERMINATOR = "\n"
COMMENT_PREFIXES = ("#", "//", "/*")


class Backend(Enum):
    """Enumeration of storage backends a settings object can be built on."""

    PROPERTIES = "properties"

    @classmethod
    def from_string(cls, value: str) -> "Backend":
        """Convert string to Backend enum.

        Raises:
            ValueError: If no backend has the given name
        """
        return cls(value.strip().lower())


class LoadMode(Enum):
    """How ``load`` treats a data line that has no ``=`` separator."""

    # Skip the line, log it and record it in the load report
    LENIENT = "lenient"
    # Raise ParsingError on the first malformed line
    STRICT = "strict"

    @classmethod
    def from_strict(cls, strict: bool) -> "LoadMode":
        """Map a boolean ``strict`` flag to a load mode."""
        return cls.STRICT if strict else cls.LENIENT
