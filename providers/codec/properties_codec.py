"""
Line codec for the ``.properties`` text format.

Every data line has the form ``<key> = <value>``. The first ``=`` separates
key from value, and surrounding whitespace on both sides is dropped when
reading. Blank lines and lines starting with ``#``, ``//`` or ``/*`` carry no
data. Nothing is escaped: a key containing ``=`` or a list element containing
``,`` does not survive a round trip.
"""

from typing import Optional, Sequence

from core.exceptions import ParsingError
from core.models import Property
from core.types import (
    COMMENT_PREFIXES,
    KEY_VALUE_SEPARATOR,
    LINE_TERMINATOR,
    LIST_SEPARATOR,
    Key,
    Value,
)


def format_line(key: str, value: str) -> str:
    """Format one property as a line of the text format.

    Args:
        key: Property name
        value: Property value

    Returns:
        ``"<key> = <value>\\n"``
    """
    return f"{key} {KEY_VALUE_SEPARATOR} {value}{LINE_TERMINATOR}"


def is_comment_or_blank(line: str) -> bool:
    """Return True if the line carries no property."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIXES)


def parse_line(line: str, line_number: Optional[int] = None) -> Optional[Property]:
    """Parse one line of the text format.

    Args:
        line: Raw line, with or without its terminator
        line_number: 1-based position of the line, used in error reports

    Returns:
        The parsed property, or None for blank and comment lines

    Raises:
        ParsingError: If a data line has no ``=`` separator
    """
    stripped = line.strip()
    if is_comment_or_blank(stripped):
        return None

    key, separator, value = stripped.partition(KEY_VALUE_SEPARATOR)
    if not separator:
        raise ParsingError(
            line=stripped,
            line_number=line_number,
            reason=f"missing '{KEY_VALUE_SEPARATOR}' separator",
        )

    return Property(key=Key(key.strip()), value=Value(value.strip()))


def join_values(values: Sequence[str]) -> str:
    """Join list elements into one compound value. An empty list joins to ``""``."""
    return LIST_SEPARATOR.join(values)


def split_values(value: str) -> list[str]:
    """Split a compound value into its elements.

    Elements are not trimmed, and an empty value yields ``[""]``.
    """
    return value.split(LIST_SEPARATOR)
