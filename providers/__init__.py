"""Providers package for PropStore - concrete implementations of abstract interfaces."""

from .codec import format_line, is_comment_or_blank, parse_line
from .stores import PropertiesStore

__all__ = [
    # Codec
    "format_line",
    "is_comment_or_blank",
    "parse_line",

    # Stores
    "PropertiesStore",
]
