"""Codec providers package for PropStore - line-level text format encoding."""

from .properties_codec import (
    format_line,
    is_comment_or_blank,
    join_values,
    parse_line,
    split_values,
)

__all__ = [
    "format_line",
    "is_comment_or_blank",
    "parse_line",
    "join_values",
    "split_values",
]
