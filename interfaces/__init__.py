"""Interfaces package for PropStore - abstract protocols for settings implementations."""

from .settings import Settings, Stream

__all__ = [
    "Settings",
    "Stream",
]
