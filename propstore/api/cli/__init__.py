"""Command-line interface for PropStore."""

from .main import main, main_sync

__all__ = ["main", "main_sync"]
