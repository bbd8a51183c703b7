"""Argument parser utilities for PropStore CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .props_parser import add_props_subparsers

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_props_subparsers",
]
