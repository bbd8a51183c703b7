"""Command implementations for PropStore CLI."""

from .props import COMMANDS, check_command, get_command, keys_command, set_command

__all__ = [
    "COMMANDS",
    "get_command",
    "set_command",
    "keys_command",
    "check_command",
]
