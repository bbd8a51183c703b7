"""Main argument parser for PropStore CLI."""

import argparse
from pathlib import Path


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from propstore import __version__

    parser = argparse.ArgumentParser(
        prog="propstore",
        description="Read and write .properties configuration files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  propstore set app.properties HttpPort 8081
  propstore set app.properties LogLevel Debug Info Warn
  propstore get app.properties LogLevel --list
  propstore keys app.properties
  propstore check app.properties --strict
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"propstore {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path (YAML, TOML or JSON; default: propstore.* in the current directory or ~/.config/propstore)",
    )
    parser.add_argument(
        "--encoding",
        help="Text encoding of the properties file (default: utf-8)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on the first malformed line instead of skipping it",
    )
