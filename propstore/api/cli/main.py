"""CLI entry point for PropStore."""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import PropStoreError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level="INFO",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import add_props_subparsers, create_main_parser, setup_subparsers

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)
    add_props_subparsers(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Arguments to parse (uses sys.argv if None)

    Returns:
        Process exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(getattr(args, "verbose", False))

    from .commands import COMMANDS

    try:
        return COMMANDS[args.command](args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (PropStoreError, PydanticValidationError, OSError, UnicodeError) as e:
        logger.error(f"Command failed: {e}")
        return 1


def main_sync() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    main_sync()
