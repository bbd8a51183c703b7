"""Property commands for PropStore CLI."""

import argparse

from loguru import logger

from interfaces.settings import Settings
from propstore.core.config import StoreConfig, find_config_files
from registry import create_settings

from ..main import setup_logging


def _open_settings(args: argparse.Namespace, strict: bool | None = None) -> Settings:
    """Build an empty store configured from the config file, environment and flags.

    Without ``--config`` the first file found by ``find_config_files`` is used.
    """
    config_file = args.config
    if config_file is None:
        found = find_config_files()
        if found:
            config_file = found[0]
            logger.debug(f"Using config file {config_file}")

    config = StoreConfig.load(
        config_file,
        encoding=args.encoding,
        strict=args.strict if strict is None else strict,
    )
    if config.debug and not args.verbose:
        setup_logging(verbose=True)

    return create_settings(config)


def get_command(args: argparse.Namespace) -> int:
    """Print one property. Exits non-zero when the key is absent."""
    settings = _open_settings(args)
    settings.load_from_file(args.file)

    if args.list:
        values = settings.property_slice(args.key)
        if values is None:
            logger.error(f"Property not found: {args.key}")
            return 1
        for value in values:
            print(value)
        return 0

    value = settings.property(args.key)
    if value is None:
        logger.error(f"Property not found: {args.key}")
        return 1
    print(value)
    return 0


def set_command(args: argparse.Namespace) -> int:
    """Set one property and write the file back.

    Rewriting drops comments and malformed lines, so a file with malformed
    lines is left untouched unless ``--force`` is given.
    """
    settings = _open_settings(args)
    if args.file.exists():
        report = settings.load_from_file(args.file)
        if not report.ok and not args.force:
            logger.error(
                f"{len(report.errors)} malformed line(s) in {args.file} would be dropped; "
                f"use --force to rewrite anyway"
            )
            return 1

    if len(args.values) == 1:
        settings.set_property(args.key, args.values[0])
    else:
        settings.set_property_slice(args.key, args.values)

    settings.store_to_file(args.file)
    logger.info(f"Set {args.key} in {args.file}")
    return 0


def keys_command(args: argparse.Namespace) -> int:
    """Print every property name, sorted."""
    settings = _open_settings(args)
    settings.load_from_file(args.file)

    for key in sorted(settings.property_names()):
        print(key)
    return 0


def check_command(args: argparse.Namespace) -> int:
    """Report malformed lines. Exits non-zero when any were found."""
    settings = _open_settings(args, strict=False)
    report = settings.load_from_file(args.file)

    for error in report.errors:
        print(f"{args.file}:{error}")

    if not report.ok:
        logger.error(f"{len(report.errors)} malformed line(s) in {args.file}")
        return 1

    logger.info(f"{args.file}: {report.loaded} properties, no malformed lines")
    return 0


COMMANDS = {
    "get": get_command,
    "set": set_command,
    "keys": keys_command,
    "check": check_command,
}
