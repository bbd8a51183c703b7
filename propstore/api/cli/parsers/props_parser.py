"""Property command argument parsers for PropStore CLI."""

from pathlib import Path

from .main_parser import add_common_arguments


def add_props_subparsers(subparsers) -> None:
    """Add the get, set, keys and check subparsers.

    Args:
        subparsers: Subparsers object from the main argument parser
    """
    get_parser = subparsers.add_parser(
        "get",
        help="Print the value of a property",
    )
    get_parser.add_argument("file", type=Path, help="Properties file")
    get_parser.add_argument("key", help="Property name")
    get_parser.add_argument(
        "--list",
        action="store_true",
        help="Print a compound value one element per line",
    )
    add_common_arguments(get_parser)

    set_parser = subparsers.add_parser(
        "set",
        help="Set a property, creating the file if needed",
        description=(
            "Several values are stored as one comma-joined value. "
            "The file is rewritten from its parsed entries, so comments are not kept; "
            "a file with malformed lines is refused unless --force is given."
        ),
    )
    set_parser.add_argument("file", type=Path, help="Properties file")
    set_parser.add_argument("key", help="Property name")
    set_parser.add_argument("values", nargs="+", help="Property value(s)")
    set_parser.add_argument(
        "--force",
        action="store_true",
        help="Rewrite the file even if malformed lines would be dropped",
    )
    add_common_arguments(set_parser)

    keys_parser = subparsers.add_parser(
        "keys",
        help="List property names",
    )
    keys_parser.add_argument("file", type=Path, help="Properties file")
    add_common_arguments(keys_parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Report malformed lines in a properties file",
    )
    check_parser.add_argument("file", type=Path, help="Properties file")
    add_common_arguments(check_parser)
