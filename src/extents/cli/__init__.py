"""
Command-line interface for extents.

Provides the ``extents`` command:

    extents show <extent>              - Print an extent
    extents intersect <a> <b>          - Intersection of two extents
    extents union <a> <b>              - Union of two extents
    extents intersects <a> <b>         - Test whether two extents intersect
    extents buffer <extent> --by ...   - Widen dimensions of an extent
    extents config                     - View/manage configuration

Extents are written as NAME=LOWER:UPPER pairs separated by commas, or as a
JSON object mapping names to [lower, upper].

Examples:
    extents show X=1:2,Y=3:4
    extents intersect X=1:2,Y=3:4 X=1.5:2.5,Z=0:1
    extents intersect X=1:2,Y=3:4 X=1.5:2.5,Z=0:1 --strict
    extents union '{"X": [0, 1]}' '{"Y": [0, 1]}' --format json
    extents intersects X=0:1 X=1:2
    extents buffer X=0:1,Y=0:1 --by X=0.5
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from extents import __version__
from extents.config import OUTPUT_FORMATS, Config, ConfigError
from extents.exceptions import ExtentsError
from extents.logging import enable_verbose
from extents.operations import buffer, intersect, intersects, union

from .utils import parse_amounts, parse_extent, print_error, print_extent

__all__ = ["main"]

logger = logging.getLogger(__name__)

_BINARY_OPERATIONS = {
    "intersect": intersect,
    "union": union,
}


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        "-f",
        choices=list(OUTPUT_FORMATS),
        default=None,
        help="Output format (default: from config, else table)",
    )


def _add_strict_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Dimensions not shared by both extents void the result",
    )
    parser.add_argument(
        "--no-strict",
        action="store_false",
        dest="strict",
        help="Ignore dimensions not shared by both extents",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="extents",
        description="Named multi-dimensional bounding boxes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"extents {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging and full tracebacks"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show
    show_parser = subparsers.add_parser("show", help="Print an extent")
    show_parser.add_argument("extent", help="Extent literal, e.g. X=1:2,Y=3:4")
    _add_output_argument(show_parser)

    # intersect / union
    for name, help_text in (
        ("intersect", "Intersection of two extents"),
        ("union", "Union of two extents"),
    ):
        op_parser = subparsers.add_parser(name, help=help_text)
        op_parser.add_argument("a", help="First extent")
        op_parser.add_argument("b", help="Second extent")
        _add_strict_arguments(op_parser)
        _add_output_argument(op_parser)

    # intersects
    intersects_parser = subparsers.add_parser(
        "intersects", help="Test whether two extents intersect"
    )
    intersects_parser.add_argument("a", help="First extent")
    intersects_parser.add_argument("b", help="Second extent")
    _add_strict_arguments(intersects_parser)
    _add_output_argument(intersects_parser)

    # buffer
    buffer_parser = subparsers.add_parser("buffer", help="Widen dimensions of an extent")
    buffer_parser.add_argument("extent", help="Extent to buffer")
    buffer_parser.add_argument(
        "--by",
        required=True,
        metavar="NAME=DISTANCE[,...]",
        help="Distance to add on both sides of each named dimension",
    )
    _add_output_argument(buffer_parser)

    # config
    config_parser = subparsers.add_parser("config", help="View and manage configuration")
    config_group = config_parser.add_mutually_exclusive_group()
    config_group.add_argument(
        "--show",
        action="store_true",
        help="Show effective configuration with sources",
    )
    config_group.add_argument(
        "--init",
        action="store_true",
        help="Create template config file in current directory",
    )
    config_group.add_argument(
        "--paths",
        action="store_true",
        help="Show config file paths",
    )
    config_parser.add_argument(
        "--user",
        action="store_true",
        help="Use user config (~/.config/extents/config.toml) for --init",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the extents CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        from .config_cmd import run as config_cmd

        try:
            return config_cmd(args)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    try:
        config = Config.load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    verbose = args.verbose or config.defaults.verbose
    if verbose:
        enable_verbose("DEBUG")

    if getattr(args, "format", None) is None:
        args.format = config.defaults.format
    if getattr(args, "strict", None) is None:
        args.strict = config.defaults.strict

    try:
        return _run_command(args, config)
    except ExtentsError as e:
        print_error(e, verbose=verbose)
        return 1


def _run_command(args, config: Config) -> int:
    """Dispatch an operation subcommand."""
    precision = config.display.precision

    if args.command == "show":
        print_extent(parse_extent(args.extent), args.format, precision)
        return 0

    if args.command in _BINARY_OPERATIONS:
        a, b = parse_extent(args.a), parse_extent(args.b)
        logger.debug(f"{args.command}({a!r}, {b!r}, strict={args.strict})")
        result = _BINARY_OPERATIONS[args.command](a, b, strict=args.strict)
        print_extent(result, args.format, precision)
        return 0

    if args.command == "intersects":
        a, b = parse_extent(args.a), parse_extent(args.b)
        result = intersects(a, b, strict=args.strict)
        if args.format == "json":
            print(json.dumps(result))
        else:
            print("true" if result else "false")
        return 0

    if args.command == "buffer":
        result = buffer(parse_extent(args.extent), parse_amounts(args.by))
        print_extent(result, args.format, precision)
        return 0

    return 0
