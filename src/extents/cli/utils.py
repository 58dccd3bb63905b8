"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
import math
import sys
import traceback
from typing import TYPE_CHECKING, Any

from extents.exceptions import ExtentParseError, ExtentsError
from extents.extent import Extent

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "format_error",
    "print_error",
    "get_error_console",
    "parse_extent",
    "parse_amounts",
    "extent_to_json",
    "print_extent",
]

# Module-level console for error output, created lazily
_error_console: Console | None = None


def get_error_console() -> Console:
    """Get or create the Rich console for error output.

    Returns a console configured for stderr with appropriate settings.
    The console is created lazily and cached for reuse.
    """
    global _error_console
    if _error_console is None:
        from rich.console import Console

        _error_console = Console(stderr=True, force_terminal=None)
    return _error_console


def print_error(
    e: Exception,
    verbose: bool = False,
    use_rich: bool | None = None,
) -> None:
    """
    Print an exception with Rich formatting when available.

    Uses Rich console on TTY terminals, falls back to plain text for
    non-TTY output (pipes, captured output).

    Args:
        e: The exception to print
        verbose: If True, include full stack trace
        use_rich: Override automatic TTY detection (None = auto-detect)
    """
    console = get_error_console()

    if use_rich is None:
        use_rich = console.is_terminal

    if verbose:
        # Always use plain text for stack traces
        print(traceback.format_exc(), file=sys.stderr)
        return

    if use_rich and isinstance(e, ExtentsError):
        from rich.markup import escape

        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
    else:
        print(format_error(e, verbose=False), file=sys.stderr)


def format_error(e: Exception, verbose: bool = False) -> str:
    """
    Format an exception for user-friendly display (plain text).

    Args:
        e: The exception to format
        verbose: If True, include full stack trace

    Returns:
        Formatted error message string
    """
    if verbose:
        return traceback.format_exc()

    if isinstance(e, ExtentsError):
        return f"Error: {e}"

    # For other exceptions, show type and message
    return f"Error: {type(e).__name__}: {e}"


def _parse_number(token: str, text: str, position: int) -> int | float:
    token = token.strip()
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise ExtentParseError(
            f"Invalid number '{token}'",
            text=text,
            position=position,
        ) from None


def _split_entries(text: str):
    """Yield (offset, entry) for each comma separated entry."""
    offset = 0
    for entry in text.split(","):
        yield offset, entry
        offset += len(entry) + 1


def parse_extent(text: str) -> Extent:
    """
    Parse an extent literal from the command line.

    Accepts ``X=1:2,Y=3.5:4`` or a JSON object ``{"X": [1, 2], "Y": [3.5, 4]}``.
    An empty string is the extent with no dimensions.

    Raises:
        ExtentParseError: If the literal is malformed
        DimensionError: If a dimension name repeats
        BoundsError: If a JSON bound is not a numeric pair
    """
    stripped = text.strip()
    if not stripped:
        return Extent()

    if stripped.startswith("{"):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ExtentParseError(f"Invalid JSON: {e.msg}", text=text, position=e.pos) from e
        if not isinstance(data, dict):
            raise ExtentParseError("JSON extent must be an object", text=text)
        return Extent(data)

    entries = []
    for offset, entry in _split_entries(text):
        name, sep, bound = entry.partition("=")
        lower, colon, upper = bound.partition(":")
        if not sep or not colon or not name.strip():
            raise ExtentParseError(
                f"Expected NAME=LOWER:UPPER, got '{entry.strip()}'",
                text=text,
                position=offset,
                suggestions=["Separate dimensions with commas: X=1:2,Y=3:4"],
            )
        entries.append(
            (
                name.strip(),
                (_parse_number(lower, text, offset), _parse_number(upper, text, offset)),
            )
        )
    return Extent(entries)


def parse_amounts(text: str) -> dict[str, int | float]:
    """Parse buffer distances written as ``X=0.5,Y=1``."""
    amounts: dict[str, int | float] = {}
    for offset, entry in _split_entries(text):
        name, sep, value = entry.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ExtentParseError(
                f"Expected NAME=DISTANCE, got '{entry.strip()}'",
                text=text,
                position=offset,
            )
        if name in amounts:
            raise ExtentParseError(f"Duplicate dimension '{name}'", text=text, position=offset)
        amounts[name] = _parse_number(value, text, offset)
    return amounts


def extent_to_json(ext: Extent | None) -> dict[str, list[Any]] | None:
    """JSON-ready form of an extent: ``{"X": [lower, upper]}`` or None."""
    if ext is None:
        return None
    return {name: list(pair) for name, pair in ext.items()}


def _format_bound(value: Any, precision: int) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return f"{value:.{precision}g}"


def print_extent(
    ext: Extent | None,
    output_format: str = "table",
    precision: int = 6,
    title: str | None = None,
) -> None:
    """Print an extent (or an absent result) in the requested format."""
    if output_format == "json":
        print(json.dumps(extent_to_json(ext)))
        return

    if ext is None:
        print("none")
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=title)
    table.add_column("Dimension", style="cyan")
    table.add_column("Lower", justify="right")
    table.add_column("Upper", justify="right")

    for name, (lower, upper) in ext.items():
        table.add_row(name, _format_bound(lower, precision), _format_bound(upper, precision))

    Console().print(table)
