"""
Exception hierarchy for extents.

Absent results of the set operations are never errors: intersect() and
union() return None. These exceptions cover structural misuse only, such as
a bound that is not a (lower, upper) pair or a duplicate dimension name.

All exceptions carry optional context and suggestions:

    from extents.exceptions import DimensionError

    raise DimensionError(
        "Duplicate dimension 'X'",
        context={"dimension": "X"},
        suggestions=["Give each dimension exactly one bound pair"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ExtentsError(Exception):
    """
    Base exception for all extents errors.

    Attributes:
        context: Dictionary of contextual information (dimension, input, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class DimensionError(ExtentsError):
    """
    Invalid, duplicate or unknown dimension name.

    Example::

        raise DimensionError(
            "Unknown dimension(s): Z",
            context={"requested": ["X", "Z"], "available": ["X", "Y"]},
        )
    """

    pass


class BoundsError(ExtentsError):
    """A bound is not a numeric (lower, upper) pair, or an amount is not numeric."""

    pass


class NoExtentError(ExtentsError):
    """An object passed where an extent was required does not provide one."""

    pass


class ExtentParseError(ExtentsError):
    """
    A textual extent literal could not be parsed.

    Example::

        raise ExtentParseError(
            "Expected NAME=LOWER:UPPER",
            text="X=1;2",
            position=0,
        )

    Attributes:
        text: The literal being parsed
        position: Character offset of the offending entry, if known
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.text = text
        self.position = position
        ctx = context or {}
        if text is not None and "input" not in ctx:
            ctx["input"] = text
        if position is not None and "position" not in ctx:
            ctx["position"] = position

        super().__init__(message, ctx, suggestions)


__all__ = [
    "ExtentsError",
    "DimensionError",
    "BoundsError",
    "NoExtentError",
    "ExtentParseError",
]
