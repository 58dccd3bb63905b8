"""
Set operations over Extents.

Provides:
- intersect: overlapping sub-range of the shared dimensions
- union: enclosing range of all dimensions
- intersects: predicate form of intersect
- covers / covered_by / disjoint: containment and separation predicates
- buffer: widen named dimensions on both sides

Dimensions present in only one operand are ignored (intersect, intersects,
covers) or copied (union) by default. With strict=True any such dimension
voids the result: None for intersect/union, False for the predicates.

Ranges that touch at an endpoint overlap: (0, 1) and (1, 2) intersect in
the single point (1, 1).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any

from extents.exceptions import BoundsError, DimensionError
from extents.extent import Bound, Extent

__all__ = [
    "intersect",
    "union",
    "intersects",
    "covers",
    "covered_by",
    "disjoint",
    "buffer",
]

logger = logging.getLogger(__name__)


def _is_nan(value: Any) -> bool:
    return value != value


def _lower_of(x: Any, y: Any) -> Any:
    """min() that returns the NaN operand if either is NaN."""
    if _is_nan(x):
        return x
    if _is_nan(y):
        return y
    return min(x, y)


def _upper_of(x: Any, y: Any) -> Any:
    """max() that returns the NaN operand if either is NaN."""
    if _is_nan(x):
        return x
    if _is_nan(y):
        return y
    return max(x, y)


def _overlap(a: Bound, b: Bound) -> Bound | None:
    """Clip two ranges to their common part, or None if they do not meet.

    intersect() and intersects() both go through here so they always agree.
    A NaN endpoint never overlaps anything.
    """
    if any(_is_nan(v) for v in (*a, *b)):
        return None
    lower = max(a[0], b[0])
    upper = min(a[1], b[1])
    if lower <= upper:
        return (lower, upper)
    return None


def _shared_dimensions(a: Extent, b: Extent) -> list[str]:
    """Names present in both extents, in a's order."""
    return [name for name in a.dimension_names() if name in b]


def _has_unshared(a: Extent, b: Extent, shared: list[str]) -> bool:
    return len(shared) != len(a) or len(shared) != len(b)


def _rejects(
    a: Extent, b: Extent, shared: list[str], strict: bool, op: str, require_shared: bool = True
) -> bool:
    """Whether the dimension sets alone void the result of an operation."""
    if strict and _has_unshared(a, b, shared):
        logger.debug(f"{op}: unshared dimensions in strict mode")
        return True
    if require_shared and not shared:
        logger.debug(f"{op}: no shared dimensions")
        return True
    return False


def intersect(a: Extent | None, b: Extent | None, strict: bool = False) -> Extent | None:
    """
    Get the intersection of two extents.

    The result holds the overlapping range of every shared dimension, in
    the dimension order of ``a``. Unshared dimensions are dropped.

    Args:
        a: First extent (None yields None)
        b: Second extent (None yields None)
        strict: Return None if any dimension is not shared by both

    Returns:
        New Extent, or None if the extents share no dimension or any shared
        dimension does not overlap.

    Example::

        >>> intersect(Extent(X=(1.0, 2.0), Y=(3.0, 4.0)), Extent(X=(1.5, 2.5)))
        Extent(X=(1.5, 2.0))
    """
    if a is None or b is None:
        return None

    shared = _shared_dimensions(a, b)
    if _rejects(a, b, shared, strict, "intersect"):
        return None

    entries = []
    for name in shared:
        clipped = _overlap(a[name], b[name])
        if clipped is None:
            logger.debug(f"intersect: no overlap on dimension '{name}'")
            return None
        entries.append((name, clipped))

    return Extent(entries)


def union(a: Extent | None, b: Extent | None, strict: bool = False) -> Extent | None:
    """
    Get the union of two extents, the range spanning both in every dimension.

    Shared dimensions are widened to cover both operands. Unshared dimensions
    are copied unchanged: ``a``'s dimensions come first, then those only in
    ``b``.

    Args:
        a: First extent (None yields ``b``)
        b: Second extent (None yields ``a``)
        strict: Return None if any dimension is not shared by both

    Returns:
        New Extent, or None in strict mode when dimensions differ.
    """
    if a is None:
        return b
    if b is None:
        return a

    shared = _shared_dimensions(a, b)
    if _rejects(a, b, shared, strict, "union", require_shared=False):
        return None

    entries = []
    for name, (lower, upper) in a.items():
        other = b.bound_for(name)
        if other is not None:
            lower, upper = _lower_of(lower, other[0]), _upper_of(upper, other[1])
        entries.append((name, (lower, upper)))
    entries.extend((name, pair) for name, pair in b.items() if name not in a)

    return Extent(entries)


def intersects(a: Extent | None, b: Extent | None, strict: bool = False) -> bool:
    """
    Check if two extents intersect.

    True if every shared dimension overlaps, counting ranges that only touch
    at an endpoint. Dimension order is ignored. False when no dimension is
    shared, and in strict mode when any dimension is unshared.
    """
    if a is None or b is None:
        return False

    shared = _shared_dimensions(a, b)
    if _rejects(a, b, shared, strict, "intersects"):
        return False

    return all(_overlap(a[name], b[name]) is not None for name in shared)


def covers(a: Extent | None, b: Extent | None, strict: bool = False) -> bool:
    """
    Check if ``a`` covers ``b``: every shared dimension of ``b`` lies inside ``a``.

    Boundaries count as inside, so an extent covers itself.
    """
    if a is None or b is None:
        return False

    shared = _shared_dimensions(a, b)
    if _rejects(a, b, shared, strict, "covers"):
        return False

    return all(a[name][0] <= b[name][0] and b[name][1] <= a[name][1] for name in shared)


def covered_by(a: Extent | None, b: Extent | None, strict: bool = False) -> bool:
    """Check if ``a`` lies inside ``b`` (``covers`` with operands swapped)."""
    return covers(b, a, strict=strict)


def disjoint(a: Extent | None, b: Extent | None, strict: bool = False) -> bool:
    """Negation of ``intersects``."""
    return not intersects(a, b, strict=strict)


def buffer(
    ext: Extent, amounts: Mapping[str, Any] | None = None, /, **named_amounts: Any
) -> Extent:
    """
    Widen dimensions of an extent by a fixed amount on both sides.

    Args:
        ext: Extent to buffer
        amounts: Mapping of dimension name to buffer distance
        **named_amounts: Buffer distances as keywords

    Returns:
        New Extent with ``(lower - d, upper + d)`` for each named dimension.
        Other dimensions are unchanged and order is preserved.

    Raises:
        DimensionError: A named dimension is not in the extent
        BoundsError: A buffer distance is not numeric

    Example::

        >>> buffer(Extent(X=(0, 1), Y=(0, 1)), X=0.5)
        Extent(X=(-0.5, 1.5), Y=(0, 1))
    """
    distances = dict(amounts or {})
    for name, amount in named_amounts.items():
        if name in distances:
            raise DimensionError(
                f"Buffer distance for '{name}' given twice",
                context={"dimension": name},
            )
        distances[name] = amount

    unknown = [name for name in distances if name not in ext]
    if unknown:
        raise DimensionError(
            f"Cannot buffer unknown dimension(s): {', '.join(map(str, unknown))}",
            context={"requested": list(distances), "available": list(ext.dimension_names())},
        )
    for name, amount in distances.items():
        if not isinstance(amount, Real) or isinstance(amount, bool):
            raise BoundsError(
                f"Buffer distance for '{name}' must be numeric",
                context={"dimension": name, "got": repr(amount)},
            )

    entries = []
    for name, (lower, upper) in ext.items():
        d = distances.get(name)
        entries.append((name, (lower, upper) if d is None else (lower - d, upper + d)))
    return Extent(entries)
