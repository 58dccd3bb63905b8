"""
The Extent value type.

An Extent is an immutable, ordered mapping from dimension name to a
(lower, upper) bound pair:

    >>> ext = Extent(X=(1.0, 2.0), Y=(3.0, 4.0))
    >>> ext.dimension_names()
    ('X', 'Y')
    >>> ext.bounds()
    ((1.0, 2.0), (3.0, 4.0))

Other objects can expose their bounds through the HasExtent protocol and
be resolved with extent(obj).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from numbers import Real
from typing import Any, Protocol, TypeAlias, Union, overload, runtime_checkable

from extents.exceptions import BoundsError, DimensionError, NoExtentError

__all__ = [
    "Bound",
    "Extent",
    "HasExtent",
    "extent",
    "dimension_names",
    "bounds",
]

# (lower, upper); lower <= upper is expected but not enforced
Bound: TypeAlias = tuple[Real, Real]

BoundsInput: TypeAlias = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def _as_bound(name: str, value: Any) -> tuple[Any, Any]:
    """Normalize a bound to a 2-tuple of reals."""
    try:
        pair = tuple(value)
    except TypeError:
        pair = None

    if pair is None or len(pair) != 2:
        raise BoundsError(
            f"Bound for dimension '{name}' must be a (lower, upper) pair",
            context={"dimension": name, "got": repr(value)},
            suggestions=[f"Use {name}=(lower, upper)"],
        )
    if not all(isinstance(v, Real) and not isinstance(v, bool) for v in pair):
        raise BoundsError(
            f"Bound for dimension '{name}' must be numeric",
            context={"dimension": name, "got": repr(value)},
        )
    return pair


class Extent(Mapping):
    """
    Immutable named multi-dimensional bounding box.

    Construct from a mapping, an iterable of (name, bound) pairs, keyword
    arguments, or a combination (positional entries first):

        Extent(X=(1.0, 2.0), Y=(3.0, 4.0))
        Extent({"X": (1.0, 2.0)}, Y=(3.0, 4.0))
        Extent([("X", (1.0, 2.0))])

    Dimension order is kept for display and iteration but ignored by
    equality and by the set operations.

    Lookups:
        ext["X"]          bound pair for X (KeyError if absent)
        ext[0]            bound pair of the first dimension
        ext[("Y", "X")]   sub-extent with Y and X, in that order
        ext.X             bound pair for X (AttributeError if absent)
    """

    __slots__ = ("_names", "_bounds", "_index")

    def __init__(self, bounds: BoundsInput = None, /, **named_bounds: Any) -> None:
        if isinstance(bounds, Mapping):
            entries = list(bounds.items())
        elif bounds is None:
            entries = []
        else:
            entries = list(bounds)
        entries.extend(named_bounds.items())

        names: list[str] = []
        pairs: list[tuple[Any, Any]] = []
        index: dict[str, int] = {}
        for entry in entries:
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise BoundsError(
                    "Extent entries must be (name, (lower, upper)) pairs",
                    context={"got": repr(entry)},
                )
            name, value = entry
            if not isinstance(name, str) or not name:
                raise DimensionError(
                    "Dimension names must be non-empty strings",
                    context={"got": repr(name)},
                )
            if name in index:
                raise DimensionError(
                    f"Duplicate dimension '{name}'",
                    context={"dimension": name, "dimensions": names},
                    suggestions=["Give each dimension exactly one bound pair"],
                )
            index[name] = len(names)
            names.append(name)
            pairs.append(_as_bound(name, value))

        object.__setattr__(self, "_names", tuple(names))
        object.__setattr__(self, "_bounds", tuple(pairs))
        object.__setattr__(self, "_index", index)

    # Accessors

    def dimension_names(self) -> tuple[str, ...]:
        """Dimension names in construction order."""
        return self._names

    def bounds(self) -> tuple[Bound, ...]:
        """(lower, upper) pairs aligned with dimension_names()."""
        return self._bounds

    def bound_for(self, name: str) -> Bound | None:
        """Bound pair for a dimension, or None if the dimension is absent."""
        i = self._index.get(name)
        return None if i is None else self._bounds[i]

    def __extent__(self) -> Extent:
        return self

    # Mapping protocol

    @overload
    def __getitem__(self, key: str) -> Bound: ...

    @overload
    def __getitem__(self, key: int) -> Bound: ...

    @overload
    def __getitem__(self, key: tuple[str, ...]) -> Extent: ...

    def __getitem__(self, key):
        if isinstance(key, str):
            return self._bounds[self._index[key]]
        if isinstance(key, int) and not isinstance(key, bool):
            return self._bounds[key]
        if isinstance(key, tuple):
            missing = [k for k in key if k not in self._index]
            if missing:
                raise DimensionError(
                    f"Unknown dimension(s): {', '.join(map(str, missing))}",
                    context={"requested": list(key), "available": list(self._names)},
                )
            return Extent((k, self._bounds[self._index[k]]) for k in key)
        raise KeyError(key)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    # Attribute-style access: ext.X

    def __getattr__(self, name: str) -> Bound:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        i = self._index.get(name)
        if i is None:
            raise AttributeError(f"Extent has no dimension '{name}'")
        return self._bounds[i]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Extent is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Extent is immutable")

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(other.bound_for(name) == pair for name, pair in self.items())

    def __hash__(self) -> int:
        return hash(frozenset(zip(self._names, self._bounds)))

    def __reduce__(self):
        return (Extent, (list(zip(self._names, self._bounds)),))

    def __repr__(self) -> str:
        if all(name.isidentifier() for name in self._names):
            inner = ", ".join(f"{n}={b!r}" for n, b in zip(self._names, self._bounds))
            return f"Extent({inner})"
        return f"Extent({dict(zip(self._names, self._bounds))!r})"


@runtime_checkable
class HasExtent(Protocol):
    """Protocol for objects that can report their own Extent."""

    def __extent__(self) -> Extent | None:
        """Return the bounds of this object, or None if it has none."""
        ...


def extent(obj: Any) -> Extent | None:
    """
    Get the Extent of an object.

    Returns obj itself for an Extent, the result of obj.__extent__() for
    objects implementing HasExtent, and None for anything else.
    """
    if isinstance(obj, Extent):
        return obj
    if isinstance(obj, HasExtent):
        return obj.__extent__()
    return None


def _require_extent(obj: Any) -> Extent:
    ext = extent(obj)
    if ext is None:
        raise NoExtentError(
            f"{type(obj).__name__} object has no extent",
            context={"type": type(obj).__name__},
            suggestions=["Implement __extent__() returning an Extent"],
        )
    return ext


def dimension_names(obj: Any) -> tuple[str, ...]:
    """Dimension names of an Extent or of any object with an extent."""
    return _require_extent(obj).dimension_names()


def bounds(obj: Any) -> tuple[Bound, ...]:
    """Bound pairs of an Extent or of any object with an extent."""
    return _require_extent(obj).bounds()
