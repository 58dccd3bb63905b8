"""
extents: named multi-dimensional bounding boxes.

An Extent maps dimension names to (lower, upper) bounds. The set
operations answer what two extents have in common or span together.

Modules:
    extent: The Extent type and the extent(x) extension point
    operations: intersect, union, intersects and related predicates
    exceptions: Errors raised for structurally invalid input
    config: TOML configuration for the command line tool
    cli: The ``extents`` command

Quick Start::

    from extents import Extent, intersect, intersects, union

    a = Extent(X=(1.0, 2.0), Y=(3.0, 4.0))
    b = Extent(X=(1.5, 2.5), Z=(0.0, 1.0))

    intersect(a, b)               # Extent(X=(1.5, 2.0))
    intersect(a, b, strict=True)  # None, Y and Z are not shared
    union(a, b)                   # Extent(X=(1.0, 2.5), Y=(3.0, 4.0), Z=(0.0, 1.0))
    intersects(a, b)              # True

Objects that know their own bounds implement ``__extent__()``::

    class Tile:
        def __extent__(self):
            return Extent(X=(self.x0, self.x1), Y=(self.y0, self.y1))

    extent(tile)
"""

__version__ = "0.1.0"

# Core type and accessors
from extents.extent import Bound, Extent, HasExtent, bounds, dimension_names, extent

# Set operations
from extents.operations import (
    buffer,
    covered_by,
    covers,
    disjoint,
    intersect,
    intersects,
    union,
)

# Errors
from extents.exceptions import (
    BoundsError,
    DimensionError,
    ExtentParseError,
    ExtentsError,
    NoExtentError,
)

# Logging
from extents.logging import disable_verbose, enable_verbose

__all__ = [
    # Version
    "__version__",
    # Core
    "Bound",
    "Extent",
    "HasExtent",
    "extent",
    "dimension_names",
    "bounds",
    # Operations
    "intersect",
    "union",
    "intersects",
    "covers",
    "covered_by",
    "disjoint",
    "buffer",
    # Errors
    "ExtentsError",
    "DimensionError",
    "BoundsError",
    "NoExtentError",
    "ExtentParseError",
    # Logging
    "enable_verbose",
    "disable_verbose",
]
