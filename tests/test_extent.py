"""Tests for the Extent type and the extent() accessor."""

import copy
import pickle

import pytest

from extents import (
    BoundsError,
    DimensionError,
    Extent,
    HasExtent,
    NoExtentError,
    bounds,
    dimension_names,
    extent,
)


class TestConstruction:
    """Tests for the ways an Extent can be built."""

    def test_keywords(self):
        ext = Extent(X=(1.0, 2.0), Y=(3.0, 4.0))
        assert ext.dimension_names() == ("X", "Y")
        assert ext.bounds() == ((1.0, 2.0), (3.0, 4.0))

    def test_mapping(self):
        ext = Extent({"X": (1.0, 2.0), "Y": (3.0, 4.0)})
        assert ext.dimension_names() == ("X", "Y")

    def test_pairs(self):
        ext = Extent([("Y", (3, 4)), ("X", (1, 2))])
        assert ext.dimension_names() == ("Y", "X")

    def test_positional_then_keywords(self):
        """Positional entries come before keyword entries."""
        ext = Extent({"Z": (0, 1)}, X=(1, 2))
        assert ext.dimension_names() == ("Z", "X")

    def test_lists_normalized_to_tuples(self):
        ext = Extent({"X": [1, 2]})
        assert ext["X"] == (1, 2)
        assert isinstance(ext["X"], tuple)

    def test_empty(self):
        ext = Extent()
        assert len(ext) == 0
        assert ext.dimension_names() == ()
        assert ext.bounds() == ()

    def test_inverted_bounds_stored_as_given(self):
        """lower > upper is not rejected."""
        ext = Extent(X=(5.0, 1.0))
        assert ext["X"] == (5.0, 1.0)

    def test_duplicate_dimension_raises(self):
        with pytest.raises(DimensionError, match="Duplicate dimension 'X'"):
            Extent({"X": (0, 1)}, X=(2, 3))

    def test_duplicate_in_pairs_raises(self):
        with pytest.raises(DimensionError):
            Extent([("X", (0, 1)), ("X", (2, 3))])

    def test_non_string_name_raises(self):
        with pytest.raises(DimensionError):
            Extent([(1, (0, 1))])

    def test_empty_name_raises(self):
        with pytest.raises(DimensionError):
            Extent([("", (0, 1))])

    def test_bound_wrong_length_raises(self):
        with pytest.raises(BoundsError, match="pair"):
            Extent(X=(1, 2, 3))

    def test_bound_not_sequence_raises(self):
        with pytest.raises(BoundsError):
            Extent(X=1.0)

    def test_bound_not_numeric_raises(self):
        with pytest.raises(BoundsError, match="numeric"):
            Extent(X=("a", "b"))

    def test_bool_bound_raises(self):
        with pytest.raises(BoundsError, match="numeric"):
            Extent(X=(True, 1))

    def test_malformed_entry_raises(self):
        with pytest.raises(BoundsError):
            Extent(["X"])


class TestAccessors:
    """Tests for lookups on an Extent."""

    def test_bound_for(self, ext_xy):
        assert ext_xy.bound_for("Y") == (3.0, 4.0)

    def test_bound_for_missing_is_none(self, ext_xy):
        assert ext_xy.bound_for("Z") is None

    def test_getitem_by_name(self, ext_xy):
        assert ext_xy["X"] == (1.0, 2.0)

    def test_getitem_missing_raises_keyerror(self, ext_xy):
        with pytest.raises(KeyError):
            ext_xy["Z"]

    def test_getitem_by_position(self, ext_xy):
        assert ext_xy[0] == (1.0, 2.0)
        assert ext_xy[-1] == (3.0, 4.0)

    def test_getitem_position_out_of_range(self, ext_xy):
        with pytest.raises(IndexError):
            ext_xy[2]

    def test_getitem_tuple_selects_sub_extent(self, ext_xy):
        sub = ext_xy[("Y", "X")]
        assert isinstance(sub, Extent)
        assert sub.dimension_names() == ("Y", "X")
        assert sub == ext_xy

    def test_getitem_tuple_unknown_raises(self, ext_xy):
        with pytest.raises(DimensionError, match="Z"):
            ext_xy[("X", "Z")]

    def test_attribute_access(self, ext_xy):
        assert ext_xy.X == (1.0, 2.0)
        assert ext_xy.Y == (3.0, 4.0)

    def test_attribute_missing_raises(self, ext_xy):
        with pytest.raises(AttributeError):
            ext_xy.Z

    def test_mapping_protocol(self, ext_xy):
        assert list(ext_xy) == ["X", "Y"]
        assert len(ext_xy) == 2
        assert "X" in ext_xy
        assert "Z" not in ext_xy
        assert 0 not in ext_xy
        assert list(ext_xy.keys()) == ["X", "Y"]
        assert list(ext_xy.values()) == [(1.0, 2.0), (3.0, 4.0)]
        assert dict(ext_xy.items()) == {"X": (1.0, 2.0), "Y": (3.0, 4.0)}
        assert ext_xy.get("Z") is None


class TestValueSemantics:
    """Tests for immutability, equality and representation."""

    def test_immutable(self, ext_xy):
        with pytest.raises(AttributeError):
            ext_xy.X = (0, 1)
        with pytest.raises(AttributeError):
            del ext_xy.X

    def test_equality_ignores_order(self):
        assert Extent(X=(1, 2), Y=(3, 4)) == Extent(Y=(3, 4), X=(1, 2))

    def test_inequality_on_bounds(self):
        assert Extent(X=(1, 2)) != Extent(X=(1, 3))

    def test_inequality_on_dimensions(self):
        assert Extent(X=(1, 2)) != Extent(X=(1, 2), Y=(0, 1))
        assert Extent(X=(1, 2)) != Extent(Y=(1, 2))

    def test_not_equal_to_dict(self, ext_xy):
        assert ext_xy != {"X": (1.0, 2.0), "Y": (3.0, 4.0)}

    def test_hash_ignores_order(self):
        a = Extent(X=(1, 2), Y=(3, 4))
        b = Extent(Y=(3, 4), X=(1, 2))
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_repr(self, ext_xy):
        assert repr(ext_xy) == "Extent(X=(1.0, 2.0), Y=(3.0, 4.0))"

    def test_repr_non_identifier_names(self):
        ext = Extent({"band 1": (0, 1)})
        assert repr(ext) == "Extent({'band 1': (0, 1)})"

    def test_repr_empty(self):
        assert repr(Extent()) == "Extent()"

    def test_pickle_roundtrip_keeps_order(self, ext_xy):
        restored = pickle.loads(pickle.dumps(ext_xy))
        assert restored == ext_xy
        assert restored.dimension_names() == ("X", "Y")

    def test_copy(self, ext_xy):
        assert copy.copy(ext_xy) == ext_xy
        assert copy.deepcopy(ext_xy) == ext_xy


class Tile:
    """A producer of extents, unknown to the library."""

    def __init__(self, x0, x1, y0, y1):
        self.x0, self.x1, self.y0, self.y1 = x0, x1, y0, y1

    def __extent__(self):
        return Extent(X=(self.x0, self.x1), Y=(self.y0, self.y1))


class TestExtentAccessor:
    """Tests for extent(x) and the module-level accessors."""

    def test_extent_of_extent_is_itself(self, ext_xy):
        assert extent(ext_xy) is ext_xy

    def test_extent_of_producer(self):
        tile = Tile(0, 10, 5, 15)
        assert isinstance(tile, HasExtent)
        assert extent(tile) == Extent(X=(0, 10), Y=(5, 15))

    def test_extent_of_unrelated_object_is_none(self):
        assert extent(object()) is None
        assert extent(None) is None

    def test_dimension_names_and_bounds(self, ext_xy):
        assert dimension_names(ext_xy) == ("X", "Y")
        assert bounds(ext_xy) == ((1.0, 2.0), (3.0, 4.0))

    def test_accessors_resolve_producers(self):
        tile = Tile(0, 1, 2, 3)
        assert dimension_names(tile) == ("X", "Y")
        assert bounds(tile) == ((0, 1), (2, 3))

    def test_accessors_reject_objects_without_extent(self):
        with pytest.raises(NoExtentError, match="str object has no extent"):
            bounds("not an extent")
