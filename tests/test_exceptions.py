"""Tests for extents.exceptions module."""

import pytest

from extents.exceptions import (
    BoundsError,
    DimensionError,
    ExtentParseError,
    ExtentsError,
    NoExtentError,
)


class TestExtentsError:
    """Tests for the base exception class."""

    def test_basic_message(self):
        err = ExtentsError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.message == "Something went wrong"
        assert err.context == {}
        assert err.suggestions == []

    def test_with_context(self):
        err = ExtentsError("Bad bound", context={"dimension": "X", "got": "(1, 2, 3)"})
        msg = str(err)
        assert "Bad bound" in msg
        assert "Context:" in msg
        assert "dimension: X" in msg
        assert "got: (1, 2, 3)" in msg

    def test_with_suggestions(self):
        err = ExtentsError("Bad bound", suggestions=["Use X=(lower, upper)"])
        msg = str(err)
        assert "Suggestions:" in msg
        assert "  - Use X=(lower, upper)" in msg


class TestSubclasses:
    """Tests for the specific exception types."""

    @pytest.mark.parametrize("cls", [DimensionError, BoundsError, NoExtentError, ExtentParseError])
    def test_inherits_base(self, cls):
        err = cls("message")
        assert isinstance(err, ExtentsError)
        assert "message" in str(err)

    def test_parse_error_records_input_and_position(self):
        err = ExtentParseError("Expected NAME=LOWER:UPPER", text="X=1;2", position=0)
        assert err.text == "X=1;2"
        assert err.position == 0
        assert "input: X=1;2" in str(err)
        assert "position: 0" in str(err)

    def test_parse_error_keeps_explicit_context(self):
        err = ExtentParseError("bad", context={"input": "given"}, text="other")
        assert err.context["input"] == "given"
