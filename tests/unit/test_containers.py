"""
Unit tests for optionals, sequences and fixed arrays
(typeparse.converters.containers).

Tests splitting, per-element empty handling, the not-set propagation
rules and shape checks.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

import pytest

from typeparse import (
    ParsingError,
    ShapeMismatchError,
    must_parse,
    try_parse,
    with_separator,
)
from typeparse.config import new_config
from typeparse.resolve import resolve


# ---------------------------------------------------------------------------
# Optionals
# ---------------------------------------------------------------------------

class TestOptional:
    """Tests for T | None targets."""

    @pytest.mark.parametrize("target", [int | None, Optional[int]])
    def test_empty_is_none(self, target):
        value, err = try_parse(target, "")
        assert value is None
        assert err is None

    def test_value_wrapped(self):
        assert must_parse(int | None, "42") == 42

    @pytest.mark.parametrize(
        "target, text, expected",
        [
            (float | None, "2.5", 2.5),
            (bool | None, "f", False),
            (str | None, "x", "x"),
            (timedelta | None, "1m", timedelta(minutes=1)),
        ],
    )
    def test_leaf_types(self, target, text, expected):
        assert must_parse(target, text) == expected

    def test_set_false_is_not_none(self):
        """An explicit 'false' is a value, not the unset state."""
        assert must_parse(bool | None, "false") is False

    def test_invalid_propagates(self):
        value, err = try_parse(int | None, "nope")
        assert value is None
        assert isinstance(err, ParsingError)

    def test_nested_optional_list(self):
        assert must_parse(list[int] | None, "1,2") == [1, 2]
        assert must_parse(list[int] | None, "") is None


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------

class TestSequence:
    """Tests for list[T] and tuple[T, ...] targets."""

    def test_ints_in_order(self):
        assert must_parse(list[int], "3,1,2") == [3, 1, 2]

    def test_bool_scenario_with_empty_parts(self):
        """Empty parts are zero elements, not sequence-level failures."""
        value, err = try_parse(list[bool], "t,t,t,f,,")
        assert err is None
        assert value == [True, True, True, False, False, False]

    def test_empty_input_is_empty_list(self):
        value, err = try_parse(list[int], "")
        assert value == []
        assert err is None

    def test_single_element(self):
        assert must_parse(list[str], "only") == ["only"]

    def test_custom_separator(self):
        assert must_parse(list[float], "1.5;2.5", with_separator(";")) == [1.5, 2.5]

    def test_multichar_separator(self):
        assert must_parse(list[str], "a::b::c", with_separator("::")) == ["a", "b", "c"]

    def test_empty_separator_splits_characters(self):
        assert must_parse(list[int], "123", with_separator("")) == [1, 2, 3]

    def test_variadic_tuple(self):
        value = must_parse(tuple[int, ...], "1,2,3,4")
        assert value == (1, 2, 3, 4)

    def test_first_error_aborts(self):
        _, err = try_parse(list[int], "1,x,y")
        assert isinstance(err, ParsingError)
        assert err.text == "x"

    def test_optional_elements(self):
        assert must_parse(list[int | None], "1,,3") == [1, None, 3]

    def test_durations(self):
        assert must_parse(list[timedelta], "1h,30m") == [timedelta(hours=1), timedelta(minutes=30)]

    def test_nested_single_slot_tuples(self):
        """Every level uses the same separator, so nesting needs fixed arrays."""
        value = must_parse(list[tuple[int]], "1,2")
        assert value == [(1,), (2,)]


class TestSequenceNotSet:
    """The all-empty-parts sequence is materialized but reported as not set."""

    def test_outcome_for_separators_only(self):
        outcome = resolve(list[int]).convert(",,", new_config())
        assert outcome.value == [0, 0, 0]
        assert outcome.is_set is False

    def test_plain_list_keeps_zero_elements(self):
        assert must_parse(list[int], ",,") == [0, 0, 0]

    def test_optional_list_collapses_to_none(self):
        value, err = try_parse(list[int] | None, ",,")
        assert value is None
        assert err is None

    def test_one_set_element_is_enough(self):
        outcome = resolve(list[str]).convert(",a,", new_config())
        assert outcome.value == ["", "a", ""]
        assert outcome.is_set is True


# ---------------------------------------------------------------------------
# Fixed arrays
# ---------------------------------------------------------------------------

class TestFixedArray:
    """Tests for tuple[T1, ..., Tn] targets."""

    def test_exact_count(self):
        assert must_parse(tuple[int, int, int], "1,2,3") == (1, 2, 3)

    def test_too_few_parts(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            must_parse(tuple[int, int, int], "1,2")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_too_many_parts(self):
        with pytest.raises(ShapeMismatchError, match="expected 2 parts, got 3"):
            must_parse(tuple[int, int], "1,2,3")

    def test_heterogeneous_slots(self):
        value = must_parse(tuple[str, int, bool], "port,8080,t")
        assert value == ("port", 8080, True)

    def test_empty_slots_keep_zero_and_count_as_set(self):
        outcome = resolve(tuple[int, int]).convert(",", new_config())
        assert outcome.value == (0, 0)
        assert outcome.is_set is True

    def test_empty_input_is_one_part(self):
        assert must_parse(tuple[int], "") == (0,)
        with pytest.raises(ShapeMismatchError):
            must_parse(tuple[int, int], "")

    def test_optional_array_is_set_even_when_empty(self):
        assert must_parse(tuple[int, int] | None, ",") == (0, 0)

    def test_element_error(self):
        with pytest.raises(ParsingError):
            must_parse(tuple[int, int], "1,b")

    def test_try_parse_zero_on_error(self):
        value, err = try_parse(tuple[int, str], "1")
        assert value == (0, "")
        assert isinstance(err, ShapeMismatchError)
