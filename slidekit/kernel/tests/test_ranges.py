"""
slidekit Ranges — Parsing and Visibility Tests

Grammar (comma-separated, whitespace trimmed):
  N    → Exact(N)
  -N   → Range(hi=N)
  N-   → Range(lo=N)
  N-M  → Range(lo=N, hi=M)

A predicate list is OR'd. An open-ended range contributes only its lower
bound to the number of subslides a slide needs.
"""

import logging

import pytest

from slidekit.kernel.ranges import (
    format_range_spec,
    is_visible,
    matches,
    max_required_index,
    parse_range_spec,
    to_predicates,
)
from slidekit.kernel.types import Exact, InvalidSpec, ParseError, Range

SPEC = "-2,4,6-8,10-"


# ============================================================================
# Parsing
# ============================================================================


class TestParseRangeSpec:
    def test_all_four_forms(self):
        assert parse_range_spec(SPEC) == (
            Range(hi=2),
            Exact(4),
            Range(lo=6, hi=8),
            Range(lo=10),
        )

    def test_whitespace_around_segments(self):
        assert parse_range_spec(" 1 ,  3- ") == (Exact(1), Range(lo=3))

    def test_single_number(self):
        assert parse_range_spec("7") == (Exact(7),)

    @pytest.mark.parametrize("bad", ["a", "1-2-3", "", "1,,2", "--3", "3 4", "x-"])
    def test_malformed_segment_raises(self, bad):
        with pytest.raises(ParseError):
            parse_range_spec(bad)

    def test_parse_error_names_segment(self):
        with pytest.raises(ParseError, match="oops"):
            parse_range_spec("1, oops")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_range_spec("nope")

    def test_inverted_range_is_kept_and_warned(self, caplog):
        with caplog.at_level(logging.WARNING, logger="slidekit.kernel.ranges"):
            preds = parse_range_spec("19-12")
        assert preds == (Range(lo=19, hi=12),)
        assert "never matches" in caplog.text
        assert not any(is_visible(i, "19-12") for i in range(1, 30))

    def test_range_needs_a_bound(self):
        with pytest.raises(ValueError):
            Range()


# ============================================================================
# Visibility
# ============================================================================


class TestIsVisible:
    def test_reference_spec(self):
        assert is_visible(3, SPEC) is False
        assert is_visible(7, SPEC) is True
        assert is_visible(11, SPEC) is True

    @pytest.mark.parametrize("index", [1, 2, 4, 6, 8, 10, 50])
    def test_visible_indices(self, index):
        assert is_visible(index, SPEC)

    @pytest.mark.parametrize("index", [3, 5, 9])
    def test_hidden_indices(self, index):
        assert not is_visible(index, SPEC)

    def test_plain_int(self):
        assert is_visible(2, 2)
        assert not is_visible(3, 2)

    def test_list_is_or(self):
        assert is_visible(3, [1, "3-4"])
        assert is_visible(1, [1, "3-4"])
        assert not is_visible(2, [1, "3-4"])

    def test_nested_lists(self):
        assert is_visible(5, [[1, [2, "5"]]])

    def test_parsed_predicates(self):
        assert is_visible(4, Exact(4))
        assert is_visible(9, Range(lo=3))
        assert not is_visible(2, Range(lo=3))
        assert is_visible(1, [Range(hi=1)])

    def test_empty_list_is_never_visible(self):
        assert not is_visible(1, [])

    def test_order_does_not_matter(self):
        for i in range(1, 12):
            assert is_visible(i, "10-,6-8,4,-2") == is_visible(i, SPEC)

    @pytest.mark.parametrize("bad", [1.5, None, True, {"beginning": 1}, object()])
    def test_invalid_type_raises(self, bad):
        with pytest.raises(InvalidSpec):
            is_visible(1, bad)

    def test_invalid_spec_inside_list(self):
        with pytest.raises(InvalidSpec):
            is_visible(1, [1, 2.0])


class TestMatches:
    def test_exact(self):
        assert matches(3, Exact(3))
        assert not matches(4, Exact(3))

    def test_closed_range_is_inclusive(self):
        assert matches(6, Range(6, 8))
        assert matches(8, Range(6, 8))
        assert not matches(9, Range(6, 8))


# ============================================================================
# Required subslides
# ============================================================================


class TestMaxRequiredIndex:
    def test_closed_range(self):
        assert max_required_index("2-5") == 5

    def test_open_range_uses_lower_bound(self):
        assert max_required_index("3-") == 3

    def test_until(self):
        assert max_required_index("-4") == 4

    def test_mixed_list(self):
        assert max_required_index([1, "7", Range(lo=2)]) == 7

    def test_reference_spec(self):
        assert max_required_index(SPEC) == 10

    def test_int(self):
        assert max_required_index(6) == 6

    def test_empty_list(self):
        assert max_required_index([]) == 0

    def test_invalid(self):
        with pytest.raises(InvalidSpec):
            max_required_index(2.5)


class TestHelpers:
    def test_to_predicates_flattens(self):
        assert to_predicates([1, "2-3", [Exact(5)]]) == [Exact(1), Range(2, 3), Exact(5)]

    def test_format_range_spec(self):
        assert format_range_spec([1, "3-", "-2", "4-5"]) == "1, 3-, -2, 4-5"

    def test_format_then_parse_is_stable(self):
        assert parse_range_spec(format_range_spec(SPEC)) == parse_range_spec(SPEC)
