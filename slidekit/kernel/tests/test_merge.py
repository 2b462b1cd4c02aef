"""
slidekit Merge — Deep Merge Tests

Nested mappings merge recursively; everything else in the overlay
replaces the base value (lists are not concatenated). Inputs are never
modified.
"""

import copy

import pytest

from slidekit.kernel.merge import merge_dicts


class TestMergeDicts:
    def test_nested_merge(self):
        result = merge_dicts({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}, "b": [1]})
        assert result == {"a": {"x": 1, "y": 3}, "b": [1]}

    def test_lists_are_replaced(self):
        assert merge_dicts({"l": [1, 2]}, {"l": [3]}) == {"l": [3]}

    def test_scalar_replaces_mapping(self):
        assert merge_dicts({"a": {"x": 1}}, {"a": 5}) == {"a": 5}

    def test_mapping_replaces_scalar(self):
        assert merge_dicts({"a": 5}, {"a": {"x": 1}}) == {"a": {"x": 1}}

    def test_rightmost_wins(self):
        assert merge_dicts({"k": 1}, {"k": 2}, {"k": 3}) == {"k": 3}

    def test_no_overlays_copies(self):
        base = {"a": {"b": 1}}
        result = merge_dicts(base)
        assert result == base
        assert result["a"] is not base["a"]

    def test_associative(self):
        a = {"theme": {"color": "red", "size": 10}, "n": 1}
        b = {"theme": {"size": 12}, "n": 2}
        c = {"theme": {"color": "blue", "font": "Serif"}}
        assert merge_dicts(merge_dicts(a, b), c) == merge_dicts(a, b, c)

    def test_inputs_untouched(self):
        base = {"a": {"x": 1}, "l": [1]}
        overlay = {"a": {"y": 2}, "l": [2]}
        before = (copy.deepcopy(base), copy.deepcopy(overlay))
        result = merge_dicts(base, overlay)
        result["a"]["z"] = 3
        result["l"].append(9)
        assert (base, overlay) == before

    def test_deep_levels(self):
        result = merge_dicts({"a": {"b": {"c": 1, "d": 2}}}, {"a": {"b": {"d": 3}}})
        assert result == {"a": {"b": {"c": 1, "d": 3}}}

    def test_non_mapping_overlay(self):
        with pytest.raises(AssertionError):
            merge_dicts({"a": 1}, [("a", 2)])

    def test_non_mapping_base(self):
        with pytest.raises(AssertionError):
            merge_dicts("nope", {"a": 1})
