"""
slidekit Kernel — Dict Merge

Deep merge for nested configuration mappings. Pure: inputs are never
modified and the result shares no mutable values with them.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def merge_dicts(base: Mapping[str, Any], *overlays: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge `overlays` into `base`, left to right.

    Where both sides hold a mapping under the same key the two are merged
    recursively. Anything else in an overlay (lists included) replaces the
    base value outright.

      merge_dicts({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}, "b": [1]})
        → {"a": {"x": 1, "y": 3}, "b": [1]}
    """
    assert isinstance(base, Mapping), f"Can only merge mappings, got {type(base).__name__}"
    result: dict[str, Any] = {k: copy.deepcopy(v) for k, v in base.items()}
    for overlay in overlays:
        assert isinstance(overlay, Mapping), f"Can only merge mappings, got {type(overlay).__name__}"
        for key, value in overlay.items():
            current = result.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = merge_dicts(current, value)
            else:
                result[key] = copy.deepcopy(value)
    return result
