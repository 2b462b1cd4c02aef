"""
In-memory layout host for deterministic testing.

Lays content out as a single vertical flow with fixed glyph metrics.
It is not a typesetter: every text run is one line of `char_width`-wide
glyphs, wrapped when a width limit applies. That is enough to exercise
the two-pass protocol (anchors, measurements, elastic spacers) without
the real host engine.
"""

from __future__ import annotations

import math
from typing import Any

from slidekit.config import settings
from slidekit.kernel.layout import ANCHOR_KIND
from slidekit.kernel.types import (
    ContentNode,
    Fraction,
    Length,
    Point,
    Region,
    Size,
    resolve_length,
)

ZERO = Size(0.0, 0.0)

# Kinds that take no room at all.
_EMPTY_KINDS = {"linebreak", "parbreak", "metadata", "measure"}


class FlowLayoutHost:
    """Deterministic stand-in for the host layout engine."""

    def __init__(self, char_width: float = 5.0, line_height: float = 10.0, em_size: float | None = None):
        self.char_width = char_width
        self.line_height = line_height
        self.em_size = settings.EM_SIZE if em_size is None else em_size
        self.passes = 0

    # -- LayoutHost ---------------------------------------------------------

    def layout(self, content: ContentNode, region: Region) -> dict[str, Size | Point]:
        """Run one pass. Returns anchor positions and measured sizes by id."""
        self.passes += 1
        results: dict[str, Size | Point] = {}
        items = list(self._flatten(content))

        # Elastic spacers share whatever the fixed items leave over.
        fixed = 0.0
        total_fr = 0.0
        for item in items:
            amount = item.attrs.get("amount") if item.kind == "v" else None
            if isinstance(amount, Fraction):
                total_fr += amount.fr
            else:
                fixed += self._flow_height(item, region)
        leftover = max(region.height - fixed, 0.0)

        y = 0.0
        for item in items:
            if item.kind == "metadata" and _anchor_id(item) is not None:
                results[_anchor_id(item)] = Point(0.0, y)
            elif item.kind == "measure":
                width = item.attrs.get("width")
                limit = region.width if width is None else width
                if math.isinf(limit):
                    limit = None
                results[item.attrs["id"]] = self.measure(item.body, limit)
            elif item.kind == "v" and isinstance(item.attrs.get("amount"), Fraction):
                if total_fr > 0:
                    y += leftover * item.attrs["amount"].fr / total_fr
            else:
                y += self._flow_height(item, region)
        return results

    # -- Measurement --------------------------------------------------------

    def measure(self, node: Any, width: float | None = None) -> Size:
        """Natural size of `node` in a container `width` wide (None: no limit)."""
        if node is None:
            return ZERO
        if isinstance(node, str):
            return self._measure_text(node, width)

        kind = node.kind
        if kind in _EMPTY_KINDS:
            return ZERO
        if kind == "text":
            return self._measure_text(node.attrs.get("text", ""), width)
        if kind in ("space", "smartquote"):
            return Size(self.char_width, self.line_height)
        if kind == "raw":
            lines = node.attrs.get("text", "").split("\n")
            return Size(max(len(line) for line in lines) * self.char_width, len(lines) * self.line_height)
        if kind == "v":
            amount = node.attrs.get("amount")
            if isinstance(amount, Fraction):
                return ZERO
            return Size(0.0, self._resolve(amount, 0.0))
        if kind in ("sequence", "stack"):
            return self._measure_stack(node, width)
        if kind in ("box", "block"):
            return self._measure_box(node, width)
        if kind == "scale":
            if node.attrs.get("reflow"):
                inner = self.measure(node.body, width)
                return Size(inner.width * node.attrs.get("x", 1.0), inner.height * node.attrs.get("y", 1.0))
            # Scaling is visual only; the layout keeps the unscaled footprint.
            return self.measure(node.body, width)
        if kind == "rect":
            w = self._resolve(node.attrs.get("width"), width or 0.0) or 0.0
            h = self._resolve(node.attrs.get("height"), 0.0) or 0.0
            return Size(w, h)
        if node.body is not None:
            return self.measure(node.body, width)
        if node.children is not None:
            return self._measure_stack(node, width)
        return ZERO

    def _measure_text(self, value: str, width: float | None) -> Size:
        if not value:
            return ZERO
        natural = len(value) * self.char_width
        if width is None or natural <= width or width <= 0:
            return Size(natural, self.line_height)
        lines = math.ceil(natural / width)
        return Size(width, lines * self.line_height)

    def _measure_stack(self, node: ContentNode, width: float | None) -> Size:
        children = node.children or ()
        if not children:
            return ZERO
        spacing = 0.0
        if node.kind == "stack":
            spacing = self._resolve(node.attrs.get("spacing"), 0.0) or 0.0
        sizes = [self.measure(c, width) for c in children]
        height = sum(s.height for s in sizes) + spacing * (len(sizes) - 1)
        return Size(max(s.width for s in sizes), max(height, 0.0))

    def _measure_box(self, node: ContentNode, width: float | None) -> Size:
        w = self._resolve(node.attrs.get("width"), width or 0.0)
        h = self._resolve(node.attrs.get("height"), 0.0)
        inner = self.measure(node.body, w if w is not None else width)
        return Size(inner.width if w is None else w, inner.height if h is None else h)

    def _flow_height(self, item: ContentNode, region: Region) -> float:
        if item.kind == "v":
            amount = item.attrs.get("amount")
            if isinstance(amount, Fraction):
                return 0.0
            return self._resolve(amount, region.height) or 0.0
        return self.measure(item, region.width).height

    def _resolve(self, value: Any, container: float) -> float | None:
        if isinstance(value, Fraction):
            return None
        if isinstance(value, Length):
            return value.resolve(container, self.em_size)
        return resolve_length(value, container, self.em_size)

    def _flatten(self, node: ContentNode):
        if node.kind == "sequence":
            for child in node.children or ():
                yield from self._flatten(child)
        else:
            yield node


def _anchor_id(node: ContentNode) -> str | None:
    value = node.attrs.get("value")
    if isinstance(value, dict) and value.get("kind") == ANCHOR_KIND:
        return value.get("id")
    return None
