"""
slidekit Kernel — Two-Pass Layout

The host engine only knows positions and sizes after it has laid out a
whole pass. Code that needs geometry therefore works in two steps:

  1. declare  — emit placeholder markers (anchors, measurements) into a
                trial document and hand it to the host
  2. query    — read the resolved geometry from the results table, keyed
                by placeholder id, and build the real content from it

LayoutHost is the measurement oracle. The kernel never lays anything out
itself.
"""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from slidekit.kernel.nodes import as_node, metadata, seq, v
from slidekit.kernel.types import (
    ContentNode,
    LayoutError,
    LengthLike,
    Point,
    Region,
    Size,
)

ANCHOR_KIND = "slidekit-anchor"

# Measurement width meaning "no container": content keeps its natural width.
UNBOUNDED = math.inf


# ---------------------------------------------------------------------------
# Host protocol
# ---------------------------------------------------------------------------


class LayoutHost(Protocol):
    """
    Lays out a document and reports resolved geometry.

    The returned table maps each anchor id to its Point and each
    measurement id to the measured Size of its body. A measurement's
    `width` attr is its container width: None means the region width,
    UNBOUNDED means no limit (nothing wraps).
    """

    def layout(self, content: ContentNode, region: Region) -> Mapping[str, Size | Point]: ...


# ---------------------------------------------------------------------------
# Placeholders
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Placeholder:
    id: str
    role: str  # "anchor" | "measure"
    node: ContentNode


def anchor_node(anchor_id: str) -> ContentNode:
    """Zero-size marker whose position the host reports back."""
    return metadata({"kind": ANCHOR_KIND, "id": anchor_id})


def measure_node(measure_id: str, content: Any, width: float | None = None) -> ContentNode:
    """Query node: the host measures `content` without placing it in the flow."""
    return ContentNode("measure", {"id": measure_id, "width": width}, body=as_node(content))


class LayoutResults:
    """Resolved geometry for one pass, keyed by placeholder id."""

    def __init__(self, table: Mapping[str, Size | Point]) -> None:
        self._table = dict(table)

    def position(self, placeholder: Placeholder) -> Point:
        value = self._table.get(placeholder.id)
        if not isinstance(value, Point):
            raise LayoutError(f"Host did not resolve anchor {placeholder.id!r}")
        return value

    def size(self, placeholder: Placeholder) -> Size:
        value = self._table.get(placeholder.id)
        if not isinstance(value, Size):
            raise LayoutError(f"Host did not measure {placeholder.id!r}")
        return value

    def distance(self, before: Placeholder, after: Placeholder) -> float:
        """Vertical distance between two anchors. `before` must precede `after`."""
        return self.position(after).y - self.position(before).y

    def __contains__(self, placeholder_id: str) -> bool:
        return placeholder_id in self._table


class LayoutPass:
    """
    Collects trial content for a single host layout run.

    Placeholder ids come from a per-pass counter under `prefix`, so the
    same sequence of declarations always yields the same ids.
    """

    def __init__(self, host: LayoutHost, region: Region, prefix: str = "slidekit") -> None:
        self.host = host
        self.region = region
        self._prefix = prefix
        self._ids = itertools.count()
        self._items: list[ContentNode] = []

    def _next_id(self, role: str) -> str:
        return f"{self._prefix}-{role}-{next(self._ids)}"

    def anchor(self) -> Placeholder:
        pid = self._next_id("anchor")
        node = anchor_node(pid)
        self._items.append(node)
        return Placeholder(pid, "anchor", node)

    def spacer(self, amount: LengthLike) -> ContentNode:
        node = v(amount)
        self._items.append(node)
        return node

    def add(self, node: Any) -> ContentNode:
        """Lay out ordinary content between placeholders."""
        node = as_node(node)
        self._items.append(node)
        return node

    def measure(self, content: Any, width: float | None = None) -> Placeholder:
        pid = self._next_id("measure")
        node = measure_node(pid, content, width)
        self._items.append(node)
        return Placeholder(pid, "measure", node)

    @property
    def content(self) -> ContentNode:
        return seq(*self._items)

    def run(self) -> LayoutResults:
        return LayoutResults(self.host.layout(self.content, self.region))


def measure_all(
    host: LayoutHost,
    region: Region,
    contents: list[Any],
    width: float | None = None,
) -> list[Size]:
    """Measure several pieces of content in one pass, all at `width`."""
    lp = LayoutPass(host, region)
    placeholders = [lp.measure(c, width) for c in contents]
    results = lp.run()
    return [results.size(p) for p in placeholders]
