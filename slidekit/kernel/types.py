"""
slidekit Kernel — Shared Types

Data classes used across ranges, reveal, rewrite, markup, fit and cover.
These are the contracts that bind the kernel together.

Key points:
- `ContentNode` is immutable. Every rewrite returns a new node.
- Visibility predicates are `Exact` or `Range`, OR'd together in a list.
- Lengths are points (floats) unless a container-relative `Length` or an
  elastic `Fraction` is given. Fractions only resolve inside a layout pass.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class _Auto:
    """Sentinel for values the host would pick automatically."""

    _instance: _Auto | None = None

    def __new__(cls) -> _Auto:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "AUTO"

    def __bool__(self) -> bool:
        return False


AUTO = _Auto()


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SlidekitError(Exception):
    """Base class for all slidekit errors."""
    pass


class ParseError(SlidekitError, ValueError):
    """A RangeSpec string segment matched none of the accepted forms."""
    pass


class InvalidSpec(SlidekitError, TypeError):
    """A value of the wrong type was supplied as a visibility predicate."""
    pass


class ConfigurationError(SlidekitError):
    """The caller supplied a setting that cannot be honoured (e.g. `auto` fill)."""
    pass


class LayoutError(SlidekitError):
    """The host did not resolve a placeholder declared in a layout pass."""
    pass


# ---------------------------------------------------------------------------
# Visibility predicates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Exact:
    """Visible on exactly one subslide."""

    n: int

    def __str__(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class Range:
    """
    Visible on every subslide in [lo, hi]. Either bound may be open,
    but not both.
    """

    lo: int | None = None
    hi: int | None = None

    def __post_init__(self) -> None:
        if self.lo is None and self.hi is None:
            raise ValueError("Range needs at least one bound")

    def __str__(self) -> str:
        lo = "" if self.lo is None else str(self.lo)
        hi = "" if self.hi is None else str(self.hi)
        return f"{lo}-{hi}"


Predicate = Union[Exact, Range]


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Region:
    """The space available to a piece of content (the container)."""

    width: float
    height: float


@dataclass(frozen=True)
class Length:
    """
    A length made of an absolute part (pt), a part relative to the
    container (ratio, 1.0 == 100%) and a part relative to the font size (em).
    """

    pt: float = 0.0
    ratio: float = 0.0
    em: float = 0.0

    def resolve(self, container: float = 0.0, em_size: float = 10.0) -> float:
        return self.pt + self.ratio * container + self.em * em_size

    def __neg__(self) -> Length:
        return Length(-self.pt, -self.ratio, -self.em)


@dataclass(frozen=True)
class Fraction:
    """Elastic length: a share of the space left over in a flow."""

    fr: float = 1.0


LengthLike = Union[float, int, Length, Fraction]


def resolve_length(value: LengthLike | None, container: float, em_size: float = 10.0) -> float | None:
    """
    Resolve an absolute or container-relative length to points.
    Fractions cannot be resolved outside a layout pass.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"Not a length: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, Length):
        return value.resolve(container, em_size)
    if isinstance(value, Fraction):
        raise TypeError("Fractional lengths only resolve inside a layout pass")
    raise TypeError(f"Not a length: {value!r}")


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def parse(cls, value: str | Color) -> Color:
        """Parse `#rgb`, `#rrggbb` or `#rrggbbaa`."""
        if isinstance(value, Color):
            return value
        m = HEX_COLOR_PATTERN.match(value.strip())
        if not m:
            raise ValueError(f"Invalid color: {value!r}")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits += "ff"
        return cls(*(int(digits[i : i + 2], 16) for i in range(0, 8, 2)))

    def transparentize(self, amount: float) -> Color:
        """Reduce opacity by `amount` (0.0 keeps it, 1.0 makes it invisible)."""
        amount = min(max(amount, 0.0), 1.0)
        return Color(self.r, self.g, self.b, round(self.a * (1.0 - amount)))

    def to_hex(self) -> str:
        out = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            out += f"{self.a:02x}"
        return out

    def __str__(self) -> str:
        return self.to_hex()


# ---------------------------------------------------------------------------
# Content tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContentNode:
    """
    One piece of rendered document structure.

    kind      — "sequence", "styled", "text", "raw", "list_item", "enum_item",
                "term_item", "linebreak", "parbreak", "strong", "emph", "link",
                "heading", "metadata", a layout kind ("box", "scale", "rect",
                "stack", "v", ...) or any host-specific kind
    attrs     — named attributes, in insertion order (read-only)
    children  — ordered child nodes (sequences), or None
    body      — single wrapped node, or None
    depth     — heading depth, or None
    label     — cross-reference identity, or None
    """

    kind: str
    attrs: Mapping[str, Any] = field(default_factory=dict, hash=False)
    children: tuple[ContentNode, ...] | None = None
    body: ContentNode | None = None
    depth: int | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))
        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def has(self, name: str) -> bool:
        """Return True if the node carries the named field."""
        if name in ("children", "body", "depth", "label"):
            return getattr(self, name) is not None
        return name in self.attrs

    def get(self, name: str, default: Any = None) -> Any:
        if name in ("children", "body", "depth", "label"):
            value = getattr(self, name)
            return default if value is None else value
        return self.attrs.get(name, default)

    def fields(self) -> dict[str, Any]:
        """All present fields in a fresh dict: attrs first, then structure."""
        out: dict[str, Any] = dict(self.attrs)
        for name in ("children", "body", "depth", "label"):
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out

    def __repr__(self) -> str:
        parts = [repr(self.kind)]
        if self.attrs:
            parts.append(f"attrs={dict(self.attrs)!r}")
        if self.children is not None:
            parts.append(f"children={list(self.children)!r}")
        if self.body is not None:
            parts.append(f"body={self.body!r}")
        if self.depth is not None:
            parts.append(f"depth={self.depth}")
        if self.label is not None:
            parts.append(f"label={self.label!r}")
        return f"ContentNode({', '.join(parts)})"
