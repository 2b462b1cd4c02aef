"""
slidekit Kernel — Subslide Ranges

Parses compact visibility strings and evaluates subslide indices against
them. Pure functions. Deterministic.

Grammar (comma-separated, whitespace around segments ignored):
  N      → exactly subslide N
  -N     → subslides 1..N
  N-     → subslide N and everything after
  N-M    → subslides N..M inclusive

A predicate may also be given as an int, an Exact/Range, or a list of any
of these (OR'd together).
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any

from slidekit.kernel.types import Exact, InvalidSpec, ParseError, Predicate, Range

logger = logging.getLogger(__name__)

# Checked in this order; the patterns are disjoint.
_EXACT_RE = re.compile(r"^([0-9]+)$")
_UNTIL_RE = re.compile(r"^-([0-9]+)$")
_FROM_RE = re.compile(r"^([0-9]+)-$")
_RANGE_RE = re.compile(r"^([0-9]+)-([0-9]+)$")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


@lru_cache(maxsize=256)
def parse_range_spec(spec: str) -> tuple[Predicate, ...]:
    """
    Parse a spec string such as "-2, 4, 6-8, 10-" into predicates.

    Raises ParseError on the first segment that matches no form.
    Results are cached per exact string.
    """
    return tuple(_parse_segment(part.strip()) for part in spec.split(","))


def _parse_segment(part: str) -> Predicate:
    m = _EXACT_RE.match(part)
    if m:
        return Exact(int(m.group(1)))

    m = _UNTIL_RE.match(part)
    if m:
        return Range(hi=int(m.group(1)))

    m = _FROM_RE.match(part)
    if m:
        return Range(lo=int(m.group(1)))

    m = _RANGE_RE.match(part)
    if m:
        lo, hi = int(m.group(1)), int(m.group(2))
        if lo > hi:
            # Accepted as written; it can never match.
            logger.warning("Inverted subslide range %r never matches", part)
        return Range(lo=lo, hi=hi)

    raise ParseError(f"Failed to parse visible subslide range: {part!r}")


def to_predicates(spec: Any) -> list[Predicate]:
    """
    Flatten any accepted predicate form into a list of Exact/Range.
    Raises InvalidSpec for unsupported types.
    """
    if isinstance(spec, bool):
        raise InvalidSpec("A bool is not a subslide index")
    if isinstance(spec, int):
        return [Exact(spec)]
    if isinstance(spec, (Exact, Range)):
        return [spec]
    if isinstance(spec, str):
        return list(parse_range_spec(spec))
    if isinstance(spec, (list, tuple)):
        out: list[Predicate] = []
        for item in spec:
            out.extend(to_predicates(item))
        return out
    raise InvalidSpec(
        f"Visible subslides must be an int, a string, a list, or a parsed range; got {type(spec).__name__}"
    )


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def matches(index: int, predicate: Predicate) -> bool:
    """True if `index` satisfies a single predicate."""
    if isinstance(predicate, Exact):
        return index == predicate.n
    lower_ok = predicate.lo is None or index >= predicate.lo
    upper_ok = predicate.hi is None or index <= predicate.hi
    return lower_ok and upper_ok


def is_visible(index: int, spec: Any) -> bool:
    """True if `index` satisfies at least one predicate in `spec`."""
    return any(matches(index, p) for p in to_predicates(spec))


def max_required_index(spec: Any) -> int:
    """
    The largest finite bound referenced by `spec`.

    An open-ended range ("3-") contributes its lower bound only. This is
    how many subslides a slide must allocate for the content to show up.
    An empty list requires nothing and returns 0.
    """
    last = 0
    for p in to_predicates(spec):
        if isinstance(p, Exact):
            last = max(last, p.n)
            continue
        if p.lo is not None:
            last = max(last, p.lo)
        if p.hi is not None:
            last = max(last, p.hi)
    return last


def format_range_spec(spec: Any) -> str:
    """Render any accepted predicate form back to the compact string grammar."""
    return ", ".join(str(p) for p in to_predicates(spec))
