"""
slidekit Kernel — Reveal

Decides what a slide shows on each subslide (reveal step).

  uncover      — hidden content keeps its space (drawn under a cover)
  only         — hidden content takes no space at all
  alternatives — several contents share one spot, one per subslide

Alternatives are measured once and every entry is boxed at the largest
width and height among them, so switching between them never shifts the
rest of the slide. If two entries are visible on the same subslide both
are rendered; choosing between them is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from slidekit.config import build_config, settings
from slidekit.kernel.cover import Cover, get_cover, hide_cover
from slidekit.kernel.layout import UNBOUNDED, LayoutHost, measure_all
from slidekit.kernel.nodes import align, as_node, box, seq
from slidekit.kernel.ranges import is_visible, max_required_index
from slidekit.kernel.types import (
    ConfigurationError,
    ContentNode,
    Exact,
    Range,
    Region,
)

logger = logging.getLogger(__name__)

DEFAULT_REGION = Region(width=800.0, height=600.0)


# ---------------------------------------------------------------------------
# Slide context
# ---------------------------------------------------------------------------


@dataclass
class SlideContext:
    """
    Everything reveal needs to know about the slide being built.

    subslide  — the current reveal step (1-based)
    host      — layout host used for measuring; None disables measuring
    region    — the space content is laid out in
    cover     — `content -> content` used by uncover for hidden content
    """

    subslide: int = 1
    host: LayoutHost | None = None
    region: Region = DEFAULT_REGION
    cover: Cover | None = None
    position: str = settings.ALIGN
    _required: list[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.subslide < 1:
            raise ValueError(f"Subslide indices start at 1, got {self.subslide}")
        if self.cover is None:
            if self.host is not None:
                self.cover = get_cover("rect", host=self.host, region=self.region)
            else:
                self.cover = hide_cover

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any] | None = None,
        *,
        subslide: int = 1,
        host: LayoutHost | None = None,
        region: Region = DEFAULT_REGION,
    ) -> SlideContext:
        """Build a context from a (partial) slide configuration."""
        cfg = build_config(dict(config or {}))
        reveal_cfg = cfg["reveal"]
        cover_cfg = cfg["cover"]
        cover = get_cover(
            reveal_cfg["cover"],
            host=host,
            region=region,
            fill=cover_cfg["fill"],
            alpha=cover_cfg["alpha"],
            inline=cover_cfg["inline"],
        )
        return cls(subslide=subslide, host=host, region=region, cover=cover, position=reveal_cfg["position"])

    def visible(self, spec: Any) -> bool:
        """Check `spec` against the current subslide, recording what it needs."""
        self._required.append(max_required_index(spec))
        return is_visible(self.subslide, spec)

    def required_subslides(self) -> int:
        """How many subslides everything seen so far needs (at least 1)."""
        return max(self._required, default=1) or 1

    def at(self, subslide: int) -> SlideContext:
        """A fresh context for another subslide of the same slide."""
        return SlideContext(
            subslide=subslide,
            host=self.host,
            region=self.region,
            cover=self.cover,
            position=self.position,
        )


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def uncover(ctx: SlideContext, spec: Any, content: Any) -> ContentNode:
    """Show `content` on `spec`'s subslides; cover it (keeping its space) otherwise."""
    content = as_node(content)
    if ctx.visible(spec):
        return content
    return ctx.cover(content)


def only(ctx: SlideContext, spec: Any, content: Any) -> ContentNode:
    """Show `content` on `spec`'s subslides; emit nothing otherwise."""
    content = as_node(content)
    if ctx.visible(spec):
        return content
    return seq()


def alternatives_match(
    ctx: SlideContext,
    cases: Iterable[tuple[Any, Any]] | Mapping[Any, Any],
    position: str | None = None,
) -> ContentNode:
    """
    Render (spec, content) pairs in one shared box.

    Every content is measured once; each entry is boxed at the maximum
    width and height and aligned by `position` inside it.
    """
    if ctx.host is None:
        raise ConfigurationError("alternatives need a layout host to measure their contents")
    pairs = list(cases.items()) if isinstance(cases, Mapping) else list(cases)
    if not pairs:
        return seq()

    position = position or ctx.position
    contents = [as_node(content) for _, content in pairs]
    sizes = measure_all(ctx.host, ctx.region, contents, width=UNBOUNDED)
    max_width = max(s.width for s in sizes)
    max_height = max(s.height for s in sizes)
    logger.debug("alternatives: %d entries, shared box %.2fx%.2f", len(pairs), max_width, max_height)

    return seq(
        *(
            only(ctx, spec, box(align(content, position), width=max_width, height=max_height))
            for (spec, _), content in zip(pairs, contents)
        )
    )


def alternatives(
    ctx: SlideContext,
    *items: Any,
    start: int | None = 1,
    repeat_last: bool = False,
    position: str | None = None,
) -> ContentNode:
    """
    Show `items` one after another, starting at subslide `start`
    (None means the current subslide). With `repeat_last` the final item
    stays visible on every later subslide.
    """
    if start is None:
        start = ctx.subslide
    specs = alternatives_predicates(start, len(items), repeat_last=repeat_last)
    return alternatives_match(ctx, list(zip(specs, items)), position=position)


def alternatives_predicates(start: int, count: int, repeat_last: bool = False) -> list[Exact | Range]:
    """
    Predicates for `count` consecutive alternatives from `start`:
    Exact(start), Exact(start + 1), ... and for the last one either
    Exact(start + count - 1) or, with `repeat_last`, Range(start + count - 1, open).
    """
    specs: list[Exact | Range] = [Exact(start + i) for i in range(count)]
    if specs and repeat_last:
        specs[-1] = Range(lo=start + count - 1)
    return specs


def alternatives_fn(
    ctx: SlideContext,
    fn: Callable[[int], Any],
    *,
    start: int = 1,
    end: int | None = None,
    count: int | None = None,
    position: str | None = None,
) -> ContentNode:
    """
    Show `fn(i)` on subslide i for every i in [start, end).
    `count` may be given instead of `end`.
    """
    if end is None:
        if count is None:
            raise ConfigurationError("alternatives_fn needs either `end` or `count`")
        end = start + count
    indices = range(start, end)
    return alternatives_match(ctx, [(i, fn(i)) for i in indices], position=position)


def alternatives_cases(
    ctx: SlideContext,
    cases: list[Any],
    fn: Callable[[int], Any],
    position: str | None = None,
) -> ContentNode:
    """Show `fn(k)` wherever `cases[k]` is visible."""
    return alternatives_match(ctx, [(spec, fn(k)) for k, spec in enumerate(cases)], position=position)


# ---------------------------------------------------------------------------
# Subslide collection
# ---------------------------------------------------------------------------


def collect_subslides(
    build: Callable[[SlideContext], Any],
    ctx: SlideContext | None = None,
) -> list[ContentNode]:
    """
    Build every subslide of a slide.

    `build` runs once for subslide 1, which tells us how many subslides
    its reveal calls need; it then runs again for each remaining one.
    """
    first_ctx = ctx or SlideContext()
    if first_ctx.subslide != 1:
        first_ctx = first_ctx.at(1)
    pages = [as_node(build(first_ctx))]
    total = first_ctx.required_subslides()
    logger.debug("collect_subslides: %d subslides", total)
    for index in range(2, total + 1):
        pages.append(as_node(build(first_ctx.at(index))))
    return pages
