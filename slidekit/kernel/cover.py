"""
slidekit Kernel — Covers

A cover hides content while keeping its footprint, so whatever follows
stays where it is. Every cover has the shape `content -> content`; reveal
calls it for content that is not visible on the current subslide.

Covers:
  rect              — opaque rectangle drawn over the content (default)
  hide              — the host's own invisible rendering
  semi-transparent  — content drawn with a faded text fill
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from slidekit.config import settings
from slidekit.kernel.layout import UNBOUNDED, LayoutHost, LayoutPass
from slidekit.kernel.nodes import box, hide, rect, stack, styled
from slidekit.kernel.types import (
    AUTO,
    Color,
    ConfigurationError,
    ContentNode,
    Length,
    Region,
)

logger = logging.getLogger(__name__)

Cover = Callable[[ContentNode], ContentNode]

# Covers the tops of tall glyphs and the tails of descenders.
DEFAULT_OUTSET = {"top": Length(em=0.15), "bottom": Length(em=0.25)}


def cover_with_rect(
    content: ContentNode,
    *,
    host: LayoutHost,
    region: Region,
    fill: Any = AUTO,
    inline: bool = True,
    **rect_args: Any,
) -> ContentNode:
    """
    Draw an opaque rectangle of `fill` over `content`.

    The content is measured, wrapped to at most the container width and
    measured again; the rectangle takes that size unless `width`/`height`
    are given in `rect_args`. Net vertical advance is the content's own.

    `fill` must be a concrete color. The page background cannot be
    looked up, so AUTO (or "auto") is a configuration error.
    """
    if fill is AUTO or fill is None or (isinstance(fill, str) and fill.strip().lower() == "auto"):
        raise ConfigurationError(
            "cover_with_rect needs an explicit fill; the page background cannot be looked up"
        )
    fill = Color.parse(fill)

    natural = _measure(host, region, content, width=UNBOUNDED)
    bounding_width = min(natural.width, region.width)
    wrapped = _measure(host, region, box(content, width=bounding_width))
    logger.debug("cover: natural=%s wrapped=%s", natural, wrapped)

    args = dict(rect_args)
    args.setdefault("width", wrapped.width)
    args.setdefault("height", wrapped.height)
    args.setdefault("outset", dict(DEFAULT_OUTSET))

    covered = stack(box(content), rect(fill=fill, **args), spacing=-wrapped.height)
    if inline:
        return box(covered)
    return covered


def _measure(host: LayoutHost, region: Region, content: ContentNode, width: float | None = None):
    lp = LayoutPass(host, region, prefix="slidekit-cover")
    placeholder = lp.measure(content, width)
    return lp.run().size(placeholder)


def hide_cover(content: ContentNode) -> ContentNode:
    """Let the host render the content invisibly."""
    return hide(content)


def semi_transparent_cover(
    content: ContentNode,
    *,
    color: Any = "#000000",
    alpha: float = 0.85,
) -> ContentNode:
    """Render the content with its text faded by `alpha`."""
    fill = Color.parse(color).transparentize(alpha)
    return styled(content, {"text.fill": fill})


COVERS: dict[str, Callable[..., ContentNode]] = {
    "rect": cover_with_rect,
    "hide": hide_cover,
    "semi-transparent": semi_transparent_cover,
}


def get_cover(
    name: str,
    *,
    host: LayoutHost | None = None,
    region: Region | None = None,
    fill: Any = None,
    alpha: float | None = None,
    inline: bool = True,
) -> Cover:
    """Build a `content -> content` cover by name."""
    if name == "rect":
        if host is None or region is None:
            raise ConfigurationError("The rect cover needs a layout host and a region to measure content")
        return functools.partial(
            cover_with_rect,
            host=host,
            region=region,
            fill=settings.COVER_FILL if fill is None else fill,
            inline=inline,
        )
    if name == "hide":
        return hide_cover
    if name == "semi-transparent":
        return functools.partial(semi_transparent_cover, alpha=settings.COVER_ALPHA if alpha is None else alpha)
    raise ConfigurationError(f"Unknown cover: {name!r}. Valid covers: {list(COVERS)}")
