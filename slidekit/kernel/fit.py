"""
slidekit Kernel — Fit Engine

Scales content so it fills a target box, using the host's layout pass
as the measuring device.

fit_to_height: two anchors separated by a spacer of the target height
are laid out together with a measurement of the content. The distance
between the anchors is the height actually available (this is how
elastic and relative heights get resolved). The content is scaled by
the smaller of the height and width ratios.

fit_to_width: measure without a width limit, scale by target / natural
width, and box the result so the surrounding layout sees the scaled size.

Scaling only happens when the policy allows it:
  shrink and ratio < 1   or   grow and ratio > 1
Otherwise the content comes back unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from pydantic import BaseModel, InstanceOf

from slidekit.kernel.layout import UNBOUNDED, LayoutHost, LayoutPass
from slidekit.kernel.nodes import as_node, box, scale, seq, v
from slidekit.kernel.types import (
    ContentNode,
    Fraction,
    Length,
    Region,
    resolve_length,
)

logger = logging.getLogger(__name__)

Dimension = Union[float, InstanceOf[Length], InstanceOf[Fraction]]
FixedDimension = Union[float, InstanceOf[Length]]


class FitRequest(BaseModel):
    """A request to scale `content` into a box of `height` (and at most `width`)."""

    model_config = {"extra": "forbid", "frozen": True}

    content: InstanceOf[ContentNode]
    height: Dimension
    width: FixedDimension | None = None
    prescale_width: FixedDimension | None = None
    grow: bool = True
    shrink: bool = True


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def fit(request: FitRequest, host: LayoutHost, region: Region) -> ContentNode:
    """Run a validated FitRequest through fit_to_height."""
    return fit_to_height(
        request.content,
        request.height,
        host=host,
        region=region,
        width=request.width,
        prescale_width=request.prescale_width,
        grow=request.grow,
        shrink=request.shrink,
    )


def fit_to_height(
    content: Any,
    height: float | Length | Fraction,
    *,
    host: LayoutHost,
    region: Region,
    width: float | Length | None = None,
    prescale_width: float | Length | None = None,
    grow: bool = True,
    shrink: bool = True,
) -> ContentNode:
    """
    Scale `content` to fill `height`, never wider than `width`
    (default: the container width).

    With `prescale_width` the content is boxed at that width before it is
    measured, which pins its line breaks before scaling.
    """
    content = as_node(content)
    body = content
    if prescale_width is not None:
        body = box(content, width=resolve_length(prescale_width, region.width))

    # Pass 1: declare anchors and the measurement
    lp = LayoutPass(host, region, prefix="slidekit-fit")
    before = lp.anchor()
    spacer = lp.spacer(height)
    after = lp.anchor()
    measured = lp.measure(body)
    results = lp.run()

    # Pass 2: read geometry back
    available = results.distance(before, after)
    size = results.size(measured)
    if size.width == 0 or size.height == 0:
        return content

    max_width = region.width if width is None else resolve_length(width, region.width)
    h_ratio = available / size.height
    w_ratio = max_width / size.width
    ratio = min(h_ratio, w_ratio)
    logger.debug(
        "fit_to_height: available=%.2f natural=%s h_ratio=%.4f w_ratio=%.4f",
        available,
        size,
        h_ratio,
        w_ratio,
    )

    if not should_scale(ratio, grow=grow, shrink=shrink):
        return content

    # The anchors and spacer stay in the output so the host lays this out
    # the same way on its next pass; the negative spacer gives their
    # advance back before the scaled box takes exactly `available`.
    scaled = scale(body, ratio, origin="top + left")
    return seq(
        before.node,
        spacer,
        after.node,
        v(-available),
        box(scaled, width=size.width * ratio, height=available),
    )


def fit_to_width(
    content: Any,
    width: float | Length,
    *,
    host: LayoutHost,
    region: Region,
    grow: bool = True,
    shrink: bool = True,
) -> ContentNode:
    """Scale `content` so its width is exactly `width`."""
    content = as_node(content)

    lp = LayoutPass(host, region, prefix="slidekit-fit")
    measured = lp.measure(content, width=UNBOUNDED)
    size = lp.run().size(measured)
    if size.width == 0:
        return content

    target = resolve_length(width, region.width)
    ratio = target / size.width
    logger.debug("fit_to_width: target=%.2f natural=%s ratio=%.4f", target, size, ratio)

    if not should_scale(ratio, grow=grow, shrink=shrink):
        return content

    # Inner box keeps the content from wrapping early; outer box reports
    # the scaled size, since scale alone leaves the layout footprint as is.
    scaled = scale(box(content, width=size.width), ratio, origin="top + left", reflow=False)
    return box(scaled, width=target, height=size.height * ratio)


def should_scale(ratio: float, *, grow: bool, shrink: bool) -> bool:
    return (shrink and ratio < 1) or (grow and ratio > 1)
