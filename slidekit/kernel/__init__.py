"""
slidekit Kernel — the pure engine.

Components:
  ranges   — subslide range parsing and visibility checks
  reveal   — uncover / only / alternatives for progressive slides
  rewrite  — structural predicates and label-preserving reconstruction
  markup   — content tree → markup text (native or markdown)
  fit      — scale content to fill a height or width
  cover    — hide content while keeping its footprint
  merge    — deep merge of nested configuration

Geometry comes from a LayoutHost through the two-pass builder in layout.
"""

from slidekit.kernel.cover import cover_with_rect, get_cover, hide_cover, semi_transparent_cover
from slidekit.kernel.fit import FitRequest, fit, fit_to_height, fit_to_width
from slidekit.kernel.layout import UNBOUNDED, LayoutHost, LayoutPass, LayoutResults
from slidekit.kernel.markup import serialize
from slidekit.kernel.merge import merge_dicts
from slidekit.kernel.ranges import is_visible, max_required_index, parse_range_spec
from slidekit.kernel.reveal import (
    SlideContext,
    alternatives,
    alternatives_cases,
    alternatives_fn,
    alternatives_match,
    collect_subslides,
    only,
    uncover,
)
from slidekit.kernel.rewrite import (
    is_heading,
    is_kind,
    is_metadata,
    is_sequence,
    is_styled,
    label_it,
    reconstruct,
    reconstruct_styled,
    trim,
)
from slidekit.kernel.types import (
    AUTO,
    ConfigurationError,
    ContentNode,
    Exact,
    Fraction,
    InvalidSpec,
    LayoutError,
    Length,
    ParseError,
    Range,
    Region,
    SlidekitError,
)

__all__ = [
    "parse_range_spec",
    "is_visible",
    "max_required_index",
    "SlideContext",
    "uncover",
    "only",
    "alternatives",
    "alternatives_fn",
    "alternatives_cases",
    "alternatives_match",
    "collect_subslides",
    "reconstruct",
    "reconstruct_styled",
    "is_sequence",
    "is_styled",
    "is_metadata",
    "is_kind",
    "is_heading",
    "label_it",
    "trim",
    "serialize",
    "FitRequest",
    "fit",
    "fit_to_height",
    "fit_to_width",
    "cover_with_rect",
    "hide_cover",
    "semi_transparent_cover",
    "get_cover",
    "merge_dicts",
    "LayoutHost",
    "LayoutPass",
    "LayoutResults",
    "UNBOUNDED",
    "ContentNode",
    "Exact",
    "Range",
    "Length",
    "Fraction",
    "Region",
    "AUTO",
    "SlidekitError",
    "ParseError",
    "InvalidSpec",
    "ConfigurationError",
    "LayoutError",
]
