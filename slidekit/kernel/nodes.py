"""
slidekit Kernel — Node Construction

Factory functions for building well-formed ContentNodes.
Used by reveal, fit and cover to emit host layout content, and by tests
to build trees concisely.
"""

from __future__ import annotations

from typing import Any

from slidekit.kernel.types import ContentNode, LengthLike


def as_node(value: Any) -> ContentNode:
    """Coerce strings, lists and None into content."""
    if isinstance(value, ContentNode):
        return value
    if value is None:
        return seq()
    if isinstance(value, str):
        return text(value)
    if isinstance(value, (list, tuple)):
        return seq(*value)
    raise TypeError(f"Cannot use {type(value).__name__} as content")


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


def text(value: str, label: str | None = None) -> ContentNode:
    return ContentNode("text", {"text": value}, label=label)


def space() -> ContentNode:
    return ContentNode("space")


def linebreak() -> ContentNode:
    return ContentNode("linebreak")


def parbreak() -> ContentNode:
    return ContentNode("parbreak")


def seq(*children: Any, label: str | None = None) -> ContentNode:
    return ContentNode("sequence", children=tuple(as_node(c) for c in children), label=label)


def strong(body: Any, label: str | None = None) -> ContentNode:
    return ContentNode("strong", body=as_node(body), label=label)


def emph(body: Any, label: str | None = None) -> ContentNode:
    return ContentNode("emph", body=as_node(body), label=label)


def link(dest: Any, body: Any = None, label: str | None = None) -> ContentNode:
    if body is None:
        body = dest if isinstance(dest, str) else ""
    return ContentNode("link", {"dest": dest}, body=as_node(body), label=label)


def heading(body: Any, depth: int = 1, label: str | None = None) -> ContentNode:
    return ContentNode("heading", body=as_node(body), depth=depth, label=label)


def list_item(body: Any) -> ContentNode:
    return ContentNode("list_item", body=as_node(body))


def enum_item(body: Any, number: int | None = None) -> ContentNode:
    attrs = {} if number is None else {"number": number}
    return ContentNode("enum_item", attrs, body=as_node(body))


def term_item(term: Any, description: Any) -> ContentNode:
    return ContentNode("term_item", {"term": as_node(term)}, body=as_node(description))


def raw(code: str, block: bool = False, lang: str | None = None) -> ContentNode:
    return ContentNode("raw", {"text": code, "block": block, "lang": lang})


def smartquote(double: bool = True) -> ContentNode:
    return ContentNode("smartquote", {"double": double})


def metadata(value: Any, label: str | None = None) -> ContentNode:
    return ContentNode("metadata", {"value": value}, label=label)


def styled(child: Any, styles: dict[str, Any]) -> ContentNode:
    return ContentNode("styled", {"styles": dict(styles)}, body=as_node(child))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def box(
    body: Any = None,
    width: LengthLike | None = None,
    height: LengthLike | None = None,
    **attrs: Any,
) -> ContentNode:
    return ContentNode("box", {"width": width, "height": height, **attrs}, body=as_node(body))


def block(
    body: Any = None,
    width: LengthLike | None = None,
    height: LengthLike | None = None,
    **attrs: Any,
) -> ContentNode:
    return ContentNode("block", {"width": width, "height": height, **attrs}, body=as_node(body))


def scale(body: Any, factor: float, origin: str = "top + left", reflow: bool = False) -> ContentNode:
    return ContentNode("scale", {"x": factor, "y": factor, "origin": origin, "reflow": reflow}, body=as_node(body))


def align(body: Any, alignment: str) -> ContentNode:
    return ContentNode("align", {"alignment": alignment}, body=as_node(body))


def rect(**attrs: Any) -> ContentNode:
    return ContentNode("rect", attrs)


def stack(*children: Any, spacing: LengthLike = 0.0) -> ContentNode:
    return ContentNode("stack", {"spacing": spacing}, children=tuple(as_node(c) for c in children))


def v(amount: LengthLike) -> ContentNode:
    """Vertical spacer."""
    return ContentNode("v", {"amount": amount})


def hide(body: Any) -> ContentNode:
    return ContentNode("hide", body=as_node(body))
