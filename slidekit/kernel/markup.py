"""
slidekit Kernel — Markup Serializer

Pure function: (content, dialect, indent) → markup string
No IO. Deterministic. Never fails on an unknown node kind.

Dialects:
  native    — the host's own markup (`*bold*`, `_italic_`, `= Heading`)
  markdown  — CommonMark (`**bold**`, `*italic*`, `# Heading`)

Unknown kinds fall back in this order: concatenate `children`, recurse
into `body`, emit `text`, else emit nothing.
"""

from __future__ import annotations

from typing import Any

import chevron

from slidekit.config import settings
from slidekit.kernel.types import ConfigurationError, ContentNode

# ---------------------------------------------------------------------------
# Dialect templates
# ---------------------------------------------------------------------------

# Triple mustaches: the values are markup already and must not be escaped.
DIALECTS: dict[str, dict[str, str]] = {
    "native": {
        "strong": "*{{{body}}}*",
        "emph": "_{{{body}}}_",
        "link": '#link("{{{dest}}}")[{{{body}}}]',
        "heading": "{{{marks}}} {{{body}}}",
        "heading_mark": "=",
    },
    "markdown": {
        "strong": "**{{{body}}}**",
        "emph": "*{{{body}}}*",
        "link": "[{{{body}}}]({{{dest}}})",
        "heading": "{{{marks}}} {{{body}}}",
        "heading_mark": "#",
    },
}

_ALIASES = {"typ": "native", "md": "markdown"}


def _dialect(name: str) -> dict[str, str]:
    key = _ALIASES.get(name, name)
    templates = DIALECTS.get(key)
    if templates is None:
        raise ConfigurationError(f"Unknown markup dialect: {name!r}. Valid dialects: {list(DIALECTS)}")
    return templates


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def serialize(node: Any, dialect: str | None = None, indent: int = 0) -> str:
    """
    Render content back to markup text, in `dialect` (default: SLIDEKIT_DIALECT).

    `indent` is the number of spaces put after every line break; list
    items nest their bodies two spaces deeper.
    """
    templates = _dialect(settings.DIALECT if dialect is None else dialect)
    return _serialize(node, templates, indent)


def _serialize(node: Any, t: dict[str, str], indent: int) -> str:
    if node is None:
        return ""
    if isinstance(node, str):
        return node
    if not isinstance(node, ContentNode):
        return repr(node)

    pad = " " * indent
    kind = node.kind

    def inner(child: Any) -> str:
        return _serialize(child, t, indent)

    def nested(child: Any) -> str:
        return _serialize(child, t, indent + 2)

    if kind == "raw":
        code = node.attrs.get("text", "")
        if node.attrs.get("block"):
            lang = node.attrs.get("lang") or ""
            lines = "".join("\n" + pad + line for line in code.split("\n"))
            return "\n" + pad + "```" + lang + lines + "\n" + pad + "```"
        return "`" + code + "`"
    if kind == "space" or (kind == "text" and node.attrs.get("text") == " "):
        return " "
    if kind == "list_item":
        return "\n" + pad + "- " + nested(node.body)
    if kind == "enum_item":
        return "\n" + pad + "+ " + nested(node.body)
    if kind == "term_item":
        return "\n" + pad + "/ " + inner(node.attrs.get("term")) + ": " + nested(node.body)
    if kind == "linebreak":
        return "\n" + pad
    if kind == "parbreak":
        return "\n\n" + pad
    if kind == "strong":
        return chevron.render(t["strong"], {"body": inner(node.body)})
    if kind == "emph":
        return chevron.render(t["emph"], {"body": inner(node.body)})
    if kind == "link" and isinstance(node.attrs.get("dest"), str):
        return chevron.render(t["link"], {"body": inner(node.body), "dest": node.attrs["dest"]})
    if kind == "heading":
        marks = t["heading_mark"] * (node.depth or 1)
        return chevron.render(t["heading"], {"marks": marks, "body": inner(node.body)}) + "\n"
    if kind == "smartquote":
        return '"' if node.attrs.get("double", True) else "'"

    # Generic fallback
    if node.children is not None:
        return "".join(inner(c) for c in node.children)
    if node.body is not None:
        return inner(node.body)
    if "text" in node.attrs:
        value = node.attrs["text"]
        return value if isinstance(value, str) else inner(value)
    return ""

