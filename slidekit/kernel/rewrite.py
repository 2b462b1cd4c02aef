"""
slidekit Kernel — Tree Rewriter

Structural predicates and label-preserving reconstruction of content
nodes. Nodes are never modified in place; every function here returns a
new node (or the original, untouched).

Reconstruction rules:
  - kind and every attribute carry over, except the replaced field
  - the label is reattached unless `labeled=False`
  - sequences replace `children`, everything else replaces `body`
"""

from __future__ import annotations

import dataclasses
from typing import Any

from slidekit.kernel.nodes import as_node
from slidekit.kernel.types import ContentNode

_STRUCTURAL_FIELDS = ("children", "body", "depth")

# Children that carry no visible text.
_BLANK_KINDS = {"space", "linebreak", "parbreak"}


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_sequence(node: Any) -> bool:
    return isinstance(node, ContentNode) and node.kind == "sequence"


def is_styled(node: Any) -> bool:
    return isinstance(node, ContentNode) and node.kind == "styled"


def is_kind(node: Any, kind: str) -> bool:
    """True for a metadata node whose value mapping has `kind == kind`."""
    if not isinstance(node, ContentNode) or node.kind != "metadata":
        return False
    value = node.attrs.get("value")
    return isinstance(value, dict) and value.get("kind") == kind


def is_metadata(node: Any, kind: str | None = None) -> bool:
    """True for metadata nodes; with `kind`, only those carrying that discriminator."""
    if kind is not None:
        return is_kind(node, kind)
    return isinstance(node, ContentNode) and node.kind == "metadata"


def is_heading(node: Any, max_depth: int | None = None) -> bool:
    """True for headings, optionally only those at `max_depth` or shallower."""
    if not isinstance(node, ContentNode) or node.kind != "heading":
        return False
    return max_depth is None or (node.depth or 1) <= max_depth


# ---------------------------------------------------------------------------
# Reconstruction
# ---------------------------------------------------------------------------


def reconstruct(
    node: ContentNode,
    *new_body: Any,
    body_name: str | None = None,
    labeled: bool = True,
    named: bool = False,
    **named_fields: Any,
) -> ContentNode:
    """
    Rebuild `node` with a new body (or new children).

    Positional form:  reconstruct(strong_node, "new text")
                      reconstruct(sequence_node, child_a, child_b)
    Named form:       reconstruct(link_node, named=True, body="new", dest="https://...")

    In the named form any attribute may be overridden alongside the body;
    unknown names are a caller error.
    """
    if body_name is None:
        body_name = "children" if node.children is not None else "body"
    assert body_name in ("children", "body"), f"Cannot replace field {body_name!r}"

    changes: dict[str, Any] = {}
    if named:
        assert not new_body, "named=True takes replacements by keyword only"
        attrs = dict(node.attrs)
        for name, value in named_fields.items():
            if name in _STRUCTURAL_FIELDS:
                changes[name] = _coerce_field(name, value)
            elif name in attrs:
                attrs[name] = value
            else:
                raise TypeError(f"{node.kind} node has no field {name!r}")
        changes["attrs"] = attrs
    else:
        assert not named_fields, "pass named=True to replace fields by keyword"
        if body_name == "children":
            if len(new_body) == 1 and isinstance(new_body[0], (list, tuple)):
                new_body = tuple(new_body[0])
            changes["children"] = tuple(as_node(c) for c in new_body)
        else:
            assert len(new_body) == 1, f"{node.kind} takes exactly one body"
            changes["body"] = as_node(new_body[0])

    changes["label"] = node.label if labeled else None
    return dataclasses.replace(node, **changes)


def _coerce_field(name: str, value: Any) -> Any:
    if name == "children":
        return tuple(as_node(c) for c in value)
    if name == "body":
        return as_node(value)
    return value


def reconstruct_styled(node: ContentNode, new_child: Any) -> ContentNode:
    """Swap the child of a styled node, keeping its style set."""
    assert is_styled(node), f"Expected a styled node, got {node.kind!r}"
    return reconstruct(node, new_child)


def label_it(node: ContentNode, label: str) -> ContentNode:
    """Attach `label` unless the node already has one."""
    if node.label is not None:
        return node
    return dataclasses.replace(node, label=label)


def trim(node: ContentNode) -> ContentNode:
    """Drop leading and trailing blank children from a sequence."""
    if not is_sequence(node):
        return node
    children = list(node.children or ())
    while children and _is_blank(children[0]):
        children.pop(0)
    while children and _is_blank(children[-1]):
        children.pop()
    if len(children) == len(node.children or ()):
        return node
    return reconstruct(node, children)


def _is_blank(node: ContentNode) -> bool:
    if node.kind in _BLANK_KINDS:
        return True
    return node.kind == "text" and not node.attrs.get("text", "").strip()
