"""Data-only markup trees and their HTML serialization.

A ``MarkupNode`` is nothing more than a kind, ordered attributes and children.
Whatever engine mounts it later (a Jinja2 template here) walks the tree;
nodes never know how they will be displayed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from markupsafe import Markup, escape

Child = Union["MarkupNode", str]

# HTML elements with no end tag; their children, if any, are dropped
VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input",
     "link", "meta", "source", "track", "wbr"}
)


@dataclass(frozen=True)
class MarkupNode:
    """One element of a renderable tree."""

    kind: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Child, ...] = ()

    @property
    def attrs(self) -> dict[str, str]:
        """Attributes as a fresh dict (mutating it leaves the node untouched)."""
        return dict(self.attributes)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    def find_all(self, kind: str) -> list[MarkupNode]:
        """Depth-first list of descendants (and self) of the given kind."""
        found = [self] if self.kind == kind else []
        for child in self.children:
            if isinstance(child, MarkupNode):
                found.extend(child.find_all(kind))
        return found


def element(
    kind: str,
    attrs: Optional[Mapping[str, str]] = None,
    *children: Child,
) -> MarkupNode:
    """Build a node, keeping attribute insertion order."""
    attributes = tuple((str(k), str(v)) for k, v in (attrs or {}).items())
    return MarkupNode(kind=kind, attributes=attributes, children=tuple(children))


def render_html(node: Child) -> Markup:
    """Serialize *node* to HTML.

    Attribute values and text are HTML-escaped; URLs are emitted exactly as
    stored (no percent-encoding).
    """
    if isinstance(node, str):
        return escape(node)

    parts = [f"<{node.kind}"]
    for name, value in node.attributes:
        parts.append(f' {name}="{escape(value)}"')
    parts.append(">")
    if node.kind in VOID_ELEMENTS:
        return Markup("".join(parts))
    parts.extend(str(render_html(child)) for child in node.children)
    parts.append(f"</{node.kind}>")
    return Markup("".join(parts))
