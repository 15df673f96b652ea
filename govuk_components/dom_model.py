"""Simple DOM model for HTML serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

from markupsafe import Markup, escape

from .html_attributes import render_attributes

VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta"})


@dataclass
class DomNode:
    tag: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    children: List["DomContent"] = field(default_factory=list)

    @property
    def self_closing(self) -> bool:
        return self.tag in VOID_ELEMENTS

    def __html__(self) -> str:
        return dom_to_html([self])


# Plain strings are escaped on output, Markup passes through untouched.
DomContent = DomNode | Markup | str


def _render_children(children: Sequence[DomContent | None]) -> Markup:
    return safe_join(children)


def dom_to_html(dom: Iterable[DomNode]) -> Markup:
    parts: List[Markup] = []
    for node in dom:
        attrs = render_attributes(node.attrs)
        if node.self_closing:
            parts.append(Markup("<{}{}>").format(node.tag, attrs))
            continue
        parts.append(Markup("<{}{}>").format(node.tag, attrs))
        if node.children:
            parts.append(_render_children(node.children))
        parts.append(Markup("</{}>").format(node.tag))
    return Markup("").join(parts)


def safe_join(parts: Iterable[Any], separator: str = "") -> Markup:
    """Escape and join the parts that are not None."""

    return Markup(escape(separator)).join(escape(part) for part in parts if part is not None)


def content_tag(tag: str, content: Any = None, attrs: Dict[str, Any] | None = None) -> Markup:
    """Render a single element around ``content``.

    ``content`` may be a string, Markup, a DomNode or a list of those; None
    renders an empty element.
    """

    if content is None:
        children: List[Any] = []
    elif isinstance(content, (list, tuple)):
        children = list(content)
    else:
        children = [content]
    return dom_to_html([DomNode(tag=tag, attrs=dict(attrs or {}), children=children)])


__all__ = ["DomContent", "DomNode", "VOID_ELEMENTS", "content_tag", "dom_to_html", "safe_join"]
