"""Shared behaviour for class-based components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Sequence

from markupsafe import Markup

from .html_attributes import HtmlAttributes, deep_merge_html_attributes

if TYPE_CHECKING:  # pragma: no cover
    from .context import RenderContext


@dataclass(kw_only=True)
class Component:
    """Base for components that accept extra classes and HTML attributes.

    Subclasses describe their own attributes in ``default_attributes``; the
    caller's ``classes`` and ``html_attributes`` are merged on top so classes
    are appended and other attributes override.
    """

    classes: Sequence[str] | str = ()
    html_attributes: Dict[str, Any] = field(default_factory=dict)

    def default_attributes(self, ctx: "RenderContext") -> HtmlAttributes:
        return {}

    def merged_attributes(self, ctx: "RenderContext", computed: HtmlAttributes | None = None) -> HtmlAttributes:
        base = computed if computed is not None else self.default_attributes(ctx)
        merged = deep_merge_html_attributes(base, {"class": self.classes})
        return deep_merge_html_attributes(merged, self.html_attributes)

    def render(self, ctx: "RenderContext", content: Any = None) -> Markup:
        raise NotImplementedError("Subclasses must implement render()")


__all__ = ["Component"]
