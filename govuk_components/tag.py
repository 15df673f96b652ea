"""Tag component: a short status label in one of the design system colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from markupsafe import Markup

from .base import Component
from .dom_model import content_tag
from .errors import InvalidColourError, MissingContentError
from .html_attributes import HtmlAttributes, class_names
from .text_utils import is_blank

if TYPE_CHECKING:  # pragma: no cover
    from .context import RenderContext

COLOURS = ("grey", "green", "turquoise", "blue", "red", "purple", "pink", "orange", "yellow")


@dataclass(kw_only=True)
class TagComponent(Component):
    text: str | None = None
    colour: str | None = None

    def __post_init__(self) -> None:
        if not is_blank(self.colour) and self.colour not in COLOURS:
            raise InvalidColourError(self.colour, COLOURS)

    def _tag_content(self, content: Any) -> Any:
        if self.text is not None:
            return self.text
        if callable(content):
            content = content()
        if content is None:
            raise MissingContentError()
        return content

    def _colour_class(self, ctx: "RenderContext") -> str | None:
        if is_blank(self.colour):
            return None
        return ctx.class_name(f"tag--{self.colour}")

    def default_attributes(self, ctx: "RenderContext") -> HtmlAttributes:
        return {"class": class_names(ctx.class_name("tag"), self._colour_class(ctx))}

    def render(self, ctx: "RenderContext", content: Any = None) -> Markup:
        text = self._tag_content(content)
        return content_tag("strong", text, self.merged_attributes(ctx))


def render_tag(
    ctx: "RenderContext",
    text: str | None = None,
    colour: str | None = None,
    classes: Sequence[str] | str = (),
    html_attributes: Mapping[str, Any] | None = None,
    content: Any = None,
) -> Markup:
    component = TagComponent(
        text=text,
        colour=colour,
        classes=classes,
        html_attributes=dict(html_attributes or {}),
    )
    return component.render(ctx, content=content)


__all__ = ["COLOURS", "TagComponent", "render_tag"]
