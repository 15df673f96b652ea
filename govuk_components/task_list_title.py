"""Title and hint block used inside a task list item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from markupsafe import Markup

from .base import Component
from .dom_model import content_tag, safe_join
from .html_attributes import HtmlAttributes
from .text_utils import is_blank, is_present

if TYPE_CHECKING:  # pragma: no cover
    from .context import RenderContext


@dataclass(kw_only=True)
class TaskListTitleComponent(Component):
    text: str | None = None
    href: str | None = None
    hint: str | None = None

    def default_attributes(self, ctx: "RenderContext") -> HtmlAttributes:
        return {"class": ctx.class_name("task-list__name-and-hint")}

    def _title_content(self, ctx: "RenderContext") -> Any:
        if is_present(self.href):
            return ctx.links.link_to(
                self.text,
                self.href,
                html_attributes={"class": ctx.class_name("task-list__link")},
            )
        return self.text

    def _hint_content(self, ctx: "RenderContext") -> Markup | None:
        if is_blank(self.hint):
            return None
        return content_tag("div", self.hint, {"class": ctx.class_name("task-list__hint")})

    def render(self, ctx: "RenderContext", content: Any = None) -> Markup:
        body = safe_join([self._title_content(ctx), self._hint_content(ctx)])
        return content_tag("div", body, self.merged_attributes(ctx))


def render_task_list_title(
    ctx: "RenderContext",
    text: str | None = None,
    href: str | None = None,
    hint: str | None = None,
    classes: Sequence[str] | str = (),
    html_attributes: Mapping[str, Any] | None = None,
) -> Markup:
    component = TaskListTitleComponent(
        text=text,
        href=href,
        hint=hint,
        classes=classes,
        html_attributes=dict(html_attributes or {}),
    )
    return component.render(ctx)


__all__ = ["TaskListTitleComponent", "render_task_list_title"]
