"""Page footer with licence, copyright and optional support links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Sequence

from jinja2 import Environment
from markupsafe import Markup

from .base import Component
from .config import OGL_URL
from .html_attributes import HtmlAttributes, deep_merge_html_attributes
from .text_utils import is_present

if TYPE_CHECKING:  # pragma: no cover
    from .context import RenderContext

FOOTER_TEMPLATE = "footer.jinja"


@dataclass
class FooterMetaItem:
    """A support link shown in the footer meta list."""

    text: str
    href: str
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, value: "FooterMetaItem | Mapping[str, Any]") -> "FooterMetaItem":
        if isinstance(value, FooterMetaItem):
            return value
        return cls(
            text=value["text"],
            href=value["href"],
            attributes=dict(value.get("attributes") or {}),
        )


@dataclass(kw_only=True)
class FooterComponent(Component):
    meta_items: Sequence[FooterMetaItem | Mapping[str, Any]] = ()
    meta_heading: str | None = None
    meta_text: str | None = None
    licence: str | None = None
    copyright_text: str | None = None
    copyright_url: str | None = None
    container_classes: Sequence[str] | str = ()

    def default_attributes(self, ctx: "RenderContext") -> HtmlAttributes:
        return {"class": ctx.class_name("footer"), "role": "contentinfo"}

    def _default_licence(self, ctx: "RenderContext") -> Markup:
        link = Markup('<a class="{}" href="{}" rel="license">Open Government Licence v3.0</a>').format(
            ctx.class_name("footer__link"), OGL_URL
        )
        return Markup("All content is available under the {}, except where otherwise stated").format(link)

    def _licence(self, ctx: "RenderContext") -> Markup:
        if is_present(self.licence):
            # Custom licences are trusted HTML supplied by the service.
            return Markup(self.licence)
        return self._default_licence(ctx)

    def _meta_links(self, ctx: "RenderContext") -> List[Dict[str, Any]]:
        links: List[Dict[str, Any]] = []
        for raw in self.meta_items:
            item = FooterMetaItem.coerce(raw)
            attrs = deep_merge_html_attributes({"class": ctx.class_name("footer__link")}, item.attributes)
            links.append({"text": item.text, "attributes": {"href": item.href, **attrs}})
        return links

    def view_model(self, ctx: "RenderContext") -> dict:
        """Assemble every value the footer template reads."""

        config = ctx.config
        meta_links = self._meta_links(ctx)
        return {
            "attributes": self.merged_attributes(ctx),
            "container_attributes": deep_merge_html_attributes(
                {"class": ctx.class_name("width-container")}, {"class": self.container_classes}
            ),
            "meta": {
                "links": meta_links,
                "heading": self.meta_heading or config.default_footer_meta_heading,
                "text": self.meta_text or "",
                "show": bool(meta_links) or is_present(self.meta_text),
            },
            "licence": self._licence(ctx),
            "copyright": {
                "text": self.copyright_text or config.default_footer_copyright_text,
                "href": self.copyright_url or config.default_footer_copyright_url,
            },
        }

    def render(self, ctx: "RenderContext", content: Any = None, env: Environment | None = None) -> Markup:
        template = (env or ctx.template_env).get_template(FOOTER_TEMPLATE)
        return Markup(template.render(footer=self.view_model(ctx), brand=ctx.brand).strip())


def render_footer(
    ctx: "RenderContext",
    meta_items: Sequence[FooterMetaItem | Mapping[str, Any]] = (),
    meta_heading: str | None = None,
    meta_text: str | None = None,
    licence: str | None = None,
    copyright_text: str | None = None,
    copyright_url: str | None = None,
    classes: Sequence[str] | str = (),
    container_classes: Sequence[str] | str = (),
    html_attributes: Mapping[str, Any] | None = None,
    env: Environment | None = None,
) -> Markup:
    component = FooterComponent(
        meta_items=meta_items,
        meta_heading=meta_heading,
        meta_text=meta_text,
        licence=licence,
        copyright_text=copyright_text,
        copyright_url=copyright_url,
        classes=classes,
        container_classes=container_classes,
        html_attributes=dict(html_attributes or {}),
    )
    return component.render(ctx, env=env)


__all__ = ["FooterComponent", "FooterMetaItem", "render_footer"]
