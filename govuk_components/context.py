"""Rendering context carrying the brand configuration into components."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, pass_environment, select_autoescape
from markupsafe import Markup

from .base import Component
from .config import ComponentsConfig
from .footer import render_footer
from .html_attributes import render_attributes
from .link_helper import ButtonStyleFlags, LinkHelper, LinkStyleFlags
from .tag import render_tag
from .task_list_title import render_task_list_title


@dataclass(frozen=True)
class RenderContext:
    """Explicit dependency passed to every render call.

    Components never look up the brand from global state; whoever builds the
    context decides it once.
    """

    config: ComponentsConfig = field(default_factory=ComponentsConfig)

    @property
    def brand(self) -> str:
        return self.config.brand

    def class_name(self, suffix: str) -> str:
        return self.config.class_name(suffix)

    @cached_property
    def links(self) -> LinkHelper:
        return LinkHelper(self.config)

    @cached_property
    def template_env(self) -> Environment:
        """Environment used by components that render from bundled templates."""

        return self.jinja_env()

    @property
    def shared_templates_dir(self) -> Path:
        """Directory containing the templates bundled with the components."""

        return Path(__file__).parent / "templates"

    def render(self, component: Component, content: Any = None) -> Markup:
        return component.render(self, content=content)

    def template_globals(self) -> dict[str, Any]:
        """Helpers exposed to templates, each bound to this context."""

        links = self.links

        def with_caller(func):
            def wrapper(*args: Any, caller: Any = None, **kwargs: Any) -> Markup:
                if caller is not None:
                    kwargs.setdefault("content", caller)
                return func(*args, **kwargs)

            wrapper.__name__ = func.__name__
            return wrapper

        def govuk_tag(*args: Any, **kwargs: Any) -> Markup:
            return render_tag(self, *args, **kwargs)

        def govuk_task_list_title(*args: Any, **kwargs: Any) -> Markup:
            return render_task_list_title(self, *args, **kwargs)

        @pass_environment
        def govuk_footer(environment: Environment, *args: Any, **kwargs: Any) -> Markup:
            # Render with the calling environment so search path overrides apply.
            return render_footer(self, *args, env=environment, **kwargs)

        return {
            "brand": self.brand,
            "LinkStyleFlags": LinkStyleFlags,
            "ButtonStyleFlags": ButtonStyleFlags,
            "govuk_link_to": with_caller(links.link_to),
            "govuk_mail_to": with_caller(links.mail_to),
            "govuk_button_to": with_caller(links.button_to),
            "govuk_button_link_to": with_caller(links.button_link_to),
            "govuk_breadcrumb_link_to": with_caller(links.breadcrumb_link_to),
            "govuk_link_classes": links.link_classes,
            "govuk_button_classes": links.button_classes,
            "govuk_visually_hidden": links.visually_hidden,
            "govuk_tag": with_caller(govuk_tag),
            "govuk_task_list_title": govuk_task_list_title,
            "govuk_footer": govuk_footer,
        }

    def jinja_env(self, *search_paths: Path) -> Environment:
        """Create a Jinja environment with the component helpers installed.

        Templates in ``search_paths`` take precedence over the bundled ones.
        """

        template_dirs = [*search_paths, self.shared_templates_dir]
        env = Environment(
            loader=FileSystemLoader(template_dirs),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        env.filters["html_attributes"] = render_attributes
        env.globals.update(self.template_globals())
        return env


__all__ = ["RenderContext"]
