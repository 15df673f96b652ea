"""Link and button helpers.

Style flags are validated when the flag objects are built, so every helper
below can assume a consistent combination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from markupsafe import Markup

from .config import ComponentsConfig
from .dom_model import content_tag, safe_join
from .errors import ConflictingStyleError
from .html_attributes import HtmlAttributes, class_names, deep_merge_html_attributes
from .text_utils import is_blank, is_present

NEW_TAB_ATTRIBUTES: Dict[str, str] = {"target": "_blank", "rel": "noreferrer noopener"}

# Methods a browser form can submit natively; anything else is tunnelled
# through a hidden _method field.
FORM_METHODS = ("get", "post")

Content = Any


@dataclass(frozen=True)
class LinkStyleFlags:
    new_tab: bool = False
    inverse: bool = False
    muted: bool = False
    no_underline: bool = False
    no_visited_state: bool = False
    text_colour: bool = False

    EXCLUSIVE = ("text_colour", "inverse", "muted")

    def __post_init__(self) -> None:
        if sum(bool(getattr(self, name)) for name in self.EXCLUSIVE) > 1:
            raise ConflictingStyleError("links", self.EXCLUSIVE)


@dataclass(frozen=True)
class ButtonStyleFlags:
    new_tab: bool = False
    disabled: bool = False
    inverse: bool = False
    secondary: bool = False
    warning: bool = False

    EXCLUSIVE = ("inverse", "secondary", "warning")

    def __post_init__(self) -> None:
        if sum(bool(getattr(self, name)) for name in self.EXCLUSIVE) > 1:
            raise ConflictingStyleError("buttons", self.EXCLUSIVE)


def _resolve(content: Content) -> Any:
    # Jinja passes call-block bodies as a zero-argument ``caller``.
    if callable(content):
        return content()
    return content


class LinkHelper:
    """Class and attribute builders for links and buttons bound to one brand."""

    def __init__(self, config: ComponentsConfig) -> None:
        self.config = config

    @property
    def brand(self) -> str:
        return self.config.brand

    def link_classes(self, flags: LinkStyleFlags | None = None) -> str:
        flags = flags or LinkStyleFlags()
        brand = self.brand
        return class_names(
            f"{brand}-link",
            {
                f"{brand}-link--inverse": flags.inverse,
                f"{brand}-link--muted": flags.muted,
                f"{brand}-link--no-underline": flags.no_underline,
                f"{brand}-link--no-visited-state": flags.no_visited_state,
                f"{brand}-link--text-colour": flags.text_colour,
            },
        )

    def button_classes(self, flags: ButtonStyleFlags | None = None) -> str:
        flags = flags or ButtonStyleFlags()
        brand = self.brand
        return class_names(
            f"{brand}-button",
            {
                f"{brand}-button--inverse": flags.inverse,
                f"{brand}-button--secondary": flags.secondary,
                f"{brand}-button--warning": flags.warning,
            },
        )

    @staticmethod
    def _new_tab_attributes(new_tab: bool) -> HtmlAttributes:
        return dict(NEW_TAB_ATTRIBUTES) if new_tab else {}

    @staticmethod
    def _disabled_attributes(disabled: bool) -> HtmlAttributes:
        return {"disabled": True, "aria": {"disabled": True}} if disabled else {}

    def link_attributes(
        self,
        flags: LinkStyleFlags | None = None,
        html_attributes: Mapping[str, Any] | None = None,
    ) -> HtmlAttributes:
        flags = flags or LinkStyleFlags()
        computed = {
            "class": self.link_classes(flags),
            **self._new_tab_attributes(flags.new_tab),
        }
        return deep_merge_html_attributes(computed, html_attributes)

    def button_attributes(
        self,
        flags: ButtonStyleFlags | None = None,
        html_attributes: Mapping[str, Any] | None = None,
    ) -> HtmlAttributes:
        """Attributes for a form-submitting button; new_tab is ignored."""

        flags = flags or ButtonStyleFlags()
        computed = {
            "class": self.button_classes(flags),
            **self._disabled_attributes(flags.disabled),
        }
        return deep_merge_html_attributes(computed, html_attributes)

    def button_link_attributes(
        self,
        flags: ButtonStyleFlags | None = None,
        html_attributes: Mapping[str, Any] | None = None,
    ) -> HtmlAttributes:
        """Attributes for a link styled as a button."""

        flags = flags or ButtonStyleFlags()
        computed = {
            "class": self.button_classes(flags),
            **self._disabled_attributes(flags.disabled),
            **self._new_tab_attributes(flags.new_tab),
        }
        return deep_merge_html_attributes(computed, html_attributes)

    def visually_hidden(self, text: Any) -> Markup | None:
        if is_blank(text):
            return None
        return content_tag("span", text, {"class": f"{self.brand}-visually-hidden"})

    def decorated_text(
        self,
        text: Any,
        visually_hidden_prefix: str | None = None,
        visually_hidden_suffix: str | None = None,
    ) -> Markup | None:
        """Wrap text with screen-reader-only prefix and suffix spans."""

        if text is None:
            return None
        prefix = visually_hidden_prefix + " " if is_present(visually_hidden_prefix) else None
        suffix = " " + visually_hidden_suffix if is_present(visually_hidden_suffix) else None
        return safe_join([self.visually_hidden(prefix), text, self.visually_hidden(suffix)])

    def _label(
        self,
        text: Any,
        content: Content,
        fallback: Any,
        visually_hidden_prefix: str | None = None,
        visually_hidden_suffix: str | None = None,
    ) -> Any:
        # Text wins over a content block; with neither, the target names the link.
        label = self.decorated_text(text, visually_hidden_prefix, visually_hidden_suffix)
        if label is None:
            label = _resolve(content)
        return fallback if label is None else label

    def link_to(
        self,
        text: Any,
        href: str | None = None,
        flags: LinkStyleFlags | None = None,
        html_attributes: Mapping[str, Any] | None = None,
        visually_hidden_prefix: str | None = None,
        visually_hidden_suffix: str | None = None,
        content: Content = None,
    ) -> Markup:
        attrs = self.link_attributes(flags, html_attributes)
        label = self._label(text, content, href, visually_hidden_prefix, visually_hidden_suffix)
        return content_tag("a", label, {"href": href, **attrs})

    def mail_to(
        self,
        email_address: str,
        text: Any = None,
        flags: LinkStyleFlags | None = None,
        html_attributes: Mapping[str, Any] | None = None,
        visually_hidden_prefix: str | None = None,
        visually_hidden_suffix: str | None = None,
        content: Content = None,
    ) -> Markup:
        attrs = self.link_attributes(flags, html_attributes)
        label = self._label(text, content, email_address, visually_hidden_prefix, visually_hidden_suffix)
        return content_tag("a", label, {"href": f"mailto:{email_address}", **attrs})

    def button_to(
        self,
        text: Any,
        href: str | None = None,
        flags: ButtonStyleFlags | None = None,
        html_attributes: Mapping[str, Any] | None = None,
        visually_hidden_prefix: str | None = None,
        visually_hidden_suffix: str | None = None,
        method: str = "post",
        content: Content = None,
    ) -> Markup:
        """Render a single-button form that submits to ``href``."""

        attrs = self.button_attributes(flags, html_attributes)
        label = self._label(text, content, href, visually_hidden_prefix, visually_hidden_suffix)

        method = method.lower()
        children = []
        if method not in FORM_METHODS:
            children.append(
                content_tag("input", attrs={"type": "hidden", "name": "_method", "value": method})
            )
        children.append(content_tag("button", label, {"type": "submit", **attrs}))
        form_method = method if method in FORM_METHODS else "post"
        return content_tag(
            "form",
            children,
            {"class": "button_to", "method": form_method, "action": href},
        )

    def button_link_to(
        self,
        text: Any,
        href: str | None = None,
        flags: ButtonStyleFlags | None = None,
        html_attributes: Mapping[str, Any] | None = None,
        visually_hidden_prefix: str | None = None,
        visually_hidden_suffix: str | None = None,
        content: Content = None,
    ) -> Markup:
        base = {
            "role": "button",
            "draggable": "false",
            "data": {"module": f"{self.brand}-button"},
        }
        attrs = self.button_link_attributes(flags, deep_merge_html_attributes(base, html_attributes))
        label = self._label(text, content, href, visually_hidden_prefix, visually_hidden_suffix)
        return content_tag("a", label, {"href": href, **attrs})

    def breadcrumb_link_to(
        self,
        text: Any,
        href: str | None = None,
        html_attributes: Mapping[str, Any] | None = None,
        content: Content = None,
    ) -> Markup:
        attrs = deep_merge_html_attributes(
            {"class": f"{self.brand}-breadcrumbs--link"}, html_attributes
        )
        label = self._label(text, content, href)
        return content_tag("a", label, {"href": href, **attrs})


__all__ = [
    "ButtonStyleFlags",
    "LinkHelper",
    "LinkStyleFlags",
    "NEW_TAB_ATTRIBUTES",
]
