"""Command-line interface for rendering single components."""

import argparse
import sys
from pathlib import Path
from typing import Any, Iterable, Optional

from .config import load_config
from .context import RenderContext
from .errors import ComponentError
from .footer import render_footer
from .io_utils import attributes_to_json
from .link_helper import ButtonStyleFlags, LinkStyleFlags
from .tag import render_tag
from .task_list_title import render_task_list_title


def _parse_pairs(values: Optional[Iterable[str]], option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for value in values or []:
        name, sep, rest = value.partition("=")
        if not sep or not name:
            raise SystemExit(f"{option} expects NAME=VALUE, got '{value}'")
        pairs[name] = rest
    return pairs


def _caller_attributes(args: argparse.Namespace) -> dict[str, Any]:
    attrs: dict[str, Any] = dict(_parse_pairs(args.attrs, "--attr"))
    if args.classes:
        attrs["class"] = " ".join(args.classes)
    return attrs


def _context(args: argparse.Namespace) -> RenderContext:
    return RenderContext(config=load_config(Path(args.config)))


def _emit(text: str) -> None:
    sys.stdout.write(text if text.endswith("\n") else text + "\n")


def _handle_tag(args: argparse.Namespace) -> None:
    ctx = _context(args)
    _emit(render_tag(ctx, text=args.text, colour=args.colour, html_attributes=_caller_attributes(args)))


def _handle_title(args: argparse.Namespace) -> None:
    ctx = _context(args)
    _emit(
        render_task_list_title(
            ctx,
            text=args.text,
            href=args.href,
            hint=args.hint,
            html_attributes=_caller_attributes(args),
        )
    )


def _handle_link(args: argparse.Namespace) -> None:
    ctx = _context(args)
    flags = LinkStyleFlags(
        new_tab=args.new_tab,
        inverse=args.inverse,
        muted=args.muted,
        no_underline=args.no_underline,
        no_visited_state=args.no_visited_state,
        text_colour=args.text_colour,
    )
    attrs = _caller_attributes(args)
    if args.json:
        _emit(attributes_to_json(ctx.links.link_attributes(flags, attrs)))
        return
    _emit(
        ctx.links.link_to(
            args.text,
            args.href,
            flags=flags,
            html_attributes=attrs,
            visually_hidden_prefix=args.prefix,
            visually_hidden_suffix=args.suffix,
        )
    )


def _handle_button(args: argparse.Namespace) -> None:
    ctx = _context(args)
    flags = ButtonStyleFlags(
        new_tab=args.new_tab,
        disabled=args.disabled,
        inverse=args.inverse,
        secondary=args.secondary,
        warning=args.warning,
    )
    attrs = _caller_attributes(args)
    links = ctx.links
    if args.json:
        builder = links.button_link_attributes if args.link else links.button_attributes
        _emit(attributes_to_json(builder(flags, attrs)))
        return
    render = links.button_link_to if args.link else links.button_to
    _emit(
        render(
            args.text,
            args.href,
            flags=flags,
            html_attributes=attrs,
            visually_hidden_prefix=args.prefix,
            visually_hidden_suffix=args.suffix,
        )
    )


def _handle_footer(args: argparse.Namespace) -> None:
    ctx = _context(args)
    meta_items = [
        {"text": text, "href": href} for text, href in _parse_pairs(args.meta, "--meta").items()
    ]
    _emit(
        render_footer(
            ctx,
            meta_items=meta_items,
            licence=args.licence,
            copyright_text=args.copyright_text,
            copyright_url=args.copyright_url,
            html_attributes=_caller_attributes(args),
        )
    )


def _add_caller_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--class",
        dest="classes",
        action="append",
        help="Extra CSS class appended to the computed classes (repeatable).",
    )
    parser.add_argument(
        "--attr",
        dest="attrs",
        action="append",
        help="Extra HTML attribute as NAME=VALUE (repeatable).",
    )


def _add_decoration_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--prefix", default=None, help="Visually hidden text before the label.")
    parser.add_argument("--suffix", default=None, help="Visually hidden text after the label.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the computed attribute map as JSON instead of markup.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="govuk-components",
        description="Render GOV.UK Design System components as HTML fragments.",
    )
    parser.add_argument(
        "--config",
        default="config/components.yaml",
        help="Path to components.yaml (brand and footer defaults).",
    )
    subparsers = parser.add_subparsers(dest="command")

    tag_parser = subparsers.add_parser("tag", help="Render a tag.", description="Render a coloured tag.")
    tag_parser.add_argument("--text", default=None, help="Tag text.")
    tag_parser.add_argument("--colour", default=None, help="One of the supported tag colours.")
    _add_caller_arguments(tag_parser)
    tag_parser.set_defaults(func=_handle_tag)

    title_parser = subparsers.add_parser(
        "title",
        help="Render a task list title.",
        description="Render a task list name with an optional link and hint.",
    )
    title_parser.add_argument("--text", required=True, help="Task name.")
    title_parser.add_argument("--href", default=None, help="Link target; omit for plain text.")
    title_parser.add_argument("--hint", default=None, help="Secondary hint text.")
    _add_caller_arguments(title_parser)
    title_parser.set_defaults(func=_handle_title)

    link_parser = subparsers.add_parser("link", help="Render a link.", description="Render a styled link.")
    link_parser.add_argument("text", help="Visible link text.")
    link_parser.add_argument("href", help="Link target.")
    link_parser.add_argument("--new-tab", dest="new_tab", action="store_true", help="Open in a new tab.")
    link_parser.add_argument("--inverse", action="store_true", help="Inverse colour scheme.")
    link_parser.add_argument("--muted", action="store_true", help="Muted colour.")
    link_parser.add_argument("--no-underline", dest="no_underline", action="store_true", help="Remove underline.")
    link_parser.add_argument(
        "--no-visited-state",
        dest="no_visited_state",
        action="store_true",
        help="Do not style visited links differently.",
    )
    link_parser.add_argument("--text-colour", dest="text_colour", action="store_true", help="Use the text colour.")
    _add_decoration_arguments(link_parser)
    _add_caller_arguments(link_parser)
    link_parser.set_defaults(func=_handle_link)

    button_parser = subparsers.add_parser(
        "button",
        help="Render a button.",
        description="Render a form button, or a link styled as a button with --link.",
    )
    button_parser.add_argument("text", help="Visible button text.")
    button_parser.add_argument("href", nargs="?", default=None, help="Form action or link target.")
    button_parser.add_argument("--link", action="store_true", help="Render a link styled as a button.")
    button_parser.add_argument(
        "--new-tab", dest="new_tab", action="store_true", help="Open in a new tab (links only)."
    )
    button_parser.add_argument("--disabled", action="store_true", help="Disable the button.")
    button_parser.add_argument("--inverse", action="store_true", help="Inverse button.")
    button_parser.add_argument("--secondary", action="store_true", help="Secondary button.")
    button_parser.add_argument("--warning", action="store_true", help="Warning button.")
    _add_decoration_arguments(button_parser)
    _add_caller_arguments(button_parser)
    button_parser.set_defaults(func=_handle_button)

    footer_parser = subparsers.add_parser(
        "footer", help="Render a footer.", description="Render the page footer."
    )
    footer_parser.add_argument("--licence", default=None, help="Trusted HTML replacing the default licence.")
    footer_parser.add_argument("--copyright-text", dest="copyright_text", default=None, help="Copyright text.")
    footer_parser.add_argument("--copyright-url", dest="copyright_url", default=None, help="Copyright link target.")
    footer_parser.add_argument(
        "--meta",
        action="append",
        help="Support link as TEXT=HREF (repeatable).",
    )
    _add_caller_arguments(footer_parser)
    footer_parser.set_defaults(func=_handle_footer)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except ComponentError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()


__all__ = ["build_parser", "main"]
