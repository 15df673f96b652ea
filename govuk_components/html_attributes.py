"""Helpers for building, merging and serialising HTML attribute maps."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Tuple

from markupsafe import Markup

HtmlAttributes = Dict[str, Any]

# Attributes whose values are whitespace separated token lists. Merging one of
# these concatenates tokens instead of replacing the value.
TOKEN_LIST_ATTRIBUTES: frozenset[Tuple[str, ...]] = frozenset(
    {
        ("class",),
        ("aria", "describedby"),
        ("aria", "controls"),
        ("aria", "labelledby"),
        ("aria", "flowto"),
        ("aria", "owns"),
    }
)

# Nested maps that are flattened into prefixed attributes when rendered.
PREFIXED_ATTRIBUTES = ("aria", "data")


def split_tokens(value: Any) -> List[str]:
    """Flatten strings, lists and tuples into a list of tokens."""

    if value is None or value is False:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple, set, frozenset)):
        tokens: List[str] = []
        for item in value:
            tokens.extend(split_tokens(item))
        return tokens
    return str(value).split()


def _unique(tokens: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    unique: List[str] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        unique.append(token)
    return unique


def class_names(*args: Any) -> str:
    """Build a class string from plain names and ``{name: condition}`` maps.

    >>> class_names("govuk-link", {"govuk-link--muted": True, "govuk-link--inverse": False})
    'govuk-link govuk-link--muted'
    """

    tokens: List[str] = []
    for arg in args:
        if isinstance(arg, Mapping):
            tokens.extend(name for name, enabled in arg.items() if enabled)
        else:
            tokens.extend(split_tokens(arg))
    return " ".join(_unique(tokens))


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _copy(item) for key, item in value.items()}
    return value


def _merge(base: Mapping[str, Any], overrides: Mapping[str, Any], path: Tuple[str, ...]) -> HtmlAttributes:
    merged: HtmlAttributes = {key: _copy(value) for key, value in base.items()}
    for key, value in overrides.items():
        key_path = path + (key,)
        existing = merged.get(key)
        if key_path in TOKEN_LIST_ATTRIBUTES:
            tokens = _unique(split_tokens(existing) + split_tokens(value))
            merged[key] = " ".join(tokens)
        elif isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge(existing, value, key_path)
        else:
            merged[key] = _copy(value)
    return merged


def deep_merge_html_attributes(
    base: Mapping[str, Any] | None, overrides: Mapping[str, Any] | None
) -> HtmlAttributes:
    """Merge caller attributes into computed ones without mutating either.

    Token list attributes (``class`` and the aria id references) are joined,
    nested maps such as ``aria`` are merged key by key and every other
    collision is won by ``overrides``.
    """

    return _merge(base or {}, overrides or {}, ())


def _attribute_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def _prefixed_pairs(prefix: str, values: Mapping[str, Any]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for key, value in values.items():
        if value is None:
            continue
        name = f"{prefix}-{str(key).replace('_', '-')}"
        if isinstance(value, bool):
            pairs.append((name, "true" if value else "false"))
        else:
            pairs.append((name, _attribute_value(value)))
    return pairs


def attribute_pairs(attrs: Mapping[str, Any] | None) -> List[Tuple[str, str]]:
    """Flatten an attribute map into ``(name, value)`` pairs in insertion order."""

    pairs: List[Tuple[str, str]] = []
    for name, value in (attrs or {}).items():
        if name in PREFIXED_ATTRIBUTES and isinstance(value, Mapping):
            pairs.extend(_prefixed_pairs(name, value))
            continue
        if value is None or value is False:
            continue
        if value is True:
            pairs.append((name, name))
            continue
        if name == "class":
            value = " ".join(split_tokens(value))
            if not value:
                continue
        pairs.append((name, _attribute_value(value)))
    return pairs


def render_attributes(attrs: Mapping[str, Any] | None) -> Markup:
    """Serialise attributes with a leading space, or return an empty string."""

    pairs = attribute_pairs(attrs)
    if not pairs:
        return Markup("")
    rendered = [Markup('{}="{}"').format(name, value) for name, value in pairs]
    return Markup(" ") + Markup(" ").join(rendered)


__all__ = [
    "HtmlAttributes",
    "TOKEN_LIST_ATTRIBUTES",
    "attribute_pairs",
    "class_names",
    "deep_merge_html_attributes",
    "render_attributes",
    "split_tokens",
]
