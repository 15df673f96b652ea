"""Small text helpers shared by components and error messages."""

from __future__ import annotations

from typing import Any, Sequence


def is_blank(value: Any) -> bool:
    """Return True for None and for strings that are empty or whitespace only."""

    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_present(value: Any) -> bool:
    return not is_blank(value)


def to_sentence(words: Sequence[str], *, last_connector: str = ", and ", two_connector: str = " and ") -> str:
    """Join words into a readable list: ``a, b, and c``."""

    items = [str(word) for word in words]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]}{two_connector}{items[1]}"
    return ", ".join(items[:-1]) + last_connector + items[-1]


__all__ = ["is_blank", "is_present", "to_sentence"]
