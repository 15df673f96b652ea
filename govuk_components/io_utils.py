"""Console output helpers for the command-line entry point."""

from __future__ import annotations

import json
import sys
from typing import Any, Mapping


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def attributes_to_json(attrs: Mapping[str, Any]) -> str:
    """Dump an attribute map, keeping nested aria/data maps as objects."""

    return stable_json_dumps(dict(attrs))


def warn(area: str, msg: str) -> None:
    print(f"[{area}] {msg}", file=sys.stderr)


__all__ = ["attributes_to_json", "stable_json_dumps", "warn"]
