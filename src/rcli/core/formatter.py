"""Plain-text formatting of server replies, redis-cli style."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

NIL_TEXT = "(nil)"
EMPTY_LIST_TEXT = "(empty list or set)"
NESTED_INDENT = "   "


def format_to_text(reply: Any, command: str = "") -> str:
    """Render a typed reply as the text a terminal client would show.

    ``command`` is accepted so replacements can special-case commands whose
    replies are already human formatted.
    """

    _ = command
    if isinstance(reply, str):
        return reply
    if isinstance(reply, (bytes, bytearray)):
        return bytes(reply).decode("utf-8", errors="replace")
    if isinstance(reply, Mapping):
        return _format_array(_flatten_mapping(reply))
    if isinstance(reply, (list, tuple)):
        return _format_array(list(reply))
    return _format_scalar(reply)


def get_db_index(db: int | None = 0) -> str:
    """Label of a logical database as shown in the prompt; db 0 has none."""

    if not db:
        return ""
    return f"[db{db}]"


def _format_array(items: list[Any], level: int = 0) -> str:
    if not items:
        return EMPTY_LIST_TEXT

    lines: list[str] = []
    for index, item in enumerate(items):
        margin = NESTED_INDENT * level if index > 0 else ""
        if isinstance(item, Mapping):
            item = _flatten_mapping(item)
        if isinstance(item, (list, tuple)):
            value = _format_array(list(item), level + 1)
        else:
            value = _format_item(item)
        lines.append(f"{margin}{index + 1}) {value}")
    return "\n".join(lines)


def _format_item(item: Any) -> str:
    if isinstance(item, (bytes, bytearray)):
        item = bytes(item).decode("utf-8", errors="replace")
    if isinstance(item, str):
        return json.dumps(item, ensure_ascii=False)
    return _format_scalar(item)


def _format_scalar(reply: Any) -> str:
    if reply is None:
        return NIL_TEXT
    if isinstance(reply, bool):
        return f"(integer) {int(reply)}"
    if isinstance(reply, int):
        return f"(integer) {reply}"
    if isinstance(reply, float):
        return f"(double) {reply:g}"
    return str(reply)


def _flatten_mapping(mapping: Mapping[Any, Any]) -> list[Any]:
    flat: list[Any] = []
    for key, value in mapping.items():
        flat.append(key)
        flat.append(value)
    return flat
