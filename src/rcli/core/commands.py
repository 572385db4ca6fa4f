"""Command name and argument helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from rcli.errors import InvalidCommandError, ParsingError

SELECT_COMMAND = "select"
DEFAULT_QUERY_LIMIT = 50
QUOTE_CHARS = "'\""
DB_INDEX_RE = re.compile(r"-?[0-9]+")


def get_command_name_from_query(
    query: str | None,
    commands_spec: Mapping[str, Any] | None = None,
    query_limit: int = DEFAULT_QUERY_LIMIT,
) -> str | None:
    """Resolve the canonical command name of a query.

    Two-word commands such as ``CLIENT LIST`` are recognized when the pair is a
    key of ``commands_spec``. Only the first ``query_limit`` characters are
    scanned. Returns ``None`` when no command can be identified.
    """

    if not isinstance(query, str):
        return None
    words = query[: max(query_limit, 0)].split()
    if not words:
        return None

    command = words[0]
    if len(words) > 1 and commands_spec:
        pair = f"{command} {words[1]}"
        if pair.upper() in commands_spec:
            return pair
    return command


def get_db_index_from_select_query(query: str) -> int:
    """Parse the database index out of a ``SELECT <index>`` query."""

    command, *args = query.strip().split() or [""]
    if command.lower() != SELECT_COMMAND:
        raise InvalidCommandError("Invalid command")
    if not args:
        raise ParsingError("Parsing error")

    raw_index = args[0].translate(str.maketrans("", "", QUOTE_CHARS)).strip()
    if DB_INDEX_RE.fullmatch(raw_index) is None:
        raise ParsingError("Parsing error")
    return int(raw_index, 10)
