"""Persisted command history."""

from rcli.history.service import (
    CLI_INPUT_HISTORY_KEY,
    MAX_COMMAND_HISTORY,
    CommandHistoryService,
    prepend_command,
    read_cli_history,
    update_cli_history_storage,
)
from rcli.history.store import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "CLI_INPUT_HISTORY_KEY",
    "MAX_COMMAND_HISTORY",
    "CommandHistoryService",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "prepend_command",
    "read_cli_history",
    "update_cli_history_storage",
]
