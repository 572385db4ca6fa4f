"""rcli - classify, label and render Redis CLI commands."""

from .core import (
    CommandExecutionStatus,
    ExecutionResult,
    LoadedModule,
    RedisModule,
    classify_command_line,
    get_command_name_from_query,
    get_db_index_from_select_query,
)
from .errors import InvalidCommandError, ParsingError, RcliError
from .history import CommandHistoryService, update_cli_history_storage

__version__ = "0.1.0"

__all__ = [
    "CommandExecutionStatus",
    "CommandHistoryService",
    "ExecutionResult",
    "InvalidCommandError",
    "LoadedModule",
    "ParsingError",
    "RcliError",
    "RedisModule",
    "classify_command_line",
    "get_command_name_from_query",
    "get_db_index_from_select_query",
    "update_cli_history_storage",
]
