"""Core command classification and output rendering."""

from .classifier import (
    CommandVerdict,
    check_blocking_command,
    check_command_module,
    check_unsupported_command,
    check_unsupported_module_command,
    classify_command_line,
)
from .commands import get_command_name_from_query, get_db_index_from_select_query
from .formatter import format_to_text, get_db_index
from .output import (
    CliPrefix,
    OutputTranscript,
    RenderedSegment,
    bash_text_value,
    clear_output,
    cli_command_output,
    cli_command_wrapper,
    cli_parse_commands_group_result,
    cli_parse_text_response,
    cli_parse_text_response_with_offset,
    cli_parse_text_response_with_redirect,
    wb_summary_command,
)
from .types import ClusterNode, CommandExecutionStatus, ExecutionResult, LoadedModule, RedisModule

__all__ = [
    "CliPrefix",
    "ClusterNode",
    "CommandExecutionStatus",
    "CommandVerdict",
    "ExecutionResult",
    "LoadedModule",
    "OutputTranscript",
    "RedisModule",
    "RenderedSegment",
    "bash_text_value",
    "check_blocking_command",
    "check_command_module",
    "check_unsupported_command",
    "check_unsupported_module_command",
    "classify_command_line",
    "clear_output",
    "cli_command_output",
    "cli_command_wrapper",
    "cli_parse_commands_group_result",
    "cli_parse_text_response",
    "cli_parse_text_response_with_offset",
    "cli_parse_text_response_with_redirect",
    "format_to_text",
    "get_command_name_from_query",
    "get_db_index",
    "get_db_index_from_select_query",
    "wb_summary_command",
]
