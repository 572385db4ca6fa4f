"""Display segments for CLI transcripts."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from rich.errors import MarkupError
from rich.text import Text

from rcli.core.formatter import NIL_TEXT, format_to_text, get_db_index
from rcli.core.types import ClusterNode, CommandExecutionStatus, ExecutionResult

Formatter = Callable[[Any, str], str]

COMMAND_WRAPPER_CLASS = "cli-command-wrapper"
WB_COMMAND_TEST_ID = "wb-command"
LINE_BREAK = "\n"


class CliPrefix(str, Enum):
    """Class-name prefix of the surface a segment is rendered on."""

    Cli = "cli"
    QueryCard = "query-card"


def _new_key() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class RenderedSegment:
    """One display unit of a transcript."""

    content: str | Text
    class_name: str | None = None
    test_id: str | None = None
    key: str = field(default_factory=_new_key, compare=False)

    @property
    def plain(self) -> str:
        if isinstance(self.content, Text):
            return self.content.plain
        return self.content


def line_break() -> RenderedSegment:
    return RenderedSegment(LINE_BREAK)


def response_class_name(status: CommandExecutionStatus, prefix: CliPrefix = CliPrefix.Cli) -> str:
    """CSS-style class of a response segment; only the status decides the suffix."""

    suffix = "success" if status == CommandExecutionStatus.Success else "fail"
    return f"{CliPrefix(prefix).value}-output-response-{suffix}"


def cli_parse_text_response(
    text: Any = "",
    command: str = "",
    status: CommandExecutionStatus = CommandExecutionStatus.Success,
    prefix: CliPrefix = CliPrefix.Cli,
    is_parse: bool = False,
    formatter: Formatter = format_to_text,
) -> RenderedSegment:
    """Render one command response as a single styled segment.

    When ``is_parse`` is set the formatted text is read as rich console markup.
    """

    class_name = response_class_name(status, prefix)
    content: str | Text
    if isinstance(text, Text):
        content = text
    else:
        formatted = formatter(text, command)
        content = _parse_markup(formatted) if is_parse else formatted
    return RenderedSegment(content, class_name=class_name, test_id=class_name)


def _parse_markup(formatted: str) -> Text:
    try:
        return Text.from_markup(formatted)
    except MarkupError:
        return Text(formatted)


def cli_parse_text_response_with_offset(
    text: Any = "",
    command: str = "",
    status: CommandExecutionStatus = CommandExecutionStatus.Success,
    formatter: Formatter = format_to_text,
) -> list[RenderedSegment]:
    return [cli_parse_text_response(text, command, status, formatter=formatter), line_break()]


def cli_parse_text_response_with_redirect(
    text: Any = "",
    command: str = "",
    status: CommandExecutionStatus = CommandExecutionStatus.Success,
    redirect_to: ClusterNode | None = None,
    formatter: Formatter = format_to_text,
) -> list[RenderedSegment]:
    """Render a response preceded by the cluster redirect notice.

    The notice segment is always present, empty when there was no redirect.
    """

    redirect_message = ""
    if redirect_to is not None:
        redirect_message = (
            f"-> Redirected to slot [{redirect_to.slot}] located at {redirect_to.host}:{redirect_to.port}"
        )
    return [
        RenderedSegment(redirect_message),
        line_break(),
        cli_parse_text_response(text, command, status, formatter=formatter),
        line_break(),
    ]


def bash_text_value(db: int | None = 0) -> str:
    return f"{get_db_index(db)} > ".lstrip()


def cli_command_wrapper(command: str) -> RenderedSegment:
    return RenderedSegment(command, class_name=COMMAND_WRAPPER_CLASS, test_id=COMMAND_WRAPPER_CLASS)


def cli_command_output(command: str, db: int | None = 0) -> list[RenderedSegment]:
    """Echo of the interactive prompt followed by the submitted command."""

    return [line_break(), RenderedSegment(bash_text_value(db)), cli_command_wrapper(command), line_break()]


def wb_summary_command(command: str, db: int | None = None) -> RenderedSegment:
    return RenderedSegment(
        f"{get_db_index(db)} > {command} \n",
        class_name=COMMAND_WRAPPER_CLASS,
        test_id=WB_COMMAND_TEST_ID,
    )


def cli_parse_commands_group_result(
    result: ExecutionResult,
    db: int | None = None,
    formatter: Formatter = format_to_text,
) -> list[RenderedSegment]:
    """Render one command of a batch: the echoed command, then its outcome.

    Successful replies are expanded to one segment per line; a failure stays a
    single styled segment even when its text spans several lines.
    """

    execution_command = wb_summary_command(result.command, db)
    response = result.response or NIL_TEXT

    if result.status == CommandExecutionStatus.Success:
        lines = formatter(response, result.command).split("\n")
        execution_result = [RenderedSegment(line) for line in lines]
    else:
        execution_result = [
            cli_parse_text_response(response, result.command, result.status, formatter=formatter),
        ]
    return [execution_command, *execution_result]


class OutputTranscript:
    """Visible output of a CLI session."""

    def __init__(self, segments: Iterable[RenderedSegment] = ()) -> None:
        self._segments: list[RenderedSegment] = list(segments)

    @property
    def segments(self) -> tuple[RenderedSegment, ...]:
        return tuple(self._segments)

    def extend(self, segments: Iterable[RenderedSegment]) -> None:
        self._segments.extend(segments)

    def clear(self) -> None:
        self._segments.clear()

    def plain_text(self) -> str:
        return "".join(segment.plain for segment in self._segments)

    def __len__(self) -> int:
        return len(self._segments)


def clear_output(transcript: OutputTranscript) -> None:
    """Reset the visible output."""

    transcript.clear()
