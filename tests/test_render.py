import io

from rich.console import Console
from rich.text import Text

from rcli.cli.render import SegmentRenderer, segment_style, segments_to_text
from rcli.core.classifier import CommandVerdict
from rcli.core.output import CliPrefix, cli_command_output, cli_parse_text_response
from rcli.core.types import CommandExecutionStatus


def _renderer() -> tuple[SegmentRenderer, io.StringIO]:
    buffer = io.StringIO()
    return SegmentRenderer(Console(file=buffer, highlight=False, soft_wrap=True, color_system=None)), buffer


def test_segment_style_ignores_surface_prefix() -> None:
    assert segment_style("cli-output-response-success") == "green"
    assert segment_style("query-card-output-response-fail") == "red"
    assert segment_style("cli-command-wrapper") == "bold"
    assert segment_style(None) == ""
    assert segment_style("unknown") == ""


def test_segments_to_text_styles_each_segment() -> None:
    failed = cli_parse_text_response("ERR", "GET k", CommandExecutionStatus.Fail, prefix=CliPrefix.QueryCard)
    text = segments_to_text([*cli_command_output("GET k"), failed])
    assert text.plain == "\n> GET k\nERR"
    styles = {str(span.style) for span in text.spans}
    assert styles == {"bold", "red"}


def test_segments_to_text_does_not_mutate_renderables() -> None:
    content = Text("parsed")
    segment = cli_parse_text_response(content)
    segments_to_text([segment])
    assert content.spans == []


def test_renderer_prints_transcript_and_verdicts() -> None:
    renderer, buffer = _renderer()
    renderer.segments(cli_command_output("PING"))
    renderer.verdict("BLPOP q 0", CommandVerdict(kind="blocking", command="blpop"))
    renderer.verdict(" GET k ", CommandVerdict(kind="ok"))
    renderer.error("boom")

    assert buffer.getvalue().splitlines() == [
        "",
        "> PING",
        "blocking 'blpop' is a blocking command",
        "ok GET k",
        "Error: boom",
    ]
