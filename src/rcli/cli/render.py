"""Terminal renderer for transcript segments."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from rcli.core.classifier import CommandVerdict
from rcli.core.output import COMMAND_WRAPPER_CLASS, RenderedSegment

SEGMENT_STYLES: dict[str, str] = {
    "output-response-success": "green",
    "output-response-fail": "red",
    COMMAND_WRAPPER_CLASS: "bold",
}


def segment_style(class_name: str | None) -> str:
    """Map a segment class name to a rich style, ignoring the surface prefix."""

    if not class_name:
        return ""
    for suffix, style in SEGMENT_STYLES.items():
        if class_name.endswith(suffix):
            return style
    return ""


def segments_to_text(segments: Iterable[RenderedSegment]) -> Text:
    """Join segments into one rich text, styling each by its class."""

    text = Text()
    for segment in segments:
        style = segment_style(segment.class_name)
        if isinstance(segment.content, Text):
            piece = segment.content.copy()
            if style:
                piece.stylize(style)
            text.append_text(piece)
        else:
            text.append(segment.content, style=style or None)
    return text


class SegmentRenderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console(highlight=False, soft_wrap=True)

    def segments(self, segments: Iterable[RenderedSegment]) -> None:
        """Print a transcript without adding a trailing newline."""
        self.console.print(segments_to_text(segments), end="")

    def lines(self, segments: Iterable[RenderedSegment]) -> None:
        """Print each segment as its own line, as block-level output is shown."""
        for segment in segments:
            text = segments_to_text([segment])
            text.rstrip()
            self.console.print(text)

    def verdict(self, line: str, verdict: CommandVerdict) -> None:
        if verdict.is_allowed:
            self.console.print(Text.assemble(("ok", "green"), f" {line.strip()}"))
            return
        self.console.print(Text.assemble((verdict.kind, "bold red"), f" {verdict.describe()}"))

    def info(self, message: str) -> None:
        self.console.print(message, markup=False)

    def error(self, message: str) -> None:
        self.console.print(Text.assemble(("Error:", "bold red"), f" {message}"))


def create_cli_renderer(console: Console | None = None) -> SegmentRenderer:
    """Create and return a renderer instance."""
    return SegmentRenderer(console)
