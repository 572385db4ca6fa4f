"""rcli command line entrypoint."""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger

from rcli.cli.render import create_cli_renderer
from rcli.config import Settings, get_settings, load_commands_spec
from rcli.core.classifier import classify_command_line
from rcli.core.commands import get_command_name_from_query, get_db_index_from_select_query
from rcli.core.output import (
    cli_command_output,
    cli_parse_commands_group_result,
    cli_parse_text_response_with_redirect,
)
from rcli.core.types import ClusterNode, CommandExecutionStatus, ExecutionResult, LoadedModule
from rcli.errors import ConfigurationError, RcliError
from rcli.history.service import CommandHistoryService
from rcli.history.store import JsonFileStore

app = typer.Typer(name="rcli", help="Classify, label and render Redis CLI commands.", add_completion=False)
history_app = typer.Typer(help="Inspect and record the persisted command history.", add_completion=False)
app.add_typer(history_app, name="history")


def _load_settings() -> Settings:
    return get_settings()


def _history_service(settings: Settings) -> CommandHistoryService:
    return CommandHistoryService(JsonFileStore(settings.history_path))


def _parse_redirect(raw: str) -> ClusterNode:
    host, sep, rest = raw.rpartition(":")
    address, sep2, port = host.rpartition(":")
    if not sep or not sep2 or not address:
        raise typer.BadParameter("expected HOST:PORT:SLOT", param_hint="--redirect")
    try:
        return ClusterNode(host=address, port=int(port), slot=int(rest))
    except ValueError as exc:
        raise typer.BadParameter("port and slot must be integers", param_hint="--redirect") from exc


@app.command()
def check(
    line: str = typer.Argument(..., help="Command line to classify"),
    unsupported: list[str] | None = typer.Option(None, "--unsupported", "-u", help="Unsupported command prefix"),
    blocking: list[str] | None = typer.Option(None, "--blocking", "-b", help="Blocking command prefix"),
    module: list[str] | None = typer.Option(None, "--module", "-m", help="Name of a loaded server module"),
) -> None:
    """Report whether a command line may be sent to the server."""

    settings = _load_settings()
    loaded_modules = [LoadedModule(name=name) for name in (module or settings.loaded_modules)]
    verdict = classify_command_line(
        line,
        unsupported_commands=unsupported or settings.unsupported_commands,
        blocking_commands=blocking or settings.blocking_commands,
        loaded_modules=loaded_modules,
    )
    logger.debug("cli.check kind={} line={}", verdict.kind, line)
    create_cli_renderer().verdict(line, verdict)
    if not verdict.is_allowed:
        raise typer.Exit(1)


@app.command()
def name(
    line: str = typer.Argument(..., help="Query to resolve"),
    spec: Path | None = typer.Option(None, "--spec", help="JSON file of command metadata"),  # noqa: B008
) -> None:
    """Print the canonical command name of a query."""

    settings = _load_settings()
    renderer = create_cli_renderer()
    spec_path = spec or settings.commands_spec_file
    try:
        commands_spec = load_commands_spec(spec_path) if spec_path is not None else {}
    except ConfigurationError as exc:
        renderer.error(str(exc))
        raise typer.Exit(2) from exc

    command_name = get_command_name_from_query(line, commands_spec, settings.command_lookup_window)
    renderer.info(command_name if command_name is not None else "(none)")


@app.command()
def select(query: str = typer.Argument(..., help="SELECT statement")) -> None:
    """Print the database index of a SELECT statement."""

    renderer = create_cli_renderer()
    try:
        index = get_db_index_from_select_query(query)
    except RcliError as exc:
        renderer.error(str(exc))
        raise typer.Exit(2) from exc
    renderer.info(str(index))


@app.command()
def render(
    command: str = typer.Argument(..., help="Executed command"),
    response: str = typer.Argument("", help="Raw response text"),
    fail: bool = typer.Option(False, "--fail", help="Render as a failed execution"),
    db: int = typer.Option(0, "--db", help="Logical database index"),
    redirect: str | None = typer.Option(None, "--redirect", help="Cluster redirect as HOST:PORT:SLOT"),
) -> None:
    """Render an execution result as the CLI transcript shows it."""

    status = CommandExecutionStatus.Fail if fail else CommandExecutionStatus.Success
    renderer = create_cli_renderer()
    if redirect is not None:
        target = _parse_redirect(redirect)
        renderer.segments(cli_command_output(command, db))
        renderer.segments(cli_parse_text_response_with_redirect(response, command, status, target))
        return

    result = ExecutionResult(command=command, response=response, status=status)
    renderer.lines(cli_parse_commands_group_result(result, db))


@history_app.command("show")
def history_show() -> None:
    """Print persisted commands, most recent first."""

    renderer = create_cli_renderer()
    entries = _history_service(_load_settings()).entries()
    if not entries:
        renderer.info("(empty history)")
        return
    for index, entry in enumerate(entries, start=1):
        renderer.info(f"{index}) {entry}")


@history_app.command("add")
def history_add(line: str = typer.Argument(..., help="Command line to record")) -> None:
    """Record a command line in the persisted history."""

    renderer = create_cli_renderer()
    service = _history_service(_load_settings())
    try:
        history = service.record(line)
    except RcliError as exc:
        renderer.error(str(exc))
        raise typer.Exit(1) from exc
    if history is None:
        renderer.info("nothing to record")
        return
    renderer.info(f"recorded ({len(history)} entries)")
