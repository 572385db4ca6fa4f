import importlib
import json
from pathlib import Path

from typer.testing import CliRunner

from rcli.history.service import CLI_INPUT_HISTORY_KEY

cli_app_module = importlib.import_module("rcli.cli.app")
runner = CliRunner()


def test_check_allows_regular_command() -> None:
    result = runner.invoke(cli_app_module.app, ["check", "GET foo"])
    assert result.exit_code == 0
    assert "ok GET foo" in result.output


def test_check_rejects_default_unsupported_command() -> None:
    result = runner.invoke(cli_app_module.app, ["check", "MONITOR"])
    assert result.exit_code == 1
    assert "unsupported" in result.output
    assert "'monitor'" in result.output


def test_check_uses_explicit_lists() -> None:
    result = runner.invoke(cli_app_module.app, ["check", "blpop q 0", "--blocking", "blpop"])
    assert result.exit_code == 1
    assert "blocking" in result.output

    result = runner.invoke(cli_app_module.app, ["check", "MONITOR", "-u", "debug"])
    assert result.exit_code == 0


def test_check_reports_missing_module() -> None:
    result = runner.invoke(cli_app_module.app, ["check", "FT.SEARCH idx *"])
    assert result.exit_code == 1
    assert "'search' module" in result.output

    result = runner.invoke(cli_app_module.app, ["check", "FT.SEARCH idx *", "--module", "search"])
    assert result.exit_code == 0


def test_name_resolves_two_word_command(tmp_path: Path) -> None:
    spec = tmp_path / "commands.json"
    spec.write_text(json.dumps({"client list": {}}), encoding="utf-8")

    result = runner.invoke(cli_app_module.app, ["name", "CLIENT LIST TYPE normal", "--spec", str(spec)])
    assert result.exit_code == 0
    assert result.output.strip() == "CLIENT LIST"

    result = runner.invoke(cli_app_module.app, ["name", "GET foo"])
    assert result.output.strip() == "GET"


def test_name_reports_unreadable_spec(tmp_path: Path) -> None:
    result = runner.invoke(cli_app_module.app, ["name", "GET foo", "--spec", str(tmp_path / "missing.json")])
    assert result.exit_code == 2
    assert "Cannot read command spec file" in result.output


def test_select_prints_index_or_error() -> None:
    result = runner.invoke(cli_app_module.app, ["select", "SELECT 3"])
    assert result.exit_code == 0
    assert result.output.strip() == "3"

    result = runner.invoke(cli_app_module.app, ["select", "GET k"])
    assert result.exit_code == 2
    assert "Invalid command" in result.output

    result = runner.invoke(cli_app_module.app, ["select", "SELECT x"])
    assert result.exit_code == 2
    assert "Parsing error" in result.output


def test_render_grouped_result() -> None:
    result = runner.invoke(cli_app_module.app, ["render", "GET k", "a\nb", "--db", "2"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["[db2] > GET k", "a", "b"]


def test_render_failed_result_stays_together() -> None:
    result = runner.invoke(cli_app_module.app, ["render", "GET k", "ERR one\ntwo", "--fail"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [" > GET k", "ERR one", "two"]


def test_render_redirect() -> None:
    result = runner.invoke(cli_app_module.app, ["render", "GET foo", "bar", "--redirect", "127.0.0.1:7001:866"])
    assert result.exit_code == 0
    assert "-> Redirected to slot [866] located at 127.0.0.1:7001" in result.output
    assert "> GET foo" in result.output

    result = runner.invoke(cli_app_module.app, ["render", "GET foo", "bar", "--redirect", "nowhere"])
    assert result.exit_code != 0


def test_history_add_and_show(tmp_path: Path) -> None:
    assert runner.invoke(cli_app_module.app, ["history", "show"]).output.strip() == "(empty history)"

    result = runner.invoke(cli_app_module.app, ["history", "add", "GET a"])
    assert result.exit_code == 0
    assert "recorded (1 entries)" in result.output
    runner.invoke(cli_app_module.app, ["history", "add", "  SET a 1 "])

    result = runner.invoke(cli_app_module.app, ["history", "show"])
    assert result.output.splitlines() == ["1) SET a 1", "2) GET a"]

    stored = json.loads((tmp_path / "home" / "history.json").read_text(encoding="utf-8"))
    assert stored[CLI_INPUT_HISTORY_KEY] == ["SET a 1", "GET a"]


def test_history_add_ignores_empty_line() -> None:
    result = runner.invoke(cli_app_module.app, ["history", "add", ""])
    assert result.exit_code == 0
    assert "nothing to record" in result.output
