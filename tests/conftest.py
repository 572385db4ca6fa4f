from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from rcli import logging_utils


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    for name in (
        "RCLI_HOME",
        "RCLI_HISTORY_FILE",
        "RCLI_UNSUPPORTED_COMMANDS",
        "RCLI_BLOCKING_COMMANDS",
        "RCLI_LOADED_MODULES",
        "RCLI_COMMANDS_SPEC_FILE",
        "RCLI_COMMAND_LOOKUP_WINDOW",
        "FORCE_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RCLI_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("RCLI_LOG_LEVEL", "WARNING")
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()
    monkeypatch.setattr(logging_utils, "_CONFIGURED_LEVEL", None)
