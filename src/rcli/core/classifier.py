"""Command line eligibility checks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from rcli.core.modules import COMMAND_MODULES, MODULE_COMMAND_PREFIXES
from rcli.core.types import ModuleLike, RedisModule, module_name

VerdictKind = Literal["ok", "unsupported", "blocking", "module"]


@dataclass(frozen=True)
class CommandVerdict:
    """Combined classification of one command line."""

    kind: VerdictKind
    command: str | None = None
    module: RedisModule | None = None

    @property
    def is_allowed(self) -> bool:
        return self.kind == "ok"

    def describe(self) -> str:
        if self.kind == "unsupported":
            return f"'{self.command}' is not supported by the CLI"
        if self.kind == "blocking":
            return f"'{self.command}' is a blocking command"
        if self.kind == "module" and self.module is not None:
            return f"command requires the '{self.module.value}' module, which is not loaded"
        return "ok"


def check_unsupported_command(unsupported_commands: Iterable[str] | None, command_line: str | None) -> str | None:
    """Return the first unsupported entry the line starts with, ignoring case on both sides."""

    if not isinstance(command_line, str):
        return None
    line = command_line.strip().lower()
    for command in unsupported_commands or ():
        if isinstance(command, str) and line.startswith(command.lower()):
            return command
    return None


def check_blocking_command(blocking_commands: Iterable[str] | None, command_line: str | None) -> str | None:
    """Return the first blocking entry the line starts with.

    Only the line is lower-cased; entries are compared as given, so an
    upper-case entry never matches.
    """

    if not isinstance(command_line, str):
        return None
    line = command_line.strip().lower()
    for command in blocking_commands or ():
        if isinstance(command, str) and line.startswith(command):
            return command
    return None


def check_command_module(command: str | None) -> RedisModule | None:
    """Resolve the module a command belongs to from its prefix."""

    if not isinstance(command, str):
        return None
    upper = command.upper()
    for prefix, module in MODULE_COMMAND_PREFIXES:
        if upper.startswith(prefix):
            return module
    return None


def check_unsupported_module_command(
    loaded_modules: Iterable[ModuleLike] | None,
    command_line: str | None,
) -> RedisModule | None:
    """Return the module a command needs when that module is not loaded."""

    if not isinstance(command_line, str):
        return None
    command_module = check_command_module(command_line.strip())
    if command_module is None:
        return None

    aliases = COMMAND_MODULES[command_module]
    if any(module_name(module) in aliases for module in loaded_modules or ()):
        return None
    return command_module


def classify_command_line(
    command_line: str | None,
    *,
    unsupported_commands: Iterable[str] | None = (),
    blocking_commands: Iterable[str] | None = (),
    loaded_modules: Iterable[ModuleLike] | None = (),
) -> CommandVerdict:
    """Run every check in order and report the first one that fires."""

    unsupported = check_unsupported_command(unsupported_commands, command_line)
    if unsupported is not None:
        return CommandVerdict(kind="unsupported", command=unsupported)

    blocking = check_blocking_command(blocking_commands, command_line)
    if blocking is not None:
        return CommandVerdict(kind="blocking", command=blocking)

    missing_module = check_unsupported_module_command(loaded_modules, command_line)
    if missing_module is not None:
        return CommandVerdict(kind="module", module=missing_module)

    return CommandVerdict(kind="ok")

