"""Shared core dataclasses and enums."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class CommandExecutionStatus(str, Enum):
    """Outcome of one remotely executed command."""

    Success = "success"
    Fail = "fail"


class RedisModule(str, Enum):
    """Logical identifiers of optional server modules."""

    Search = "search"
    ReJSON = "ReJSON"
    TimeSeries = "timeseries"
    Graph = "graph"
    Bloom = "bf"


@dataclass(frozen=True)
class LoadedModule:
    """One module reported as active by the connected server."""

    name: str
    version: int | None = None
    semantic_version: str | None = None


# Loaded modules may also arrive as raw mappings, e.g. straight from a MODULE LIST reply.
ModuleLike = Union[LoadedModule, Mapping[str, Any]]


@dataclass(frozen=True)
class ClusterNode:
    """Cluster node a command was redirected to."""

    host: str
    port: int
    slot: int


@dataclass(frozen=True)
class ExecutionResult:
    """Result of one command as returned by the execution collaborator."""

    command: str
    response: Any = None
    status: CommandExecutionStatus = CommandExecutionStatus.Success


def module_name(module: ModuleLike) -> str | None:
    """Read the module name from a dataclass or mapping."""

    if isinstance(module, Mapping):
        name = module.get("name")
    else:
        name = getattr(module, "name", None)
    return name if isinstance(name, str) else None
