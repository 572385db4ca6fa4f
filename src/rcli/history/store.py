"""Key-value storage backends for persisted CLI state."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from loguru import logger

from rcli.errors import StorageError


class KeyValueStore(Protocol):
    """Minimal put/get contract for persisted values."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """Process-local store, used by tests and one-shot sessions."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._items.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._items[key] = value


class JsonFileStore:
    """Store that keeps every key in one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        payload = self._read()
        payload[key] = value
        self._write(payload)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("store.read.invalid path={} error={}", self.path, exc)
            return {}
        if not isinstance(payload, dict):
            logger.warning("store.read.invalid path={} error=top-level value is not an object", self.path)
            return {}
        return payload

    def _write(self, payload: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        except OSError as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, ensure_ascii=False, indent=2)
            tmp_path.replace(self.path)
        except (OSError, TypeError, ValueError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Could not write {self.path}: {exc}") from exc
