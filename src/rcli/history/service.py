"""Bounded history of submitted CLI commands."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from loguru import logger

from rcli.history.store import KeyValueStore

MAX_COMMAND_HISTORY = 20
CLI_INPUT_HISTORY_KEY = "cliInputHistory"

HistoryListener = Callable[[tuple[str, ...]], None]


def prepend_command(history: Iterable[str], command: str, limit: int = MAX_COMMAND_HISTORY) -> tuple[str, ...]:
    """Put ``command`` in front of ``history`` and drop entries beyond ``limit``.

    Repeated commands are kept; the oldest entries fall off the end.
    """

    return (command, *history)[:limit]


def read_cli_history(store: KeyValueStore) -> tuple[str, ...]:
    """Load persisted history, ignoring anything that is not a list of strings."""

    stored = store.get(CLI_INPUT_HISTORY_KEY)
    if not isinstance(stored, list):
        return ()
    return tuple(item for item in stored if isinstance(item, str))


def update_cli_history_storage(
    command: str | None,
    store: KeyValueStore,
    on_update: HistoryListener | None = None,
) -> tuple[str, ...] | None:
    """Record a submitted command and persist the bounded history.

    Returns the new history, or ``None`` when there was nothing to record.
    """

    if not command:
        return None

    history = prepend_command(read_cli_history(store), command.strip())
    store.set(CLI_INPUT_HISTORY_KEY, list(history))
    logger.debug("history.update size={} command={}", len(history), history[0])

    if on_update is not None:
        on_update(history)
    return history


class CommandHistoryService:
    """History helper bound to one store; the store is the only state."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._listeners: list[HistoryListener] = []

    def subscribe(self, listener: HistoryListener) -> Callable[[], None]:
        """Register a listener for history changes and return its unsubscribe hook."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def entries(self) -> tuple[str, ...]:
        return read_cli_history(self._store)

    def record(self, command: str | None) -> tuple[str, ...] | None:
        return update_cli_history_storage(command, self._store, on_update=self._notify)

    def _notify(self, history: tuple[str, ...]) -> None:
        for listener in list(self._listeners):
            listener(history)
