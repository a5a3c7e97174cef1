"""Thread-safe event emitter."""

import threading
import typing as t
from collections import defaultdict

from ..infrastructure.logging import get_logger
from .base import BaseEmitter

if t.TYPE_CHECKING:
    import loguru

Handler = t.Callable[[t.Any], None]


class EventEmitter(BaseEmitter):
    """Dispatches events to subscribed handlers on the emitting thread.

    Events are emitted from worker threads, so the handler registry is
    guarded by a lock and handlers are invoked on a snapshot taken at emit
    time. A handler subscribing or unsubscribing mid-emission affects only
    later emissions.

    A handler that raises is logged and skipped; the remaining handlers still
    run and the exception never reaches the emitter's caller.
    """

    def __init__(self, logger: t.Optional["loguru.Logger"] = None) -> None:
        self._logger = logger or get_logger(__name__)
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self._lock = threading.Lock()

    def on(self, event_type: str, handler: Handler) -> None:
        """Subscribe handler to event_type."""
        with self._lock:
            self._handlers[event_type].append(handler)

    def off(self, event_type: str, handler: Handler) -> None:
        """Unsubscribe handler from event_type, warning if it isn't subscribed."""
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)
                return
        self._logger.warning(f"Handler {handler} not found for event {event_type}")

    def emit(self, event_type: str, event_data: t.Any) -> None:
        """Call every handler subscribed to event_type with event_data."""
        with self._lock:
            handlers = list(self._handlers.get(event_type, ()))

        for handler in handlers:
            try:
                handler(event_data)
            except Exception as exc:
                self._logger.error(
                    f"Error in handler for {event_type}: {type(exc).__name__}: {exc}"
                )
