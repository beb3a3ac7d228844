"""Controller signal bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

from tick_toss.types import TickContext

_Handler = Callable[[str, dict[str, Any]], None]

TOSS_SIGNALS = (
    "drag_began",
    "drag_ended",
    "tossed",
    "toss_expired",
    "reset_started",
    "reset_completed",
)


class SignalBus:
    """Queues controller signals until the signal system flushes them.

    Only names in ``TOSS_SIGNALS`` can be subscribed to or published;
    any other name raises ValueError.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {name: [] for name in TOSS_SIGNALS}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._handlers(signal_name).append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        """Subscribe ``handler`` to every toss signal."""
        for signal_name in TOSS_SIGNALS:
            self._subscribers[signal_name].append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._handlers(signal_name)
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in self._subscribers[signal_name]:
                handler(signal_name, data)

    def _handlers(self, signal_name: str) -> list[_Handler]:
        try:
            return self._subscribers[signal_name]
        except KeyError:
            raise ValueError(
                f"Unknown signal {signal_name!r}; expected one of {TOSS_SIGNALS}"
            ) from None


def make_signal_system(bus: SignalBus) -> Callable[[TickContext], None]:
    def signal_system(ctx: TickContext) -> None:
        bus.flush()

    return signal_system
