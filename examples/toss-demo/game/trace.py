"""Console trace of controller signals."""
from __future__ import annotations

from typing import Any

from tick_toss import SignalBus, Toss


def _fmt(point: tuple[float, float]) -> str:
    return f"({point[0]:.1f}, {point[1]:.1f})"


def describe(signal: str, data: dict[str, Any]) -> str:
    if signal == "drag_began":
        return f"touch start at {_fmt(data['pointer'])}, in card at {_fmt(data['local'])}"
    if signal == "drag_ended":
        kind = "toss" if isinstance(data["decision"], Toss) else "snap back"
        return f"touch end at {_fmt(data['pointer'])}, velocity {_fmt(data['velocity'])} -> {kind}"
    if signal == "tossed":
        return f"tossed at {_fmt(data['velocity'])} with spin {data['spin']}"
    return signal.replace("_", " ")


class Trace:
    """Prints every controller signal and remembers the latest line for the status bar."""

    def __init__(self, bus: SignalBus) -> None:
        self.last = ""
        bus.subscribe_all(self._on_signal)

    def _on_signal(self, signal: str, data: dict[str, Any]) -> None:
        self.last = describe(signal, data)
        print(self.last)
