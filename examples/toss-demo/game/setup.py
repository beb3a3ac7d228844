"""Build the demo state: engine, controller, trace, and pointer tracking."""
from __future__ import annotations

from tick_toss import Engine, Pose, SignalBus, TossConfig, create_controller

from game.gesture import VelocityTracker
from game.trace import Trace
from ui.constants import CARD_CENTER, CARD_H, CARD_W, TPS


class DemoState:
    """Holds the engine, controller, and pointer tracking."""

    def __init__(self, config: TossConfig | None = None, seed: int = 42) -> None:
        self.engine = Engine(tps=TPS, seed=seed)
        self.bus = SignalBus()
        self.trace = Trace(self.bus)
        self.controller = create_controller(
            self.engine,
            Pose(center=CARD_CENTER, size=(CARD_W, CARD_H)),
            config,
            bus=self.bus,
        )
        self.tracker = VelocityTracker()
        self.dragging = False

    def press(self, t: float, pos: tuple[float, float]) -> None:
        if not self.controller.object.contains(pos):
            return
        self.dragging = True
        self.tracker.reset()
        self.tracker.add(t, pos)
        self.controller.begin_drag(pos)

    def move(self, t: float, pos: tuple[float, float]) -> None:
        if not self.dragging:
            return
        self.tracker.add(t, pos)
        self.controller.update_drag(pos)

    def release(self, t: float, pos: tuple[float, float]) -> None:
        if not self.dragging:
            return
        self.dragging = False
        self.tracker.add(t, pos)
        self.controller.update_drag(pos)
        self.controller.end_drag(self.tracker.velocity())

    def reset_card(self) -> None:
        """Drop any drag in progress and animate the card home."""
        self.dragging = False
        self.tracker.reset()
        self.controller.reset()
