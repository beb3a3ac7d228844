"""tick-toss - Drag-and-toss interaction core on a fixed-timestep tick loop."""
from __future__ import annotations

from tick_toss import vec
from tick_toss.clock import Clock
from tick_toss.config import TossConfig
from tick_toss.controller import TossController, create_controller, make_toss_system
from tick_toss.easing import EASINGS
from tick_toss.engine import Engine
from tick_toss.schedule import Scheduler, TimerHandle, make_timer_system
from tick_toss.signals import TOSS_SIGNALS, SignalBus, make_signal_system
from tick_toss.types import (
    DRAGGING,
    IDLE,
    RESETTING,
    TOSSING,
    Decision,
    DragSession,
    InvalidStateError,
    Pose,
    SnapBack,
    TickContext,
    Toss,
    TossableObject,
)

__all__ = [
    "Clock",
    "Decision",
    "DragSession",
    "DRAGGING",
    "EASINGS",
    "Engine",
    "IDLE",
    "InvalidStateError",
    "Pose",
    "RESETTING",
    "Scheduler",
    "SignalBus",
    "SnapBack",
    "TickContext",
    "TimerHandle",
    "TOSS_SIGNALS",
    "TOSSING",
    "Toss",
    "TossableObject",
    "TossConfig",
    "TossController",
    "create_controller",
    "make_signal_system",
    "make_timer_system",
    "make_toss_system",
    "vec",
]
