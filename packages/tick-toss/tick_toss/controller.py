"""TossController - the drag / toss / reset state machine."""
from __future__ import annotations

import random
from typing import Callable

from tick_toss import attachment, simulator
from tick_toss.animator import ResetTween, advance_reset, start_reset
from tick_toss.clock import Clock
from tick_toss.config import TossConfig
from tick_toss.engine import Engine
from tick_toss.release import evaluate_release
from tick_toss.schedule import Scheduler, TimerHandle, make_timer_system
from tick_toss.signals import SignalBus, make_signal_system
from tick_toss.types import (
    DRAGGING,
    IDLE,
    RESETTING,
    TOSSING,
    Decision,
    DragSession,
    InvalidStateError,
    Pose,
    TickContext,
    Toss,
    TossableObject,
)
from tick_toss.vec import Vec2

TransitionCallback = Callable[[str, str], None]

TRANSITIONS: dict[str, frozenset[str]] = {
    IDLE: frozenset({DRAGGING, RESETTING}),
    DRAGGING: frozenset({TOSSING, RESETTING}),
    TOSSING: frozenset({DRAGGING, RESETTING}),
    RESETTING: frozenset({DRAGGING, RESETTING, IDLE}),
}


class TossController:
    """Owns one tossable object and drives it from drag events and ticks.

    Gesture events (``begin_drag``, ``update_drag``, ``end_drag``) arrive
    between ticks. The toss expiry is a one-shot timer on ``scheduler`` and
    the reset animation advances inside ``step``, so both live on the same
    tick loop. Each gesture bumps ``generation``; a callback scheduled
    under an older generation does nothing when it fires.

    Signals published on ``bus`` (delivered when the bus is flushed):
    ``drag_began``, ``drag_ended``, ``tossed``, ``toss_expired``,
    ``reset_started``, ``reset_completed``.
    """

    def __init__(
        self,
        pose: Pose,
        config: TossConfig | None = None,
        *,
        scheduler: Scheduler,
        clock: Clock,
        rng: random.Random | None = None,
        bus: SignalBus | None = None,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        self._config = config if config is not None else TossConfig()
        self._original = pose
        self._object = TossableObject.from_pose(pose)
        self._scheduler = scheduler
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._bus = bus
        self._on_transition = on_transition

        self._phase = IDLE
        self._generation = 0
        self._session: DragSession | None = None
        self._expiry: TimerHandle | None = None
        self._tween: ResetTween | None = None
        self._spin = 0

    # --- Read-only views ---

    @property
    def config(self) -> TossConfig:
        return self._config

    @property
    def phase(self) -> str:
        return self._phase

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def object(self) -> TossableObject:
        return self._object

    @property
    def pose(self) -> Pose:
        return self._object.pose()

    @property
    def original_pose(self) -> Pose:
        return self._original

    @property
    def session(self) -> DragSession | None:
        return self._session

    @property
    def anchor_point(self) -> Vec2 | None:
        if self._session is None:
            return None
        return self._session.anchor_point

    @property
    def attached_point(self) -> Vec2 | None:
        if self._session is None:
            return None
        return attachment.attached_point(self._session, self._object)

    @property
    def spin(self) -> int:
        """Spin rolled for the most recent toss."""
        return self._spin

    @property
    def expiry(self) -> TimerHandle | None:
        return self._expiry

    # --- Gesture events ---

    def begin_drag(self, pointer: Vec2) -> DragSession:
        """Grab the object at ``pointer``. Supersedes whatever was in flight."""
        self._supersede()
        self._object.halt()
        self._session = attachment.begin_drag(pointer, self._object)
        self._transition(DRAGGING)
        self._publish(
            "drag_began",
            pointer=pointer,
            local=self._object.to_local(pointer),
        )
        return self._session

    def update_drag(self, pointer: Vec2) -> None:
        session = self._require_session("update_drag")
        attachment.update_drag(session, pointer, self._object)

    def end_drag(self, velocity: Vec2) -> Decision:
        """Let go with the pointer moving at ``velocity`` (units/s)."""
        session = self._require_session("end_drag")
        self._session = None
        decision = evaluate_release(velocity, self._config.throwing_threshold)
        self._publish(
            "drag_ended",
            pointer=session.anchor_point,
            velocity=velocity,
            decision=decision,
        )
        if isinstance(decision, Toss):
            self._toss(decision)
        else:
            self.reset()
        return decision

    def reset(self, duration: float | None = None) -> None:
        """Animate back to the original pose over ``duration`` seconds."""
        if duration is None:
            duration = self._config.reset_duration
        ticks = self._clock.ticks_for(duration)
        self._supersede()
        self._session = None
        self._tween = start_reset(
            self._object, self._original, ticks, self._config.reset_easing
        )
        self._transition(RESETTING)
        self._publish("reset_started", duration=duration)
        if ticks == 0:
            self._finish_reset()

    # --- Tick ---

    def step(self, ctx: TickContext) -> None:
        if self._phase == TOSSING:
            simulator.integrate(self._object, ctx.dt, self._config.friction)
        elif self._phase == RESETTING and self._tween is not None:
            if advance_reset(self._tween, self._object):
                self._finish_reset()

    # --- Internals ---

    def _toss(self, decision: Toss) -> None:
        ticks = self._clock.ticks_for(self._config.toss_duration)
        self._spin = simulator.apply_toss(
            self._object, decision, self._config, self._rng
        )
        self._transition(TOSSING)
        generation = self._generation

        def on_expire(ctx: TickContext) -> None:
            if generation != self._generation:
                return
            self._expiry = None
            self._publish("toss_expired", tick=ctx.tick_number)
            self.reset()

        self._expiry = self._scheduler.call_later(ticks, "toss_expiry", on_expire)
        self._publish("tossed", velocity=self._object.velocity, spin=self._spin)

    def _finish_reset(self) -> None:
        self._tween = None
        self._object.apply_pose(self._original)
        self._object.halt()
        self._transition(IDLE)
        self._publish("reset_completed", pose=self._original)

    def _supersede(self) -> None:
        """Invalidate everything scheduled by the previous gesture."""
        self._generation += 1
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None
        self._tween = None

    def _require_session(self, operation: str) -> DragSession:
        if self._session is None:
            raise InvalidStateError(
                self._phase, f"{operation} called with no active drag (phase {self._phase!r})"
            )
        return self._session

    def _transition(self, target: str) -> None:
        old = self._phase
        if old == target == DRAGGING:
            # Re-grab while dragging: new session, same phase.
            return
        if target not in TRANSITIONS[old]:
            raise InvalidStateError(old, f"Cannot go from {old!r} to {target!r}")
        self._phase = target
        if self._on_transition is not None:
            self._on_transition(old, target)

    def _publish(self, signal_name: str, **data: object) -> None:
        if self._bus is not None:
            self._bus.publish(signal_name, **data)


def make_toss_system(controller: TossController) -> Callable[[TickContext], None]:
    """Return a system that flies or animates the controller's object each tick."""

    def toss_system(ctx: TickContext) -> None:
        controller.step(ctx)

    return toss_system


def create_controller(
    engine: Engine,
    pose: Pose,
    config: TossConfig | None = None,
    *,
    bus: SignalBus | None = None,
    on_transition: TransitionCallback | None = None,
) -> TossController:
    """Build a controller on ``engine`` and register its systems.

    Order per tick: the object moves, then due timers fire, then signals
    are delivered. A toss therefore flies for every tick of
    ``toss_duration`` before its expiry starts the reset.
    """
    scheduler = Scheduler()
    controller = TossController(
        pose,
        config,
        scheduler=scheduler,
        clock=engine.clock,
        rng=engine.rng,
        bus=bus,
        on_transition=on_transition,
    )
    engine.add_system(make_toss_system(controller))
    engine.add_system(make_timer_system(scheduler))
    if bus is not None:
        engine.add_system(make_signal_system(bus))
    return controller
