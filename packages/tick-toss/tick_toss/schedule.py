"""One-shot timers counted in ticks, with cancellable handles."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from tick_toss.types import TickContext

TimerCallback = Callable[[TickContext], None]


@dataclass
class Timer:
    """One-shot countdown. Fires when remaining reaches 0, then is dropped."""

    name: str
    remaining: int
    callback: TimerCallback
    cancelled: bool = False
    fired: bool = False


class TimerHandle:
    """Caller-side reference to a scheduled Timer.

    Cancelling is idempotent: cancelling a fired or already cancelled timer
    does nothing.
    """

    __slots__ = ("_scheduler", "_timer")

    def __init__(self, scheduler: Scheduler, timer: Timer) -> None:
        self._scheduler = scheduler
        self._timer = timer

    @property
    def active(self) -> bool:
        return not (self._timer.cancelled or self._timer.fired)

    @property
    def fired(self) -> bool:
        return self._timer.fired

    def cancel(self) -> None:
        self._scheduler._cancel(self._timer)


class Scheduler:
    """Holds pending timers. A timer system advances them once per tick."""

    def __init__(self) -> None:
        self._timers: list[Timer] = []

    def call_later(self, ticks: int, name: str, callback: TimerCallback) -> TimerHandle:
        """Fire ``callback`` after ``ticks`` ticks. 0 fires on the next tick."""
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")
        timer = Timer(name=name, remaining=ticks, callback=callback)
        self._timers.append(timer)
        return TimerHandle(self, timer)

    def _cancel(self, timer: Timer) -> None:
        if timer.cancelled or timer.fired:
            return
        timer.cancelled = True
        self._timers.remove(timer)

    def _advance(self, ctx: TickContext) -> None:
        for timer in list(self._timers):
            # An earlier callback this tick may have cancelled it.
            if timer.cancelled:
                continue
            timer.remaining -= 1
            if timer.remaining <= 0:
                timer.fired = True
                self._timers.remove(timer)
                timer.callback(ctx)


def make_timer_system(scheduler: Scheduler) -> Callable[[TickContext], None]:
    """Return a system that counts timers down and fires callbacks at zero."""

    def timer_system(ctx: TickContext) -> None:
        scheduler._advance(ctx)

    return timer_system
