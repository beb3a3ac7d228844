"""Tests for Scheduler, TimerHandle and make_timer_system."""
import pytest
from tick_toss import Engine
from tick_toss.schedule import Scheduler, make_timer_system


def _engine_with(scheduler: Scheduler) -> Engine:
    engine = Engine(tps=20, seed=42)
    engine.add_system(make_timer_system(scheduler))
    return engine


class TestTimerBasics:
    """Basic one-shot behavior."""

    def test_timer_fires_at_correct_tick(self):
        """call_later(5) fires after exactly 5 ticks."""
        scheduler = Scheduler()
        engine = _engine_with(scheduler)
        fired = []
        scheduler.call_later(5, "build", lambda ctx: fired.append(ctx.tick_number))

        engine.run(4)
        assert fired == []

        engine.step()
        assert fired == [5]

    def test_timer_fires_exactly_once(self):
        scheduler = Scheduler()
        engine = _engine_with(scheduler)
        fired = []
        scheduler.call_later(3, "test", lambda ctx: fired.append(ctx.tick_number))
        engine.run(10)
        assert fired == [3]

    def test_zero_ticks_fires_next_tick(self):
        scheduler = Scheduler()
        engine = _engine_with(scheduler)
        fired = []
        scheduler.call_later(0, "now", lambda ctx: fired.append(ctx.tick_number))
        engine.step()
        assert fired == [1]

    def test_negative_ticks_rejected(self):
        with pytest.raises(ValueError):
            Scheduler().call_later(-1, "bad", lambda ctx: None)


class TestHandle:
    def test_cancel_prevents_fire(self):
        scheduler = Scheduler()
        engine = _engine_with(scheduler)
        fired = []
        handle = scheduler.call_later(3, "t", lambda ctx: fired.append(1))
        engine.run(2)
        handle.cancel()
        engine.run(5)
        assert fired == []
        assert not handle.active
        assert not handle.fired

    def test_cancel_is_idempotent(self):
        """Cancelling twice, or after firing, is a no-op."""
        scheduler = Scheduler()
        engine = _engine_with(scheduler)
        cancelled = scheduler.call_later(3, "c", lambda ctx: None)
        cancelled.cancel()
        cancelled.cancel()

        fired = scheduler.call_later(1, "f", lambda ctx: None)
        engine.step()
        assert fired.fired
        fired.cancel()
        assert fired.fired
        assert not cancelled.active
        assert not cancelled.fired


class TestCallbacksThatSchedule:
    def test_callback_cancels_later_timer_in_same_tick(self):
        """A timer cancelled by an earlier callback in the same tick does not fire."""
        scheduler = Scheduler()
        engine = _engine_with(scheduler)
        fired = []
        second = None

        def first(ctx):
            fired.append("first")
            second.cancel()

        scheduler.call_later(2, "first", first)
        second = scheduler.call_later(2, "second", lambda ctx: fired.append("second"))
        engine.run(4)
        assert fired == ["first"]

    def test_callback_schedules_new_timer(self):
        """A timer scheduled from a callback starts counting on the next tick."""
        scheduler = Scheduler()
        engine = _engine_with(scheduler)
        fired = []

        def rearm(ctx):
            fired.append(ctx.tick_number)
            if len(fired) < 3:
                scheduler.call_later(2, "again", rearm)

        scheduler.call_later(2, "start", rearm)
        engine.run(10)
        assert fired == [2, 4, 6]
