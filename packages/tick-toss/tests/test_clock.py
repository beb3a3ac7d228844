"""Tests for clock advancement and TickContext generation."""

import math
import random

import pytest
from tick_toss.clock import Clock
from tick_toss.types import TickContext

_test_rng = random.Random(0)


def test_clock_initialization():
    """Clock starts at tick 0 with dt = 1 / tps."""
    clock = Clock(tps=60)
    assert clock.tps == 60
    assert clock.tick_number == 0
    assert abs(clock.dt - (1.0 / 60)) < 1e-9


def test_non_positive_tps_rejected():
    with pytest.raises(ValueError):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_advance_returns_new_tick_number():
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_context_fields():
    """Context carries tick number, dt, elapsed seconds, and the rng."""
    clock = Clock(tps=20)
    for _ in range(10):
        clock.advance()
    ctx = clock.context(lambda: None, _test_rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 10
    assert abs(ctx.dt - 0.05) < 1e-9
    assert abs(ctx.elapsed - 0.5) < 1e-9
    assert ctx.random is _test_rng


class TestTicksFor:
    def test_whole_seconds(self):
        assert Clock(tps=60).ticks_for(5.0) == 300

    def test_reset_duration_rounds_to_nearest(self):
        """0.45 s at 60 tps is 27 ticks despite float error in 0.45 * 60."""
        assert Clock(tps=60).ticks_for(0.45) == 27

    def test_zero(self):
        assert Clock(tps=60).ticks_for(0.0) == 0

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Clock(tps=60).ticks_for(-1.0)

    @pytest.mark.parametrize("seconds", [math.nan, math.inf])
    def test_non_finite_rejected(self, seconds):
        with pytest.raises(ValueError):
            Clock(tps=60).ticks_for(seconds)

