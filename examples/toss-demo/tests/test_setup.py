"""Tests for the demo's pygame-free state: pointer tracking and the R reset."""
from __future__ import annotations

import pytest

from tick_toss import IDLE, RESETTING, TOSSING, Toss, vec

from game.setup import DemoState
from ui.constants import CARD_CENTER


def _grab_and_move(state: DemoState) -> None:
    state.press(0.0, CARD_CENTER)
    state.move(0.05, vec.add(CARD_CENTER, (100.0, 0.0)))


class TestPointer:
    def test_press_outside_card_is_ignored(self):
        state = DemoState()
        state.press(0.0, (0.0, 0.0))
        assert not state.dragging
        assert state.controller.phase == IDLE

    def test_fast_release_tosses(self):
        state = DemoState()
        _grab_and_move(state)
        state.release(0.06, vec.add(CARD_CENTER, (120.0, 0.0)))
        assert state.controller.phase == TOSSING
        assert state.tracker.velocity()[0] == pytest.approx(2000.0)

    def test_release_velocity_feeds_controller(self):
        state = DemoState()
        decisions = []
        state.bus.subscribe("drag_ended", lambda n, d: decisions.append(d["decision"]))
        _grab_and_move(state)
        state.release(0.06, vec.add(CARD_CENTER, (120.0, 0.0)))
        state.engine.step()
        assert isinstance(decisions[0], Toss)


class TestResetCard:
    def test_reset_mid_drag_clears_tracker(self):
        """R while dragging drops the drag and the pointer samples."""
        state = DemoState()
        _grab_and_move(state)
        assert state.tracker.velocity() != vec.ZERO

        state.reset_card()
        assert not state.dragging
        assert state.tracker.velocity() == vec.ZERO
        assert state.controller.phase == RESETTING

    def test_release_after_reset_is_ignored(self):
        state = DemoState()
        _grab_and_move(state)
        state.reset_card()
        state.release(0.06, vec.add(CARD_CENTER, (300.0, 0.0)))
        assert state.controller.phase == RESETTING
        state.engine.run_for(0.45)
        assert state.controller.phase == IDLE
