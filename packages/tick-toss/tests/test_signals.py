"""Unit tests for SignalBus and make_signal_system."""
from __future__ import annotations

import pytest

from tick_toss import Engine
from tick_toss.signals import TOSS_SIGNALS, SignalBus, make_signal_system


def test_subscribe_and_flush():
    """Subscribe handler, publish signal, flush dispatches to handler."""
    bus = SignalBus()
    received = []
    bus.subscribe("tossed", lambda name, data: received.append((name, data)))
    bus.publish("tossed", spin=3)
    assert received == []
    bus.flush()
    assert received == [("tossed", {"spin": 3})]


def test_flush_empties_queue():
    bus = SignalBus()
    received = []
    bus.publish("toss_expired", tick=300)
    bus.flush()
    bus.subscribe("toss_expired", lambda n, d: received.append(n))
    bus.flush()
    assert received == []


def test_handlers_called_in_registration_order():
    bus = SignalBus()
    order = []
    bus.subscribe("drag_began", lambda n, d: order.append("a"))
    bus.subscribe("drag_began", lambda n, d: order.append("b"))
    bus.publish("drag_began")
    bus.flush()
    assert order == ["a", "b"]


def test_subscribe_all_sees_every_toss_signal():
    bus = SignalBus()
    received = []
    bus.subscribe_all(lambda n, d: received.append(n))
    for name in TOSS_SIGNALS:
        bus.publish(name)
    bus.flush()
    assert received == list(TOSS_SIGNALS)


class TestUnknownNames:
    def test_subscribe_rejects_unknown_name(self):
        with pytest.raises(ValueError, match="tosed"):
            SignalBus().subscribe("tosed", lambda n, d: None)

    def test_publish_rejects_unknown_name(self):
        bus = SignalBus()
        with pytest.raises(ValueError):
            bus.publish("landed")
        received = []
        bus.subscribe_all(lambda n, d: received.append(n))
        bus.flush()
        assert received == []


def test_publish_during_flush_waits_for_next_flush():
    bus = SignalBus()
    received = []

    def chain(name, data):
        received.append(name)
        if name == "toss_expired":
            bus.publish("reset_started")

    bus.subscribe("toss_expired", chain)
    bus.subscribe("reset_started", chain)
    bus.publish("toss_expired")
    bus.flush()
    assert received == ["toss_expired"]
    bus.flush()
    assert received == ["toss_expired", "reset_started"]


def test_signal_system_flushes_each_tick():
    engine = Engine(tps=20, seed=1)
    bus = SignalBus()
    received = []
    bus.subscribe("toss_expired", lambda n, d: received.append(d["tick"]))
    engine.add_system(lambda ctx: bus.publish("toss_expired", tick=ctx.tick_number))
    engine.add_system(make_signal_system(bus))
    engine.run(3)
    assert received == [1, 2, 3]
