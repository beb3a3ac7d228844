"""Toss configuration dataclass."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Mapping

from tick_toss.easing import get_easing

_NUMBER_FIELDS = (
    "throwing_threshold",
    "throwing_velocity_padding",
    "push_direction_divisor",
    "push_speed_scale",
    "reference_area",
    "friction",
    "toss_duration",
    "reset_duration",
)


@dataclass(frozen=True)
class TossConfig:
    """Immutable tuning for the drag-and-toss controller.

    The push constants were tuned by eye, not derived, and are kept as
    plain values.

    Attributes:
        throwing_threshold: Release speed (units/s) the pointer must exceed
            for a toss. A release at exactly this speed snaps back.
        throwing_velocity_padding: Divisor turning release speed into push
            magnitude. Larger values give slower tosses.
        push_direction_divisor: Divisor applied to the release velocity to
            form the push direction vector.
        push_speed_scale: Speed (units/s) one push unit gives an object of
            ``reference_area``.
        reference_area: Area with unit mass. Bigger objects fly slower.
        friction: Linear damping rate (1/s) while tossed.
        spin_range: Inclusive (low, high) bounds of the random spin, rad/s.
        toss_duration: Seconds a toss lasts before the object is reset.
        reset_duration: Seconds the reset animation takes.
        reset_easing: Name of the easing curve used by the reset animation.
    """

    throwing_threshold: float = 1000.0
    throwing_velocity_padding: float = 35.0
    push_direction_divisor: float = 10.0
    push_speed_scale: float = 100.0
    reference_area: float = 100.0 * 100.0
    friction: float = 0.2
    spin_range: tuple[int, int] = (-10, 9)
    toss_duration: float = 5.0
    reset_duration: float = 0.45
    reset_easing: str = "ease_in_out"

    def __post_init__(self) -> None:
        for name in _NUMBER_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        if self.throwing_threshold < 0:
            raise ValueError("throwing_threshold must be non-negative")
        for name in (
            "throwing_velocity_padding",
            "push_direction_divisor",
            "reference_area",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if self.push_speed_scale < 0:
            raise ValueError("push_speed_scale must be non-negative")
        if self.friction < 0:
            raise ValueError("friction must be non-negative")
        if len(self.spin_range) != 2 or not all(
            isinstance(bound, int) and not isinstance(bound, bool)
            for bound in self.spin_range
        ):
            raise ValueError(f"spin_range must be two ints, got {self.spin_range!r}")
        low, high = self.spin_range
        if low > high:
            raise ValueError(f"spin_range is empty: {self.spin_range!r}")
        if self.toss_duration < 0 or self.reset_duration < 0:
            raise ValueError("durations must be non-negative")
        get_easing(self.reset_easing)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TossConfig:
        """Build a config from a plain mapping such as parsed JSON."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown TossConfig keys: {unknown}")
        values = dict(data)
        if "spin_range" in values:
            values["spin_range"] = tuple(values["spin_range"])
        return cls(**values)
