"""Shared data model and error types for the toss controller."""
from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Callable, Union

from tick_toss import vec
from tick_toss.vec import Vec2

IDLE = "idle"
DRAGGING = "dragging"
TOSSING = "tossing"
RESETTING = "resetting"

PHASES = (IDLE, DRAGGING, TOSSING, RESETTING)


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


@dataclass(frozen=True)
class Pose:
    """Where the object sits: center point, (width, height) and rotation in radians."""

    center: Vec2
    size: Vec2
    rotation: float = 0.0

    def __post_init__(self) -> None:
        if self.size[0] <= 0 or self.size[1] <= 0:
            raise ValueError(f"size must be positive, got {self.size!r}")

    def isclose(self, other: Pose, abs_tol: float = 1e-9) -> bool:
        return (
            vec.isclose(self.center, other.center, abs_tol)
            and vec.isclose(self.size, other.size, abs_tol)
            and math.isclose(self.rotation, other.rotation, abs_tol=abs_tol)
        )


@dataclass
class TossableObject:
    """The single object the controller moves around.

    ``position`` is the center. ``velocity`` and ``angular_velocity`` only
    mean something while the object is being tossed.
    """

    position: Vec2
    size: Vec2
    rotation: float = 0.0
    velocity: Vec2 = vec.ZERO
    angular_velocity: float = 0.0

    @classmethod
    def from_pose(cls, pose: Pose) -> TossableObject:
        return cls(position=pose.center, size=pose.size, rotation=pose.rotation)

    def pose(self) -> Pose:
        return Pose(center=self.position, size=self.size, rotation=self.rotation)

    def apply_pose(self, pose: Pose) -> None:
        self.position = pose.center
        self.size = pose.size
        self.rotation = pose.rotation

    def halt(self) -> None:
        self.velocity = vec.ZERO
        self.angular_velocity = 0.0

    @property
    def area(self) -> float:
        return self.size[0] * self.size[1]

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Unrotated (x, y, width, height) frame around the center."""
        w, h = self.size
        return (self.position[0] - w / 2, self.position[1] - h / 2, w, h)

    def to_local(self, point: Vec2) -> Vec2:
        """Map a screen point into object space (origin at the top-left corner)."""
        w, h = self.size
        rel = vec.rotate(vec.sub(point, self.position), -self.rotation)
        return (rel[0] + w / 2, rel[1] + h / 2)

    def to_world(self, local: Vec2) -> Vec2:
        w, h = self.size
        rel = vec.rotate((local[0] - w / 2, local[1] - h / 2), self.rotation)
        return vec.add(self.position, rel)

    def contains(self, point: Vec2) -> bool:
        x, y = self.to_local(point)
        w, h = self.size
        return 0.0 <= x <= w and 0.0 <= y <= h


@dataclass
class DragSession:
    """Active gesture: where on the object it was grabbed and where the pointer is now."""

    anchor_offset: Vec2
    anchor_point: Vec2


@dataclass(frozen=True)
class Toss:
    """Release was fast enough to throw the object."""

    velocity: Vec2
    magnitude: float

    @property
    def direction(self) -> Vec2:
        return vec.normalize(self.velocity)


@dataclass(frozen=True)
class SnapBack:
    """Release was too slow; the object goes home."""


Decision = Union[Toss, SnapBack]


class InvalidStateError(RuntimeError):
    """Raised when a drag event or transition does not fit the current phase."""

    def __init__(self, phase: str, message: str) -> None:
        self.phase = phase
        super().__init__(message)
