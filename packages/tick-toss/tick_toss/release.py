"""Release evaluator: toss or snap back, decided by release speed."""
from __future__ import annotations

from tick_toss import vec
from tick_toss.types import Decision, SnapBack, Toss
from tick_toss.vec import Vec2


def evaluate_release(velocity: Vec2, threshold: float) -> Decision:
    """Toss when the release speed is strictly above ``threshold``."""
    magnitude = vec.magnitude(velocity)
    if magnitude > threshold:
        return Toss(velocity=velocity, magnitude=magnitude)
    return SnapBack()
