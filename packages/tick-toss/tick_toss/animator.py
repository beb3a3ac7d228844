"""Reset animator: eases the object back to a target pose, one tick at a time."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_toss import vec
from tick_toss.easing import get_easing
from tick_toss.types import Pose, TossableObject


def wrap_angle(angle: float) -> float:
    """Wrap into (-pi, pi]."""
    wrapped = math.remainder(angle, math.tau)
    if wrapped == -math.pi:
        return math.pi
    return wrapped


@dataclass
class ResetTween:
    start: Pose
    end: Pose
    duration: int
    elapsed: int = 0
    easing: str = "ease_in_out"

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration


def start_reset(
    obj: TossableObject, target: Pose, duration: int, easing: str = "ease_in_out"
) -> ResetTween:
    """Stop ``obj`` and set up a tween from its current pose to ``target``.

    The start rotation is wrapped so a spun-up object unwinds along the
    shorter arc instead of replaying every turn. A zero duration applies
    ``target`` at once.
    """
    get_easing(easing)
    obj.halt()
    obj.rotation = target.rotation + wrap_angle(obj.rotation - target.rotation)
    tween = ResetTween(start=obj.pose(), end=target, duration=duration, easing=easing)
    if duration <= 0:
        obj.apply_pose(target)
    return tween


def advance_reset(tween: ResetTween, obj: TossableObject) -> bool:
    """Advance one tick. Returns True once ``obj`` sits exactly on the end pose."""
    if tween.done:
        obj.apply_pose(tween.end)
        return True

    tween.elapsed += 1
    if tween.done:
        obj.apply_pose(tween.end)
        return True

    t = get_easing(tween.easing)(tween.elapsed / tween.duration)
    start, end = tween.start, tween.end
    obj.position = vec.lerp(start.center, end.center, t)
    obj.size = vec.lerp(start.size, end.size, t)
    obj.rotation = start.rotation + (end.rotation - start.rotation) * t
    return False
