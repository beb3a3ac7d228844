"""2D vector helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def magnitude(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec2) -> Vec2:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return (v[0] / mag, v[1] / mag)


def rotate(v: Vec2, angle: float) -> Vec2:
    """Rotate counter-clockwise by ``angle`` radians (clockwise on a y-down screen)."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (v[0] * c - v[1] * s, v[0] * s + v[1] * c)


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def isclose(a: Vec2, b: Vec2, abs_tol: float = 1e-9) -> bool:
    return math.isclose(a[0], b[0], abs_tol=abs_tol) and math.isclose(
        a[1], b[1], abs_tol=abs_tol
    )
