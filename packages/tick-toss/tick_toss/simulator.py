"""Toss simulator: instantaneous push, random spin, damped free flight."""
from __future__ import annotations

import math
import random

from tick_toss import vec
from tick_toss.config import TossConfig
from tick_toss.types import Toss, TossableObject
from tick_toss.vec import Vec2


def push_velocity(obj: TossableObject, toss: Toss, config: TossConfig) -> Vec2:
    """Velocity an instantaneous push gives ``obj``.

    Heading comes from the release velocity, force from
    ``magnitude / throwing_velocity_padding``. Objects with density 1 and
    ``reference_area`` area have unit mass.
    """
    direction = vec.scale(toss.velocity, 1.0 / config.push_direction_divisor)
    heading = vec.normalize(direction)
    push_magnitude = toss.magnitude / config.throwing_velocity_padding
    mass = obj.area / config.reference_area
    speed = push_magnitude * config.push_speed_scale / mass
    return vec.scale(heading, speed)


def roll_spin(rng: random.Random, config: TossConfig) -> int:
    low, high = config.spin_range
    return rng.randint(0, high - low) + low


def apply_toss(
    obj: TossableObject, toss: Toss, config: TossConfig, rng: random.Random
) -> int:
    """Launch ``obj``. Velocity and spin are set, not accumulated. Returns the spin."""
    spin = roll_spin(rng, config)
    obj.velocity = push_velocity(obj, toss, config)
    obj.angular_velocity = float(spin)
    return spin


def integrate(obj: TossableObject, dt: float, friction: float) -> None:
    """One semi-implicit Euler step: damp velocity, then move and spin.

    Damping is exponential so speed only ever decays. Spin is not damped.
    No bounds or collisions: a tossed object is free to leave the screen.
    """
    if friction:
        obj.velocity = vec.scale(obj.velocity, math.exp(-friction * dt))
    obj.position = vec.add(obj.position, vec.scale(obj.velocity, dt))
    obj.rotation += obj.angular_velocity * dt
