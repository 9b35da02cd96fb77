"""Random numbers, points and seeds drawn from a Mersenne Twister generator."""

from __future__ import annotations

import random
import secrets
from typing import Sequence

import numpy as np


def random_fl(a: float, b: float, generator: random.Random) -> float:
    """A uniform float in [a, b]; requires a < b."""
    if not a < b:
        raise ValueError(f"empty range [{a}, {b}]")
    return min(max(generator.uniform(a, b), a), b)


def random_normal(mean: float, sigma: float, generator: random.Random) -> float:
    if sigma < 0:
        raise ValueError(f"negative standard deviation {sigma}")
    return generator.gauss(mean, sigma)


def random_int(a: int, b: int, generator: random.Random) -> int:
    """A uniform integer in [a, b]; requires a <= b."""
    if a > b:
        raise ValueError(f"empty range [{a}, {b}]")
    return generator.randint(a, b)


def random_sz(a: int, b: int, generator: random.Random) -> int:
    """A uniform non-negative integer in [a, b]."""
    if a < 0 or b < 0:
        raise ValueError("sizes must not be negative")
    return random_int(a, b, generator)


def random_inside_sphere(generator: random.Random) -> np.ndarray:
    """A point drawn uniformly from the open unit ball."""
    while True:
        point = np.array([random_fl(-1.0, 1.0, generator) for _ in range(3)])
        if float(point @ point) < 1:
            return point


def random_in_box(
    corner1: Sequence[float], corner2: Sequence[float], generator: random.Random
) -> np.ndarray:
    """A point drawn uniformly from the box spanned by two corners."""
    return np.array([random_fl(lo, hi, generator) for lo, hi in zip(corner1, corner2)])


def auto_seed() -> int:
    """A seed taken from the operating system's entropy source, as a signed 32-bit int."""
    value = secrets.randbits(32)
    return value - 2**32 if value >= 2**31 else value