"""Quaternions for rigid-body orientations, and angle helpers."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass
from itertools import repeat
from typing import Iterator, Sequence, Union

import numpy as np

from pdbqtdock.randomness import random_normal

EPSILON_FL = sys.float_info.epsilon
PI = math.pi

Number = Union[int, float]


def _eq(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON_FL


def normalized_angle(x: float) -> float:
    """Shift x by whole turns into [-pi, pi]."""
    if x > 3 * PI:
        x -= 2 * PI * math.ceil((x - PI) / (2 * PI))
    elif x < -3 * PI:
        x += 2 * PI * math.ceil((-x - PI) / (2 * PI))
    elif x > PI:
        x -= 2 * PI
    elif x < -PI:
        x += 2 * PI
    return x


def int_pow(x: float, n: int) -> float:
    """x raised to a non-negative integer power by repeated multiplication."""
    if n < 0:
        raise ValueError("the exponent must not be negative")
    return math.prod(repeat(x, n), start=1.0)


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion a + b i + c j + d k."""

    a: float
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.a, self.b, self.c, self.d))

    def norm_sqr(self) -> float:
        return self.a**2 + self.b**2 + self.c**2 + self.d**2

    def norm(self) -> float:
        return math.sqrt(self.norm_sqr())

    def normalized(self) -> "Quaternion":
        length = self.norm()
        if length <= EPSILON_FL:
            raise ValueError("cannot normalize a zero quaternion")
        return self * (1 / length)

    def normalized_approx(self, tolerance: float = 1e-6) -> "Quaternion":
        """Normalize only when the squared norm is off by at least tolerance."""
        if abs(self.norm_sqr() - 1) < tolerance:
            return self
        return self.normalized()

    def is_normalized(self) -> bool:
        return _eq(self.norm_sqr(), 1) and _eq(self.norm(), 1)

    def approx_eq(self, other: "Quaternion") -> bool:
        """Componentwise approximate equality; equivalent rotations may differ."""
        return all(_eq(x, y) for x, y in zip(self, other))

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.a, -self.b, -self.c, -self.d)

    def __mul__(self, other: Union["Quaternion", Number]) -> "Quaternion":
        if isinstance(other, Quaternion):
            a1, b1, c1, d1 = self
            a2, b2, c2, d2 = other
            return Quaternion(
                a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
                a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
                a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2,
                a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2,
            )
        if isinstance(other, (int, float)):
            return Quaternion(self.a * other, self.b * other, self.c * other, self.d * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Quaternion":
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Union["Quaternion", Number]) -> "Quaternion":
        """self * other⁻¹ for a quaternion, or componentwise for a scalar."""
        if isinstance(other, Quaternion):
            denominator = other.norm_sqr()
            if denominator == 0:
                raise ZeroDivisionError("division by a zero quaternion")
            return (self * other.conjugate()) * (1 / denominator)
        if isinstance(other, (int, float)):
            return Quaternion(self.a / other, self.b / other, self.c / other, self.d / other)
        return NotImplemented


QT_IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)


def axis_angle_to_quaternion(axis: Sequence[float], angle: float) -> Quaternion:
    """Rotation by angle about a unit axis."""
    angle = normalized_angle(angle)
    c = math.cos(angle / 2)
    s = math.sin(angle / 2)
    return Quaternion(c, s * axis[0], s * axis[1], s * axis[2])


def angle_to_quaternion(rotation: Sequence[float]) -> Quaternion:
    """Rotation given as angle * axis."""
    vector = np.asarray(rotation, dtype=float)
    angle = float(np.linalg.norm(vector))
    if angle > EPSILON_FL:
        return axis_angle_to_quaternion(vector / angle, angle)
    return QT_IDENTITY


def quaternion_to_angle(q: Quaternion) -> np.ndarray:
    """The rotation vector (angle * axis) of a unit quaternion."""
    c = q.a
    if -1 < c < 1:
        angle = 2 * math.acos(c)
        if angle > PI:
            angle -= 2 * PI
        s = math.sin(angle / 2)
        if abs(s) < EPSILON_FL:
            return np.zeros(3)
        return np.array([q.b, q.c, q.d]) * (angle / s)
    return np.zeros(3)


def quaternion_to_r3(q: Quaternion) -> np.ndarray:
    """The 3x3 rotation matrix of a unit quaternion."""
    a, b, c, d = q
    aa, ab, ac, ad = a * a, a * b, a * c, a * d
    bb, bc, bd = b * b, b * c, b * d
    cc, cd = c * c, c * d
    dd = d * d
    return np.array(
        [
            [aa + bb - cc - dd, 2 * (-ad + bc), 2 * (ac + bd)],
            [2 * (ad + bc), aa - bb + cc - dd, 2 * (-ab + cd)],
            [2 * (-ac + bd), 2 * (ab + cd), aa - bb - cc + dd],
        ]
    )


def random_orientation(generator: random.Random) -> Quaternion:
    """A uniformly distributed unit quaternion."""
    while True:
        q = Quaternion(*(random_normal(0.0, 1.0, generator) for _ in range(4)))
        length = q.norm()
        if length > EPSILON_FL:
            return q / length


def quaternion_increment(q: Quaternion, rotation: Sequence[float]) -> Quaternion:
    """Apply a rotation vector to an orientation."""
    return (angle_to_quaternion(rotation) * q).normalized_approx()


def quaternion_difference(b: Quaternion, a: Quaternion) -> np.ndarray:
    """The rotation vector that turns a into b."""
    return quaternion_to_angle(b / a)