"""Two-dimensional vector and matrix math used by the physics engine."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from numbers import Real
from typing import Union, overload

PI = 3.141592741
EPSILON = 0.0001

GRAVITY_SCALE = 5.0
DT = 1.0 / 60.0


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __add__(self, other: Union[Vec2, float]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: Vec2) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Real):
            return Vec2(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Real):
            return Vec2(scalar * self.x, scalar * self.y)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Real):
            return Vec2(self.x / scalar, self.y / scalar)
        return NotImplemented

    def length_sqr(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.length_sqr())

    def rotated(self, radians: float) -> Vec2:
        """This vector rotated counter-clockwise by ``radians``."""
        c = math.cos(radians)
        s = math.sin(radians)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; tiny vectors are returned unchanged."""
        length = self.length()
        if length > EPSILON:
            inv = 1.0 / length
            return Vec2(self.x * inv, self.y * inv)
        return self


@dataclass(frozen=True, slots=True)
class Mat2:
    """An immutable 2x2 matrix stored row by row."""

    m00: float = 1.0
    m01: float = 0.0
    m10: float = 0.0
    m11: float = 1.0

    @staticmethod
    def from_angle(radians: float) -> Mat2:
        """Rotation matrix for ``radians``."""
        c = math.cos(radians)
        s = math.sin(radians)
        return Mat2(c, -s, s, c)

    def abs(self) -> Mat2:
        """Element-wise absolute value."""
        return Mat2(abs(self.m00), abs(self.m01), abs(self.m10), abs(self.m11))

    def axis_x(self) -> Vec2:
        """First column."""
        return Vec2(self.m00, self.m10)

    def axis_y(self) -> Vec2:
        """Second column."""
        return Vec2(self.m01, self.m11)

    def transpose(self) -> Mat2:
        """Transposed matrix; the inverse of a rotation."""
        return Mat2(self.m00, self.m10, self.m01, self.m11)

    @overload
    def __matmul__(self, rhs: Vec2) -> Vec2: ...

    @overload
    def __matmul__(self, rhs: Mat2) -> Mat2: ...

    def __matmul__(self, rhs):
        if isinstance(rhs, Vec2):
            return Vec2(
                self.m00 * rhs.x + self.m01 * rhs.y,
                self.m10 * rhs.x + self.m11 * rhs.y,
            )
        if isinstance(rhs, Mat2):
            return Mat2(
                self.m00 * rhs.m00 + self.m01 * rhs.m10,
                self.m00 * rhs.m01 + self.m01 * rhs.m11,
                self.m10 * rhs.m00 + self.m11 * rhs.m10,
                self.m10 * rhs.m01 + self.m11 * rhs.m11,
            )
        return NotImplemented


GRAVITY = Vec2(0.0, 10.0 * GRAVITY_SCALE)


def vmin(a: Vec2, b: Vec2) -> Vec2:
    """Component-wise minimum."""
    return Vec2(min(a.x, b.x), min(a.y, b.y))


def vmax(a: Vec2, b: Vec2) -> Vec2:
    """Component-wise maximum."""
    return Vec2(max(a.x, b.x), max(a.y, b.y))


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y


def dist_sqr(a: Vec2, b: Vec2) -> float:
    """Squared distance between two points."""
    c = a - b
    return dot(c, c)


def cross(a, b):
    """2D cross product.

    Vector x vector gives a scalar; vector x scalar and scalar x vector
    give the perpendicular vectors used for angular terms.
    """
    if isinstance(a, Vec2) and isinstance(b, Vec2):
        return a.x * b.y - a.y * b.x
    if isinstance(a, Vec2) and isinstance(b, Real):
        return Vec2(b * a.y, -b * a.x)
    if isinstance(a, Real) and isinstance(b, Vec2):
        return Vec2(-a * b.y, a * b.x)
    raise TypeError("cross needs at least one Vec2 and otherwise a number")


def equal(a: float, b: float) -> bool:
    """True if ``a`` and ``b`` differ by at most EPSILON."""
    return abs(a - b) <= EPSILON


def sqr(a: float) -> float:
    """Square of ``a``."""
    return a * a


def clamp(low: float, high: float, a: float) -> float:
    """Clamp ``a`` into the range [low, high]."""
    if a < low:
        return low
    if a > high:
        return high
    return a


def round_half(a: float) -> int:
    """Add one half and truncate toward zero."""
    return int(a + 0.5)


def random_range(low: float, high: float, rng: random.Random | None = None) -> float:
    """Uniform random number between ``low`` and ``high``."""
    source = rng if rng is not None else random
    return (high - low) * source.random() + low


def bias_greater_than(a: float, b: float) -> bool:
    """Comparison biased toward ``a`` to keep reference faces stable."""
    k_bias_relative = 0.95
    k_bias_absolute = 0.01
    return a >= b * k_bias_relative + a * k_bias_absolute