"""Vector types and the numeric helpers shared by the renderer."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO, Tuple

EPSILON = 0.00001
K_INFINITY = 3.4028234663852886e38  # largest single-precision float
PI = math.pi

_rng = random.Random()


@dataclass(frozen=True)
class Vector3f:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> "Vector3f":
        """Return a vector with every component set to ``value``."""
        return cls(value, value, value)

    def __add__(self, other: "Vector3f") -> "Vector3f":
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3f") -> "Vector3f":
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3f":
        return Vector3f(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Vector3f):
            return Vector3f(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3f(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3f(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, r):
        if isinstance(r, (int, float)):
            return Vector3f(self.x / r, self.y / r, self.z / r)
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}, {self.z:g}"

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vector3f":
        """Unit vector in the same direction; a zero vector cannot be normalized."""
        n = self.norm()
        return Vector3f(self.x / n, self.y / n, self.z / n)

    @staticmethod
    def component_min(p1: "Vector3f", p2: "Vector3f") -> "Vector3f":
        """Component-wise minimum."""
        return Vector3f(min(p1.x, p2.x), min(p1.y, p2.y), min(p1.z, p2.z))

    @staticmethod
    def component_max(p1: "Vector3f", p2: "Vector3f") -> "Vector3f":
        """Component-wise maximum."""
        return Vector3f(max(p1.x, p2.x), max(p1.y, p2.y), max(p1.z, p2.z))


@dataclass(frozen=True)
class Vector2f:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __mul__(self, r):
        if isinstance(r, (int, float)):
            return Vector2f(self.x * r, self.y * r)
        return NotImplemented

    def __add__(self, other: "Vector2f") -> "Vector2f":
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)


def lerp(a: Vector3f, b: Vector3f, t: float) -> Vector3f:
    """Linear interpolation between ``a`` and ``b``."""
    return a * (1 - t) + b * t


def normalize(v: Vector3f) -> Vector3f:
    """Return ``v`` scaled to unit length, or ``v`` itself if it is zero."""
    mag2 = v.x * v.x + v.y * v.y + v.z * v.z
    if mag2 > 0:
        inv_mag = 1 / math.sqrt(mag2)
        return Vector3f(v.x * inv_mag, v.y * inv_mag, v.z * inv_mag)
    return v


def dot_product(a: Vector3f, b: Vector3f) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross_product(a: Vector3f, b: Vector3f) -> Vector3f:
    return Vector3f(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def clamp(lo: float, hi: float, v: float) -> float:
    """Clamp ``v`` into ``[lo, hi]``."""
    return max(lo, min(hi, v))


def solve_quadratic(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Real roots of ``a*x^2 + b*x + c`` in ascending order, or None."""
    discr = b * b - 4 * a * c
    if discr < 0:
        return None
    if discr == 0:
        x0 = x1 = -0.5 * b / a
    else:
        root = math.sqrt(discr)
        q = -0.5 * (b + root) if b > 0 else -0.5 * (b - root)
        x0 = q / a
        x1 = c / q
    if x0 > x1:
        x0, x1 = x1, x0
    return x0, x1


def get_random_float() -> float:
    """Uniform random number in ``[0, 1)``."""
    return _rng.random()


def update_progress(progress: float, stream: Optional[TextIO] = None) -> None:
    """Draw a 70-column progress bar on ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    bar_width = 70
    pos = int(bar_width * progress)
    cells = "".join(
        "=" if i < pos else ">" if i == pos else " " for i in range(bar_width)
    )
    out.write(f"[{cells}] {int(progress * 100.0)} %\r")
    out.flush()