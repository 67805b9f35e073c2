"""Rays with a cached inverse direction."""

from __future__ import annotations

import math
import sys

from .vector import Vector3f


def _inverse(d: float) -> float:
    if d == 0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class Ray:
    """A half-line ``origin + t * direction``."""

    __slots__ = ("origin", "direction", "direction_inv", "t", "t_min", "t_max")

    def __init__(self, origin: Vector3f, direction: Vector3f, t: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.t = t
        self.direction_inv = Vector3f(
            _inverse(direction.x), _inverse(direction.y), _inverse(direction.z)
        )
        self.t_min = 0.0
        self.t_max = sys.float_info.max

    def __call__(self, t: float) -> Vector3f:
        """Point reached after travelling ``t`` along the ray."""
        return self.origin + self.direction * t

    def __str__(self) -> str:
        return f"[origin:={self.origin}, direction={self.direction}, time={self.t:g}]\n"

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, {self.t!r})"