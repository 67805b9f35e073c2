"""Point and area lights."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector3f, get_random_float


@dataclass
class Light:
    """A light with a position and an intensity."""

    position: Vector3f
    intensity: Vector3f


class AreaLight(Light):
    """A unit-square light facing down the y axis."""

    def __init__(self, position: Vector3f, intensity: Vector3f):
        super().__init__(position, intensity)
        self.normal = Vector3f(0.0, -1.0, 0.0)
        self.u = Vector3f(1.0, 0.0, 0.0)
        self.v = Vector3f(0.0, 0.0, 1.0)
        self.length = 100.0

    def sample_point(self) -> Vector3f:
        """Random point on the light's surface."""
        random_u = get_random_float()
        random_v = get_random_float()
        return self.position + random_u * self.u + random_v * self.v