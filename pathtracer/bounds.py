"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

from .ray import Ray
from .vector import Vector3f


class Bounds3:
    """Axis-aligned box spanned by ``p_min`` and ``p_max``.

    With no points the box is empty; with one point it is degenerate.
    """

    __slots__ = ("p_min", "p_max")

    def __init__(self, p1: Optional[Vector3f] = None, p2: Optional[Vector3f] = None):
        if p1 is None:
            self.p_min = Vector3f.splat(math.inf)
            self.p_max = Vector3f.splat(-math.inf)
        elif p2 is None:
            self.p_min = p1
            self.p_max = p1
        else:
            self.p_min = Vector3f.component_min(p1, p2)
            self.p_max = Vector3f.component_max(p1, p2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds3):
            return NotImplemented
        return self.p_min == other.p_min and self.p_max == other.p_max

    def __repr__(self) -> str:
        return f"Bounds3({self.p_min!r}, {self.p_max!r})"

    def diagonal(self) -> Vector3f:
        return self.p_max - self.p_min

    def max_extent(self) -> int:
        """Index of the longest axis: 0 for x, 1 for y, 2 for z."""
        d = self.diagonal()
        if d.x > d.y and d.x > d.z:
            return 0
        if d.y > d.z:
            return 1
        return 2

    def surface_area(self) -> float:
        d = self.diagonal()
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    def centroid(self) -> Vector3f:
        return 0.5 * self.p_min + 0.5 * self.p_max

    def intersect(self, other: "Bounds3") -> "Bounds3":
        """Box shared by this box and ``other``."""
        return Bounds3(
            Vector3f.component_max(self.p_min, other.p_min),
            Vector3f.component_min(self.p_max, other.p_max),
        )

    def offset(self, p: Vector3f) -> Vector3f:
        """Position of ``p`` relative to the box, 0 at ``p_min`` and 1 at ``p_max``."""
        o = p - self.p_min
        parts = []
        for value, lo, hi in zip(o, self.p_min, self.p_max):
            parts.append(value / (hi - lo) if hi > lo else value)
        return Vector3f(*parts)

    @staticmethod
    def overlaps(b1: "Bounds3", b2: "Bounds3") -> bool:
        return all(
            hi1 >= lo2 and lo1 <= hi2
            for lo1, hi1, lo2, hi2 in zip(b1.p_min, b1.p_max, b2.p_min, b2.p_max)
        )

    @staticmethod
    def inside(p: Vector3f, b: "Bounds3") -> bool:
        return all(lo <= v <= hi for v, lo, hi in zip(p, b.p_min, b.p_max))

    def __getitem__(self, i: int) -> Vector3f:
        return self.p_min if i == 0 else self.p_max

    def intersect_p(self, ray: Ray, inv_dir: Vector3f, dir_is_neg: Sequence[int]) -> bool:
        """Slab test: does ``ray`` hit this box at some ``t >= 0``."""
        enters = []
        exits = []
        for axis in range(3):
            t_lo = (self.p_min[axis] - ray.origin[axis]) * inv_dir[axis]
            t_hi = (self.p_max[axis] - ray.origin[axis]) * inv_dir[axis]
            if dir_is_neg[axis]:
                t_lo, t_hi = t_hi, t_lo
            enters.append(t_lo)
            exits.append(t_hi)
        t_enter = max(enters[0], max(enters[1], enters[2]))
        t_exit = min(exits[0], min(exits[1], exits[2]))
        return t_enter <= t_exit and t_exit >= 0


def union(b: Bounds3, other: Union[Bounds3, Vector3f]) -> Bounds3:
    """Smallest box containing ``b`` and ``other`` (a box or a point)."""
    ret = Bounds3()
    if isinstance(other, Bounds3):
        ret.p_min = Vector3f.component_min(b.p_min, other.p_min)
        ret.p_max = Vector3f.component_max(b.p_max, other.p_max)
    else:
        ret.p_min = Vector3f.component_min(b.p_min, other)
        ret.p_max = Vector3f.component_max(b.p_max, other)
    return ret