"""Data types and text helpers used when reading Wavefront OBJ files."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

_LEADING_WORD = re.compile(r"[ \t]*([^ \t]+)", re.DOTALL)
_TAIL = re.compile(r"[ \t]*[^ \t]+[ \t]+([^ \t].*?)[ \t]*\Z", re.DOTALL)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Vector2:
    """A 2D vector holding texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented


@dataclass(frozen=True)
class Vector3:
    """A 3D vector holding positions and normals."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented


@dataclass
class Vertex:
    """A model vertex: position, normal and texture coordinate."""

    position: Vector3 = Vector3()
    normal: Vector3 = Vector3()
    texture_coordinate: Vector2 = Vector2()


@dataclass
class ObjMaterial:
    """A material as described in an MTL file."""

    name: str = ""
    ka: Vector3 = Vector3()
    kd: Vector3 = Vector3()
    ks: Vector3 = Vector3()
    ns: float = 0.0
    ni: float = 0.0
    d: float = 0.0
    illum: int = 0
    map_ka: str = ""
    map_kd: str = ""
    map_ks: str = ""
    map_ns: str = ""
    map_d: str = ""
    map_bump: str = ""


@dataclass
class Mesh:
    """A named list of vertices with triangle indices into it."""

    name: str = ""
    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    material: Optional[ObjMaterial] = None


def cross_v3(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def magnitude_v3(v: Vector3) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def dot_v3(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def angle_between_v3(a: Vector3, b: Vector3) -> float:
    """Angle in radians between ``a`` and ``b``; NaN if it is undefined."""
    denom = magnitude_v3(a) * magnitude_v3(b)
    if denom == 0:
        return math.nan
    cosine = dot_v3(a, b) / denom
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine)


def proj_v3(a: Vector3, b: Vector3) -> Vector3:
    """Projection of ``a`` onto ``b``; all NaN when ``b`` is zero."""
    mag = magnitude_v3(b)
    if mag == 0:
        return Vector3(math.nan, math.nan, math.nan)
    bn = b / mag
    return bn * dot_v3(a, bn)


def same_side(p1: Vector3, p2: Vector3, a: Vector3, b: Vector3) -> bool:
    """True if ``p1`` and ``p2`` lie on the same side of the line ``ab``."""
    cp1 = cross_v3(b - a, p1 - a)
    cp2 = cross_v3(b - a, p2 - a)
    return dot_v3(cp1, cp2) >= 0


def gen_tri_normal(t1: Vector3, t2: Vector3, t3: Vector3) -> Vector3:
    """Unnormalised normal of the triangle ``t1 t2 t3``."""
    return cross_v3(t2 - t1, t3 - t1)


def in_triangle(point: Vector3, tri1: Vector3, tri2: Vector3, tri3: Vector3) -> bool:
    """True if ``point`` lies within the triangle's prism and on its plane through the origin."""
    within_prism = (
        same_side(point, tri1, tri2, tri3)
        and same_side(point, tri2, tri1, tri3)
        and same_side(point, tri3, tri1, tri2)
    )
    if not within_prism:
        return False
    n = gen_tri_normal(tri1, tri2, tri3)
    proj = proj_v3(point, n)
    return magnitude_v3(proj) == 0


def split(text: str, token: str) -> List[str]:
    """Split ``text`` at ``token``.

    A separator directly after another one (or at the start) yields an empty
    field; a trailing separator yields nothing.
    """
    out: List[str] = []
    temp = ""
    size = len(text)
    step = len(token)
    i = 0
    while i < size:
        if text[i:i + step] == token:
            if temp:
                out.append(temp)
                temp = ""
                i += step - 1
            else:
                out.append("")
        elif i + step >= size:
            temp += text[i:i + step]
            out.append(temp)
            break
        else:
            temp += text[i]
        i += 1
    return out


def tail(text: str) -> str:
    """Everything after the first word, with surrounding blanks removed."""
    match = _TAIL.match(text)
    return match.group(1) if match else ""


def first_token(text: str) -> str:
    """The first blank-separated word of ``text``, or an empty string."""
    match = _LEADING_WORD.match(text)
    return match.group(1) if match else ""


def get_element(elements: Sequence[T], index: str) -> T:
    """Element named by an OBJ index: 1-based, or negative counting from the end."""
    match = _LEADING_INT.match(index)
    if match is None:
        raise ValueError(f"invalid index: {index!r}")
    idx = int(match.group(1))
    idx = len(elements) + idx if idx < 0 else idx - 1
    if not 0 <= idx < len(elements):
        raise IndexError(f"index {index!r} out of range for {len(elements)} elements")
    return elements[idx]