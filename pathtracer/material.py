"""Surface materials and the optics helpers they use."""

from __future__ import annotations

import math
from enum import Enum

from .vector import (
    EPSILON,
    PI,
    Vector3f,
    clamp,
    cross_product,
    dot_product,
    get_random_float,
)


class MaterialType(Enum):
    DIFFUSE = "diffuse"


def reflect(i: Vector3f, n: Vector3f) -> Vector3f:
    """Mirror direction of ``i`` about the normal ``n``."""
    return i - 2 * dot_product(i, n) * n


def refract(i: Vector3f, n: Vector3f, ior: float) -> Vector3f:
    """Refracted direction by Snell's law; zero on total internal reflection."""
    cosi = clamp(-1, 1, dot_product(i, n))
    etai, etat = 1.0, ior
    normal = n
    if cosi < 0:
        cosi = -cosi
    else:
        etai, etat = etat, etai
        normal = -n
    eta = etai / etat
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k < 0:
        return Vector3f()
    return eta * i + (eta * cosi - math.sqrt(k)) * normal


def fresnel(i: Vector3f, n: Vector3f, ior: float) -> float:
    """Fraction of light reflected at the surface."""
    cosi = clamp(-1, 1, dot_product(i, n))
    etai, etat = 1.0, ior
    if cosi > 0:
        etai, etat = etat, etai
    sint = etai / etat * math.sqrt(max(0.0, 1 - cosi * cosi))
    if sint >= 1:
        return 1.0
    cost = math.sqrt(max(0.0, 1 - sint * sint))
    cosi = abs(cosi)
    rs = ((etat * cosi) - (etai * cost)) / ((etat * cosi) + (etai * cost))
    rp = ((etai * cosi) - (etat * cost)) / ((etai * cosi) + (etat * cost))
    return (rs * rs + rp * rp) / 2


def to_world(a: Vector3f, n: Vector3f) -> Vector3f:
    """Transform ``a`` from the local frame whose z axis is ``n`` to world space."""
    if abs(n.x) > abs(n.y):
        inv_len = 1.0 / math.sqrt(n.x * n.x + n.z * n.z)
        c = Vector3f(n.z * inv_len, 0.0, -n.x * inv_len)
    else:
        inv_len = 1.0 / math.sqrt(n.y * n.y + n.z * n.z)
        c = Vector3f(0.0, n.z * inv_len, -n.y * inv_len)
    b = cross_product(c, n)
    return a.x * b + a.y * c + a.z * n


class Material:
    """A surface description: type, emission and reflectance."""

    def __init__(
        self,
        m_type: MaterialType = MaterialType.DIFFUSE,
        emission: Vector3f = Vector3f(),
    ):
        self.m_type = m_type
        self.emission = emission
        self.ior = 0.0
        self.kd = Vector3f()
        self.ks = Vector3f()
        self.specular_exponent = 0.0

    def __repr__(self) -> str:
        return f"Material({self.m_type!r}, {self.emission!r})"

    def has_emission(self) -> bool:
        return self.emission.norm() > EPSILON

    def color_at(self, u: float, v: float) -> Vector3f:
        return Vector3f()

    def sample(self, wi: Vector3f, n: Vector3f) -> Vector3f:
        """Random outgoing direction on the hemisphere around ``n``."""
        if self.m_type is MaterialType.DIFFUSE:
            x_1 = get_random_float()
            x_2 = get_random_float()
            z = abs(1.0 - 2.0 * x_1)
            r = math.sqrt(1.0 - z * z)
            phi = 2 * PI * x_2
            local = Vector3f(r * math.cos(phi), r * math.sin(phi), z)
            return to_world(local, n)
        raise ValueError(f"unsupported material type: {self.m_type}")

    def pdf(self, wi: Vector3f, wo: Vector3f, n: Vector3f) -> float:
        """Probability density of sampling ``wo``."""
        if self.m_type is MaterialType.DIFFUSE:
            return 0.5 / PI if dot_product(wo, n) > 0.0 else 0.0
        raise ValueError(f"unsupported material type: {self.m_type}")

    def eval(self, wi: Vector3f, wo: Vector3f, n: Vector3f) -> Vector3f:
        """BRDF value for the pair of directions."""
        if self.m_type is MaterialType.DIFFUSE:
            if dot_product(n, wo) > 0.0:
                return self.kd / PI
            return Vector3f()
        raise ValueError(f"unsupported material type: {self.m_type}")