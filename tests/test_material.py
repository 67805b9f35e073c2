import math

import pytest

from pathtracer.material import (
    Material,
    MaterialType,
    fresnel,
    reflect,
    refract,
    to_world,
)
from pathtracer.vector import Vector3f, dot_product, normalize

UP = Vector3f(0.0, 0.0, 1.0)


def test_reflect_twice_is_identity():
    i = normalize(Vector3f(1.0, -2.0, -3.0))
    r = reflect(i, UP)
    assert list(reflect(r, UP)) == pytest.approx(list(i))
    assert math.isclose(r.norm(), i.norm())
    assert math.isclose(dot_product(r, UP), -dot_product(i, UP))


def test_refract_with_unit_index_is_straight():
    i = normalize(Vector3f(0.3, 0.2, -1.0))
    result = refract(i, UP, 1.0)
    assert list(result) == pytest.approx(list(i), abs=1e-9)


def test_refract_total_internal_reflection_is_zero():
    i = normalize(Vector3f(1.0, 0.0, 0.1))
    assert refract(i, UP, 1.5) == Vector3f()


def test_fresnel_matched_media_reflects_nothing():
    assert math.isclose(fresnel(Vector3f(0.0, 0.0, -1.0), UP, 1.0), 0.0, abs_tol=1e-12)


def test_fresnel_total_internal_reflection():
    i = normalize(Vector3f(1.0, 0.0, 0.1))
    assert fresnel(i, UP, 1.5) == 1.0


def test_fresnel_is_a_fraction():
    kr = fresnel(normalize(Vector3f(0.5, 0.0, -1.0)), UP, 1.5)
    assert 0.0 < kr < 1.0


@pytest.mark.parametrize(
    "n", [UP, normalize(Vector3f(1.0, 0.2, 0.3)), normalize(Vector3f(-0.1, 0.9, -0.4))]
)
def test_to_world_maps_z_axis_to_normal(n):
    result = to_world(Vector3f(0.0, 0.0, 1.0), n)
    assert list(result) == pytest.approx(list(n), abs=1e-9)


def test_emission_detection():
    assert not Material().has_emission()
    assert Material(MaterialType.DIFFUSE, Vector3f.splat(1.0)).has_emission()


def test_color_at_is_black():
    assert Material().color_at(0.5, 0.5) == Vector3f()


@pytest.mark.parametrize("n", [UP, normalize(Vector3f(1.0, 1.0, 0.0)), normalize(Vector3f(0.2, -1.0, 0.5))])
def test_sample_lies_on_hemisphere(n):
    m = Material()
    for _ in range(100):
        wo = m.sample(Vector3f(), n)
        assert math.isclose(wo.norm(), 1.0, rel_tol=1e-9)
        assert dot_product(wo, n) >= -1e-9


def test_pdf_uniform_hemisphere():
    m = Material()
    assert math.isclose(m.pdf(Vector3f(), UP, UP), 1.0 / (2.0 * math.pi))
    assert m.pdf(Vector3f(), -UP, UP) == 0.0


def test_eval_is_lambertian():
    m = Material()
    m.kd = Vector3f(0.63, 0.065, 0.05)
    assert list(m.eval(Vector3f(), UP, UP) * math.pi) == pytest.approx([0.63, 0.065, 0.05])
    assert m.eval(Vector3f(), -UP, UP) == Vector3f()