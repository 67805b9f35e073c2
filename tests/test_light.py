from pathtracer.light import AreaLight, Light
from pathtracer.vector import Vector3f

POSITION = Vector3f(2.0, 5.0, -1.0)
INTENSITY = Vector3f.splat(3.0)


def test_light_keeps_fields():
    light = Light(POSITION, INTENSITY)
    assert light.position == POSITION
    assert light.intensity == INTENSITY


def test_area_light_frame():
    light = AreaLight(POSITION, INTENSITY)
    assert light.normal == Vector3f(0.0, -1.0, 0.0)
    assert light.u == Vector3f(1.0, 0.0, 0.0)
    assert light.v == Vector3f(0.0, 0.0, 1.0)
    assert light.length == 100
    assert light.position == POSITION


def test_sample_point_on_unit_patch():
    light = AreaLight(POSITION, INTENSITY)
    for _ in range(200):
        p = light.sample_point()
        assert p.y == POSITION.y
        assert POSITION.x <= p.x <= POSITION.x + 1.0
        assert POSITION.z <= p.z <= POSITION.z + 1.0