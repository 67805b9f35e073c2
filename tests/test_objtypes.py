import math

import pytest

from pathtracer.objtypes import (
    Mesh,
    ObjMaterial,
    Vector2,
    Vector3,
    Vertex,
    angle_between_v3,
    cross_v3,
    dot_v3,
    first_token,
    gen_tri_normal,
    get_element,
    in_triangle,
    magnitude_v3,
    proj_v3,
    same_side,
    split,
    tail,
)


def test_vector3_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    assert a + b - b == a
    assert a * 2 == 2 * a
    assert (a * 2) / 2 == a
    assert a != b


def test_vector2_arithmetic():
    a = Vector2(1.0, 2.0)
    assert a + a == a * 2
    assert a - a == Vector2()


def test_cross_of_axes():
    x = Vector3(1, 0, 0)
    y = Vector3(0, 1, 0)
    assert cross_v3(x, y) == Vector3(0, 0, 1)
    assert cross_v3(y, x) == Vector3(0, 0, -1)


def test_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = cross_v3(a, b)
    assert dot_v3(c, a) == pytest.approx(0.0)
    assert dot_v3(c, b) == pytest.approx(0.0)


def test_magnitude_matches_dot():
    v = Vector3(3.0, -4.0, 12.0)
    assert magnitude_v3(v) ** 2 == pytest.approx(dot_v3(v, v))


def test_angle_between_axes():
    assert angle_between_v3(Vector3(1, 0, 0), Vector3(0, 1, 0)) == pytest.approx(math.pi / 2)
    assert angle_between_v3(Vector3(2, 0, 0), Vector3(5, 0, 0)) == pytest.approx(0.0)


def test_angle_with_zero_vector_is_nan():
    angle = angle_between_v3(Vector3(), Vector3(1, 0, 0))
    assert angle == pytest.approx(math.nan, nan_ok=True)


def test_projection_is_parallel_to_target():
    a = Vector3(3.0, 4.0, 5.0)
    b = Vector3(0.0, 0.0, 2.0)
    p = proj_v3(a, b)
    assert magnitude_v3(cross_v3(p, b)) == pytest.approx(0.0)
    assert p.z == pytest.approx(a.z)


def test_projection_onto_zero_is_nan():
    p = proj_v3(Vector3(1, 1, 1), Vector3())
    assert [p.x, p.y, p.z] == pytest.approx([math.nan] * 3, nan_ok=True)


def test_same_side():
    a = Vector3(0, 0, 0)
    b = Vector3(1, 0, 0)
    assert same_side(Vector3(0, 1, 0), Vector3(2, 3, 0), a, b)
    assert not same_side(Vector3(0, 1, 0), Vector3(0, -1, 0), a, b)


def test_gen_tri_normal_perpendicular():
    t1, t2, t3 = Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0)
    n = gen_tri_normal(t1, t2, t3)
    assert n == cross_v3(t2 - t1, t3 - t1)
    assert dot_v3(n, t2 - t1) == 0


def test_in_triangle():
    tri = (Vector3(0, 0, 0), Vector3(2, 0, 0), Vector3(0, 2, 0))
    assert in_triangle(Vector3(0.5, 0.5, 0), *tri)
    assert not in_triangle(Vector3(3, 3, 0), *tri)
    assert not in_triangle(Vector3(0.5, 0.5, 1), *tri)


def test_split_on_space():
    assert split("1 2 3", " ") == ["1", "2", "3"]


def test_split_face_indices():
    assert split("1/2/3", "/") == ["1", "2", "3"]
    assert split("1//3", "/") == ["1", "", "3"]


def test_split_trailing_token_dropped():
    assert split("7 ", " ") == ["7"]


def test_split_empty():
    assert split("", " ") == []


def test_tail():
    assert tail("v 1.0 2.0 3.0") == "1.0 2.0 3.0"
    assert tail("  usemtl  red  \t") == "red"
    assert tail("o") == ""
    assert tail("") == ""


def test_first_token():
    assert first_token("vn 0 1 0") == "vn"
    assert first_token("\t  mtllib box.mtl") == "mtllib"
    assert first_token("") == ""
    assert first_token("   ") == ""


def test_get_element_positive_and_negative():
    items = ["a", "b", "c"]
    assert get_element(items, "1") == "a"
    assert get_element(items, "3") == "c"
    assert get_element(items, "-1") == "c"
    assert get_element(items, "-3") == "a"


def test_get_element_errors():
    with pytest.raises(IndexError):
        get_element(["a"], "0")
    with pytest.raises(IndexError):
        get_element(["a"], "2")
    with pytest.raises(ValueError):
        get_element(["a"], "x")


def test_defaults():
    material = ObjMaterial()
    assert material.name == "" and material.illum == 0 and material.map_bump == ""
    mesh = Mesh()
    assert mesh.vertices == [] and mesh.indices == [] and mesh.material is None
    vertex = Vertex()
    assert vertex.position == Vector3() and vertex.texture_coordinate == Vector2()


def test_mesh_lists_not_shared():
    m1 = Mesh()
    m2 = Mesh()
    m1.indices.append(1)
    assert m2.indices == []