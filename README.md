# pathtracer

Plain-Python building blocks for a physically based path tracer, with no
third-party dependencies:

- `pathtracer.vector`: the immutable `Vector3f` and `Vector2f` types and the
  helpers `lerp`, `normalize`, `dot_product`, `cross_product`, `clamp`,
  `solve_quadratic` (ascending real roots, or `None`), `get_random_float`
  and `update_progress` (a 70-column text progress bar);
- `pathtracer.ray`: `Ray`, a half-line with a cached inverse direction;
  calling `ray(t)` gives the point at distance `t`;
- `pathtracer.bounds`: `Bounds3` axis-aligned boxes (centroid, longest axis,
  surface area, overlap and containment tests, the slab test `intersect_p`)
  and `union` of a box with another box or a point;
- `pathtracer.intersection`: the `Intersection` record of a ray hit;
- `pathtracer.material`: `Material` with `MaterialType.DIFFUSE`, which samples
  directions uniformly on the hemisphere and gives their `pdf` and BRDF
  (`eval`), plus the optics helpers `reflect`, `refract`, `fresnel` and
  `to_world`;
- `pathtracer.light`: `Light` and `AreaLight`, whose `sample_point` picks a
  random point on the light;
- `pathtracer.objtypes` and `pathtracer.objloader`: a Wavefront OBJ / MTL
  reader. `Loader.load_file` reads vertices, texture coordinates, normals,
  faces, groups and material libraries into meshes; polygon faces are split
  into triangles by `triangulate`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Rays and boxes:

```python
from pathtracer.bounds import Bounds3
from pathtracer.ray import Ray
from pathtracer.vector import Vector3f, normalize

box = Bounds3(Vector3f(-1.0, -1.0, 4.0), Vector3f(1.0, 1.0, 6.0))
ray = Ray(Vector3f(0.0, 0.0, 0.0), normalize(Vector3f(0.0, 0.0, 1.0)))
dir_is_neg = [int(c < 0) for c in ray.direction]
hit = box.intersect_p(ray, ray.direction_inv, dir_is_neg)   # True
```

Materials:

```python
from pathtracer.material import Material, MaterialType
from pathtracer.vector import Vector3f

white = Material(MaterialType.DIFFUSE, Vector3f(0.0, 0.0, 0.0))
white.kd = Vector3f(0.725, 0.71, 0.68)
n = Vector3f(0.0, 1.0, 0.0)
wo = white.sample(Vector3f(0.0, -1.0, 0.0), n)   # direction with wo.y >= 0
brdf = white.eval(Vector3f(0.0, -1.0, 0.0), wo, n)
```

Loading a model:

```python
from pathtracer.objloader import Loader

loader = Loader()
if loader.load_file("models/box.obj"):
    for mesh in loader.loaded_meshes:
        print(mesh.name, len(mesh.vertices), len(mesh.indices) // 3)
```

`load_file` raises `ValueError` for a path that does not end in `.obj` and
`OSError` when the file cannot be read; a material library named by
`mtllib` that is missing is skipped. `load_materials` reads an `.mtl` file
directly and returns the materials it found.

## What this package does not do

The package stops at these building blocks. It has no scene container, no
sphere or triangle shapes, no bounding volume hierarchy, no path-tracing
integrator, no image output and no command-line program: nothing here
renders an image. Those parts have to be supplied by the code that uses it.