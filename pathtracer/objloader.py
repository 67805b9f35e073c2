"""Reader for Wavefront OBJ models and their MTL material libraries."""

from __future__ import annotations

import os
import re
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .objtypes import (
    Mesh,
    ObjMaterial,
    Vector2,
    Vector3,
    Vertex,
    angle_between_v3,
    cross_v3,
    first_token,
    get_element,
    in_triangle,
    split,
    tail,
)

PathLike = Union[str, "os.PathLike[str]"]

_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT = re.compile(r"\s*([+-]?\d+)")

_COLOR_FIELDS: Dict[str, str] = {"Ka": "ka", "Kd": "kd", "Ks": "ks"}
_SCALAR_FIELDS: Dict[str, str] = {"Ns": "ns", "Ni": "ni", "d": "d"}
_MAP_FIELDS: Dict[str, str] = {
    "map_Ka": "map_ka",
    "map_Kd": "map_kd",
    "map_Ks": "map_ks",
    "map_Ns": "map_ns",
    "map_d": "map_d",
    "map_Bump": "map_bump",
    "map_bump": "map_bump",
    "bump": "map_bump",
}


def _stof(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def _stoi(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _read_lines(path: str) -> List[str]:
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def _vector3(fields: Sequence[str]) -> Vector3:
    return Vector3(_stof(fields[0]), _stof(fields[1]), _stof(fields[2]))


def _parse_materials(lines: Iterable[str]) -> List[ObjMaterial]:
    materials: List[ObjMaterial] = []
    current = ObjMaterial()
    listening = False
    for line in lines:
        token = first_token(line)
        if token == "newmtl":
            if listening:
                materials.append(current)
                current = ObjMaterial()
            listening = True
            current.name = tail(line) if len(line) > 7 else "none"
        elif token in _COLOR_FIELDS:
            values = split(tail(line), " ")
            if len(values) == 3:
                setattr(current, _COLOR_FIELDS[token], _vector3(values))
        elif token in _SCALAR_FIELDS:
            setattr(current, _SCALAR_FIELDS[token], _stof(tail(line)))
        elif token == "illum":
            current.illum = _stoi(tail(line))
        elif token in _MAP_FIELDS:
            setattr(current, _MAP_FIELDS[token], tail(line))
    materials.append(current)
    return materials


def _face_vertices(
    positions: Sequence[Vector3],
    tcoords: Sequence[Vector2],
    normals: Sequence[Vector3],
    line: str,
) -> List[Vertex]:
    """Vertices named by an ``f`` line; missing normals become the face normal."""
    verts: List[Vertex] = []
    no_normal = False
    for spec in split(tail(line), " "):
        parts = split(spec, "/")
        if len(parts) == 1:
            verts.append(Vertex(position=get_element(positions, parts[0])))
            no_normal = True
        elif len(parts) == 2:
            verts.append(
                Vertex(
                    position=get_element(positions, parts[0]),
                    texture_coordinate=get_element(tcoords, parts[1]),
                )
            )
            no_normal = True
        elif len(parts) == 3:
            texture = get_element(tcoords, parts[1]) if parts[1] else Vector2()
            verts.append(
                Vertex(
                    position=get_element(positions, parts[0]),
                    normal=get_element(normals, parts[2]),
                    texture_coordinate=texture,
                )
            )

    if no_normal:
        if len(verts) < 3:
            raise ValueError(f"face needs at least 3 vertices: {line!r}")
        a = verts[0].position - verts[1].position
        b = verts[2].position - verts[1].position
        normal = cross_v3(a, b)
        for vert in verts:
            vert.normal = normal
    return verts


def triangulate(vertices: Sequence[Vertex]) -> List[int]:
    """Split a polygon into triangles by ear clipping.

    Returns indices into ``vertices``, three per triangle.
    """
    if len(vertices) < 3:
        return []
    if len(vertices) == 3:
        return [0, 1, 2]

    def indices_of(*targets: Vector3) -> List[int]:
        return [
            j
            for j, vert in enumerate(vertices)
            for target in targets
            if vert.position == target
        ]

    out: List[int] = []
    remaining = list(vertices)
    i = 0
    while i < len(remaining):
        prev = remaining[i - 1].position
        cur = remaining[i].position
        nxt = remaining[(i + 1) % len(remaining)].position

        if len(remaining) == 4:
            out.extend(indices_of(cur, prev, nxt))
            fourth = next(
                (
                    vert.position
                    for vert in remaining
                    if vert.position not in (cur, prev, nxt)
                ),
                Vector3(),
            )
            out.extend(indices_of(prev, nxt, fourth))
            break

        angle_between_v3(prev - cur, nxt - cur)
        blocked = any(
            in_triangle(vert.position, prev, cur, nxt)
            and vert.position not in (prev, cur, nxt)
            for vert in vertices
        )
        if blocked:
            i += 1
            continue

        out.extend(indices_of(cur, prev, nxt))
        for j, vert in enumerate(remaining):
            if vert.position == cur:
                del remaining[j]
                break
        i = 0
    return out


class Loader:
    """Loads meshes, vertices, indices and materials from OBJ files."""

    def __init__(self) -> None:
        self.loaded_meshes: List[Mesh] = []
        self.loaded_vertices: List[Vertex] = []
        self.loaded_indices: List[int] = []
        self.loaded_materials: List[ObjMaterial] = []

    def load_file(self, path: PathLike) -> bool:
        """Read an ``.obj`` file; True if it held any geometry.

        Raises ValueError for a path without the ``.obj`` suffix and OSError
        if the file cannot be read. A missing material library is ignored.
        """
        path = os.fspath(path)
        if not path.endswith(".obj"):
            raise ValueError(f"not an .obj file: {path!r}")
        lines = _read_lines(path)

        self.loaded_meshes.clear()
        self.loaded_vertices.clear()
        self.loaded_indices.clear()

        positions: List[Vector3] = []
        tcoords: List[Vector2] = []
        normals: List[Vector3] = []
        vertices: List[Vertex] = []
        indices: List[int] = []
        mesh_mat_names: List[str] = []
        listening = False
        meshname = ""

        for line in lines:
            token = first_token(line)
            if token in ("o", "g") or line.startswith("g"):
                named = token in ("o", "g")
                if listening and indices and vertices:
                    self.loaded_meshes.append(
                        Mesh(name=meshname, vertices=vertices, indices=indices)
                    )
                    vertices, indices = [], []
                    meshname = tail(line)
                else:
                    listening = True
                    meshname = tail(line) if named else "unnamed"
            elif token == "v":
                positions.append(_vector3(split(tail(line), " ")))
            elif token == "vt":
                fields = split(tail(line), " ")
                tcoords.append(Vector2(_stof(fields[0]), _stof(fields[1])))
            elif token == "vn":
                normals.append(_vector3(split(tail(line), " ")))
            elif token == "f":
                face = _face_vertices(positions, tcoords, normals, line)
                vertices.extend(face)
                self.loaded_vertices.extend(face)
                for idx in triangulate(face):
                    indices.append(len(vertices) - len(face) + idx)
                    self.loaded_indices.append(
                        len(self.loaded_vertices) - len(face) + idx
                    )
            elif token == "usemtl":
                mesh_mat_names.append(tail(line))
                if indices and vertices:
                    self.loaded_meshes.append(
                        Mesh(name=f"{meshname}_2", vertices=vertices, indices=indices)
                    )
                    vertices, indices = [], []
            elif token == "mtllib":
                parts = split(path, "/")
                prefix = "".join(f"{part}/" for part in parts[:-1]) if len(parts) != 1 else ""
                self._load_materials_if_present(prefix + tail(line))

        if indices and vertices:
            self.loaded_meshes.append(
                Mesh(name=meshname, vertices=vertices, indices=indices)
            )

        for mesh, matname in zip(self.loaded_meshes, mesh_mat_names):
            found: Optional[ObjMaterial] = next(
                (mat for mat in self.loaded_materials if mat.name == matname), None
            )
            if found is not None:
                mesh.material = found

        return bool(self.loaded_meshes or self.loaded_vertices or self.loaded_indices)

    def load_materials(self, path: PathLike) -> List[ObjMaterial]:
        """Read an ``.mtl`` file, add its materials and return them.

        Raises ValueError for a path without the ``.mtl`` suffix and OSError
        if the file cannot be read.
        """
        path = os.fspath(path)
        if not path.endswith(".mtl"):
            raise ValueError(f"not an .mtl file: {path!r}")
        materials = _parse_materials(_read_lines(path))
        self.loaded_materials.extend(materials)
        return materials

    def _load_materials_if_present(self, path: str) -> None:
        if not path.endswith(".mtl"):
            return
        try:
            lines = _read_lines(path)
        except OSError:
            return
        self.loaded_materials.extend(_parse_materials(lines))