"""Wavefront OBJ export and small colour and naming helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

from tailorsim.mesh import MeshData

PathLike = Union[str, Path]

HEADER = "# Generated by tailorsim"
_log = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    return f"{float(value):.6f}"


def _vertex_lines(prefix: str, rows: Iterable[Sequence[float]], width: int) -> Iterator[str]:
    for row in rows:
        values = [float(v) for v in row]
        if len(values) < width:
            raise ValueError(f"'{prefix}' entries need {width} components")
        yield prefix + " " + " ".join(_fmt(v) for v in values[:width])


def _triangles(indices: Sequence[int]) -> Iterator[Tuple[int, int, int]]:
    flat = [int(i) for i in indices]
    usable = len(flat) - len(flat) % 3
    return zip(flat[0:usable:3], flat[1:usable:3], flat[2:usable:3])


def _face_line(corners: Iterable[int]) -> str:
    return "f " + " ".join(str(int(c) + 1) for c in corners)


def _write(path: PathLike, object_name: str, body: Iterable[str], faces: Iterable[str],
           header: str = HEADER) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        out.write(f"{header}\n")
        out.write(f"o {object_name}\n")
        for line in body:
            out.write(line + "\n")
        out.write("s 1\n")
        for line in faces:
            out.write(line + "\n")


def save_body_as_obj(path: PathLike, positions, faces) -> None:
    """Write a body mesh; ``faces`` is a sequence of vertex-index triples."""
    _write(
        path,
        "smplx",
        _vertex_lines("v", positions, 3),
        (_face_line(face[:3]) for face in faces),
    )


def save_mesh_as_obj(path: PathLike, positions, indices: Sequence[int]) -> None:
    """Write a mesh given as positions and a flat triangle index list."""
    _log.info("Save garment obj")
    _write(
        path,
        "garment",
        _vertex_lines("v", positions, 3),
        (_face_line(tri) for tri in _triangles(indices)),
    )


def save_garment_as_obj(path: PathLike, positions, indices: Sequence[int],
                        colors: Optional[Sequence[Sequence[float]]] = None) -> None:
    """Write a garment; with ``colors`` each vertex line carries an RGB triple."""
    _log.info("Save garment obj")
    if colors is None:
        body: Iterable[str] = _vertex_lines("v", positions, 3)
    else:
        points = [tuple(float(v) for v in p) for p in positions]
        tints = [tuple(float(v) for v in c) for c in colors]
        if len(tints) < len(points):
            raise ValueError("fewer colours than vertices")
        body = _vertex_lines("v", (p[:3] + c[:3] for p, c in zip(points, tints)), 6)
    _write(path, "garment", body, (_face_line(tri) for tri in _triangles(indices)))


def save_mesh_data_as_obj(path: PathLike, mesh_data: MeshData) -> None:
    """Write the positions and face position indices of ``mesh_data``."""
    _log.info("Save garment obj")
    _write(
        path,
        "garment",
        _vertex_lines("v", mesh_data.positions, 3),
        (_face_line(corner.position for corner in face[:3]) for face in mesh_data.indices),
    )


def save_mesh_data_as_obj_with_uv_normal(path: PathLike, mesh_data: MeshData) -> None:
    """Write ``mesh_data`` with texture coordinates, normals and v/vt/vn faces."""
    _log.info("Save garment obj")

    def body() -> Iterator[str]:
        yield from _vertex_lines("v", mesh_data.positions, 3)
        yield from _vertex_lines("vt", mesh_data.uvs, 2)
        yield from _vertex_lines("vn", mesh_data.normals, 3)

    def faces() -> Iterator[str]:
        for face in mesh_data.indices:
            yield "f " + " ".join(
                f"{c.position + 1}/{c.uv + 1}/{c.normal + 1}" for c in face[:3]
            )

    _write(path, "garment", body(), faces())


def map_value(value: float, target_min: float, target_max: float,
              data_min: float, data_max: float) -> float:
    """Clamp ``value`` to the data range and map it linearly onto the target range."""
    value = min(max(value, data_min), data_max)
    return target_min + ((value - data_min) / (data_max - data_min)) * (target_max - target_min)


def hsv_to_rgb(color: Sequence[float]) -> Tuple[float, float, float]:
    """Convert (h, s, v), each in [0, 1], to (r, g, b)."""
    hue, sat, val = (float(c) for c in color[:3])
    h = hue * 360.0
    if h >= 360.0:
        h = 0.0
    h /= 60.0
    sector = int(h)
    f = h - sector
    p = val * (1.0 - sat)
    q = val * (1.0 - sat * f)
    t = val * (1.0 - sat * (1.0 - f))

    if sector == 0:
        return (val, t, p)
    if sector == 1:
        return (q, val, p)
    if sector == 2:
        return (p, val, t)
    if sector == 3:
        return (p, q, val)
    if sector == 4:
        return (t, p, val)
    return (val, p, q)


def get_basename(name: str) -> str:
    """The part of ``name`` before its first dot, or all of it."""
    return name.split(".", 1)[0]