"""Triangle meshes, their file-level index data and vertex adjacency."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

_log = logging.getLogger(__name__)

Edge = Tuple[int, int]


@dataclass(frozen=True, order=True)
class Index:
    """One corner of a face: position, texture and normal indices."""

    position: int = 0
    uv: int = 0
    normal: int = 0


@dataclass
class MeshData:
    """Raw mesh data as read from a file, with per-corner index triples."""

    positions: List[Tuple[float, float, float]] = field(default_factory=list)
    uvs: List[Tuple[float, ...]] = field(default_factory=list)
    normals: List[Tuple[float, float, float]] = field(default_factory=list)
    indices: List[List[Index]] = field(default_factory=list)


def _as_array(values, width: int) -> np.ndarray:
    array = np.asarray(values if values is not None else [], dtype=float)
    if array.size == 0:
        return np.zeros((0, width))
    return array.reshape(-1, width)


class Mesh:
    """A triangle mesh with per-vertex attributes and vertex adjacency."""

    def __init__(
        self,
        positions,
        normals=None,
        tex_coords=None,
        indices: Optional[Sequence[int]] = None,
        mesh_id: int = 0,
    ) -> None:
        self.positions = _as_array(positions, 3)
        self.normals = _as_array(normals, 3)
        self.tex_coords = _as_array(tex_coords, 2)
        self.indices: List[int] = [int(i) for i in (indices or [])]
        self.mesh_id = int(mesh_id)
        self.uvs = np.zeros((0, 2))
        self.uv_indices: List[int] = []
        self.normal_indices: List[int] = []

        if len(self.indices) % 3:
            raise ValueError("the number of indices must be a multiple of 3")
        count = len(self.positions)
        for index in self.indices:
            if not 0 <= index < count:
                raise IndexError(f"vertex index {index} out of range for {count} vertices")
        self._adjacency = self._build_adjacency()

    @classmethod
    def from_mesh_data(cls, data: MeshData, mesh_id: int = 0) -> "Mesh":
        """Build a mesh from file data; faces use the first three corners."""
        num_vertices = len(data.positions)
        normals = None
        if data.normals:
            if len(data.normals) < num_vertices:
                raise ValueError("fewer normals than vertices")
            normals = list(data.normals[:num_vertices])
        else:
            _log.warning("Normals not found")

        has_uv = bool(data.uvs)
        indices: List[int] = []
        uv_indices: List[int] = []
        normal_indices: List[int] = []
        for face in data.indices:
            if len(face) < 3:
                raise ValueError("every face needs at least three corners")
            for corner in face[:3]:
                indices.append(corner.position)
                if has_uv:
                    uv_indices.append(corner.uv)
                normal_indices.append(corner.normal)

        mesh = cls(data.positions, normals, np.zeros((num_vertices, 2)), indices, mesh_id)
        if has_uv:
            mesh.uvs = np.array([(uv[0], uv[1]) for uv in data.uvs], dtype=float)
        mesh.uv_indices = uv_indices
        mesh.normal_indices = normal_indices
        return mesh

    @classmethod
    def from_packed(
        cls,
        attribute_sizes: Sequence[int],
        packed_vertices: Sequence[float],
        indices: Optional[Sequence[int]] = None,
    ) -> "Mesh":
        """Build a mesh from interleaved vertex attributes.

        ``attribute_sizes`` gives the width of each attribute in order:
        position (3), then optionally normal (3), then texture coordinate (2).
        """
        stride = sum(int(size) for size in attribute_sizes)
        if stride < 3:
            raise ValueError("packed vertices need at least three position components")
        packed = np.asarray(packed_vertices, dtype=float)
        num_vertices = len(packed) // stride
        rows = packed[: num_vertices * stride].reshape(num_vertices, stride)

        positions = rows[:, 0:3]
        has_normals = stride >= 6
        normals = rows[:, 3:6] if has_normals else None
        uv_start = 6 if has_normals else 3
        if uv_start + 2 <= stride:
            tex_coords = rows[:, uv_start:uv_start + 2]
        else:
            tex_coords = np.zeros((num_vertices, 2))
        return cls(positions, normals, tex_coords, indices)

    def _build_adjacency(self) -> List[Set[int]]:
        adjacency: List[Set[int]] = [set() for _ in range(len(self.positions))]
        for a, b, c in zip(self.indices[0::3], self.indices[1::3], self.indices[2::3]):
            for u, v in ((a, b), (b, c), (c, a)):
                if u != v:
                    adjacency[u].add(v)
                    adjacency[v].add(u)
        return adjacency

    def use_indices(self) -> bool:
        return bool(self.indices)

    def draw_count(self) -> int:
        """Number of elements to draw: indices if present, else vertices."""
        return len(self.indices) if self.use_indices() else len(self.positions)

    def compute_normals(self, positions=None) -> np.ndarray:
        """Area-weighted vertex normals for ``positions`` (default: own positions)."""
        points = self.positions if positions is None else _as_array(positions, 3)
        normals = np.zeros_like(points)
        for a, b, c in zip(self.indices[0::3], self.indices[1::3], self.indices[2::3]):
            face_normal = np.cross(points[b] - points[a], points[c] - points[a])
            normals[a] += face_normal
            normals[b] += face_normal
            normals[c] += face_normal
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        np.divide(normals, lengths, out=normals, where=lengths > 0)
        return normals

    def neighbors(self, vertex: int) -> List[int]:
        """Vertices sharing an edge with ``vertex``, in ascending order."""
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")
        return sorted(self._adjacency[vertex])

    def edges(self) -> List[Edge]:
        """Unique undirected edges as sorted pairs, in ascending order."""
        unique: Dict[Edge, None] = {}
        for vertex, adjacent in enumerate(self._adjacency):
            for other in adjacent:
                if vertex < other:
                    unique[(vertex, other)] = None
        return sorted(unique)

    def __len__(self) -> int:
        return len(self.positions)