"""Shortest paths along mesh edges from chosen source vertices."""

from __future__ import annotations

import heapq
import math
from typing import List

from tailorsim.config import SCALAR_MAX
from tailorsim.mesh import Mesh

Path = List[int]
PathMap = List[Path]


class Geodesic:
    """Dijkstra distances over the edge graph of a mesh.

    ``sources`` holds vertex ids; each call of
    :meth:`compute_geodesic_distance` appends one row to ``distances``,
    ``vec_previous`` and ``maps``. Row ``i`` of a map lists the
    intermediate vertices on the path to vertex ``i``, walking from ``i``
    back towards the source and leaving out both ends.
    """

    def __init__(self, mesh: Mesh) -> None:
        self._mesh = mesh
        self.sources: List[int] = []
        self.distances: List[List[float]] = []
        self.vec_previous: List[List[int]] = []
        self.maps: List[PathMap] = []

    def compute_geodesic_distance(self, source_index: int) -> List[float]:
        """Compute distances from ``sources[source_index]`` to every vertex."""
        positions = self._mesh.positions
        count = len(positions)
        if not 0 <= source_index < count or source_index >= len(self.sources):
            raise ValueError("[Geodesic] Invalid source index")
        source_id = self.sources[source_index]
        if not 0 <= source_id < count:
            raise ValueError("[Geodesic] Invalid source index")

        distances = [SCALAR_MAX] * count
        previous: List[int] = [-1] * count
        previous[source_id] = source_id
        distances[source_id] = 0.0

        queue = [(0.0, source_id)]
        while queue:
            dist, current = heapq.heappop(queue)
            if dist > distances[current]:
                continue
            for neighbor in self._mesh.neighbors(current):
                weight = math.dist(positions[current], positions[neighbor])
                candidate = distances[current] + weight
                if distances[neighbor] > candidate:
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    heapq.heappush(queue, (candidate, neighbor))

        paths: PathMap = []
        for vertex in range(count):
            path: Path = []
            cur = previous[vertex]
            while cur not in (source_id, -1):
                path.append(cur)
                cur = previous[cur]
            paths.append(path)

        self.distances.append(distances)
        self.vec_previous.append(previous)
        self.maps.append(paths)
        return distances