"""Rotation, random sampling and interpolation helpers."""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

import numpy as np

_PI = 3.1415926535


def _axis_rotation(axis: Sequence[float], degrees: float) -> np.ndarray:
    """A 4x4 rotation of ``degrees`` about ``axis`` for column vectors."""
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    x, y, z = np.asarray(axis, dtype=float) / np.linalg.norm(axis)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    rot3 = c * np.eye(3) + (1.0 - c) * np.outer((x, y, z), (x, y, z)) + s * cross
    rot4 = np.eye(4)
    rot4[:3, :3] = rot3
    return rot4


def rotate_matrix_with_degree(matrix, rotation) -> np.ndarray:
    """Post-multiply ``matrix`` by rotations about y, then z, then x (degrees)."""
    result = np.asarray(matrix, dtype=float)
    if result.shape != (4, 4):
        raise ValueError("matrix must be 4x4")
    rx, ry, rz = (float(v) for v in rotation)
    result = result @ _axis_rotation((0.0, 1.0, 0.0), ry)
    result = result @ _axis_rotation((0.0, 0.0, 1.0), rz)
    result = result @ _axis_rotation((1.0, 0.0, 0.0), rx)
    return result


def rotate_vector_with_degree(vector, rotation) -> np.ndarray:
    """Rotate a direction by Euler angles in degrees and normalise it."""
    rot = rotate_matrix_with_degree(np.eye(4), rotation)
    direction = np.append(np.asarray(vector, dtype=float), 0.0)
    rotated = (rot @ direction)[:3]
    length = np.linalg.norm(rotated)
    if length == 0.0:
        raise ValueError("cannot normalise a zero vector")
    return rotated / length


def random_scalar(low: float = 0.0, high: float = 1.0, rng: Optional[random.Random] = None) -> float:
    """A uniform value between ``low`` and ``high``."""
    source = rng if rng is not None else random
    return low + source.random() * (high - low)


def random_unit_vector(rng: Optional[random.Random] = None) -> np.ndarray:
    """A unit vector from two random angles."""
    phi = random_scalar(0.0, _PI * 2.0, rng)
    theta = random_scalar(0.0, _PI * 2.0, rng)
    return np.array(
        [math.cos(theta) * math.sin(phi), math.cos(phi), math.sin(theta) * math.sin(phi)]
    )


def lerp(value1, value2, a: float):
    """Interpolate from ``value1`` to ``value2``; ``a`` is clamped to [0, 1]."""
    a = min(max(a, 0.0), 1.0)
    return a * value2 + (1 - a) * value1