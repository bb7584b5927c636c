import math
import random

import numpy as np
import pytest

from tailorsim.helper import (
    lerp,
    random_scalar,
    random_unit_vector,
    rotate_matrix_with_degree,
    rotate_vector_with_degree,
)


def test_zero_rotation_keeps_matrix():
    matrix = np.arange(16, dtype=float).reshape(4, 4)
    assert np.allclose(rotate_matrix_with_degree(matrix, (0, 0, 0)), matrix)


def test_rotation_is_orthonormal():
    rot = rotate_matrix_with_degree(np.eye(4), (30, 45, 60))
    assert np.allclose(rot.T @ rot, np.eye(4))
    assert np.linalg.det(rot) == pytest.approx(1.0)


def test_rotation_post_multiplies():
    base = np.diag([2.0, 3.0, 4.0, 1.0])
    rotation = (10, 20, 30)
    expected = base @ rotate_matrix_with_degree(np.eye(4), rotation)
    assert np.allclose(rotate_matrix_with_degree(base, rotation), expected)


def test_rotation_rejects_bad_shape():
    with pytest.raises(ValueError):
        rotate_matrix_with_degree(np.eye(3), (0, 0, 0))


def test_yaw_quarter_turn_of_x_axis():
    result = rotate_vector_with_degree((1, 0, 0), (0, 90, 0))
    assert np.allclose(result, (0, 0, -1))


def test_rotated_vector_is_normalised():
    result = rotate_vector_with_degree((2, 0, 0), (15, 25, 35))
    assert np.linalg.norm(result) == pytest.approx(1.0)


def test_zero_vector_cannot_be_normalised():
    with pytest.raises(ValueError):
        rotate_vector_with_degree((0, 0, 0), (10, 0, 0))


def test_random_scalar_within_bounds():
    rng = random.Random(5)
    values = [random_scalar(-2.0, 3.0, rng) for _ in range(200)]
    assert all(-2.0 <= v <= 3.0 for v in values)


def test_random_scalar_reproducible():
    first = random_scalar(0.0, 1.0, random.Random(11))
    second = random_scalar(0.0, 1.0, random.Random(11))
    assert first == second
    assert 0.0 <= first <= 1.0


def test_random_unit_vector_has_unit_length():
    rng = random.Random(3)
    for _ in range(50):
        assert math.isclose(np.linalg.norm(random_unit_vector(rng)), 1.0, rel_tol=1e-9)


def test_lerp_endpoints():
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0


def test_lerp_clamps():
    assert lerp(2.0, 4.0, -1.0) == 2.0
    assert lerp(2.0, 4.0, 5.0) == 4.0


def test_lerp_arrays_midpoint_symmetry():
    a = np.array([0.0, 2.0])
    b = np.array([4.0, 6.0])
    assert np.allclose(lerp(a, b, 0.5), lerp(b, a, 0.5))