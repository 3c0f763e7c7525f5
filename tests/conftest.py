"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def grid():
    """4 x 5 matrix holding 0..19 in row-major order."""
    return Matrix([[0, 1, 2, 3, 4],
                   [5, 6, 7, 8, 9],
                   [10, 11, 12, 13, 14],
                   [15, 16, 17, 18, 19]])


@pytest.fixture
def small():
    """2 x 2 matrix [[1, 2], [3, 4]]."""
    return Matrix([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def invertible_3x3():
    """Non-symmetric invertible 3 x 3 matrix with known inverse and trace -3."""
    return Matrix([[1.0, 0.0, 2.0],
                   [-1.0, 5.0, 0.0],
                   [0.0, 3.0, -9.0]])


@pytest.fixture
def spd_5x5():
    """Symmetric positive definite Pascal matrix of order 5."""
    return Matrix([[1.0, 1.0, 1.0, 1.0, 1.0],
                   [1.0, 2.0, 3.0, 4.0, 5.0],
                   [1.0, 3.0, 6.0, 10.0, 15.0],
                   [1.0, 4.0, 10.0, 20.0, 35.0],
                   [1.0, 5.0, 15.0, 35.0, 70.0]])


@pytest.fixture
def random_matrix(rng):
    """Factory for random rows x cols matrices drawn from a seeded generator."""
    def make(rows, cols):
        return Matrix(rng.standard_normal((rows, cols)))
    return make
