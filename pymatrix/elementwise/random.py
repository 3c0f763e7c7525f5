"""
Random matrices.
"""

import numpy as np

from pymatrix.core.validation import check_positive_dims
from pymatrix.matrix.storage import Matrix


def rand(rows: int, cols: int, rng: np.random.Generator | None = None) -> Matrix:
    """
    Matrix of independent uniform samples on [0, 1).

    Args:
        rows: Number of rows
        cols: Number of columns
        rng: Generator to draw from; a fresh default_rng() if None
    """
    check_positive_dims(rows, cols, 'rand')
    gen = rng if rng is not None else np.random.default_rng()
    return Matrix._wrap(rows, cols, gen.random(rows * cols))


def randn(rows: int, cols: int, rng: np.random.Generator | None = None) -> Matrix:
    """Matrix of independent standard normal samples."""
    check_positive_dims(rows, cols, 'randn')
    gen = rng if rng is not None else np.random.default_rng()
    return Matrix._wrap(rows, cols, gen.standard_normal(rows * cols))
