"""
Matrix constructors: zeros, ones, eye, diag.
"""

from typing import Any

import numpy as np

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import check_positive_dims
from pymatrix.matrix.storage import Matrix, as_vector


def zeros(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of zeros."""
    return Matrix.filled(rows, cols, 0.0)


def ones(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of ones."""
    return Matrix.filled(rows, cols, 1.0)


def eye(rows: int, cols: int) -> Matrix:
    """rows x cols identity: ones on the main diagonal, zeros elsewhere."""
    check_positive_dims(rows, cols, 'eye')
    return Matrix._wrap(rows, cols, np.eye(rows, cols).ravel())


def diag(*args: Any) -> Matrix:
    """
    Diagonal matrix.

    diag(v) builds a square matrix with v on the diagonal; v is a vector
    or a one-column Matrix. diag(rows, cols, v) builds a rectangular
    matrix with v on the main diagonal; v must have min(rows, cols)
    values.

    Raises:
        DimensionError: On non-positive dimensions or a wrong-length v
        ValidationError: On any other call signature
    """
    if len(args) == 1:
        values = as_vector(args[0], 'v')
        n = values.shape[0]
        check_positive_dims(n, n, 'diag')
        return Matrix._wrap(n, n, np.diag(values).ravel())

    if len(args) == 3:
        rows, cols, v = args
        check_positive_dims(rows, cols, 'diag')
        values = as_vector(v, 'v')
        k = min(rows, cols)
        if values.shape[0] != k:
            raise DimensionError(
                f"diag: a {rows}x{cols} matrix needs {k} diagonal values, got {values.shape[0]}"
            )
        out = np.zeros((rows, cols))
        out[np.arange(k), np.arange(k)] = values
        return Matrix._wrap(rows, cols, out.ravel())

    raise ValidationError(f"diag takes 1 or 3 arguments, got {len(args)}")

