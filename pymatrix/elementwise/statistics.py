"""
Row and column statistics.

Every reduction takes a Dim. With Dim.ROW (the default) each row is
reduced to one value; with Dim.COLUMN each column is. The matrix is
first oriented with to_rows, then reduced row by row.

Note: these names shadow the builtins max, min, sum and map inside
this module.
"""

from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.matrix.layout import to_rows
from pymatrix.matrix.storage import Dim, Matrix


def _rows(A: Matrix, d: Dim) -> NDArray[np.float64]:
    return to_rows(A, d)._grid


def max(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.float64]:
    """Largest value of each row (or column)."""
    return np.max(_rows(A, d), axis=1)


def maxi(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.intp]:
    """Position of the largest value of each row (or column)."""
    return np.argmax(_rows(A, d), axis=1)


def min(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.float64]:
    """Smallest value of each row (or column)."""
    return np.min(_rows(A, d), axis=1)


def mini(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.intp]:
    """Position of the smallest value of each row (or column)."""
    return np.argmin(_rows(A, d), axis=1)


def mean(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.float64]:
    return np.mean(_rows(A, d), axis=1)


def std(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.float64]:
    """Population standard deviation (divides by n, not n - 1)."""
    return np.std(_rows(A, d), axis=1)


def normalize(A: Matrix, d: Dim = Dim.ROW) -> Matrix:
    """
    Subtract the mean and divide by the standard deviation, per row
    (Dim.ROW) or per column (Dim.COLUMN). The result has A's shape.

    A constant row (column) has zero deviation and normalises to nan.
    """
    axis = 1 if d == Dim.ROW else 0
    grid = A._grid
    with np.errstate(divide='ignore', invalid='ignore'):
        out = (grid - grid.mean(axis=axis, keepdims=True)) / grid.std(axis=axis, keepdims=True)
    return Matrix._wrap(A.rows, A.cols, np.ascontiguousarray(out).ravel())


def sum(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.float64]:
    return np.sum(_rows(A, d), axis=1)


def sumsq(A: Matrix, d: Dim = Dim.ROW) -> NDArray[np.float64]:
    """Sum of squared values of each row (or column)."""
    return np.sum(np.square(_rows(A, d)), axis=1)


def map(A: Matrix, f: Callable[[float], float]) -> Matrix:
    """New matrix with f applied to every element."""
    values = np.fromiter((f(float(x)) for x in A._flat), dtype=np.float64, count=A.rows * A.cols)
    return Matrix._wrap(A.rows, A.cols, values)


def reduce(
    A: Matrix,
    f: Callable[[NDArray[np.float64]], float],
    d: Dim = Dim.ROW
) -> NDArray[np.float64]:
    """
    Reduce each row (or column) to one value with f.

    Example:
        >>> reduce(Matrix([[1, 2], [3, 4]]), np.prod)
        array([ 2., 12.])
    """
    rows = _rows(A, d)
    return np.array([f(rows[i].copy()) for i in range(rows.shape[0])], dtype=np.float64)
