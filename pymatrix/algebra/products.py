"""
Matrix products: transpose, mtimes, mpower, trace.
"""

import numpy as np

from pymatrix.core.validation import check_conformant, check_square
from pymatrix.matrix.storage import Matrix


def transpose(A: Matrix) -> Matrix:
    """New cols x rows matrix with A[i, j] at (j, i)."""
    out = np.ascontiguousarray(A._grid.T)
    return Matrix._wrap(A.cols, A.rows, out.ravel())


def mtimes(A: Matrix, B: Matrix) -> Matrix:
    """
    Matrix product A * B.

    Raises:
        DimensionError: If A.cols != B.rows
    """
    check_conformant(A.shape, B.shape, 1, 0, ('A', 'B'))
    out = A._grid @ B._grid
    return Matrix._wrap(A.rows, B.cols, out.ravel())


def mpower(A: Matrix, p: int) -> Matrix:
    """
    Integer matrix power.

    p == 0 gives the identity, p == 1 a copy, p > 1 repeated
    multiplication, p == -1 the inverse and p < -1 the inverse of
    mpower(A, -p).

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If p < 0 and the power is singular
    """
    check_square(A.rows, A.cols, 'A')

    if p == 0:
        from pymatrix.matrix.creation import eye
        return eye(A.rows, A.cols)
    if p == 1:
        return Matrix(A)

    from pymatrix.algebra.decompositions import inverse
    if p == -1:
        return inverse(A)
    if p < -1:
        return inverse(mpower(A, -p))

    result = A
    for _ in range(p - 1):
        result = mtimes(A, result)
    return result


def trace(A: Matrix) -> float:
    """Sum of the main diagonal of a square matrix."""
    check_square(A.rows, A.cols, 'A')
    return float(np.trace(A._grid))
