"""
Overdetermined least squares.
"""

import numpy as np

from pymatrix.core.compute.linalg import lstsq_qr
from pymatrix.core.exceptions import DimensionError, SingularMatrixError
from pymatrix.core.validation import check_conformant
from pymatrix.algebra.solution import LstsqResult
from pymatrix.matrix.layout import from_fortran, to_fortran
from pymatrix.matrix.storage import Matrix


def lstsqr(A: Matrix, B: Matrix) -> LstsqResult:
    """
    Solve min ||A X - B|| for a full-rank, overdetermined A (gels).

    Each column of B is an independent right-hand side. The residual
    sum of squares of column k is the squared norm of the trailing
    A.rows - A.cols entries of the solved column, which are the
    components of the residual orthogonal to the range of A.

    Args:
        A: Coefficient matrix, A.rows >= A.cols
        B: Right-hand sides, B.rows == A.rows

    Returns:
        LstsqResult(X, R) with X of shape A.cols x B.cols and R holding
        one residual sum of squares per column of B

    Raises:
        DimensionError: If A is underdetermined or the row counts differ
        SingularMatrixError: If A does not have full column rank

    Example:
        >>> X, R = lstsqr(A, B)
    """
    if A.rows < A.cols:
        raise DimensionError(
            f"lstsqr: system must be overdetermined, got A of shape {A.rows}x{A.cols}"
        )
    check_conformant(A.shape, B.shape, 0, 0, ('A', 'B'))

    result = lstsq_qr(to_fortran(A), to_fortran(B))
    if result.info > 0:
        raise SingularMatrixError(
            f"lstsqr: coefficient matrix is rank-deficient "
            f"(diagonal element {result.info} of the triangular factor is zero)",
            routine='gels',
            info=result.info,
        )

    n = A.cols
    X = from_fortran(result.x[:n, :])
    R = np.sum(result.x[n:, :] ** 2, axis=0)
    return LstsqResult(X=X, R=R)
