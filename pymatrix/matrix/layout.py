"""
Layout adapter between row-major Matrix storage and column-major kernels.

LAPACK reads and writes column-major (Fortran) buffers. The flat buffer
of the transpose of a row-major matrix is exactly the column-major buffer
of the matrix itself, so converting is a transpose in one direction and a
transpose back in the other.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.matrix.storage import Dim, Matrix


def to_rows(A: Matrix, d: Dim) -> Matrix:
    """
    Interpret A as laid out along d and return its row-oriented form.

    Args:
        A: Matrix whose buffer is organised along d
        d: Dim.ROW returns A unchanged, Dim.COLUMN returns transpose(A)
    """
    if d == Dim.ROW:
        return A
    from pymatrix.algebra.products import transpose
    return transpose(A)


def to_cols(A: Matrix, d: Dim) -> Matrix:
    """Dual of to_rows: Dim.COLUMN returns A, Dim.ROW returns transpose(A)."""
    if d == Dim.COLUMN:
        return A
    from pymatrix.algebra.products import transpose
    return transpose(A)


def to_fortran(A: Matrix) -> NDArray[np.float64]:
    """
    Column-major (rows x cols) array for a kernel.

    The buffer of to_cols(A, Dim.ROW) is wrapped as a Fortran-ordered
    view; no further copy is made.
    """
    C = to_cols(A, Dim.ROW)
    return C._flat.reshape((A.rows, A.cols), order='F')


def from_fortran(a: NDArray[Any]) -> Matrix:
    """
    Row-major Matrix from a kernel's column-major output.

    The column-major buffer is read as a (cols x rows) row-major matrix
    and transposed back with to_rows(., Dim.COLUMN).
    """
    arr = np.asarray(a, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    rows, cols = arr.shape
    C = Matrix.from_flat(cols, rows, arr.ravel(order='F'))
    return to_rows(C, Dim.COLUMN)
