"""
Matrix storage, constructors and the row/column layout adapter.

Public API:
    Matrix              - Row-major dense float64 matrix
    Dim                 - Dim.ROW / Dim.COLUMN axis selector
    Triangle            - Triangle.UPPER / Triangle.LOWER
    zeros, ones, eye    - Constant and identity constructors
    diag                - Square or rectangular diagonal matrices
    to_rows, to_cols    - Row/column orientation adapter
"""

from pymatrix.matrix.storage import Dim, Matrix, Triangle
from pymatrix.matrix.creation import diag, eye, ones, zeros
from pymatrix.matrix.layout import from_fortran, to_cols, to_fortran, to_rows

__all__ = [
    "Matrix",
    "Dim",
    "Triangle",
    "zeros",
    "ones",
    "eye",
    "diag",
    "to_rows",
    "to_cols",
    "to_fortran",
    "from_fortran",
]
