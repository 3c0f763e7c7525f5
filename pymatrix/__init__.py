"""
pymatrix: dense matrix algebra on a row-major buffer, backed by LAPACK.

A row-major Matrix type, a structural manipulation layer (slicing with
extractors, insertion, concatenation) and a decomposition engine that
delegates to LAPACK through scipy.linalg.lapack.

Submodules:
    matrix: Matrix storage, constructors, layout adapter
    manipulation: slice, insert, append, prepend, hconcat, vconcat
    algebra: Products and decompositions (inverse, eig, svd, gsvd, chol,
             det, lstsqr)
    elementwise: Arithmetic, functions, statistics, random matrices
    core: Exceptions, validation, tolerances, LAPACK kernels
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    ConvergenceError,
    DimensionError,
    IndexOutOfBoundsError,
    KernelError,
    NotPositiveDefiniteError,
    NumericalError,
    PyMatrixError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.matrix import Dim, Matrix, Triangle, diag, eye, ones, to_cols, to_rows, zeros
from pymatrix.manipulation import (
    All,
    Drop,
    DropLast,
    Pos,
    PosCyc,
    Range,
    Take,
    TakeLast,
    append,
    hconcat,
    hstack,
    insert,
    prepend,
    slice,
    vconcat,
    vstack,
)
from pymatrix.algebra import (
    chol,
    det,
    eig,
    gsvd,
    inverse,
    lstsqr,
    mpower,
    mtimes,
    svd,
    trace,
    transpose,
    tri,
)
from pymatrix import elementwise
from pymatrix.elementwise import statistics

__all__ = [
    "__version__",
    # Storage
    "Matrix",
    "Dim",
    "Triangle",
    "zeros",
    "ones",
    "eye",
    "diag",
    "to_rows",
    "to_cols",
    # Manipulation
    "All",
    "Range",
    "Pos",
    "PosCyc",
    "Take",
    "TakeLast",
    "Drop",
    "DropLast",
    "slice",
    "insert",
    "append",
    "prepend",
    "hconcat",
    "vconcat",
    "vstack",
    "hstack",
    # Algebra
    "transpose",
    "mtimes",
    "mpower",
    "trace",
    "inverse",
    "eig",
    "svd",
    "gsvd",
    "chol",
    "tri",
    "det",
    "lstsqr",
    # Elementwise
    "elementwise",
    "statistics",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    "KernelError",
]
