"""
Decomposition engine.

Matrix products and LAPACK-backed decompositions. Every kernel call
goes through the row/column layout adapter, so callers only ever see
row-major Matrix values.

Public API:
    transpose(A)        - Transpose
    mtimes(A, B)        - Matrix product
    mpower(A, p)        - Integer matrix power
    trace(A)            - Sum of the diagonal
    inverse(A)          - Inverse (getrf + getri)
    eig(A)              - Eigendecomposition (geev)
    svd(A)              - Singular value decomposition (gesdd)
    gsvd(A, B)          - Generalized SVD (geqrf/orgqr + gesdd)
    chol(A, triangle)   - Cholesky factor (potrf)
    tri(A, triangle)    - Triangular part
    det(A)              - Determinant (getrf)
    lstsqr(A, B)        - Least squares (gels)
"""

from pymatrix.algebra.products import mpower, mtimes, trace, transpose
from pymatrix.algebra.decompositions import chol, det, eig, gsvd, inverse, svd, tri
from pymatrix.algebra.least_squares import lstsqr
from pymatrix.algebra.solution import EigResult, GSVDResult, LstsqResult, SVDResult

__all__ = [
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
    "EigResult",
    "SVDResult",
    "GSVDResult",
    "LstsqResult",
]
