"""
Decomposition engine: inverse, eig, svd, gsvd, chol, tri, det.

Every function converts its row-major input to a column-major buffer
with to_fortran, runs a LAPACK kernel from pymatrix.core.compute.linalg
and reads the results back with from_fortran. Inputs are never modified.
"""

import warnings

import numpy as np

from pymatrix.core.compute.linalg import (
    cholesky_factor,
    eig_general,
    lu_determinant,
    lu_factor,
    lu_invert,
    qr_factor,
    svd_full,
)
from pymatrix.core.exceptions import (
    ConvergenceError,
    DimensionError,
    NotPositiveDefiniteError,
    SingularMatrixError,
)
from pymatrix.core.validation import check_conformant, check_square
from pymatrix.algebra.products import transpose
from pymatrix.algebra.solution import EigResult, GSVDResult, SVDResult
from pymatrix.manipulation.insertion import hconcat
from pymatrix.matrix.creation import diag
from pymatrix.matrix.layout import from_fortran, to_fortran
from pymatrix.matrix.storage import Matrix, Triangle


def inverse(A: Matrix) -> Matrix:
    """
    Inverse of a square matrix via LU factorization (getrf + getri).

    Args:
        A: Square matrix

    Returns:
        inv(A)

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If A is exactly singular
    """
    check_square(A.rows, A.cols, 'A')

    factor = lu_factor(to_fortran(A))
    if factor.is_singular:
        raise SingularMatrixError(
            f"inverse: matrix is singular (U[{factor.info - 1}, {factor.info - 1}] is zero)",
            routine='getrf',
            info=factor.info,
        )

    inv_a, info = lu_invert(factor)
    if info > 0:
        raise SingularMatrixError(
            "inverse: matrix is singular",
            routine='getri',
            info=info,
        )
    return from_fortran(inv_a)


def eig(A: Matrix) -> EigResult:
    """
    Eigenvalues and right eigenvectors of a square matrix (geev).

    Returns V with the eigenvectors as columns and D diagonal, such that
    A V = V D. Complex conjugate eigenvalue pairs cannot be represented
    in a real matrix; their real parts are kept and a UserWarning is
    issued.

    Args:
        A: Square matrix

    Returns:
        EigResult(V, D)

    Raises:
        DimensionError: If A is not square
        ConvergenceError: If the QR algorithm fails to converge
    """
    check_square(A.rows, A.cols, 'A')

    result = eig_general(to_fortran(A))
    if result.info > 0:
        raise ConvergenceError(
            f"eig: QR algorithm failed to compute all eigenvalues "
            f"({result.info} did not converge)",
            routine='geev',
            info=result.info,
        )

    if not result.is_real:
        warnings.warn(
            "eig: matrix has complex eigenvalues; only their real parts are returned",
            UserWarning,
            stacklevel=2,
        )

    return EigResult(V=from_fortran(result.vr), D=diag(result.wr))


def svd(A: Matrix) -> SVDResult:
    """
    Singular value decomposition A = U S V' (gesdd).

    Args:
        A: Any matrix (m x n)

    Returns:
        SVDResult(U, S, V) with U m x m, S m x n rectangular diagonal with
        descending singular values, V n x n

    Raises:
        ConvergenceError: If the divide and conquer iteration fails
    """
    result = svd_full(to_fortran(A))
    if result.info > 0:
        raise ConvergenceError(
            "svd: singular value iteration did not converge",
            routine='gesdd',
            info=result.info,
        )

    U = from_fortran(result.u)
    S = diag(A.rows, A.cols, result.s)
    V = transpose(from_fortran(result.vt))
    return SVDResult(U=U, S=S, V=V)


def gsvd(A: Matrix, B: Matrix) -> GSVDResult:
    """
    Generalized singular value decomposition of a pair of matrices.

    Computes A = U C Q and B = V S Q with U, V orthogonal, Q n x n and
    alpha^2 + beta^2 = 1, where C and S hold alpha and beta as described
    in GSVDResult (result.C and result.S build them).

    Algorithm:
        1. Reduced QR of the stacked pair [A; B] = [Q1; Q2] R
        2. Full SVD Q1 = U1 diag(c) W', reordered so c ascends; the
           n - m columns of W spanning the null space of a wide Q1 get
           c = 0 and come first
        3. The columns of Q2 W are orthogonal with norms sqrt(1 - c^2);
           a complete QR of Q2 W gives V and beta (signs fixed so
           beta >= 0)
        4. Q = W' R

    Numerical trouble never raises. If [A; B] does not have full column
    rank, or a kernel reports a failure, success is False, a
    RuntimeWarning is issued and the factors are a best-effort result.

    Args:
        A: m x n matrix
        B: p x n matrix, m + p >= n

    Returns:
        GSVDResult(U, V, Q, alpha, beta, success)

    Raises:
        DimensionError: If the column counts differ or the pair has
            fewer rows in total than columns
    """
    check_conformant(A.shape, B.shape, 1, 1, ('A', 'B'))
    m, n = A.shape
    p = B.rows
    if m + p < n:
        raise DimensionError(
            f"gsvd: the stacked pair needs at least as many rows as columns, "
            f"got A {m}x{n} and B {p}x{n}"
        )

    stacked = qr_factor(to_fortran(hconcat(A, B)), mode='reduced')
    success = stacked.rank == n

    Q1 = np.asfortranarray(stacked.Q[:m, :])
    Q2 = stacked.Q[m:, :]

    cs = svd_full(Q1)
    success = success and cs.info == 0

    # Ascending cosines put the largest sines (non-zero columns of Q2 W) first
    k = min(m, n)
    cosines = np.zeros(n)
    cosines[:k] = cs.s
    c = np.clip(cosines[::-1], 0.0, 1.0)
    W = cs.vt.T[:, ::-1]
    U1 = np.array(cs.u, order='F')
    U1[:, :k] = cs.u[:, :k][:, ::-1]

    T = np.asfortranarray(Q2 @ W)
    sines = qr_factor(T, mode='complete')
    U2 = np.array(sines.Q, order='F')
    d = np.diag(sines.R)[:min(p, n)]
    U2[:, np.flatnonzero(d < 0)] *= -1.0
    s = np.zeros(n)
    s[:d.shape[0]] = np.abs(d)

    Qf = W.T @ stacked.R

    if not success:
        warnings.warn(
            f"gsvd: decomposition failed (rank of [A; B] is {stacked.rank}, "
            f"expected {n}); factors are not reliable",
            RuntimeWarning,
            stacklevel=2,
        )

    return GSVDResult(
        U=from_fortran(U1),
        V=from_fortran(U2),
        Q=from_fortran(Qf),
        alpha=c,
        beta=s,
        success=bool(success),
    )


def tri(A: Matrix, triangle: Triangle) -> Matrix:
    """Upper or lower triangular part of A with the other half zeroed."""
    grid = A._grid
    out = np.triu(grid) if triangle == Triangle.UPPER else np.tril(grid)
    return Matrix._wrap(A.rows, A.cols, np.ascontiguousarray(out).ravel())


def chol(A: Matrix, triangle: Triangle = Triangle.UPPER) -> Matrix:
    """
    Cholesky factor of a symmetric positive definite matrix (potrf).

    Args:
        A: Square symmetric positive definite matrix
        triangle: Triangle.UPPER for U with A = U'U,
                  Triangle.LOWER for L with A = LL'

    Returns:
        The requested triangular factor, other half zeroed

    Raises:
        DimensionError: If A is not square
        NotPositiveDefiniteError: If A is not positive definite
    """
    check_square(A.rows, A.cols, 'A')

    factor, info = cholesky_factor(to_fortran(A), lower=(triangle == Triangle.LOWER))
    if info > 0:
        raise NotPositiveDefiniteError(
            f"chol: leading minor of order {info} is not positive definite",
            routine='potrf',
            info=info,
        )
    return tri(from_fortran(factor), triangle)


def det(A: Matrix) -> float:
    """
    Determinant from the LU factorization (getrf).

    A singular matrix has an exactly zero pivot and gives 0.0.

    Raises:
        DimensionError: If A is not square
    """
    check_square(A.rows, A.cols, 'A')
    return lu_determinant(lu_factor(to_fortran(A)))
