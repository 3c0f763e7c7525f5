"""
Result containers for the decomposition engine.

Each result is a NamedTuple so it can be unpacked directly:

    V, D = eig(A)
    U, S, V = svd(A)
"""

from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from pymatrix.matrix.storage import Matrix


class EigResult(NamedTuple):
    """
    Eigendecomposition A V = V D.

    Attributes:
        V: Right eigenvectors as columns
        D: Diagonal matrix of (real parts of) the eigenvalues
    """
    V: Matrix
    D: Matrix


class SVDResult(NamedTuple):
    """
    Singular value decomposition A = U S V'.

    Attributes:
        U: Left singular vectors, rows x rows
        S: Rectangular diagonal of singular values, rows x cols, descending
        V: Right singular vectors, cols x cols
    """
    U: Matrix
    S: Matrix
    V: Matrix


class GSVDResult(NamedTuple):
    """
    Generalized singular value decomposition of the pair (A, B).

    A = U C Q and B = V S Q, where U and V are orthogonal, Q is n x n
    and non-singular, and alpha^2 + beta^2 = 1. alpha is in ascending
    order, so alpha / beta (the generalized singular values) ascend too.

    S (p x n) carries beta on its main diagonal. C (m x n) carries alpha
    on the diagonal starting at column max(0, n - m); the first n - m
    entries of alpha are zero when A is wide, and the last n - p entries
    of beta are zero when B is wide. With m >= n and p >= n these are
    diag(m, n, alpha) and diag(p, n, beta).

    Attributes:
        U: m x m orthogonal
        V: p x p orthogonal
        Q: n x n shared right factor
        alpha: Cosines, length n
        beta: Sines, length n
        success: False if the stacked pair was rank-deficient; the
            factors are then a best-effort result only
    """
    U: Matrix
    V: Matrix
    Q: Matrix
    alpha: NDArray[np.float64]
    beta: NDArray[np.float64]
    success: bool

    @property
    def C(self) -> Matrix:
        """m x n factor of A."""
        m, n = self.U.rows, self.alpha.shape[0]
        k = min(m, n)
        offset = n - k
        out = np.zeros((m, n))
        out[np.arange(k), np.arange(k) + offset] = self.alpha[offset:]
        return Matrix._wrap(m, n, out.ravel())

    @property
    def S(self) -> Matrix:
        """p x n factor of B."""
        p, n = self.V.rows, self.beta.shape[0]
        k = min(p, n)
        out = np.zeros((p, n))
        out[np.arange(k), np.arange(k)] = self.beta[:k]
        return Matrix._wrap(p, n, out.ravel())


class LstsqResult(NamedTuple):
    """
    Least squares solution of min ||A X - B||.

    Attributes:
        X: Solution, A.cols x B.cols
        R: Residual sum of squares for each column of B
    """
    X: Matrix
    R: NDArray[np.float64]
