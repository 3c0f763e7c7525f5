"""
QR decomposition kernels.

Householder QR through LAPACK geqrf followed by orgqr to form Q
explicitly. Both routines size their workspace by being called once with
lwork=-1. Used by the generalized SVD.
"""

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.workspace import (
    check_argument_info,
    lapack_routines,
    query_workspace_inplace,
)
from pymatrix.core.precision import rank_tolerance


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (m x k where k = min(m, n) for reduced mode,
           m x m for complete mode), column-major
        R: Upper triangular matrix (k x n or m x n), column-major
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_factor(
    a: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    QR decomposition using LAPACK geqrf + orgqr.

    Computes a = QR where Q is orthogonal and R is upper triangular.

    Args:
        a: Column-major matrix to decompose (m x n)
        mode: 'reduced' for economy QR (Q is m x k, R is k x n where k = min(m,n))
              'complete' for full QR (Q is m x m, R is m x n)

    Returns:
        QRResult with Q, R, and numerical rank
    """
    m, n = a.shape
    geqrf, orgqr = lapack_routines(('geqrf', 'orgqr'), a)

    lwork = query_workspace_inplace(geqrf, 'geqrf', a)
    qr, tau, _, info = geqrf(a, lwork=lwork)
    check_argument_info(info, 'geqrf')

    k = min(m, n)
    if mode == 'complete':
        R = np.triu(qr)
        if m > n:
            # orgqr builds as many columns as it is given
            reflectors = np.zeros((m, m), dtype=qr.dtype, order='F')
            reflectors[:, :n] = qr
        else:
            reflectors = np.asfortranarray(qr[:, :m])
    else:
        R = np.triu(qr[:k, :])
        reflectors = np.asfortranarray(qr[:, :k])

    lwork = query_workspace_inplace(orgqr, 'orgqr', reflectors, tau)
    Q, _, info = orgqr(reflectors, tau, lwork=lwork)
    check_argument_info(info, 'orgqr')

    # Determine numerical rank from R diagonal
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R.max() > 0:
        tol = rank_tolerance(diag_R, (m, n))
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=np.asfortranarray(R), rank=rank)
