"""
Least squares kernel (LAPACK gels).

Solves min ||A X - B|| for a full-rank overdetermined A through a QR
factorization of A. The workspace is sized by gels_lwork first.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.workspace import (
    check_argument_info,
    lapack_routines,
    query_workspace,
)


@dataclass(frozen=True)
class GelsResult:
    """
    Raw gels output.

    Attributes:
        x: m x nrhs, column-major. Rows [0, n) hold the solution; rows
           [n, m) hold the components of each residual orthogonal to
           the range of A
        info: gels status; info > 0 means the i-th diagonal element of
              the triangular factor is zero (A is rank-deficient)
    """
    x: NDArray[np.floating[Any]]
    info: int


def lstsq_qr(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]]
) -> GelsResult:
    """
    Overdetermined least squares via QR (gels, trans='N').

    Args:
        a: Column-major coefficient matrix (m x n, m >= n)
        b: Column-major right-hand sides (m x nrhs)

    Returns:
        GelsResult
    """
    m, n = a.shape
    nrhs = b.shape[1]
    gels, gels_lwork = lapack_routines(('gels', 'gels_lwork'), a, b)

    lwork = query_workspace(gels_lwork, 'gels', m, n, nrhs, trans='N')
    _, x, info = gels(a, b, trans='N', lwork=lwork)
    check_argument_info(info, 'gels')
    return GelsResult(x=x, info=int(info))
