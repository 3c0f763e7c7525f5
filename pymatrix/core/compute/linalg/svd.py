"""
Singular value decomposition kernel (LAPACK gesdd, divide and conquer).
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
class SVDKernelResult:
    """
    Raw gesdd output.

    Attributes:
        u: Left singular vectors, m x m, column-major
        s: Singular values in descending order, length min(m, n)
        vt: Transposed right singular vectors, n x n, column-major
        info: gesdd status; info > 0 means the iteration did not converge
    """
    u: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    vt: NDArray[np.floating[Any]]
    info: int


def svd_full(a: NDArray[np.floating[Any]]) -> SVDKernelResult:
    """
    Full SVD a = u * diag(s) * vt (gesdd with jobz='A').

    The workspace is sized by gesdd_lwork before the real call.

    Args:
        a: Column-major matrix (m x n)

    Returns:
        SVDKernelResult
    """
    m, n = a.shape
    gesdd, gesdd_lwork = lapack_routines(('gesdd', 'gesdd_lwork'), a)

    lwork = query_workspace(gesdd_lwork, 'gesdd', m, n, compute_uv=1, full_matrices=1)
    u, s, vt, info = gesdd(a, compute_uv=1, full_matrices=1, lwork=lwork)
    check_argument_info(info, 'gesdd')
    return SVDKernelResult(u=u, s=s, vt=vt, info=int(info))
