"""
General (non-symmetric) eigenvalue kernel (LAPACK geev).
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
class EigKernelResult:
    """
    Raw geev output.

    Attributes:
        wr: Real parts of the eigenvalues
        wi: Imaginary parts; conjugate pairs appear consecutively with the
            positive imaginary part first
        vr: Right eigenvectors as columns, column-major. For a complex
            pair (j, j+1) the vectors are vr[:, j] +/- i*vr[:, j+1]
        info: geev status; info > 0 means the QR algorithm failed
    """
    wr: NDArray[np.floating[Any]]
    wi: NDArray[np.floating[Any]]
    vr: NDArray[np.floating[Any]]
    info: int

    @property
    def is_real(self) -> bool:
        return not np.any(self.wi != 0.0)


def eig_general(a: NDArray[np.floating[Any]]) -> EigKernelResult:
    """
    Eigenvalues and right eigenvectors of a square matrix.

    The workspace is sized by geev_lwork before the real call. Left
    eigenvectors are not requested.

    Args:
        a: Column-major square matrix

    Returns:
        EigKernelResult
    """
    n = a.shape[0]
    geev, geev_lwork = lapack_routines(('geev', 'geev_lwork'), a)

    lwork = query_workspace(geev_lwork, 'geev', n, compute_vl=0, compute_vr=1)
    wr, wi, _, vr, info = geev(a, compute_vl=0, compute_vr=1, lwork=lwork)
    check_argument_info(info, 'geev')
    return EigKernelResult(wr=wr, wi=wi, vr=vr, info=int(info))
