"""
LU factorization kernels.

Wraps LAPACK getrf (LU with partial pivoting) and getri (inverse from
the LU factors). Inputs and outputs are column-major (Fortran-ordered)
arrays; layout translation is the caller's business.
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
class LUResult:
    """
    Result of an LU factorization.

    Attributes:
        lu: Packed factors (unit lower L below the diagonal, U on and above)
        piv: 0-based pivot indices; row i was interchanged with row piv[i]
        info: getrf status; info > 0 means U[info-1, info-1] is exactly zero
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    info: int

    @property
    def is_singular(self) -> bool:
        return self.info > 0


def lu_factor(a: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU factorization with partial pivoting (getrf).

    Args:
        a: Column-major matrix to factor

    Returns:
        LUResult; a singular factor is reported through info, not raised
    """
    getrf, = lapack_routines(('getrf',), a)
    lu, piv, info = getrf(a)
    check_argument_info(info, 'getrf')
    return LUResult(lu=lu, piv=piv, info=int(info))


def lu_invert(factor: LUResult) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Inverse of a matrix from its LU factors (getri).

    Follows the two-phase protocol: getri_lwork reports the optimal
    workspace, then getri runs with exactly that much.

    Args:
        factor: Result of lu_factor on a square matrix

    Returns:
        (inverse, info); info > 0 means the factor is singular
    """
    getri, getri_lwork = lapack_routines(('getri', 'getri_lwork'), factor.lu)
    n = factor.lu.shape[0]

    lwork = query_workspace(getri_lwork, 'getri', n)
    inv_a, info = getri(factor.lu, factor.piv, lwork=lwork)
    check_argument_info(info, 'getri')
    return inv_a, int(info)


def lu_determinant(factor: LUResult) -> float:
    """
    Determinant from LU factors.

    det = prod(diag(U)) * (-1)^(number of row interchanges), where an
    interchange is any pivot entry that differs from its own row index.
    """
    diagonal = np.diag(factor.lu)
    swaps = int(np.count_nonzero(factor.piv != np.arange(factor.piv.shape[0])))
    sign = -1.0 if swaps % 2 else 1.0
    return sign * float(np.prod(diagonal))
