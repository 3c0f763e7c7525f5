"""
Cholesky factorization kernel (LAPACK potrf).

potrf works in place and needs no workspace, so unlike the other
kernels it is a single call.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.workspace import check_argument_info, lapack_routines


def cholesky_factor(
    a: NDArray[np.floating[Any]],
    lower: bool
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Cholesky factor of a symmetric positive definite matrix.

    Only the requested triangle is referenced and overwritten; the other
    triangle is returned untouched (clean=0), so callers must extract the
    half they asked for.

    Args:
        a: Column-major square matrix
        lower: Factor as L (a = L L') instead of U (a = U' U)

    Returns:
        (factor, info); info > 0 is the order of the first leading minor
        that is not positive definite
    """
    potrf, = lapack_routines(('potrf',), a)
    c, info = potrf(a, lower=int(lower), clean=0)
    check_argument_info(info, 'potrf')
    return c, int(info)
