"""
Linear algebra kernels for pymatrix.

Thin wrappers around LAPACK (through scipy.linalg.lapack) used by the
decomposition engine.

All functions follow these conventions:
    - Inputs and outputs are column-major (Fortran-ordered) float64 arrays
    - Routines needing scratch memory use the two-phase workspace protocol
      (query the optimal size, then execute with exactly that size)
    - Negative status codes raise KernelError; positive ones are returned
      so the engine can translate them into its own error model
    - Each operation returns a structured result dataclass

Submodules:
    workspace: Two-phase workspace queries and status checks
    lu: LU factorization, inverse and determinant (getrf/getri)
    qr: QR decomposition (geqrf/orgqr)
    svd: Singular value decomposition (gesdd)
    eig: General eigenproblem (geev)
    cholesky: Cholesky factorization (potrf)
    least_squares: Overdetermined least squares (gels)
"""

from pymatrix.core.compute.linalg.cholesky import cholesky_factor
from pymatrix.core.compute.linalg.eig import EigKernelResult, eig_general
from pymatrix.core.compute.linalg.least_squares import GelsResult, lstsq_qr
from pymatrix.core.compute.linalg.lu import (
    LUResult,
    lu_determinant,
    lu_factor,
    lu_invert,
)
from pymatrix.core.compute.linalg.qr import QRResult, qr_factor
from pymatrix.core.compute.linalg.svd import SVDKernelResult, svd_full
from pymatrix.core.compute.linalg.workspace import (
    check_argument_info,
    query_workspace,
    query_workspace_inplace,
)

__all__ = [
    # Workspace protocol
    "check_argument_info",
    "query_workspace",
    "query_workspace_inplace",
    # LU
    "LUResult",
    "lu_factor",
    "lu_invert",
    "lu_determinant",
    # QR
    "QRResult",
    "qr_factor",
    # SVD
    "SVDKernelResult",
    "svd_full",
    # Eigen
    "EigKernelResult",
    "eig_general",
    # Cholesky
    "cholesky_factor",
    # Least squares
    "GelsResult",
    "lstsq_qr",
]
