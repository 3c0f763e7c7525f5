"""
Shared compute infrastructure for pymatrix.

IMPORTANT: This is NOT where the public algebra lives. That goes in
pymatrix.algebra. This module contains the LAPACK kernel wrappers, which
know nothing about Matrix or row-major layout.

Submodules:
    linalg: Linear algebra kernels (LU, QR, SVD, eigen, Cholesky, gels)
"""

from pymatrix.core.compute import linalg

__all__ = ["linalg"]
