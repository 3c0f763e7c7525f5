"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the
matrix, manipulation, algebra and elementwise subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators (fatal preconditions)
    precision: Comparison tolerance and rank tolerance
    tolerances: Tolerance tiers for numerical comparison in tests
    compute: LAPACK kernels with the two-phase workspace protocol
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
    KernelError,
)

__all__ = [
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    "KernelError",
]
