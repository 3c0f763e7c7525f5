"""
Numerical precision constants and utilities.

Provides machine epsilon, the comparison tolerance used by Matrix equality
and ordering, and the rank tolerance used when inspecting triangular
factors.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Absolute tolerance for elementwise matrix comparisons
DEFAULT_ATOL: float = 1e-14


def is_close(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    atol: float = DEFAULT_ATOL
) -> NDArray[np.bool_]:
    """
    Elementwise absolute closeness: |a - b| <= atol.

    Args:
        a: First values
        b: Second values
        atol: Absolute tolerance

    Returns:
        Boolean array indicating closeness
    """
    return np.abs(a - b) <= atol


def is_less(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    atol: float = DEFAULT_ATOL
) -> NDArray[np.bool_]:
    """Elementwise strict order with tolerance: b - a > atol."""
    return (b - a) > atol


def is_less_equal(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    atol: float = DEFAULT_ATOL
) -> NDArray[np.bool_]:
    """Elementwise order with tolerance: close, or strictly less."""
    return (a - b) <= atol


def rank_tolerance(diagonal: NDArray[np.floating[Any]], shape: tuple[int, int]) -> float:
    """
    Tolerance below which a triangular-factor diagonal entry counts as zero.

    Args:
        diagonal: Absolute values of the factor diagonal
        shape: Shape of the factored matrix

    Returns:
        max(shape) * eps * max(diagonal), or 0.0 for an empty/zero diagonal
    """
    if diagonal.size == 0:
        return 0.0
    return max(shape) * EPSILON_64 * float(np.max(diagonal))
