"""
Elementwise power, exponential, logarithmic and trigonometric functions.

Domain errors (log of a negative number, sqrt(-1), ...) yield nan or
inf; no exception is raised.
"""

from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.matrix.storage import Matrix


def _apply(func: Callable[[NDArray[np.float64]], NDArray[np.float64]], A: Matrix) -> Matrix:
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return Matrix._wrap(A.rows, A.cols, func(A._flat))


def power(A: Matrix, p: float) -> Matrix:
    """Raise every element to the power p."""
    return _apply(lambda x: np.power(x, float(p)), A)


def square(A: Matrix) -> Matrix:
    return _apply(np.square, A)


def sqrt(A: Matrix) -> Matrix:
    return _apply(np.sqrt, A)


def exp(A: Matrix) -> Matrix:
    return _apply(np.exp, A)


def log(A: Matrix) -> Matrix:
    """Natural logarithm."""
    return _apply(np.log, A)


def log10(A: Matrix) -> Matrix:
    return _apply(np.log10, A)


def log2(A: Matrix) -> Matrix:
    return _apply(np.log2, A)


def sin(A: Matrix) -> Matrix:
    return _apply(np.sin, A)


def cos(A: Matrix) -> Matrix:
    return _apply(np.cos, A)


def tan(A: Matrix) -> Matrix:
    return _apply(np.tan, A)
