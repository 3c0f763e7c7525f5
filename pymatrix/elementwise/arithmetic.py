"""
Elementwise arithmetic.

Binary operations accept three operand combinations:
    - matrix and matrix of the same shape
    - matrix and vector: the vector (length A.cols) is repeated for
      every row, in either operand position
    - matrix and scalar, in either operand position

Division by zero produces inf or nan, never an exception.
"""

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import check_length
from pymatrix.matrix.storage import Matrix, as_vector, is_scalar


_Operand = Any
_Op = Callable[[Any, Any], NDArray[np.float64]]


def _row_operand(value: _Operand, cols: int, name: str) -> float | NDArray[np.float64]:
    """Scalar, or a vector to be repeated for every row."""
    if is_scalar(value):
        return float(value)
    vec = as_vector(value, name)
    check_length(vec, cols, name)
    return vec


def _binary(op: _Op, a: _Operand, b: _Operand, name: str) -> Matrix:
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if isinstance(a, Matrix) and isinstance(b, Matrix):
            if a.shape != b.shape:
                raise DimensionError(
                    f"{name}: matrix dimensions must agree, got {a.rows}x{a.cols} "
                    f"and {b.rows}x{b.cols}"
                )
            return Matrix._wrap(a.rows, a.cols, op(a._flat, b._flat))

        if isinstance(a, Matrix):
            out = op(a._grid, _row_operand(b, a.cols, 'b'))
            return Matrix._wrap(a.rows, a.cols, np.ascontiguousarray(out).ravel())

        if isinstance(b, Matrix):
            out = op(_row_operand(a, b.cols, 'a'), b._grid)
            return Matrix._wrap(b.rows, b.cols, np.ascontiguousarray(out).ravel())

    raise ValidationError(f"{name}: at least one operand must be a Matrix")


def plus(a: _Operand, b: _Operand) -> Matrix:
    """Elementwise a + b."""
    return _binary(np.add, a, b, 'plus')


def minus(a: _Operand, b: _Operand) -> Matrix:
    """Elementwise a - b."""
    return _binary(np.subtract, a, b, 'minus')


def times(a: _Operand, b: _Operand) -> Matrix:
    """Elementwise (Hadamard) product a .* b."""
    return _binary(np.multiply, a, b, 'times')


def rdivide(a: _Operand, b: _Operand) -> Matrix:
    """Elementwise right division a ./ b."""
    return _binary(np.divide, a, b, 'rdivide')


def ldivide(a: _Operand, b: _Operand) -> Matrix:
    """Elementwise left division: b divided by a."""
    return _binary(lambda x, y: np.divide(y, x), a, b, 'ldivide')


def uminus(A: Matrix) -> Matrix:
    """Elementwise negation."""
    return Matrix._wrap(A.rows, A.cols, np.negative(A._flat))


def absolute(A: Matrix) -> Matrix:
    """Elementwise absolute value."""
    return Matrix._wrap(A.rows, A.cols, np.abs(A._flat))


def thr(A: Matrix, t: float) -> Matrix:
    """
    Threshold: every element below t is replaced by t.

    thr(A, 0.0) clips negative values to zero.
    """
    return Matrix._wrap(A.rows, A.cols, np.maximum(A._flat, float(t)))
