"""
Precondition checks shared by the matrix engine.

Each check raises at the call that detects the problem, with the
offending parameter name and the actual values in the message. Shape
problems raise DimensionError, index problems IndexOutOfBoundsError and
anything that cannot become a float64 array ValidationError.

Checks never repair their input; np.asarray on array-likes is the only
conversion performed.
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (indicating ragged or mixed data) and non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex data is not supported")

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_equal_lengths(rows: Sequence[Any], name: str) -> None:
    """
    Verify every row of a nested literal has the same length.

    Raises:
        ValidationError: If the literal is empty
        DimensionError: If row lengths differ
    """
    if len(rows) == 0:
        raise ValidationError(f"{name}: input must not be empty")
    lengths = sorted({len(row) for row in rows})
    if len(lengths) > 1:
        raise DimensionError(
            f"{name}: input dimensions must agree, got row lengths {lengths}"
        )


def check_positive_dims(rows: int, cols: int, name: str) -> None:
    """
    Verify matrix dimensions are both positive.

    Raises:
        DimensionError: If either dimension is not positive
    """
    if rows <= 0 or cols <= 0:
        raise DimensionError(
            f"{name}: matrix dimensions must be positive, got {rows}x{cols}"
        )


def check_length(values: NDArray[np.floating[Any]], expected: int, name: str) -> None:
    """
    Verify a vector has the expected number of elements.

    Raises:
        DimensionError: If the length differs
    """
    if values.shape[0] != expected:
        raise DimensionError(
            f"{name}: expected {expected} values, got {values.shape[0]}"
        )


def check_square(rows: int, cols: int, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    if rows != cols:
        raise DimensionError(f"{name}: matrix must be square, got {rows}x{cols}")


def check_conformant(
    left: tuple[int, int],
    right: tuple[int, int],
    left_axis: int,
    right_axis: int,
    names: tuple[str, str],
) -> None:
    """
    Verify two shapes agree along the given axes.

    Args:
        left: Shape of the first operand
        right: Shape of the second operand
        left_axis: Axis of the first operand (0 rows, 1 columns)
        right_axis: Axis of the second operand
        names: Operand names for error messages

    Raises:
        DimensionError: If the sizes differ
    """
    if left[left_axis] != right[right_axis]:
        axis_names = ('rows', 'cols')
        raise DimensionError(
            f"Matrix dimensions must agree: {names[0]}.{axis_names[left_axis]}="
            f"{left[left_axis]}, {names[1]}.{axis_names[right_axis]}={right[right_axis]}"
        )


def check_index(index: int, size: int, name: str) -> None:
    """
    Verify 0 <= index < size.

    Raises:
        IndexOutOfBoundsError: If the index is outside the axis
    """
    if index < 0 or index >= size:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of bounds for size {size}",
            index=index,
            size=size,
        )


def check_insert_position(index: int, size: int, name: str) -> None:
    """
    Verify 0 <= index <= size (insertion at size appends).

    Raises:
        IndexOutOfBoundsError: If the position is outside [0, size]
    """
    if index < 0 or index > size:
        raise IndexOutOfBoundsError(
            f"{name}: insert position {index} out of bounds for size {size}",
            index=index,
            size=size,
        )
