"""
Row-major dense matrix storage.

Matrix owns a flat float64 buffer of rows*cols values; element (i, j)
lives at offset i*cols + j. Indexers are the only way to mutate a Matrix
in place. Every algebraic function returns a freshly allocated Matrix and
leaves its inputs untouched.
"""

from enum import Enum
from numbers import Real
from typing import Any, Callable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError, IndexOutOfBoundsError, ValidationError
from pymatrix.core.precision import DEFAULT_ATOL, is_close, is_less, is_less_equal
from pymatrix.core.validation import (
    check_1d,
    check_array,
    check_equal_lengths,
    check_index,
    check_length,
    check_ndim,
    check_positive_dims,
)


class Dim(Enum):
    """Axis selector for row/column-wise operations."""
    ROW = 'row'
    COLUMN = 'column'


class Triangle(Enum):
    """Triangular half selector."""
    UPPER = 'upper'
    LOWER = 'lower'


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Matrix:
    """
    Dense double precision matrix in row-major layout.

    Construction:
        Matrix([[1, 2], [3, 4]])       2-D literal, rows of equal length
        Matrix([1, 2, 3])              1-D sequence, a single column
        Matrix(other)                  copy of another Matrix
        Matrix.filled(2, 3, 0.5)       dimensioned, filled with a value
        Matrix.from_flat(2, 2, flat)   from a row-major buffer

    Indexing:
        m[i, j]            element, 0 <= i < rows, 0 <= j < cols
        m[k]               element at flat row-major offset k
        m[er, ec]          slice with two Extractors (or ints / slices)
        m[i, j] = block    write a Matrix with its top-left corner at (i, j)

    Comparison operators hold only if they hold for every element pair,
    with an absolute tolerance of DEFAULT_ATOL. Matrices of different
    dimensions compare unequal and unordered.
    """

    __slots__ = ('_flat', '_rows', '_cols')

    # Make NumPy defer to our reflected operators (np.float64(2) * m)
    __array_ufunc__ = None

    def __init__(self, data: 'Matrix | ArrayLike'):
        if isinstance(data, Matrix):
            self._rows = data._rows
            self._cols = data._cols
            self._flat = data._flat.copy()
            return

        if isinstance(data, np.ndarray):
            values = check_array(data, 'data')
        else:
            rows = list(data)
            if rows and all(np.ndim(row) == 1 for row in rows):
                check_equal_lengths(rows, 'data')
            values = check_array(rows, 'data')

        if values.ndim == 1:
            values = values.reshape(-1, 1)
        check_ndim(values, 2, 'data')
        check_positive_dims(values.shape[0], values.shape[1], 'data')

        self._rows, self._cols = values.shape
        self._flat = np.array(values, dtype=np.float64, order='C').ravel()

    @classmethod
    def filled(cls, rows: int, cols: int, value: float = 0.0) -> 'Matrix':
        """Matrix of the given dimensions with every element set to value."""
        check_positive_dims(rows, cols, 'filled')
        return cls._wrap(rows, cols, np.full(rows * cols, float(value)))

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: ArrayLike) -> 'Matrix':
        """
        Matrix from a row-major buffer.

        Args:
            rows: Number of rows
            cols: Number of columns
            flat: rows*cols values in row-major order (copied)

        Raises:
            DimensionError: If the dimensions are not positive or the
                buffer length is not rows*cols
        """
        check_positive_dims(rows, cols, 'from_flat')
        values = check_array(flat, 'flat').ravel()
        if values.shape[0] != rows * cols:
            raise DimensionError(
                f"from_flat: buffer of {values.shape[0]} values cannot form a {rows}x{cols} matrix"
            )
        return cls._wrap(rows, cols, values.copy())

    @classmethod
    def _wrap(cls, rows: int, cols: int, flat: NDArray[np.float64]) -> 'Matrix':
        """Adopt a contiguous float64 buffer without copying (internal)."""
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._flat = flat
        return m

    # ═══════════════════════════════════════════════════════════════════
    # Shape and buffer access
    # ═══════════════════════════════════════════════════════════════════

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def flat(self) -> NDArray[np.float64]:
        """Copy of the row-major buffer."""
        return self._flat.copy()

    @property
    def _grid(self) -> NDArray[np.float64]:
        """2-D row-major view sharing the buffer (internal)."""
        return self._flat.reshape(self._rows, self._cols)

    def to_array(self) -> NDArray[np.float64]:
        """2-D numpy copy of the matrix."""
        return self._grid.copy()

    @property
    def T(self) -> 'Matrix':
        from pymatrix.algebra.products import transpose
        return transpose(self)

    # ═══════════════════════════════════════════════════════════════════
    # Whole row / column access
    # ═══════════════════════════════════════════════════════════════════

    def get_row(self, row: int) -> NDArray[np.float64]:
        check_index(row, self._rows, 'row')
        start = row * self._cols
        return self._flat[start:start + self._cols].copy()

    def set_row(self, row: int, values: ArrayLike) -> None:
        check_index(row, self._rows, 'row')
        vec = check_array(values, 'values')
        check_1d(vec, 'values')
        check_length(vec, self._cols, 'values')
        start = row * self._cols
        self._flat[start:start + self._cols] = vec

    def get_col(self, col: int) -> NDArray[np.float64]:
        check_index(col, self._cols, 'col')
        return self._flat[col::self._cols].copy()

    def set_col(self, col: int, values: ArrayLike) -> None:
        check_index(col, self._cols, 'col')
        vec = check_array(values, 'values')
        check_1d(vec, 'values')
        check_length(vec, self._rows, 'values')
        self._flat[col::self._cols] = vec

    # ═══════════════════════════════════════════════════════════════════
    # Indexers
    # ═══════════════════════════════════════════════════════════════════

    def __getitem__(self, key: Any) -> 'float | Matrix':
        if isinstance(key, tuple):
            row_key, col_key = self._split_key(key)
            if _is_int(row_key) and _is_int(col_key):
                check_index(row_key, self._rows, 'row')
                check_index(col_key, self._cols, 'col')
                return float(self._flat[row_key * self._cols + col_key])

            from pymatrix.manipulation.extractors import as_extractor
            from pymatrix.manipulation.slicing import slice as slice_matrix
            return slice_matrix(self, as_extractor(row_key), as_extractor(col_key))

        if _is_int(key):
            check_index(key, self._rows * self._cols, 'index')
            return float(self._flat[key])
        raise TypeError(f"Matrix indices must be integers, slices or extractors, not {type(key).__name__}")

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            row_key, col_key = self._split_key(key)
            if _is_int(row_key) and _is_int(col_key):
                if isinstance(value, Matrix):
                    self._set_block(row_key, col_key, value)
                    return
                check_index(row_key, self._rows, 'row')
                check_index(col_key, self._cols, 'col')
                self._flat[row_key * self._cols + col_key] = float(value)
                return

            from pymatrix.manipulation.extractors import as_extractor, resolve
            row_idx, col_idx = resolve(
                as_extractor(row_key), as_extractor(col_key), self._rows, self._cols
            )
            if isinstance(value, Matrix):
                if value.shape != (len(row_idx), len(col_idx)):
                    raise DimensionError(
                        f"block of shape {value.rows}x{value.cols} does not match "
                        f"selection of shape {len(row_idx)}x{len(col_idx)}"
                    )
                self._grid[np.ix_(row_idx, col_idx)] = value._grid
            else:
                self._grid[np.ix_(row_idx, col_idx)] = float(value)
            return

        if _is_int(key):
            check_index(key, self._rows * self._cols, 'index')
            self._flat[key] = float(value)
            return
        raise TypeError(f"Matrix indices must be integers, slices or extractors, not {type(key).__name__}")

    @staticmethod
    def _split_key(key: tuple) -> tuple[Any, Any]:
        if len(key) != 2:
            raise ValidationError(f"Matrix takes 2 indices, got {len(key)}")
        return key[0], key[1]

    def _set_block(self, row: int, col: int, block: 'Matrix') -> None:
        check_index(row, self._rows, 'row')
        check_index(col, self._cols, 'col')
        if row + block.rows > self._rows or col + block.cols > self._cols:
            raise IndexOutOfBoundsError(
                f"block of shape {block.rows}x{block.cols} at ({row}, {col}) "
                f"exceeds matrix of shape {self._rows}x{self._cols}",
                index=(row, col),
                size=self._rows * self._cols,
            )
        self._grid[row:row + block.rows, col:col + block.cols] = block._grid

    def __iter__(self) -> Iterator[NDArray[np.float64]]:
        for i in range(self._rows):
            yield self.get_row(i)

    # ═══════════════════════════════════════════════════════════════════
    # Comparison
    # ═══════════════════════════════════════════════════════════════════

    def _compare(self, other: 'Matrix', op: Callable[..., NDArray[np.bool_]], swap: bool = False) -> bool:
        # Matrices of different dimensions are never equal or ordered
        if self.shape != other.shape:
            return False
        a, b = (other._flat, self._flat) if swap else (self._flat, other._flat)
        return bool(np.all(op(a, b, DEFAULT_ATOL)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._compare(other, is_close)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: 'Matrix') -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._compare(other, is_less)

    def __gt__(self, other: 'Matrix') -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._compare(other, is_less, swap=True)

    def __le__(self, other: 'Matrix') -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._compare(other, is_less_equal)

    def __ge__(self, other: 'Matrix') -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._compare(other, is_less_equal, swap=True)

    # ═══════════════════════════════════════════════════════════════════
    # Operator sugar over the named functions
    # ═══════════════════════════════════════════════════════════════════

    def __add__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import plus
        return plus(self, other)

    def __radd__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import plus
        return plus(other, self)

    def __sub__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import minus
        return minus(self, other)

    def __rsub__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import minus
        return minus(other, self)

    def __mul__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import times
        return times(self, other)

    def __rmul__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import times
        return times(other, self)

    def __truediv__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import rdivide
        return rdivide(self, other)

    def __rtruediv__(self, other: Any) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import rdivide
        return rdivide(other, self)

    def __matmul__(self, other: 'Matrix') -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.algebra.products import mtimes
        return mtimes(self, other)

    def __pow__(self, p: int) -> 'Matrix':
        if not _is_int(p):
            return NotImplemented
        from pymatrix.algebra.products import mpower
        return mpower(self, int(p))

    def __neg__(self) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import uminus
        return uminus(self)

    def __abs__(self) -> 'Matrix':
        from pymatrix.elementwise.arithmetic import absolute
        return absolute(self)

    # ═══════════════════════════════════════════════════════════════════
    # Display
    # ═══════════════════════════════════════════════════════════════════

    def __repr__(self) -> str:
        return f"Matrix({self._grid.tolist()!r})"

    def __str__(self) -> str:
        return "\n".join(
            " ".join(f"{v:g}" for v in self.get_row(i)) for i in range(self._rows)
        )


def as_vector(values: ArrayLike | Sequence[float], name: str) -> NDArray[np.float64]:
    """
    Validate a 1-D operand and return it as a float64 vector.

    A one-row or one-column Matrix is accepted and flattened.
    """
    if isinstance(values, Matrix):
        if values.rows != 1 and values.cols != 1:
            raise DimensionError(
                f"{name}: expected a vector, got a {values.rows}x{values.cols} matrix"
            )
        return values.flat
    vec = check_array(values, name)
    check_1d(vec, name)
    return vec


def is_scalar(value: Any) -> bool:
    """True for real numbers (bool excluded)."""
    return isinstance(value, (Real, np.floating, np.integer)) and not isinstance(value, (bool, np.bool_))
