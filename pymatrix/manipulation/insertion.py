"""
Insertion, append/prepend and concatenation of rows and columns.

All functions return a new matrix; rows (columns) of the source at or
after the insertion index shift down (right) by the size of the
inserted block.

Note on concatenation names: hconcat ("horizontal") stacks its operands
by rows and grows the row count, vconcat ("vertical") stacks by columns
and grows the column count. This is the transpose of the NumPy
convention, which vstack and hstack follow instead.
"""

from functools import reduce
from typing import Any, Sequence

import numpy as np

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import check_conformant, check_insert_position
from pymatrix.matrix.storage import Matrix, as_vector, is_scalar


def _row_block(row: Any, width: int) -> Matrix:
    """One-row matrix from a scalar (broadcast), a vector or a 1 x n Matrix."""
    if is_scalar(row):
        return Matrix.filled(1, width, float(row))
    if isinstance(row, Matrix) and row.rows != 1:
        raise DimensionError(f"row: expected a single row, got a {row.rows}x{row.cols} matrix")
    values = as_vector(row, 'row')
    return Matrix._wrap(1, values.shape[0], values.copy())


def _col_block(col: Any, height: int) -> Matrix:
    """One-column matrix from a scalar (broadcast), a vector or an n x 1 Matrix."""
    if is_scalar(col):
        return Matrix.filled(height, 1, float(col))
    if isinstance(col, Matrix) and col.cols != 1:
        raise DimensionError(f"col: expected a single column, got a {col.rows}x{col.cols} matrix")
    values = as_vector(col, 'col')
    return Matrix._wrap(values.shape[0], 1, values.copy())


def _rows_block(rows: Matrix | Sequence[Any]) -> Matrix:
    """Matrix of rows from a Matrix or a list of row vectors."""
    if isinstance(rows, Matrix):
        return rows
    return Matrix([as_vector(r, 'rows') for r in rows])


def _cols_block(cols: Matrix | Sequence[Any]) -> Matrix:
    """Matrix of columns from a Matrix or a list of column vectors."""
    if isinstance(cols, Matrix):
        return cols
    stacked = Matrix([as_vector(c, 'cols') for c in cols])
    from pymatrix.algebra.products import transpose
    return transpose(stacked)


def _insert_rows(m: Matrix, block: Matrix, index: int) -> Matrix:
    check_conformant(m.shape, block.shape, 1, 1, ('m', 'rows'))
    check_insert_position(index, m.rows, 'at')
    grid = m._grid
    out = np.concatenate((grid[:index], block._grid, grid[index:]), axis=0)
    return Matrix._wrap(out.shape[0], out.shape[1], out.ravel())


def _insert_cols(m: Matrix, block: Matrix, index: int) -> Matrix:
    check_conformant(m.shape, block.shape, 0, 0, ('m', 'cols'))
    check_insert_position(index, m.cols, 'at')
    grid = m._grid
    out = np.concatenate((grid[:, :index], block._grid, grid[:, index:]), axis=1)
    return Matrix._wrap(out.shape[0], out.shape[1], np.ascontiguousarray(out).ravel())


def _single_keyword(keywords: dict[str, Any], func: str) -> tuple[str, Any]:
    given = [(k, v) for k, v in keywords.items() if v is not None]
    if len(given) != 1:
        raise ValidationError(
            f"{func}: pass exactly one of row=, rows=, col=, cols=, got {[k for k, _ in given]}"
        )
    return given[0]


def insert(
    m: Matrix,
    *,
    at: int,
    row: Any = None,
    rows: Any = None,
    col: Any = None,
    cols: Any = None
) -> Matrix:
    """
    Insert rows or columns before position `at`.

    Exactly one of the block keywords must be given:
        row:  scalar (broadcast to a full row), vector, or 1 x n Matrix
        rows: Matrix, or list of row vectors
        col:  scalar (broadcast to a full column), vector, or n x 1 Matrix
        cols: Matrix, or list of column vectors

    Args:
        m: Source matrix (not modified)
        at: Insertion index, 0 <= at <= axis size; at == axis size appends

    Returns:
        New matrix with the block inserted

    Raises:
        DimensionError: If the block width (height) differs from m's
        IndexOutOfBoundsError: If `at` is outside [0, axis size]

    Example:
        >>> insert(Matrix([[1, 2], [3, 4]]), rows=Matrix([[5, 6]]), at=1)
        Matrix([[1.0, 2.0], [5.0, 6.0], [3.0, 4.0]])
    """
    kind, value = _single_keyword(
        {'row': row, 'rows': rows, 'col': col, 'cols': cols}, 'insert'
    )
    if kind == 'row':
        return _insert_rows(m, _row_block(value, m.cols), at)
    if kind == 'rows':
        return _insert_rows(m, _rows_block(value), at)
    if kind == 'col':
        return _insert_cols(m, _col_block(value, m.rows), at)
    return _insert_cols(m, _cols_block(value), at)


def append(m: Matrix, *, row: Any = None, rows: Any = None, col: Any = None, cols: Any = None) -> Matrix:
    """Insert after the last row (or column). Same keywords as insert()."""
    kind, _ = _single_keyword({'row': row, 'rows': rows, 'col': col, 'cols': cols}, 'append')
    at = m.rows if kind in ('row', 'rows') else m.cols
    return insert(m, at=at, row=row, rows=rows, col=col, cols=cols)


def prepend(m: Matrix, *, row: Any = None, rows: Any = None, col: Any = None, cols: Any = None) -> Matrix:
    """Insert before the first row (or column). Same keywords as insert()."""
    return insert(m, at=0, row=row, rows=rows, col=col, cols=cols)


def hconcat(lhs: Any, rhs: Any) -> Matrix:
    """
    Stack lhs on top of rhs (grows the row count).

    Either operand may be a vector or a scalar, taken as a single row
    (a scalar is broadcast to the width of the other operand).
    """
    if isinstance(lhs, Matrix):
        if isinstance(rhs, Matrix):
            return append(lhs, rows=rhs)
        return append(lhs, row=rhs)
    if isinstance(rhs, Matrix):
        return prepend(rhs, row=lhs)
    raise ValidationError("hconcat: at least one operand must be a Matrix")


def vconcat(lhs: Any, rhs: Any) -> Matrix:
    """
    Place rhs to the right of lhs (grows the column count).

    Either operand may be a vector or a scalar, taken as a single column
    (a scalar is broadcast to the height of the other operand).
    """
    if isinstance(lhs, Matrix):
        if isinstance(rhs, Matrix):
            return append(lhs, cols=rhs)
        return append(lhs, col=rhs)
    if isinstance(rhs, Matrix):
        return prepend(rhs, col=lhs)
    raise ValidationError("vconcat: at least one operand must be a Matrix")


def vstack(matrices: Sequence[Matrix]) -> Matrix:
    """Stack matrices top to bottom (conventional vstack)."""
    if len(matrices) == 0:
        raise ValidationError("vstack: need at least one matrix")
    return reduce(hconcat, matrices[1:], Matrix(matrices[0]))


def hstack(matrices: Sequence[Matrix]) -> Matrix:
    """Place matrices left to right (conventional hstack)."""
    if len(matrices) == 0:
        raise ValidationError("hstack: need at least one matrix")
    return reduce(vconcat, matrices[1:], Matrix(matrices[0]))
