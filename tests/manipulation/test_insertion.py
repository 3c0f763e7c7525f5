"""
Tests for insert / append / prepend and concatenation.
"""

import numpy as np
import pytest

from pymatrix import (
    DimensionError,
    IndexOutOfBoundsError,
    Matrix,
    ValidationError,
    append,
    hconcat,
    hstack,
    insert,
    prepend,
    vconcat,
    vstack,
)
from pymatrix.core.tolerances import EXACT


def assert_exact(actual, expected):
    np.testing.assert_allclose(actual, expected, rtol=EXACT.rtol, atol=EXACT.atol)


@pytest.fixture
def block():
    return Matrix([[5.0, 6.0], [7.0, 8.0]])


# ═══════════════════════════════════════════════════════════════════════
# insert
# ═══════════════════════════════════════════════════════════════════════


class TestInsertRows:
    """Rows at or after the index shift down."""

    def test_insert_rows_matrix(self, small, block):
        result = insert(small, rows=block, at=1)
        assert result == Matrix([[1, 2], [5, 6], [7, 8], [3, 4]])

    def test_insert_row_vector(self, small):
        result = insert(small, row=[9, 9], at=0)
        assert result == Matrix([[9, 9], [1, 2], [3, 4]])

    def test_insert_row_scalar_broadcast(self, small):
        result = insert(small, row=0.5, at=2)
        assert result == Matrix([[1, 2], [3, 4], [0.5, 0.5]])

    def test_insert_row_matrix(self, small):
        result = insert(small, row=Matrix([[9, 8]]), at=1)
        assert result == Matrix([[1, 2], [9, 8], [3, 4]])

    def test_insert_rows_list(self, small):
        result = insert(small, rows=[[5, 6], [7, 8]], at=2)
        assert result == Matrix([[1, 2], [3, 4], [5, 6], [7, 8]])

    def test_insertion_invariant(self, random_matrix):
        m = random_matrix(5, 3)
        k = random_matrix(2, 3)
        result = insert(m, rows=k, at=3)
        assert result.shape == (7, 3)
        grid, source, inserted = result.to_array(), m.to_array(), k.to_array()
        assert_exact(grid[:3], source[:3])
        assert_exact(grid[3:5], inserted)
        assert_exact(grid[5:], source[3:])

    def test_width_mismatch(self, small):
        with pytest.raises(DimensionError):
            insert(small, rows=Matrix([[1, 2, 3]]), at=0)

    def test_multi_row_matrix_as_row(self, small, block):
        with pytest.raises(DimensionError, match="single row"):
            insert(small, row=block, at=0)

    @pytest.mark.parametrize("at", [-1, 3])
    def test_position_out_of_bounds(self, small, at):
        with pytest.raises(IndexOutOfBoundsError):
            insert(small, row=1.0, at=at)

    def test_source_not_modified(self, small, block):
        insert(small, rows=block, at=1)
        assert small == Matrix([[1, 2], [3, 4]])


class TestInsertCols:
    """Columns at or after the index shift right."""

    def test_insert_cols_matrix(self, small, block):
        result = insert(small, cols=block, at=1)
        assert result == Matrix([[1, 5, 6, 2], [3, 7, 8, 4]])

    def test_insert_col_vector(self, small):
        result = insert(small, col=[9, 8], at=0)
        assert result == Matrix([[9, 1, 2], [8, 3, 4]])

    def test_insert_col_scalar(self, small):
        result = insert(small, col=0.0, at=1)
        assert result == Matrix([[1, 0, 2], [3, 0, 4]])

    def test_insert_cols_list_of_columns(self, small):
        result = insert(small, cols=[[5, 7], [6, 8]], at=2)
        assert result == Matrix([[1, 2, 5, 6], [3, 4, 7, 8]])

    def test_height_mismatch(self, small):
        with pytest.raises(DimensionError):
            insert(small, col=[1, 2, 3], at=0)


class TestKeywords:
    """Exactly one block keyword is accepted."""

    def test_none(self, small):
        with pytest.raises(ValidationError, match="exactly one"):
            insert(small, at=0)

    def test_two(self, small):
        with pytest.raises(ValidationError, match="exactly one"):
            insert(small, row=1.0, col=1.0, at=0)


# ═══════════════════════════════════════════════════════════════════════
# append / prepend
# ═══════════════════════════════════════════════════════════════════════


class TestAppendPrepend:
    """append inserts at the axis size, prepend at zero."""

    def test_append_row_scalar(self, small):
        assert append(small, row=5.0) == Matrix([[1, 2], [3, 4], [5, 5]])

    def test_prepend_row_scalar(self, small):
        assert prepend(small, row=5.0) == Matrix([[5, 5], [1, 2], [3, 4]])

    def test_append_rows_forms_agree(self, small):
        expected = Matrix([[1, 2], [3, 4], [5, 6]])
        assert append(small, rows=[[5, 6]]) == expected
        assert append(small, rows=Matrix([[5, 6]])) == expected
        assert append(small, row=[5, 6]) == expected

    def test_append_col(self, small):
        assert append(small, col=[5, 6]) == Matrix([[1, 2, 5], [3, 4, 6]])

    def test_prepend_cols(self, small, block):
        assert prepend(small, cols=block) == Matrix([[5, 6, 1, 2], [7, 8, 3, 4]])


# ═══════════════════════════════════════════════════════════════════════
# Concatenation
# ═══════════════════════════════════════════════════════════════════════


class TestConcatenation:
    """hconcat grows rows, vconcat grows columns."""

    def test_hconcat_matrices(self, small, block):
        assert hconcat(small, block) == Matrix([[1, 2], [3, 4], [5, 6], [7, 8]])

    def test_hconcat_vector_on_left(self, small):
        assert hconcat([5, 6], small) == Matrix([[5, 6], [1, 2], [3, 4]])

    def test_hconcat_scalar(self, small):
        assert hconcat(small, 5.0) == Matrix([[1, 2], [3, 4], [5, 5]])

    def test_vconcat_matrices(self, small, block):
        assert vconcat(small, block) == Matrix([[1, 2, 5, 6], [3, 4, 7, 8]])

    def test_vconcat_scalar_on_left(self, small):
        assert vconcat(0.0, small) == Matrix([[0, 1, 2], [0, 3, 4]])

    def test_concat_needs_a_matrix(self):
        with pytest.raises(ValidationError):
            hconcat(1.0, 2.0)
        with pytest.raises(ValidationError):
            vconcat([1.0], [2.0])

    def test_vstack_is_conventional(self, small, block):
        result = vstack([small, block, small])
        assert result.shape == (6, 2)
        assert result == hconcat(hconcat(small, block), small)

    def test_hstack_is_conventional(self, small, block):
        result = hstack([small, block])
        assert result.shape == (2, 4)

    def test_stack_empty(self):
        with pytest.raises(ValidationError):
            vstack([])
