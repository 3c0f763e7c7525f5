"""
Tests for elementwise arithmetic and elementwise functions.

Matrix-vector operands repeat the vector on every row; scalars apply
to every element, in either operand position.
"""

import numpy as np
import pytest

from pymatrix import DimensionError, Matrix, ValidationError
from pymatrix.elementwise import (
    absolute,
    cos,
    exp,
    ldivide,
    log,
    log2,
    log10,
    minus,
    plus,
    power,
    rdivide,
    sin,
    sqrt,
    square,
    tan,
    thr,
    times,
    uminus,
)


# ═══════════════════════════════════════════════════════════════════════
# Binary operations
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixMatrix:
    """Same-shape operands combine element by element."""

    def test_plus(self, small):
        assert plus(small, small) == Matrix([[2, 4], [6, 8]])

    def test_minus(self, small):
        assert minus(small, Matrix([[1, 1], [1, 1]])) == Matrix([[0, 1], [2, 3]])

    def test_times_is_hadamard(self, small):
        assert times(small, small) == Matrix([[1, 4], [9, 16]])

    def test_rdivide(self, small):
        assert rdivide(small, Matrix([[2, 2], [3, 4]])) == Matrix([[0.5, 1], [1, 1]])

    def test_ldivide(self, small):
        """ldivide(a, b) divides b by a."""
        assert ldivide(Matrix([[2, 2], [3, 4]]), small) == Matrix([[0.5, 1], [1, 1]])

    def test_shape_mismatch(self, small, grid):
        with pytest.raises(DimensionError, match="must agree"):
            plus(small, grid)

    def test_operators(self, small):
        assert small + small == plus(small, small)
        assert small - small == Matrix([[0, 0], [0, 0]])
        assert small * small == times(small, small)
        assert small / small == Matrix([[1, 1], [1, 1]])
        assert -small == Matrix([[-1, -2], [-3, -4]])

    def test_inputs_unchanged(self, small):
        plus(small, small)
        assert small == Matrix([[1, 2], [3, 4]])


class TestMatrixVector:
    """A vector of length A.cols is applied to every row."""

    def test_plus_vector(self, small):
        assert plus(small, [10, 20]) == Matrix([[11, 22], [13, 24]])

    def test_vector_on_left(self, small):
        assert minus([10, 20], small) == Matrix([[9, 18], [7, 16]])

    def test_times_array(self, grid):
        result = times(grid, np.array([1, 0, 1, 0, 1]))
        assert result[1, :].flat.tolist() == [5, 0, 7, 0, 9]

    def test_row_matrix_vector(self, small):
        assert rdivide(small, Matrix([[1, 2]]).flat) == Matrix([[1, 1], [3, 2]])

    def test_vector_length_mismatch(self, small):
        with pytest.raises(DimensionError):
            plus(small, [1, 2, 3])

    def test_two_dimensional_operand(self, small):
        with pytest.raises(DimensionError, match="expected 1D"):
            plus(small, np.ones((2, 2)))


class TestMatrixScalar:
    """Scalars broadcast over every element."""

    def test_plus_scalar(self, small):
        assert plus(small, 1) == Matrix([[2, 3], [4, 5]])
        assert small + 1 == 1 + small

    def test_scalar_minus_matrix(self, small):
        assert 10 - small == Matrix([[9, 8], [7, 6]])

    def test_scalar_divided_by_matrix(self, small):
        assert 12 / small == Matrix([[12, 6], [4, 3]])

    def test_ldivide_scalar(self, small):
        assert ldivide(2.0, small) == Matrix([[0.5, 1], [1.5, 2]])

    def test_numpy_scalar(self, small):
        assert small * np.float64(2.0) == Matrix([[2, 4], [6, 8]])

    def test_two_scalars(self):
        with pytest.raises(ValidationError, match="at least one operand"):
            plus(1.0, 2.0)


class TestDivisionByZero:
    """Division by zero yields inf or nan without raising."""

    def test_divide_by_zero_scalar(self, small):
        result = (small / 0.0).to_array()
        assert np.all(np.isinf(result))
        assert np.all(result > 0)

    def test_zero_by_zero(self):
        result = rdivide(Matrix([[0.0, 1.0]]), Matrix([[0.0, 0.0]])).to_array()
        assert np.isnan(result[0, 0])
        assert np.isinf(result[0, 1])


# ═══════════════════════════════════════════════════════════════════════
# Unary operations
# ═══════════════════════════════════════════════════════════════════════


class TestUnary:
    """uminus, absolute, thr."""

    def test_uminus(self, small):
        assert uminus(small) == -1 * small

    def test_absolute(self):
        assert absolute(Matrix([[-1, 2], [3, -4]])) == Matrix([[1, 2], [3, 4]])
        assert abs(Matrix([[-1.5]])) == Matrix([[1.5]])

    def test_thr_clips_below(self):
        m = Matrix([[-2, -1, 0], [1, 2, 3]])
        assert thr(m, 0.0) == Matrix([[0, 0, 0], [1, 2, 3]])
        assert thr(m, 1.5) == Matrix([[1.5, 1.5, 1.5], [1.5, 2, 3]])


# ═══════════════════════════════════════════════════════════════════════
# Functions
# ═══════════════════════════════════════════════════════════════════════


class TestFunctions:
    """Elementwise power, exponential, logarithmic and trigonometric."""

    def test_power(self, small):
        assert power(small, 2) == square(small)
        assert power(small, 0.5) == sqrt(small)

    def test_square(self, small):
        assert square(small) == Matrix([[1, 4], [9, 16]])

    def test_sqrt(self):
        assert sqrt(Matrix([[4, 9], [16, 25]])) == Matrix([[2, 3], [4, 5]])

    def test_exp_log_inverse(self, small):
        np.testing.assert_allclose(log(exp(small)).to_array(), small.to_array(), rtol=1e-14)

    def test_log_bases(self):
        m = Matrix([[1, 10, 100]])
        np.testing.assert_allclose(log10(m).flat, [0, 1, 2], atol=1e-15)
        np.testing.assert_allclose(log2(Matrix([[1, 2, 8]])).flat, [0, 1, 3], atol=1e-15)

    def test_trig(self):
        m = Matrix([[0.0, np.pi / 2], [np.pi, np.pi / 4]])
        np.testing.assert_allclose(sin(m).to_array(), [[0, 1], [0, np.sqrt(0.5)]], atol=1e-15)
        np.testing.assert_allclose(cos(m).to_array(), [[1, 0], [-1, np.sqrt(0.5)]], atol=1e-15)
        np.testing.assert_allclose(tan(Matrix([[0.0, np.pi / 4]])).flat, [0, 1], atol=1e-15)

    def test_log_of_negative_is_nan(self):
        result = log(Matrix([[-1.0, 0.0]])).flat
        assert np.isnan(result[0])
        assert result[1] == -np.inf

    def test_sqrt_of_negative_is_nan(self):
        assert np.isnan(sqrt(Matrix([[-4.0]])).flat[0])

    def test_shape_preserved(self, grid):
        assert exp(grid).shape == (4, 5)
