"""
Tests for the LAPACK kernel wrappers.

The kernels work on column-major numpy arrays and know nothing about
Matrix. Each is checked against the factorization identity it promises,
and the workspace protocol is checked on its own.
"""

import importlib

import numpy as np
import pytest

from pymatrix.core.compute.linalg import (
    cholesky_factor,
    eig_general,
    lstsq_qr,
    lu_determinant,
    lu_factor,
    lu_invert,
    qr_factor,
    svd_full,
)
from pymatrix.core.compute.linalg.workspace import (
    check_argument_info,
    lapack_routines,
    query_workspace,
    query_workspace_inplace,
)
from pymatrix.core.exceptions import KernelError


def fortran(values):
    return np.asfortranarray(np.asarray(values, dtype=np.float64))


# ═══════════════════════════════════════════════════════════════════════
# Workspace protocol
# ═══════════════════════════════════════════════════════════════════════


class TestWorkspace:
    """Query phase sizes the workspace the execute phase is given."""

    def test_dedicated_query(self):
        a = fortran(np.eye(4))
        _, getri_lwork = lapack_routines(('getri', 'getri_lwork'), a)
        lwork = query_workspace(getri_lwork, 'getri', 4)
        assert isinstance(lwork, int)
        assert lwork >= 4

    def test_inplace_query(self):
        a = fortran(np.ones((5, 3)))
        geqrf, = lapack_routines(('geqrf',), a)
        lwork = query_workspace_inplace(geqrf, 'geqrf', a)
        assert isinstance(lwork, int)
        assert lwork >= 3

    @pytest.mark.parametrize("module, call", [
        ('lu', lambda: lu_invert(lu_factor(fortran([[4.0, 3.0, 2.0], [6.0, 3.0, 1.0], [2.0, 5.0, 7.0]])))),
        ('eig', lambda: eig_general(fortran([[2.0, 1.0, 0.0], [1.0, 3.0, 1.0], [0.0, 1.0, 4.0]]))),
        ('least_squares', lambda: lstsq_qr(
            fortran([[1.0, 1.0], [1.0, 2.0], [1.0, 3.0], [1.0, 4.0]]),
            fortran([[6.0], [5.0], [7.0], [10.0]]),
        )),
    ])
    def test_execute_receives_queried_size(self, monkeypatch, module, call):
        target = importlib.import_module(f'pymatrix.core.compute.linalg.{module}')
        reported = []
        received = []

        def record_query(fn):
            def wrapper(*args, **kwargs):
                work, info = fn(*args, **kwargs)
                reported.append(max(int(np.ceil(float(np.real(np.ravel(work)[0])))), 1))
                return work, info
            return wrapper

        def record_execute(fn):
            def wrapper(*args, **kwargs):
                if 'lwork' in kwargs:
                    received.append(kwargs['lwork'])
                return fn(*args, **kwargs)
            return wrapper

        def spying_routines(names, *arrays):
            routines = lapack_routines(names, *arrays)
            return tuple(
                record_query(fn) if name.endswith('_lwork') else record_execute(fn)
                for name, fn in zip(names, routines)
            )

        monkeypatch.setattr(target, 'lapack_routines', spying_routines)
        call()
        assert len(reported) == 1
        assert received == reported

    def test_negative_info_raises(self):
        with pytest.raises(KernelError, match="argument 3") as exc_info:
            check_argument_info(-3, 'gesdd')
        assert exc_info.value.routine == 'gesdd'
        assert exc_info.value.argument == 3

    def test_zero_and_positive_info_pass(self):
        check_argument_info(0, 'getrf')
        check_argument_info(2, 'getrf')


# ═══════════════════════════════════════════════════════════════════════
# LU
# ═══════════════════════════════════════════════════════════════════════


class TestLU:
    """getrf/getri wrappers."""

    def test_inverse(self, rng):
        a = rng.standard_normal((4, 4)) + 4 * np.eye(4)
        factor = lu_factor(fortran(a))
        assert not factor.is_singular
        inv_a, info = lu_invert(factor)
        assert info == 0
        np.testing.assert_allclose(inv_a @ a, np.eye(4), atol=1e-12)

    def test_singular_reported(self):
        factor = lu_factor(fortran(np.ones((3, 3))))
        assert factor.is_singular
        assert factor.info > 0

    def test_determinant_with_pivoting(self, rng):
        a = rng.standard_normal((5, 5))
        assert lu_determinant(lu_factor(fortran(a))) == pytest.approx(np.linalg.det(a))

    def test_determinant_of_permutation(self):
        p = fortran([[0.0, 1.0], [1.0, 0.0]])
        assert lu_determinant(lu_factor(p)) == pytest.approx(-1.0)


# ═══════════════════════════════════════════════════════════════════════
# QR
# ═══════════════════════════════════════════════════════════════════════


class TestQR:
    """geqrf/orgqr wrapper."""

    def test_reduced(self, rng):
        a = rng.standard_normal((6, 3))
        result = qr_factor(fortran(a))
        assert result.Q.shape == (6, 3)
        assert result.R.shape == (3, 3)
        assert result.rank == 3
        np.testing.assert_allclose(result.Q @ result.R, a, atol=1e-12)
        np.testing.assert_allclose(result.Q.T @ result.Q, np.eye(3), atol=1e-12)

    def test_complete_tall(self, rng):
        a = rng.standard_normal((5, 2))
        result = qr_factor(fortran(a), mode='complete')
        assert result.Q.shape == (5, 5)
        assert result.R.shape == (5, 2)
        np.testing.assert_allclose(result.Q @ result.R, a, atol=1e-12)
        np.testing.assert_allclose(result.Q.T @ result.Q, np.eye(5), atol=1e-12)

    def test_complete_wide(self, rng):
        a = rng.standard_normal((2, 4))
        result = qr_factor(fortran(a), mode='complete')
        assert result.Q.shape == (2, 2)
        np.testing.assert_allclose(result.Q @ result.R, a, atol=1e-12)

    def test_rank_deficient(self):
        a = np.array([[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]])
        assert qr_factor(fortran(a)).rank == 1


# ═══════════════════════════════════════════════════════════════════════
# SVD / eigen / Cholesky / least squares
# ═══════════════════════════════════════════════════════════════════════


class TestSVDKernel:
    """gesdd wrapper."""

    def test_reconstruction(self, rng):
        a = rng.standard_normal((4, 3))
        result = svd_full(fortran(a))
        assert result.info == 0
        assert result.u.shape == (4, 4)
        assert result.vt.shape == (3, 3)
        s = np.zeros((4, 3))
        s[:3, :3] = np.diag(result.s)
        np.testing.assert_allclose(result.u @ s @ result.vt, a, atol=1e-12)

    def test_descending(self, rng):
        result = svd_full(fortran(rng.standard_normal((5, 5))))
        assert np.all(np.diff(result.s) <= 0)


class TestEigKernel:
    """geev wrapper."""

    def test_real_spectrum(self):
        a = fortran([[2.0, 0.0], [0.0, 3.0]])
        result = eig_general(a)
        assert result.is_real
        np.testing.assert_allclose(sorted(result.wr), [2.0, 3.0])

    def test_complex_pair(self):
        rotation = fortran([[0.0, -1.0], [1.0, 0.0]])
        result = eig_general(rotation)
        assert not result.is_real
        np.testing.assert_allclose(sorted(np.abs(result.wi)), [1.0, 1.0])


class TestCholeskyKernel:
    """potrf wrapper."""

    def test_upper(self):
        a = fortran([[4.0, 2.0], [2.0, 3.0]])
        c, info = cholesky_factor(a, lower=False)
        assert info == 0
        u = np.triu(c)
        np.testing.assert_allclose(u.T @ u, a, atol=1e-12)

    def test_not_positive_definite(self):
        _, info = cholesky_factor(fortran([[1.0, 2.0], [2.0, 1.0]]), lower=True)
        assert info == 2


class TestLeastSquaresKernel:
    """gels wrapper."""

    def test_exact_system(self):
        a = fortran([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
        b = fortran([[1.0], [2.0], [3.0]])
        result = lstsq_qr(a, b)
        assert result.info == 0
        assert result.x.shape == (3, 1)
        np.testing.assert_allclose(result.x[:2, 0], [1.0, 2.0], atol=1e-12)
        assert abs(result.x[2, 0]) < 1e-12
