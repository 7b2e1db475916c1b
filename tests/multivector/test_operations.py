"""
Tests for block operations between operators and multivectors.

Dense, sparse, LinearOperator and mult()-style operators must all give
the same result as the equivalent NumPy matrix product.
"""

import numpy as np
import pytest
import scipy.sparse as sp
from scipy.sparse.linalg import aslinearoperator

from pymultivector import CPUVector, MultiVector
from pymultivector.core.exceptions import DimensionError, ValidationError
from pymultivector.multivector import mat_mv_mult, mat_mv_transpmult, mv_dsmat_mult


def _mv_from_columns(values):
    mv = MultiVector(CPUVector.zeros(values.shape[0]), values.shape[1])
    for i in range(values.shape[1]):
        mv[i] = CPUVector(values[:, i])
    return mv


def _columns(mv):
    return np.column_stack([v.to_numpy() for v in mv])


class DiagonalOperator:
    """Operator acting on vectors through mult()/transpmult()."""

    def __init__(self, d):
        self.d = np.asarray(d, dtype=np.float64)
        self.calls = 0

    def mult(self, x, y):
        self.calls += 1
        y.array[:] = self.d * x.array

    def transpmult(self, x, y):
        self.mult(x, y)


@pytest.fixture
def A(rng):
    return rng.standard_normal((5, 4))


@pytest.fixture
def X(rng):
    return rng.standard_normal((4, 3))


class TestMatMvMult:

    @pytest.mark.parametrize("kind", ["dense", "sparse", "linop"])
    def test_matches_matmul(self, A, X, kind):
        op = {"dense": A, "sparse": sp.csr_matrix(A), "linop": aslinearoperator(A)}[kind]
        x = _mv_from_columns(X)
        y = MultiVector(CPUVector.zeros(5), 3)
        mat_mv_mult(op, x, y)
        np.testing.assert_allclose(_columns(y), A @ X)

    def test_overwrites_output(self, A, X):
        x = _mv_from_columns(X)
        y = _mv_from_columns(np.ones((5, 3)))
        mat_mv_mult(A, x, y)
        np.testing.assert_allclose(_columns(y), A @ X)

    def test_custom_operator(self, rng):
        d = rng.standard_normal(4)
        values = rng.standard_normal((4, 3))
        op = DiagonalOperator(d)
        y = MultiVector(CPUVector.zeros(4), 3)
        mat_mv_mult(op, _mv_from_columns(values), y)
        assert op.calls == 3
        np.testing.assert_allclose(_columns(y), d[:, None] * values)

    def test_nvec_mismatch(self, A, X):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            mat_mv_mult(A, _mv_from_columns(X), MultiVector(CPUVector.zeros(5), 2))

    def test_size_mismatch(self, A, X):
        with pytest.raises(DimensionError, match="cannot map size 4 to size 4"):
            mat_mv_mult(A, _mv_from_columns(X), MultiVector(CPUVector.zeros(4), 3))

    def test_not_an_operator(self, X):
        with pytest.raises(ValidationError, match="linear operator"):
            mat_mv_mult("A", _mv_from_columns(X), _mv_from_columns(X))


class TestMatMvTranspmult:

    @pytest.mark.parametrize("kind", ["dense", "sparse", "linop"])
    def test_matches_transposed_matmul(self, A, rng, kind):
        op = {"dense": A, "sparse": sp.csc_matrix(A), "linop": aslinearoperator(A)}[kind]
        Z = rng.standard_normal((5, 2))
        y = MultiVector(CPUVector.zeros(4), 2)
        mat_mv_transpmult(op, _mv_from_columns(Z), y)
        np.testing.assert_allclose(_columns(y), A.T @ Z)

    def test_custom_operator_needs_transpmult(self, X):
        class MultOnly:
            def mult(self, x, y):
                y.array[:] = x.array

        with pytest.raises(ValidationError, match="no transpmult"):
            mat_mv_transpmult(MultOnly(), _mv_from_columns(X), _mv_from_columns(X))


class TestMvDsmatMult:

    def test_matches_matmul(self, X, rng):
        coeffs = rng.standard_normal((3, 2))
        Y = _mv_from_columns(np.full((4, 2), 7.0))
        mv_dsmat_mult(_mv_from_columns(X), coeffs, Y)
        np.testing.assert_allclose(_columns(Y), X @ coeffs)

    def test_shape_mismatch(self, X):
        Y = MultiVector(CPUVector.zeros(4), 2)
        with pytest.raises(DimensionError, match=r"expected shape \(3, 2\)"):
            mv_dsmat_mult(_mv_from_columns(X), np.ones((2, 3)), Y)

    def test_aliasing_rejected(self, X):
        x = _mv_from_columns(X)
        with pytest.raises(ValidationError, match="different MultiVector"):
            mv_dsmat_mult(x, np.eye(3), x)
