"""
Tests for the NumPy reference vector.
"""

import numpy as np
import pytest

from pymultivector.core.exceptions import DimensionError, ValidationError
from pymultivector.core.protocols import Vector
from pymultivector.vectors import CPUVector, NORM_L1, NORM_L2, NORM_LINF


class TestConstruction:

    def test_satisfies_protocol(self):
        assert isinstance(CPUVector([1.0, 2.0]), Vector)

    def test_copies_input(self):
        data = np.array([1.0, 2.0, 3.0])
        v = CPUVector(data)
        data[0] = 100.0
        assert v.array[0] == 1.0

    def test_int_input_promoted(self):
        v = CPUVector([1, 2])
        assert v.array.dtype == np.float64

    def test_zeros(self):
        v = CPUVector.zeros(4)
        assert v.size == 4
        assert len(v) == 4
        np.testing.assert_array_equal(v.array, np.zeros(4))

    def test_zeros_negative_size(self):
        with pytest.raises(ValidationError):
            CPUVector.zeros(-1)

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            CPUVector(np.ones((2, 2)))


class TestArithmetic:

    def test_copy_is_independent(self):
        v = CPUVector([1.0, 2.0])
        w = v.copy()
        w.scale(3.0)
        np.testing.assert_array_equal(v.array, [1.0, 2.0])
        np.testing.assert_array_equal(w.array, [3.0, 6.0])

    def test_zero(self):
        v = CPUVector([1.0, -2.0])
        v.zero()
        np.testing.assert_array_equal(v.array, [0.0, 0.0])

    def test_axpy(self):
        v = CPUVector([1.0, 1.0])
        v.axpy(2.0, CPUVector([1.0, -1.0]))
        np.testing.assert_array_equal(v.array, [3.0, -1.0])

    def test_inner(self):
        assert CPUVector([1.0, 2.0, 3.0]).inner(CPUVector([4.0, 5.0, 6.0])) == 32.0

    def test_imul(self):
        v = CPUVector([1.0, 2.0])
        v *= -2.0
        np.testing.assert_array_equal(v.array, [-2.0, -4.0])

    def test_to_numpy_is_copy(self):
        v = CPUVector([1.0, 2.0])
        out = v.to_numpy()
        out[0] = 9.0
        assert v.array[0] == 1.0


class TestNorms:

    @pytest.mark.parametrize("norm_type, expected", [
        (NORM_L1, 7.0),
        (NORM_L2, 5.0),
        (NORM_LINF, 4.0),
    ])
    def test_norm_types(self, norm_type, expected):
        assert CPUVector([3.0, -4.0]).norm(norm_type) == pytest.approx(expected)

    def test_default_is_l2(self):
        assert CPUVector([3.0, 4.0]).norm() == pytest.approx(5.0)

    def test_linf_of_empty_vector(self):
        assert CPUVector.zeros(0).norm(NORM_LINF) == 0.0

    def test_unknown_norm(self):
        with pytest.raises(ValidationError, match="unknown norm 'l3'"):
            CPUVector([1.0]).norm('l3')


class TestIncompatible:

    def test_size_mismatch(self):
        with pytest.raises(DimensionError, match="expected 2, got 3"):
            CPUVector([1.0, 2.0]).inner(CPUVector([1.0, 2.0, 3.0]))

    def test_wrong_type(self):
        with pytest.raises(ValidationError, match="expected CPUVector"):
            CPUVector([1.0, 2.0]).axpy(1.0, np.array([1.0, 2.0]))
