"""
GPU backend tests for vectors and multivectors.

Validates GPUVector arithmetic against the CPUVector reference.
GPU vectors default to FP32, so tolerances are relaxed.
Skipped if no GPU is available.
"""

from __future__ import annotations

import numpy as np
import pytest

try:
    import torch
    HAS_GPU = torch.cuda.is_available() or (
        hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()
    )
except ImportError:
    HAS_GPU = False

pytestmark = pytest.mark.skipif(not HAS_GPU, reason="No GPU available")

from pymultivector import CPUVector, MultiVector, make_vector
from pymultivector.core.exceptions import DimensionError, ValidationError


@pytest.fixture
def data():
    rng = np.random.default_rng(42)
    return rng.standard_normal((50, 3))


class TestGPUVector:

    def test_roundtrip_values(self, data):
        v = make_vector(data[:, 0], backend='gpu')
        np.testing.assert_allclose(v.to_numpy(), data[:, 0], rtol=1e-6)

    def test_inner_matches_cpu(self, data):
        g0 = make_vector(data[:, 0], backend='gpu')
        g1 = make_vector(data[:, 1], backend='gpu')
        c0, c1 = CPUVector(data[:, 0]), CPUVector(data[:, 1])
        assert g0.inner(g1) == pytest.approx(c0.inner(c1), rel=1e-4, abs=1e-4)

    @pytest.mark.parametrize("norm_type", ['l1', 'l2', 'linf'])
    def test_norm_matches_cpu(self, data, norm_type):
        g = make_vector(data[:, 0], backend='gpu')
        c = CPUVector(data[:, 0])
        assert g.norm(norm_type) == pytest.approx(c.norm(norm_type), rel=1e-5)

    def test_axpy_and_scale(self, data):
        g = make_vector(data[:, 0], backend='gpu')
        g.axpy(2.0, make_vector(data[:, 1], backend='gpu'))
        g.scale(0.5)
        np.testing.assert_allclose(
            g.to_numpy(), 0.5 * (data[:, 0] + 2.0 * data[:, 1]), rtol=1e-5, atol=1e-6,
        )

    def test_copy_is_independent(self, data):
        g = make_vector(data[:, 0], backend='gpu')
        h = g.copy()
        h.zero()
        np.testing.assert_allclose(g.to_numpy(), data[:, 0], rtol=1e-6)

    def test_size_mismatch(self, data):
        g = make_vector(data[:, 0], backend='gpu')
        with pytest.raises(DimensionError):
            g.inner(make_vector(data[:10, 0], backend='gpu'))

    def test_mixed_backends_rejected(self, data):
        g = make_vector(data[:, 0], backend='gpu')
        with pytest.raises(ValidationError, match="expected GPUVector"):
            g.axpy(1.0, CPUVector(data[:, 0]))


class TestGPUMultiVector:

    def test_gram_matches_cpu(self, data):
        gpu_mv = MultiVector(make_vector(np.zeros(50), backend='gpu'), 3)
        cpu_mv = MultiVector(CPUVector.zeros(50), 3)
        for i in range(3):
            gpu_mv[i] = make_vector(data[:, i], backend='gpu')
            cpu_mv[i] = CPUVector(data[:, i])
        np.testing.assert_allclose(
            gpu_mv.dot_self(), cpu_mv.dot_self(), rtol=1e-4, atol=1e-4,
        )
        np.testing.assert_allclose(gpu_mv.norm('l2'), cpu_mv.norm('l2'), rtol=1e-5)

    def test_orthogonalize(self, data):
        mv = MultiVector(make_vector(np.zeros(50), backend='gpu'), 3)
        for i in range(3):
            mv[i] = make_vector(data[:, i], backend='gpu')
        mv.orthogonalize()
        np.testing.assert_allclose(mv.dot_matrix(), np.eye(3), atol=1e-4)
