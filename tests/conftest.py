"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pymultivector import CPUVector, MultiVector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def template():
    """Zero template vector of size 6."""
    return CPUVector.zeros(6)


@pytest.fixture
def random_mv(rng):
    """MultiVector of 4 random vectors of size 6, plus the (6, 4) array of its values."""
    values = rng.standard_normal((6, 4))
    mv = MultiVector(CPUVector.zeros(6), 4)
    for i in range(4):
        mv[i] = CPUVector(values[:, i])
    return mv, values
