"""
Reference vector types.

Any object satisfying pymultivector.core.protocols.Vector can live in a
MultiVector. This subpackage provides two:

    CPUVector  - NumPy float64 storage (reference)
    GPUVector  - torch storage on CUDA/MPS (imported lazily, needs torch)
    make_vector(data, backend=...) - backend selection
"""

from pymultivector.vectors._common import (
    NORM_L1,
    NORM_L2,
    NORM_LINF,
    ALL_NORM_TYPES,
)
from pymultivector.vectors.cpu import CPUVector
from pymultivector.vectors.factory import make_vector

__all__ = [
    "CPUVector",
    "make_vector",
    "NORM_L1",
    "NORM_L2",
    "NORM_LINF",
    "ALL_NORM_TYPES",
]
