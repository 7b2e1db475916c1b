"""
PyMultiVector: batched linear algebra over collections of vectors.

A MultiVector is a fixed-size ordered collection of vectors that share
one layout. It provides batched inner products, linear combinations,
norms and Gram-Schmidt orthonormalization on top of any vector type that
satisfies the core.protocols.Vector protocol, as needed by randomized
SVD, low-rank approximation and inexact Newton-CG solvers.

Submodules:
    core: Protocols, exceptions, validation, result envelope
    vectors: NumPy (CPU) and PyTorch (GPU) reference vectors
    multivector: MultiVector and block operations
"""

__version__ = "0.1.0"

from pymultivector import core
from pymultivector import vectors
from pymultivector import multivector
from pymultivector.multivector import MultiVector
from pymultivector.vectors import CPUVector, make_vector

__all__ = [
    "__version__",
    "core",
    "vectors",
    "multivector",
    "MultiVector",
    "CPUVector",
    "make_vector",
]
