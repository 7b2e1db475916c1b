"""
Multivectors: ordered collections of vectors sharing one layout.

Public API:
    MultiVector                 - container with batched arithmetic
    mat_mv_mult(A, x, y)        - y[i] = A x[i]
    mat_mv_transpmult(A, x, y)  - y[i] = A^T x[i]
    mv_dsmat_mult(X, A, Y)      - Y[j] = sum_i A[i, j] X[i]
    orthogonalize(mv)           - Euclidean Gram-Schmidt, in place
    borthogonalize(mv, B)       - B-inner-product Gram-Schmidt, in place
"""

from pymultivector.multivector.multivector import MultiVector
from pymultivector.multivector.operations import (
    mat_mv_mult,
    mat_mv_transpmult,
    mv_dsmat_mult,
)
from pymultivector.multivector.orthogonalize import (
    OrthoParams,
    orthogonalize,
    borthogonalize,
)

__all__ = [
    "MultiVector",
    "mat_mv_mult",
    "mat_mv_transpmult",
    "mv_dsmat_mult",
    "OrthoParams",
    "orthogonalize",
    "borthogonalize",
]
