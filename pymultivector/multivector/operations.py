"""
Block operations between linear operators, dense matrices and multivectors.

    mat_mv_mult(A, x, y)        y[i] = A x[i]
    mat_mv_transpmult(A, x, y)  y[i] = A^T x[i]
    mv_dsmat_mult(X, A, Y)      Y[j] = sum_i A[i, j] X[i]

The operator A can be:
    - any object with mult(x, y) (and transpmult(x, y) for the transpose),
      acting directly on vectors;
    - a NumPy array, a SciPy sparse matrix or a
      scipy.sparse.linalg.LinearOperator. These act on the NumPy buffers
      of the vectors, so the multivectors must hold CPUVectors.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike
from scipy.sparse.linalg import aslinearoperator

from pymultivector.core.exceptions import DimensionError, ValidationError
from pymultivector.core.protocols import Operator, TransposableOperator, Vector
from pymultivector.core.validation import (
    check_array,
    check_2d,
    check_consistent_nvec,
    check_shape,
)
from pymultivector.multivector.multivector import MultiVector
from pymultivector.vectors.cpu import CPUVector


Apply = Callable[[Vector, Vector], None]


def as_apply(A: Any, transpose: bool = False) -> Apply:
    """
    Normalize an operator to a callable apply(x, y) computing y = A x.

    Args:
        A: Operator object, ndarray, sparse matrix or LinearOperator
        transpose: If True, the callable computes y = A^T x instead

    Returns:
        Function of two vectors that overwrites its second argument

    Raises:
        ValidationError: If A cannot be interpreted as a linear operator
    """
    if isinstance(A, Operator):
        if not transpose:
            return A.mult
        if not isinstance(A, TransposableOperator):
            raise ValidationError(
                f"A: {type(A).__name__} has no transpmult method"
            )
        return A.transpmult

    try:
        op = aslinearoperator(A)
    except TypeError as e:
        raise ValidationError(
            f"A: cannot interpret {type(A).__name__} as a linear operator"
        ) from e

    matvec = op.rmatvec if transpose else op.matvec
    n_in, n_out = (op.shape[0], op.shape[1]) if transpose else (op.shape[1], op.shape[0])

    def apply(x: Vector, y: Vector) -> None:
        xa = _buffer(x, "x")
        ya = _buffer(y, "y")
        if xa.shape[0] != n_in or ya.shape[0] != n_out:
            raise DimensionError(
                f"A: operator of shape {op.shape} cannot map size {xa.shape[0]} "
                f"to size {ya.shape[0]}",
                expected=(n_in, n_out),
                actual=(xa.shape[0], ya.shape[0]),
            )
        ya[:] = np.asarray(matvec(xa)).reshape(-1)

    return apply


def mat_mv_mult(A: Any, x: MultiVector, y: MultiVector) -> None:
    """Compute y[i] = A x[i] for every i."""
    _apply_all(as_apply(A), x, y)


def mat_mv_transpmult(A: Any, x: MultiVector, y: MultiVector) -> None:
    """Compute y[i] = A^T x[i] for every i."""
    _apply_all(as_apply(A, transpose=True), x, y)


def mv_dsmat_mult(X: MultiVector, A: ArrayLike, Y: MultiVector) -> None:
    """
    Multiply a multivector by a small dense matrix: Y[j] = sum_i A[i, j] X[i].

    Y is overwritten and must not be X.

    Args:
        X: Input multivector with n vectors
        A: Dense (n, m) coefficient matrix
        Y: Output multivector with m vectors
    """
    if Y is X:
        raise ValidationError("Y: must be a different MultiVector than X")
    coeffs = check_array(A, "A")
    check_2d(coeffs, "A")
    check_shape(coeffs, (X.nvec(), Y.nvec()), "A")

    for j in range(Y.nvec()):
        yj = Y[j]
        yj.zero()
        X.reduce(yj, coeffs[:, j])


def _apply_all(apply: Apply, x: MultiVector, y: MultiVector) -> None:
    check_consistent_nvec(x.nvec(), y.nvec(), names=("x", "y"))
    for xi, yi in zip(x, y):
        apply(xi, yi)


def _buffer(v: Vector, name: str) -> np.ndarray:
    if not isinstance(v, CPUVector):
        raise ValidationError(
            f"{name}: array operators require CPUVector elements, "
            f"got {type(v).__name__}; wrap the operator in an object with mult()"
        )
    return v.array
