"""
Gram-Schmidt orthonormalization of multivectors.

Both variants are modified Gram-Schmidt with iterated re-orthogonalization:
a vector is projected again whenever one pass shrinks its norm by more
than a factor REORTHOGONALIZE_RATIO, which keeps the basis orthonormal to
working precision even for nearly dependent inputs.

    orthogonalize(Q)      Q^T Q = I,  Q_before = Q_after R
    borthogonalize(Q, B)  Q^T B Q = I, Q_before = Q_after R, Bq = B Q

A vector whose norm collapses below tol times its norm before projection
is numerically dependent on its predecessors: it is set to zero, its
diagonal entry in R is zero, and a warning is recorded.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymultivector.core.compute.precision import (
    DEPENDENCE_RTOL,
    EPSILON_64,
    REORTHOGONALIZE_RATIO,
)
from pymultivector.core.compute.device import DeviceInfo
from pymultivector.core.compute.timing import Timer
from pymultivector.core.exceptions import OrthogonalizationError
from pymultivector.core.protocols import Vector
from pymultivector.core.result import Result
from pymultivector.multivector.multivector import MultiVector
from pymultivector.multivector.operations import as_apply


@dataclass(frozen=True)
class OrthoParams:
    """
    Payload of an orthogonalization.

    Attributes:
        r: Upper-triangular (n, n) coefficients, Q_before[:, k] = sum_i r[i, k] Q_after[:, i]
        Bq: B-image of the orthonormal vectors (None for the Euclidean variant)
    """
    r: NDArray[np.float64]
    Bq: MultiVector | None = None

    @property
    def rank(self) -> int:
        """Number of vectors that were not found dependent."""
        return int(np.count_nonzero(np.diag(self.r)))


def orthogonalize(
    mv: MultiVector,
    *,
    tol: float = DEPENDENCE_RTOL,
    max_passes: int = 5,
) -> Result[OrthoParams]:
    """
    Orthonormalize mv in place with respect to the Euclidean inner product.

    Args:
        mv: Multivector to orthonormalize (overwritten)
        tol: Relative norm below which a vector counts as dependent
        max_passes: Maximum projection passes per vector

    Returns:
        Result[OrthoParams] with Bq=None
    """
    def inner_norm2(k: int, _bq: Any) -> float:
        return mv[k].inner(mv[k])

    return _mgs(
        mv,
        apply_b=None,
        norm2=inner_norm2,
        tol=tol,
        max_passes=max_passes,
        method='mgs_reortho',
    )


def borthogonalize(
    mv: MultiVector,
    B: Any,
    *,
    tol: float = DEPENDENCE_RTOL,
    max_passes: int = 5,
) -> Result[OrthoParams]:
    """
    B-orthonormalize mv in place: after the call <mv[i], B mv[j]> = delta_ij.

    Args:
        mv: Multivector to orthonormalize (overwritten)
        B: Symmetric positive definite operator. Anything accepted by
           operations.as_apply (object with mult(), ndarray, sparse matrix,
           LinearOperator).
        tol: Relative B-norm below which a vector counts as dependent
        max_passes: Maximum projection passes per vector

    Returns:
        Result[OrthoParams] whose Bq holds B applied to the orthonormal vectors

    Raises:
        OrthogonalizationError: If <v, B v> is negative for some vector
    """
    apply_b = as_apply(B)

    def b_norm2(k: int, bq: MultiVector) -> float:
        apply_b(mv[k], bq[k])
        return bq[k].inner(mv[k])

    return _mgs(
        mv,
        apply_b=apply_b,
        norm2=b_norm2,
        tol=tol,
        max_passes=max_passes,
        method='mgs_stable_b',
    )


def _mgs(
    mv: MultiVector,
    apply_b: Callable[[Vector, Vector], None] | None,
    norm2: Callable[[int, Any], float],
    tol: float,
    max_passes: int,
    method: str,
) -> Result[OrthoParams]:
    """
    Shared Gram-Schmidt loop.

    With apply_b, projections use <Bq[i], v>; otherwise <q[i], v>.
    norm2(k, Bq) refreshes Bq[k] when needed and returns the squared norm
    of mv[k] in the relevant inner product.
    """
    if max_passes < 1:
        raise ValueError(f"max_passes must be >= 1, got {max_passes}")

    n = mv.nvec()
    timer = Timer(sync_cuda=_on_cuda(mv))
    timer.start()

    r = np.zeros((n, n), dtype=np.float64)
    passes = np.zeros(n, dtype=np.int64)
    bq = MultiVector(mv[0], n) if (apply_b is not None and n > 0) else None
    warnings_list: list[str] = []

    for k in range(n):
        with timer.section('normalize'):
            t = _checked_sqrt(norm2(k, bq), k, 0.0)
        t0 = t

        u = 0
        while True:
            u += 1
            with timer.section('project'):
                proj = bq if bq is not None else mv
                for i in range(k):
                    s = proj[i].inner(mv[k])
                    r[i, k] += s
                    mv[k].axpy(-s, mv[i])
            with timer.section('normalize'):
                tt = _checked_sqrt(norm2(k, bq), k, t * t)

            if t * 10.0 * EPSILON_64 < tt < t * REORTHOGONALIZE_RATIO and u < max_passes:
                t = tt
                continue
            if tt < tol * t0 or t0 == 0.0:
                tt = 0.0
            break

        if u == max_passes and tt != 0.0 and tt < t * REORTHOGONALIZE_RATIO:
            warnings_list.append(
                f"vector {k}: still losing orthogonality after {max_passes} passes"
            )

        passes[k] = u
        r[k, k] = tt
        scale = 1.0 / tt if tt > 0.0 else 0.0
        if tt == 0.0:
            warnings_list.append(f"vector {k}: numerically dependent, set to zero")
        mv.scale(k, scale)
        if bq is not None:
            bq.scale(k, scale)

    timer.stop()

    for msg in warnings_list:
        warnings.warn(msg, RuntimeWarning, stacklevel=3)

    params = OrthoParams(r=r, Bq=bq)
    return Result(
        params=params,
        info={
            'method': method,
            'rank': params.rank,
            'passes': passes,
            'tol': tol,
        },
        timing=timer.result(),
        backend_name=method,
        warnings=tuple(warnings_list),
    )


def _on_cuda(mv: MultiVector) -> bool:
    """True if the elements live on a CUDA device (GPUVector.device)."""
    if mv.nvec() == 0:
        return False
    device = getattr(mv[0], 'device', None)
    return isinstance(device, DeviceInfo) and device.device_type == 'cuda'


def _checked_sqrt(value: float, k: int, reference: float) -> float:
    """
    Square root of a squared norm.

    Negative values within roundoff of the squared reference norm are
    clamped to zero.
    """
    if value < 0.0:
        if value < -np.sqrt(EPSILON_64) * reference:
            raise OrthogonalizationError(
                f"vector {k}: negative squared norm {value:.3e}, "
                "the inner product operator is not positive definite",
                column=k,
                norm=value,
            )
        return 0.0
    return float(np.sqrt(value))
