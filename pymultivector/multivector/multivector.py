"""
MultiVector: an ordered collection of vectors sharing one layout.

Every batched operation iterates over the elements and delegates the
per-vector arithmetic to the element type (see core.protocols.Vector).
Coefficient arrays go in as array-likes and results come out as float64
NumPy arrays; matrix-shaped results are flattened with the index formula
out[i + nvec * j], i.e. column-major with i as the row index.

Contract violations (bad index, coefficient array of the wrong length,
multivectors of different lengths) raise in every configuration. Errors
raised by the element type propagate unchanged, and batched mutators are
not atomic: a failure half-way through leaves earlier elements updated.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymultivector.core.exceptions import DimensionError, ValidationError
from pymultivector.core.protocols import Vector
from pymultivector.core.result import Result
from pymultivector.core.validation import (
    check_array,
    check_1d,
    check_count,
    check_consistent_nvec,
    check_index,
    check_length,
)
from pymultivector.vectors._common import NORM_L2


class MultiVector:
    """
    Fixed-size ordered collection of vectors with batched arithmetic.

    Construction:
        MultiVector()            - empty
        MultiVector(v, nvec)     - nvec zeroed copies of template vector v
        MultiVector(other)       - deep copy of another MultiVector

    The container owns its elements. mv[i] returns the live element (the
    handle stays valid as long as the container holds it); mv[i] = v copies
    the values of v into slot i.
    """

    def __init__(self, v: Vector | MultiVector | None = None, nvec: int | None = None):
        self._mv: list[Vector] = []
        if v is None:
            if nvec is not None:
                raise ValidationError("nvec: requires a template vector")
        elif isinstance(v, MultiVector):
            if nvec is not None:
                raise ValidationError("nvec: not accepted when copying a MultiVector")
            self._mv = [vi.copy() for vi in v._mv]
        else:
            if nvec is None:
                raise ValidationError("nvec: required with a template vector")
            self.set_size_from_vector(v, nvec)

    def set_size_from_vector(self, v: Vector, nvec: int) -> None:
        """
        Reinitialize with nvec zeroed copies of the template vector v.

        Prior contents are discarded. Only the layout of v is used.
        """
        nvec = check_count(nvec, "nvec")
        elements = []
        for _ in range(nvec):
            vj = v.copy()
            vj.zero()
            elements.append(vj)
        self._mv = elements

    def nvec(self) -> int:
        """Number of vectors in the multivector."""
        return len(self._mv)

    def __len__(self) -> int:
        return len(self._mv)

    def __getitem__(self, i: int) -> Vector:
        return self._mv[check_index(i, len(self._mv), "i")]

    def __setitem__(self, i: int, v: Vector) -> None:
        slot = self._mv[check_index(i, len(self._mv), "i")]
        if v is slot:
            return
        if not isinstance(v, type(slot)):
            raise ValidationError(
                f"v: expected {type(slot).__name__}, got {type(v).__name__}"
            )
        if v.size != slot.size:
            raise DimensionError(
                f"v: size mismatch, expected {slot.size}, got {v.size}",
                expected=slot.size,
                actual=v.size,
            )
        slot.zero()
        slot.axpy(1.0, v)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._mv)

    def __repr__(self) -> str:
        size = self._mv[0].size if self._mv else 0
        return f"MultiVector(nvec={len(self._mv)}, size={size})"

    def copy(self) -> MultiVector:
        """Deep copy of every element."""
        return MultiVector(self)

    def __copy__(self) -> MultiVector:
        return MultiVector(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> MultiVector:
        return MultiVector(self)

    # ------------------------------------------------------------------
    # Inner products
    # ------------------------------------------------------------------

    def dot_v(self, v: Vector) -> NDArray[np.float64]:
        """out[i] = <self[i], v>"""
        out = np.empty(len(self._mv), dtype=np.float64)
        for i, vi in enumerate(self._mv):
            out[i] = vi.inner(v)
        return out

    def dot_self(self) -> NDArray[np.float64]:
        """
        Flattened Gram matrix out[i + n*j] = <self[i], self[j]>.

        Only the upper triangle (diagonal included) is computed; the lower
        triangle is mirrored from it, so n*(n+1)/2 inner products are
        evaluated instead of n*n.
        """
        s = len(self._mv)
        m = np.empty(s * s, dtype=np.float64)
        for i in range(s):
            vi = self._mv[i]
            m[i + s * i] = vi.inner(vi)
            for j in range(i):
                m[i + s * j] = m[j + s * i] = vi.inner(self._mv[j])
        return m

    def dot_mv(self, other: MultiVector) -> NDArray[np.float64]:
        """
        Flattened cross Gram matrix out[i + n*j] = <self[i], other[j]>.

        Falls through to dot_self() when other shares this container's
        storage.
        """
        if not isinstance(other, MultiVector):
            raise ValidationError(
                f"other: expected MultiVector, got {type(other).__name__}"
            )
        if other._mv is self._mv:
            return self.dot_self()

        s = len(self._mv)
        m = np.empty(s * len(other._mv), dtype=np.float64)
        for i, vi in enumerate(self._mv):
            for j, vj in enumerate(other._mv):
                m[i + s * j] = vi.inner(vj)
        return m

    def dot(self, x: Vector | MultiVector) -> NDArray[np.float64]:
        """Inner products with a vector (dot_v) or a multivector (dot_mv)."""
        if isinstance(x, MultiVector):
            return self.dot_mv(x)
        return self.dot_v(x)

    def dot_matrix(self, other: MultiVector | None = None) -> NDArray[np.float64]:
        """
        Gram matrix as a 2D array M[i, j] = <self[i], other[j]>.

        Args:
            other: Right-hand multivector. Defaults to self.

        Returns:
            Array of shape (self.nvec(), other.nvec())
        """
        if other is None:
            other = self
        return self.dot_mv(other).reshape(
            (len(self._mv), other.nvec()), order='F'
        )

    # ------------------------------------------------------------------
    # Linear combinations
    # ------------------------------------------------------------------

    def reduce(self, v: Vector, alpha: ArrayLike) -> None:
        """v += sum_i alpha[i] * self[i]"""
        alpha = self._coefficients(alpha, "alpha")
        for a, vi in zip(alpha, self._mv):
            v.axpy(float(a), vi)

    def axpy(self, a: float | ArrayLike, y: Vector | MultiVector) -> None:
        """
        Batched axpy.

        With a scalar a and a vector y:
            self[k] += a * y       for every k
        With an array a and a MultiVector y:
            self[k] += a[k] * y[k] for every k
        """
        if isinstance(y, MultiVector):
            coeffs = self._coefficients(a, "a")
            check_consistent_nvec(len(self._mv), y.nvec(), names=("self", "y"))
            for ak, vk, yk in zip(coeffs, self._mv, y._mv):
                vk.axpy(float(ak), yk)
            return

        if np.ndim(a) != 0:
            raise ValidationError(
                "a: an array of coefficients requires y to be a MultiVector"
            )
        a = float(a)
        for vk in self._mv:
            vk.axpy(a, y)

    def scale(self, k: int | ArrayLike, a: float | None = None) -> None:
        """
        Scale one vector or all of them.

        scale(k, a): self[k] *= a
        scale(a):    self[k] *= a[k] for every k
        """
        if a is None:
            coeffs = self._coefficients(k, "a")
            for ak, vk in zip(coeffs, self._mv):
                vk.scale(float(ak))
            return

        self._mv[check_index(k, len(self._mv), "k")].scale(float(a))

    def zero(self) -> None:
        """Zero out all entries of the multivector."""
        for vi in self._mv:
            vi.zero()

    def norm(self, norm_type: str = NORM_L2) -> NDArray[np.float64]:
        """Norm of each vector separately; norm_type is passed to the vectors."""
        out = np.empty(len(self._mv), dtype=np.float64)
        for i, vi in enumerate(self._mv):
            out[i] = vi.norm(norm_type)
        return out

    def swap(self, other: MultiVector) -> None:
        """Exchange contents with other in O(1); no element is copied."""
        if not isinstance(other, MultiVector):
            raise ValidationError(
                f"other: expected MultiVector, got {type(other).__name__}"
            )
        self._mv, other._mv = other._mv, self._mv

    # ------------------------------------------------------------------
    # Orthogonalization
    # ------------------------------------------------------------------

    def orthogonalize(self, **kwargs: Any) -> Result:
        """In-place Euclidean orthonormalization. See orthogonalize.orthogonalize."""
        from pymultivector.multivector.orthogonalize import orthogonalize
        return orthogonalize(self, **kwargs)

    def borthogonalize(self, B: Any, **kwargs: Any) -> Result:
        """In-place B-orthonormalization. See orthogonalize.borthogonalize."""
        from pymultivector.multivector.orthogonalize import borthogonalize
        return borthogonalize(self, B, **kwargs)

    def _coefficients(self, values: ArrayLike, name: str) -> NDArray[np.float64]:
        """One scalar per vector, validated."""
        coeffs = check_array(values, name)
        check_1d(coeffs, name)
        check_length(coeffs, len(self._mv), name)
        return coeffs
