"""
Core protocols for PyMultiVector.

These define structural interfaces that vector types and operators must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that vectors from other libraries can be wrapped, or used
directly, without inheriting from anything in this package.

Design Principles:
    - Minimal contracts: prescribe only what the batched operations call
    - Arithmetic semantics (precision, norm kinds, behaviour on mismatched
      sizes) belong to the vector type and are inherited unchanged
"""

from typing import Protocol, TypeVar, runtime_checkable

V = TypeVar('V', bound='Vector')


@runtime_checkable
class Vector(Protocol):
    """
    Minimal protocol for the elements of a MultiVector.

    Every method except copy() and the scalar reductions mutates the
    vector in place.
    """

    @property
    def size(self) -> int:
        """Global dimension of the vector."""
        ...

    def copy(self: V) -> V:
        """Deep copy with the same layout and values."""
        ...

    def zero(self) -> None:
        """Set every entry to the additive identity."""
        ...

    def axpy(self, a: float, x: 'Vector') -> None:
        """self += a * x"""
        ...

    def inner(self, x: 'Vector') -> float:
        """Euclidean inner product with a vector of the same layout."""
        ...

    def norm(self, norm_type: str) -> float:
        """
        Norm of the vector.

        The set of accepted norm_type strings is owned by the vector type.
        The reference vectors accept 'l1', 'l2' and 'linf'.
        """
        ...

    def scale(self, a: float) -> None:
        """self *= a"""
        ...


@runtime_checkable
class Operator(Protocol):
    """
    Protocol for linear operators acting on vectors in place.

    Block operations accept this protocol in addition to NumPy arrays,
    SciPy sparse matrices and scipy.sparse.linalg.LinearOperator.
    """

    def mult(self, x: Vector, y: Vector) -> None:
        """y = A x"""
        ...


@runtime_checkable
class TransposableOperator(Operator, Protocol):
    """Operator that can also apply its transpose."""

    def transpmult(self, x: Vector, y: Vector) -> None:
        """y = A^T x"""
        ...
