"""
NumPy-backed reference vector.

CPUVector is the reference implementation of the Vector protocol: every
batched MultiVector operation is validated against it.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymultivector.core.exceptions import DimensionError, ValidationError
from pymultivector.core.validation import check_array, check_1d
from pymultivector.vectors._common import NORM_L1, NORM_L2, check_norm_type


class CPUVector:
    """
    Dense float64 vector stored in a 1D NumPy array.

    The vector owns its array: the constructor copies the input, and
    `array` exposes the live buffer for in-place NumPy code.
    """

    def __init__(self, data: ArrayLike):
        values = check_array(data, "data")
        check_1d(values, "data")
        self._data = np.array(values, dtype=np.float64, copy=True)

    @classmethod
    def zeros(cls, size: int) -> CPUVector:
        """Zero vector of the given size."""
        if size < 0:
            raise ValidationError(f"size: must be non-negative, got {size}")
        return cls(np.zeros(size, dtype=np.float64))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def array(self) -> NDArray[np.float64]:
        """Live view of the underlying buffer."""
        return self._data

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the values as a float64 array."""
        return self._data.copy()

    def copy(self) -> CPUVector:
        return CPUVector(self._data)

    def zero(self) -> None:
        self._data.fill(0.0)

    def axpy(self, a: float, x: CPUVector) -> None:
        self._data += a * self._other(x, "x")

    def inner(self, x: CPUVector) -> float:
        return float(np.dot(self._data, self._other(x, "x")))

    def norm(self, norm_type: str = NORM_L2) -> float:
        norm_type = check_norm_type(norm_type)
        if norm_type == NORM_L1:
            return float(np.linalg.norm(self._data, 1))
        if norm_type == NORM_L2:
            return float(np.linalg.norm(self._data))
        return float(np.linalg.norm(self._data, np.inf)) if self.size else 0.0

    def scale(self, a: float) -> None:
        self._data *= a

    def __imul__(self, a: float) -> CPUVector:
        self.scale(a)
        return self

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"CPUVector(size={self.size})"

    def _other(self, x: CPUVector, name: str) -> NDArray[np.float64]:
        """Buffer of a compatible vector, or raise."""
        if not isinstance(x, CPUVector):
            raise ValidationError(
                f"{name}: expected CPUVector, got {type(x).__name__}"
            )
        if x.size != self.size:
            raise DimensionError(
                f"{name}: size mismatch, expected {self.size}, got {x.size}",
                expected=self.size,
                actual=x.size,
            )
        return x._data
