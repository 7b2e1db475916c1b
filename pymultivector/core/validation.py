"""
Input validation utilities for PyMultiVector.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every batched operation calls
them once per call, never once per element.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymultivector.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex data (inner products here are real).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric or complex dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_length(array: NDArray[np.floating[Any]], length: int, name: str) -> None:
    """
    Verify a 1D array has exactly `length` entries.

    Args:
        array: 1D array to check
        length: Required number of entries (usually the number of vectors)
        name: Parameter name for error messages

    Raises:
        DimensionError: If the length differs
    """
    if array.shape[0] != length:
        raise DimensionError(
            f"{name}: expected {length} entries, got {array.shape[0]}",
            expected=length,
            actual=array.shape[0],
        )


def check_shape(
    array: NDArray[np.floating[Any]],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify an array has exactly the given shape.

    Raises:
        DimensionError: If the shape differs
    """
    if tuple(array.shape) != tuple(shape):
        raise DimensionError(
            f"{name}: expected shape {tuple(shape)}, got {tuple(array.shape)}",
            expected=tuple(shape),
            actual=tuple(array.shape),
        )


def check_index(index: Any, size: int, name: str) -> int:
    """
    Validate an element index against a container of `size` elements.

    Negative indices are out of range: elements are addressed by their
    position in [0, size) only.

    Args:
        index: Candidate index (anything implementing __index__)
        size: Number of elements
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, size)
    """
    try:
        i = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer index, got {type(index).__name__}"
        ) from e

    if i < 0 or i >= size:
        raise IndexOutOfRangeError(
            f"{name}: index {i} out of range for {size} vectors",
            index=i,
            size=size,
        )
    return i


def check_consistent_nvec(*nvecs: int, names: tuple[str, ...]) -> None:
    """
    Verify several containers hold the same number of vectors.

    Args:
        *nvecs: Vector counts to compare
        names: Parameter names for error messages (must match number of counts)

    Raises:
        ValueError: If number of names doesn't match number of counts
        DimensionError: If counts differ
    """
    if len(nvecs) != len(names):
        raise ValueError(
            f"Number of counts ({len(nvecs)}) must match number of names ({len(names)})"
        )

    if len(set(nvecs)) > 1:
        details = ", ".join(f"{name}={n}" for name, n in zip(names, nvecs))
        raise DimensionError(
            f"Inconsistent number of vectors: {details}",
            expected=nvecs[0],
            actual=tuple(nvecs),
        )


def check_count(count: Any, name: str) -> int:
    """
    Validate a number of vectors.

    Args:
        count: Candidate count (anything implementing __index__)
        name: Parameter name for error messages

    Returns:
        The count as a Python int

    Raises:
        ValidationError: If count is not a non-negative integer
    """
    try:
        n = operator.index(count)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(count).__name__}"
        ) from e

    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")
    return n
