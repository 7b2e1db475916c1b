"""
Core infrastructure for PyMultiVector.

Key components:
    protocols: Vector and Operator protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection, timing, precision constants
"""

from pymultivector.core.protocols import Vector, Operator, TransposableOperator
from pymultivector.core.result import Result
from pymultivector.core.exceptions import (
    PyMultiVectorError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    OrthogonalizationError,
)

__all__ = [
    # Protocols
    "Vector",
    "Operator",
    "TransposableOperator",
    # Result
    "Result",
    # Exceptions
    "PyMultiVectorError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "OrthogonalizationError",
]
