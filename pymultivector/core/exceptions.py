"""
Exception hierarchy for PyMultiVector.

All exceptions inherit from PyMultiVectorError to allow catching any
library-specific error. Errors raised by a vector type's own arithmetic
are never wrapped: they propagate unchanged.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Contract violations are checked in every configuration
"""


class PyMultiVectorError(Exception):
    """Base exception for all PyMultiVector errors."""
    pass


class ValidationError(PyMultiVectorError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    coefficient arrays, unknown norm types, unknown backends, ...).
    """
    pass


class DimensionError(ValidationError):
    """
    Lengths or shapes are incorrect or inconsistent.

    Raised when a coefficient array does not match the number of vectors
    in a multivector, when two multivectors have different lengths, or
    when two vectors have different sizes.

    Attributes:
        expected: Expected length or shape, if known
        actual: Actual length or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index outside [0, size).

    Also an IndexError so that plain Python code (and iteration through
    the legacy __getitem__ protocol) keeps working.

    Attributes:
        index: The offending index
        size: Number of elements in the container
    """

    def __init__(self, message: str, index: int, size: int):
        super().__init__(message)
        self.index = index
        self.size = size


class NumericalError(PyMultiVectorError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class OrthogonalizationError(NumericalError):
    """
    Gram-Schmidt orthogonalization broke down.

    Raised when the leading vector is zero, or when the inner product
    operator is not positive on the span of the vectors.

    Attributes:
        column: Index of the vector at which the breakdown happened
        norm: Norm (or squared B-norm) observed at the breakdown
    """

    def __init__(
        self,
        message: str,
        column: int | None = None,
        norm: float | None = None,
    ):
        super().__init__(message)
        self.column = column
        self.norm = norm
