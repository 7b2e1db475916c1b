"""
Generic result container for PyMultiVector computations.

Orthogonalization (and any later algorithm that produces more than a
mutated container) returns its payload in this envelope, together with
timing, diagnostics and version provenance.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, passes, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the interpreter and numeric stack that produced a result."""
    import numpy as np
    from pymultivector import __version__

    return {
        'pymultivector_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The payload type

    Attributes:
        params: Payload (coefficient matrices, auxiliary multivectors, ...)
        info: Structured metadata (method, passes, numerical rank)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Package and library versions

    Examples:
        >>> Result(
        ...     params=OrthoParams(r=r, Bq=None),
        ...     info={'method': 'mgs_reortho', 'rank': 5},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='mgs_reortho'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
