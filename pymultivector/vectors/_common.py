"""
Norm type constants shared by the reference vector types.

This module is the single source of truth for norm type strings.
"""

from pymultivector.core.exceptions import ValidationError

# Sum of absolute values
NORM_L1 = 'l1'

# Euclidean norm
NORM_L2 = 'l2'

# Largest absolute value
NORM_LINF = 'linf'

ALL_NORM_TYPES = frozenset({NORM_L1, NORM_L2, NORM_LINF})


def check_norm_type(norm_type: str) -> str:
    """Return norm_type unchanged, or raise ValidationError if it is unknown."""
    if norm_type not in ALL_NORM_TYPES:
        raise ValidationError(
            f"norm_type: unknown norm {norm_type!r}, "
            f"expected one of {sorted(ALL_NORM_TYPES)}"
        )
    return norm_type
