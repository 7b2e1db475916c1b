"""
Numerical precision constants.

Thresholds used by Gram-Schmidt to decide when to project again and when
a vector is numerically dependent on the ones before it. They assume
float64 arithmetic; pass a larger tol when orthogonalizing float32 (GPU)
vectors.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# A vector whose norm drops below DEPENDENCE_RTOL times its norm before
# projection is treated as linearly dependent. Exact dependence leaves a
# residual of a few EPSILON_64.
DEPENDENCE_RTOL: float = 1e-12

# Another projection pass is run while the norm shrinks by more than this
# factor in a single pass.
REORTHOGONALIZE_RATIO: float = 0.1
