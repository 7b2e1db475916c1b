"""
Vector construction with backend selection.

make_vector() picks CPUVector or GPUVector the same way the batched
solvers pick their backends: 'cpu' always works, 'gpu' requires a
device, 'auto' prefers a GPU and falls back to the CPU reference.
"""

from __future__ import annotations

import warnings
from typing import Literal

from numpy.typing import ArrayLike

from pymultivector.core.compute.device import select_device
from pymultivector.core.exceptions import ValidationError
from pymultivector.vectors.cpu import CPUVector


BackendChoice = Literal['auto', 'cpu', 'gpu']


def make_vector(
    data: ArrayLike,
    *,
    backend: BackendChoice = 'cpu',
    dtype=None,
):
    """
    Build a reference vector from array-like data.

    Parameters
    ----------
    data : array-like
        1D values.
    backend : str
        'cpu' (default), 'gpu' or 'auto'.
    dtype : torch.dtype, optional
        Precision of GPU vectors. Ignored by the CPU backend (always float64).

    Returns
    -------
    CPUVector or GPUVector
    """
    if backend == 'cpu':
        return CPUVector(data)

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            try:
                from pymultivector.vectors.gpu import GPUVector
            except ImportError:
                warnings.warn(
                    "GPU detected but the GPU vector backend could not be imported, using CPU",
                    RuntimeWarning,
                    stacklevel=2,
                )
                return CPUVector(data)
            return GPUVector(data, device=device, dtype=dtype)
        return CPUVector(data)

    if backend == 'gpu':
        device = select_device('gpu')
        from pymultivector.vectors.gpu import GPUVector
        return GPUVector(data, device=device, dtype=dtype)

    raise ValidationError(f"Unknown backend: {backend!r}")
