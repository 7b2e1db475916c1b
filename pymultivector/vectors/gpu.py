"""
PyTorch-backed vector for CUDA and MPS devices.

Performance path for large vectors, validated against CPUVector.
FP32 by default on GPU devices (MPS has no FP64), FP64 on CPU.
Scalar reductions (inner, norm) synchronize with the device to
return Python floats.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymultivector.core.compute.device import DeviceInfo, select_device
from pymultivector.core.exceptions import DimensionError, ValidationError
from pymultivector.core.validation import check_array, check_1d
from pymultivector.vectors._common import (
    NORM_L1,
    NORM_L2,
    NORM_LINF,
    check_norm_type,
)


class GPUVector:
    """
    Dense vector stored in a 1D torch tensor.

    Parameters
    ----------
    data : array-like or torch.Tensor
        Values. Tensors are copied onto the target device.
    device : DeviceInfo, optional
        Target device. If None, auto-selects (GPU if available).
    dtype : torch.dtype, optional
        Storage precision. Defaults to float32 on GPU, float64 on CPU.
    """

    def __init__(
        self,
        data,
        device: DeviceInfo | None = None,
        dtype=None,
    ):
        import torch

        if device is None:
            device = select_device('auto')
        if dtype is None:
            dtype = torch.float32 if device.is_gpu else torch.float64
        if device.device_type == 'mps' and dtype == torch.float64:
            raise ValidationError("dtype: MPS devices do not support float64")

        if isinstance(data, torch.Tensor):
            if data.dim() != 1:
                raise DimensionError(
                    f"data: expected 1D tensor, got {data.dim()}D",
                    expected=1,
                    actual=data.dim(),
                )
            values = data.detach()
        else:
            array = check_array(data, "data")
            check_1d(array, "data")
            values = torch.from_numpy(np.ascontiguousarray(array))

        self._device = device
        self._tensor = values.to(
            device=torch.device(device.torch_device), dtype=dtype, copy=True,
        )

    @classmethod
    def zeros(cls, size: int, device: DeviceInfo | None = None, dtype=None) -> GPUVector:
        """Zero vector of the given size on the given device."""
        if size < 0:
            raise ValidationError(f"size: must be non-negative, got {size}")
        return cls(np.zeros(size, dtype=np.float64), device=device, dtype=dtype)

    @property
    def size(self) -> int:
        return self._tensor.shape[0]

    @property
    def tensor(self):
        """Live underlying tensor."""
        return self._tensor

    @property
    def device(self) -> DeviceInfo:
        return self._device

    def to_numpy(self) -> NDArray[np.float64]:
        """Host copy of the values as a float64 array."""
        return self._tensor.detach().cpu().numpy().astype(np.float64)

    def copy(self) -> GPUVector:
        return GPUVector(self._tensor, device=self._device, dtype=self._tensor.dtype)

    def zero(self) -> None:
        self._tensor.zero_()

    def axpy(self, a: float, x: GPUVector) -> None:
        self._tensor.add_(self._other(x, "x"), alpha=float(a))

    def inner(self, x: GPUVector) -> float:
        import torch

        return float(torch.dot(self._tensor, self._other(x, "x")).item())

    def norm(self, norm_type: str = NORM_L2) -> float:
        import torch

        norm_type = check_norm_type(norm_type)
        if self.size == 0:
            return 0.0
        order = {NORM_L1: 1, NORM_L2: 2, NORM_LINF: float('inf')}[norm_type]
        return float(torch.linalg.vector_norm(self._tensor, ord=order).item())

    def scale(self, a: float) -> None:
        self._tensor.mul_(float(a))

    def __imul__(self, a: float) -> GPUVector:
        self.scale(a)
        return self

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"GPUVector(size={self.size}, device={self._device.torch_device!r})"

    def _other(self, x: GPUVector, name: str):
        """Tensor of a compatible vector, or raise."""
        if not isinstance(x, GPUVector):
            raise ValidationError(
                f"{name}: expected GPUVector, got {type(x).__name__}"
            )
        if x.size != self.size:
            raise DimensionError(
                f"{name}: size mismatch, expected {self.size}, got {x.size}",
                expected=self.size,
                actual=x.size,
            )
        if x._tensor.device != self._tensor.device:
            raise ValidationError(
                f"{name}: device mismatch, expected {self._tensor.device}, "
                f"got {x._tensor.device}"
            )
        return x._tensor
