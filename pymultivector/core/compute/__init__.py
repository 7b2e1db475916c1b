"""
Shared compute infrastructure for PyMultiVector.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    precision: Numerical precision constants
"""

from pymultivector.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pymultivector.core.compute.timing import Timer

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
]
