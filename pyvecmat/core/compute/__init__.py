"""
Shared compute infrastructure for pyvecmat.

This module provides hardware detection, precision utilities and the
BLAS/LAPACK kernels every vector and matrix operation delegates to.

Submodules:
    device: Hardware detection and device selection
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers per dtype/backend
    linalg: BLAS and LAPACK kernels
"""

from pyvecmat.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pyvecmat.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
