"""
GPU backend for matrix products and inversion using PyTorch.

Performance path for large matrices - validated against the CPU reference.
Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon).
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyvecmat.core.compute import linalg
from pyvecmat.core.compute.device import DeviceInfo, select_device


class GPUMatrixBackend:
    """
    GPU backend using PyTorch.

    Computes in the precision of the operands: float64 inputs run in FP64,
    float32 inputs in FP32. MPS has no FP64 kernels, so float64 inputs are
    computed in FP32 there (with a RuntimeWarning) and cast back.
    """

    def __init__(self, device: DeviceInfo | None = None):
        """
        Initialize GPU backend.

        Args:
            device: Target GPU. Defaults to the best available GPU.

        Raises:
            RuntimeError: If no GPU is available or `device` is the CPU
        """
        if device is None:
            device = select_device('gpu')
        if not device.is_gpu:
            raise RuntimeError(
                f"GPUMatrixBackend requires a GPU device, got {device}. "
                "Use backend='cpu'."
            )
        self.device = device
        self._last_precision = 'fp64' if device.supports_float64 else 'fp32'

    @property
    def name(self) -> str:
        return f'gpu_torch_{self._last_precision}'

    def _torch_dtype(self, *arrays: NDArray[np.floating[Any]], stacklevel: int = 2) -> Any:
        import torch

        dtype = np.result_type(*arrays)
        if dtype == np.float32:
            self._last_precision = 'fp32'
            return torch.float32
        if not self.device.supports_float64:
            warnings.warn(
                f"{self.device} does not support float64; computing in float32. "
                "Use backend='cpu' for double precision.",
                RuntimeWarning,
                stacklevel=stacklevel,
            )
            self._last_precision = 'fp32'
            return torch.float32
        self._last_precision = 'fp64'
        return torch.float64

    def matmul(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
        stacklevel: int = 2,
    ) -> NDArray[np.floating[Any]]:
        """a @ b for a 2D `a` and a 2D or 1D `b`."""
        dtype = self._torch_dtype(a, b, stacklevel=stacklevel + 1)
        return linalg.gemm_gpu(a, b, self.device.torch_device, dtype)

    def vecmat(
        self,
        x: NDArray[np.floating[Any]],
        a: NDArray[np.floating[Any]],
        stacklevel: int = 2,
    ) -> NDArray[np.floating[Any]]:
        """x @ a for a 1D `x`, computed as a' @ x."""
        dtype = self._torch_dtype(x, a, stacklevel=stacklevel + 1)
        return linalg.gemm_gpu(a.T, x, self.device.torch_device, dtype)

    def inv(
        self,
        a: NDArray[np.floating[Any]],
        matrix_name: str = 'x',
        stacklevel: int = 2,
    ) -> NDArray[np.floating[Any]]:
        """
        Inverse via torch.linalg.inv_ex.

        Raises:
            SingularMatrixError: If the factorization has a zero pivot
        """
        dtype = self._torch_dtype(a, stacklevel=stacklevel + 1)
        return linalg.inv_gpu(a, self.device.torch_device, dtype, matrix_name=matrix_name)
