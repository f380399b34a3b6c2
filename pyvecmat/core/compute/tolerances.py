"""
Tolerance tiers for numerical comparison.

Defines precision expectations for different element types and compute paths:
- CPU FP64 (reference): BLAS/LAPACK double precision
- CPU FP32: BLAS/LAPACK single precision
- GPU FP64: same as CPU FP64
- GPU FP32 (CUDA and MPS): relaxed for single-precision device arithmetic

Used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reference',
)

CPU_FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='cpu_fp32',
    description='CPU single precision',
)

GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision',
)


def select_tolerance(
    dtype: np.dtype | type = np.float64,
    backend_name: str = 'cpu',
) -> ToleranceTier:
    """Select appropriate tolerance tier for an element type and backend."""
    single = np.dtype(dtype) == np.float32
    if 'gpu' in backend_name:
        if 'fp64' in backend_name and not single:
            return GPU_FP64
        return GPU_FP32
    return CPU_FP32 if single else CPU_FP64
