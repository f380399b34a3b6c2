"""
Linear algebra kernels for pyvecmat.

All functions follow these conventions:
    - CPU functions call BLAS/LAPACK through scipy.linalg.blas / .lapack
    - GPU functions use PyTorch and return NumPy arrays (data moved to CPU)
    - Inputs are never modified
    - Native status codes are checked and raised immediately

Submodules:
    blas: axpy, scal, dot, asum, gemv, gemm (+ gemm_gpu)
    lu: getrf/getri factorization and inversion, gecon estimate (+ inv_gpu)
"""

from pyvecmat.core.compute.linalg.blas import (
    axpy,
    scal,
    dot,
    asum,
    gemv,
    gemm,
    gemm_gpu,
)
from pyvecmat.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    inv_cpu,
    inv_gpu,
    rcond_cpu,
)

__all__ = [
    # BLAS
    "axpy",
    "scal",
    "dot",
    "asum",
    "gemv",
    "gemm",
    "gemm_gpu",
    # LAPACK
    "LUResult",
    "lu_cpu",
    "inv_cpu",
    "inv_gpu",
    "rcond_cpu",
]
