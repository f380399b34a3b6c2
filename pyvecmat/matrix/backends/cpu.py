"""
CPU reference backend for matrix products and inversion.

BLAS gemm/gemv and LAPACK getrf/getri/gecon through SciPy.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyvecmat.core.compute import linalg
from pyvecmat.core.compute.precision import machine_epsilon


# Inverses with fewer than two reliable digits are flagged
ILL_CONDITIONED_DIGITS = 2


class CPUMatrixBackend:
    """CPU reference backend (BLAS/LAPACK)."""

    @property
    def name(self) -> str:
        return 'cpu_blas'

    def matmul(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
        stacklevel: int = 2,
    ) -> NDArray[np.floating[Any]]:
        """
        a @ b for a 2D `a` and a 2D or 1D `b` (gemm or gemv).

        `stacklevel` is accepted for parity with GPUMatrixBackend; the CPU
        products never warn.
        """
        if b.ndim == 1:
            return linalg.gemv(a, b)
        return linalg.gemm(a, b)

    def vecmat(
        self,
        x: NDArray[np.floating[Any]],
        a: NDArray[np.floating[Any]],
        stacklevel: int = 2,
    ) -> NDArray[np.floating[Any]]:
        """x @ a for a 1D `x` (gemv on a')."""
        return linalg.gemv(a, x, trans=True)

    def inv(
        self,
        a: NDArray[np.floating[Any]],
        matrix_name: str = 'x',
        stacklevel: int = 2,
    ) -> NDArray[np.floating[Any]]:
        """
        Inverse via getrf + getri.

        Emits a RuntimeWarning when the reciprocal condition number
        estimated from the LU factors (gecon) leaves fewer than
        ILL_CONDITIONED_DIGITS significant digits, attributed `stacklevel`
        frames up.

        Raises:
            SingularMatrixError: If the factorization has a zero pivot
        """
        factor = linalg.lu_cpu(a)
        result = linalg.inv_cpu(a, matrix_name=matrix_name, factor=factor)

        rcond = linalg.rcond_cpu(a, factor)
        if rcond <= machine_epsilon(a.dtype) * 10**ILL_CONDITIONED_DIGITS:
            warnings.warn(
                f"Matrix {matrix_name} is ill-conditioned (estimated condition "
                f"number {1.0 / rcond if rcond > 0 else np.inf:.3e}); "
                f"the inverse may be inaccurate.",
                RuntimeWarning,
                stacklevel=stacklevel,
            )

        return result
