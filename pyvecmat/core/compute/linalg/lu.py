"""
LU factorization and explicit inversion.

CPU path: LAPACK getrf + getri (via scipy.linalg.lapack), the same pair of
routines a hand-written cblas/clapack binding would call.
GPU path: torch.linalg.inv_ex, returning NumPy arrays.

rcond_cpu estimates the reciprocal condition number from the LU factors
(gecon), which costs O(n²) once the factorization exists.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import get_lapack_funcs

from pyvecmat.core.exceptions import NumericalError, SingularMatrixError

if TYPE_CHECKING:
    import torch


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU factorization with partial pivoting.

    Attributes:
        lu: Packed L (unit diagonal, below) and U (on and above diagonal)
        piv: 0-based pivot indices; row i was interchanged with row piv[i]
        info: LAPACK status code (0 success, >0 zero pivot at U[info-1, info-1])
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    info: int

    @property
    def is_singular(self) -> bool:
        return self.info > 0


def _check_info(info: int, routine: str) -> None:
    if info < 0:
        raise NumericalError(
            f"LAPACK {routine}: illegal value in argument {-info}"
        )


def lu_cpu(a: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU factorization using LAPACK getrf.

    Args:
        a: Square matrix (n x n)

    Returns:
        LUResult; singularity is reported through info, not raised

    Raises:
        NumericalError: If LAPACK rejects an argument
    """
    getrf, = get_lapack_funcs(('getrf',), (a,))
    lu, piv, info = getrf(a, overwrite_a=False)
    _check_info(info, 'getrf')
    return LUResult(lu=lu, piv=piv, info=int(info))


def inv_cpu(
    a: NDArray[np.floating[Any]],
    matrix_name: str = 'x',
    factor: LUResult | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Matrix inverse via LU factorization (getrf) and getri.

    Args:
        a: Square matrix (n x n)
        matrix_name: Name used in error messages
        factor: Precomputed lu_cpu(a), to avoid factorizing twice

    Returns:
        C-ordered inverse (n x n)

    Raises:
        SingularMatrixError: If the factorization has an exactly zero pivot
        NumericalError: If LAPACK rejects an argument
    """
    n = a.shape[0]
    if factor is None:
        factor = lu_cpu(a)

    if factor.is_singular:
        rank = int(np.sum(np.abs(np.diag(factor.lu)) > 0))
        raise SingularMatrixError(
            f"Matrix not invertible: U[{factor.info - 1},{factor.info - 1}] "
            f"is exactly zero in the LU factorization of {matrix_name}",
            matrix_name=matrix_name,
            condition_number=np.inf,
            rank=rank,
            expected_rank=n,
            pivot=factor.info,
        )

    getri, = get_lapack_funcs(('getri',), (factor.lu,))
    inv_a, info = getri(factor.lu, factor.piv, overwrite_lu=False)
    _check_info(info, 'getri')
    if info > 0:
        raise SingularMatrixError(
            f"Matrix not invertible: getri reported a zero pivot at {info}",
            matrix_name=matrix_name,
            expected_rank=n,
            pivot=int(info),
        )

    return np.ascontiguousarray(inv_a)


def rcond_cpu(a: NDArray[np.floating[Any]], factor: LUResult) -> float:
    """
    Reciprocal 1-norm condition number estimate (LAPACK gecon).

    Args:
        a: The matrix that was factorized
        factor: lu_cpu(a)

    Returns:
        rcond in [0, 1]; 0.0 for a singular factorization
    """
    if factor.is_singular:
        return 0.0
    gecon, = get_lapack_funcs(('gecon',), (factor.lu,))
    anorm = float(np.linalg.norm(a, 1))
    rcond, info = gecon(factor.lu, anorm, norm='1')
    _check_info(info, 'gecon')
    return float(rcond)


def inv_gpu(
    a: NDArray[np.floating[Any]],
    device: str,
    dtype: 'torch.dtype',
    matrix_name: str = 'x',
) -> NDArray[np.floating[Any]]:
    """
    Matrix inverse using PyTorch (GPU-accelerated).

    Args:
        a: Square matrix (n x n)
        device: torch device string ('cuda:0', 'mps')
        dtype: torch dtype to compute in
        matrix_name: Name used in error messages

    Returns:
        Inverse as a NumPy array (moved to CPU) in the dtype of the input

    Raises:
        SingularMatrixError: If torch reports the matrix as singular
    """
    import torch

    a_t = torch.from_numpy(np.ascontiguousarray(a)).to(device=device, dtype=dtype)
    inv_t, info = torch.linalg.inv_ex(a_t)
    info = int(info.item())
    if info > 0:
        raise SingularMatrixError(
            f"Matrix not invertible: zero pivot at {info} in the LU "
            f"factorization of {matrix_name}",
            matrix_name=matrix_name,
            condition_number=np.inf,
            expected_rank=a.shape[0],
            pivot=info,
        )
    return inv_t.cpu().numpy().astype(a.dtype, copy=False)
