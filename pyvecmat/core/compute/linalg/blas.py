"""
BLAS kernels.

Thin typed wrappers over scipy.linalg.blas. The precision prefix
(s/d) is chosen from the operand dtype, so float32 data runs through the
single precision routines and float64 data through the double precision
ones, exactly as a direct cblas_s*/cblas_d* call would.

All wrappers copy any in/out argument before handing it to Fortran, so
callers' buffers are never written to.
"""

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import get_blas_funcs

if TYPE_CHECKING:
    import torch


def axpy(
    alpha: float,
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Scaled vector addition.

    Returns:
        alpha * x + y (newly allocated)
    """
    dtype = np.result_type(x, y)
    x = np.ascontiguousarray(x, dtype=dtype)
    result = np.array(y, dtype=dtype, copy=True)
    if result.size == 0:
        return result
    fn = get_blas_funcs('axpy', (x, result))
    return fn(x, result, a=alpha)


def scal(alpha: float, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Vector scaling.

    Returns:
        alpha * x (newly allocated)
    """
    result = np.array(x, copy=True)
    if result.size == 0:
        return result
    fn = get_blas_funcs('scal', (result,))
    return fn(alpha, result)


def dot(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    """Inner product sum(x[i] * y[i])."""
    if x.size == 0:
        return 0.0
    dtype = np.result_type(x, y)
    x = np.ascontiguousarray(x, dtype=dtype)
    y = np.ascontiguousarray(y, dtype=dtype)
    fn = get_blas_funcs('dot', (x, y))
    return float(fn(x, y))


def asum(x: NDArray[np.floating[Any]]) -> float:
    """Sum of absolute values."""
    if x.size == 0:
        return 0.0
    x = np.ascontiguousarray(x)
    fn = get_blas_funcs('asum', (x,))
    return float(fn(x))


def gemv(
    a: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
    trans: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Matrix-vector product.

    Args:
        a: 2D matrix (m x n)
        x: Vector of length n (or m when trans=True)
        trans: Multiply by a' instead of a

    Returns:
        a @ x, or a' @ x when trans=True
    """
    dtype = np.result_type(a, x)
    a = np.asarray(a, dtype=dtype)
    x = np.ascontiguousarray(x, dtype=dtype)
    fn = get_blas_funcs('gemv', (a, x))
    return np.ascontiguousarray(fn(1.0, a, x, trans=int(trans)))


def gemm(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Matrix-matrix product.

    Args:
        a: (m x k) matrix
        b: (k x n) matrix

    Returns:
        (m x n) C-ordered product a @ b
    """
    dtype = np.result_type(a, b)
    a = np.asarray(a, dtype=dtype)
    b = np.asarray(b, dtype=dtype)
    fn = get_blas_funcs('gemm', (a, b))
    return np.ascontiguousarray(fn(1.0, a, b))


def gemm_gpu(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    device: str,
    dtype: 'torch.dtype',
) -> NDArray[np.floating[Any]]:
    """
    Matrix-matrix product using PyTorch (GPU-accelerated).

    Args:
        a: (m x k) matrix
        b: (k x n) matrix, or a vector of length k
        device: torch device string ('cuda:0', 'mps')
        dtype: torch dtype to compute in

    Returns:
        Product as a NumPy array (moved back to CPU) in the dtype of the
        inputs
    """
    import torch

    out_dtype = np.result_type(a, b)
    a_t = torch.from_numpy(np.ascontiguousarray(a)).to(device=device, dtype=dtype)
    b_t = torch.from_numpy(np.ascontiguousarray(b)).to(device=device, dtype=dtype)
    return (a_t @ b_t).cpu().numpy().astype(out_dtype, copy=False)
