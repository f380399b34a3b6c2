"""
Linear algebra on Matrix values.

Every function validates shapes up front and returns a newly allocated
result; operands are never modified.

Backends:
    'cpu'  - BLAS/LAPACK through SciPy (default, reference)
    'gpu'  - PyTorch on CUDA or MPS
    'auto' - GPU if one is available, else CPU

Only dot() and inv() dispatch to a backend. The element-wise operations
and reductions always run on the CPU.
"""

from __future__ import annotations

import numbers
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.compute import linalg as kernels
from pyvecmat.core.compute.device import select_device
from pyvecmat.core.exceptions import ValidationError, DimensionError
from pyvecmat.core.validation import check_vector, check_finite
from pyvecmat.matrix.matrix import Matrix
from pyvecmat.matrix.backends.cpu import CPUMatrixBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']
Axis = Literal['column', 'row'] | None


# === Checks ===

def _check_matrix(x: Any, name: str) -> Matrix:
    if not isinstance(x, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(x).__name__}")
    return x


def _check_same_shape(x: Matrix, y: Matrix, operation: str) -> None:
    if x.shape != y.shape:
        raise DimensionError(
            f"Matrix({x.rows},{x.columns}) and Matrix({y.rows},{y.columns}) "
            f"not compatible with {operation}"
        )


def _check_square(x: Matrix, name: str) -> None:
    if x.rows != x.columns:
        raise DimensionError(
            f"{name}: Matrix must be square, got Matrix({x.rows},{x.columns})"
        )


def _check_scalar(alpha: Any, name: str) -> float:
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise ValidationError(f"{name}: expected a real scalar, got {type(alpha).__name__}")
    return alpha


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice == 'cpu':
        return CPUMatrixBackend()

    if choice == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            from pyvecmat.matrix.backends.gpu import GPUMatrixBackend
            return GPUMatrixBackend(device)
        return CPUMatrixBackend()

    if choice == 'gpu':
        from pyvecmat.matrix.backends.gpu import GPUMatrixBackend
        return GPUMatrixBackend()

    raise ValidationError(
        f"backend: expected 'auto', 'cpu' or 'gpu', got {choice!r}"
    )


def _elementwise(kernel, *grids: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    with np.errstate(all='ignore'):
        return kernel(*grids)


# === Element-wise arithmetic ===

def add(x: Matrix, y: Matrix) -> Matrix:
    """
    Element-wise sum (BLAS axpy).

    Raises:
        DimensionError: If shapes differ
    """
    _check_matrix(x, 'x')
    _check_matrix(y, 'y')
    _check_same_shape(x, y, "addition")
    return Matrix._wrap(x.rows, x.columns, kernels.axpy(1.0, x._grid, y._grid))


def sub(x: Matrix, y: Matrix) -> Matrix:
    """
    Element-wise difference x - y (BLAS axpy).

    Raises:
        DimensionError: If shapes differ
    """
    _check_matrix(x, 'x')
    _check_matrix(y, 'y')
    _check_same_shape(x, y, "subtraction")
    return Matrix._wrap(x.rows, x.columns, kernels.axpy(-1.0, y._grid, x._grid))


def mul(alpha: float, x: Matrix) -> Matrix:
    """Scale every element by `alpha` (BLAS scal)."""
    alpha = _check_scalar(alpha, 'alpha')
    _check_matrix(x, 'x')
    return Matrix._wrap(x.rows, x.columns, kernels.scal(alpha, x._grid))


def elmul(x: Matrix, y: Matrix) -> Matrix:
    """
    Element-wise (Hadamard) product.

    Raises:
        DimensionError: If shapes differ
    """
    _check_matrix(x, 'x')
    _check_matrix(y, 'y')
    _check_same_shape(x, y, "element-wise multiplication")
    return Matrix._wrap(x.rows, x.columns, _elementwise(np.multiply, x._grid, y._grid))


def pow(x: Matrix, p: float) -> Matrix:
    """Raise every element to the power `p`."""
    _check_matrix(x, 'x')
    p = _check_scalar(p, 'p')
    return Matrix._wrap(
        x.rows, x.columns, _elementwise(np.power, x._grid, x.dtype.type(p))
    )


def exp(x: Matrix) -> Matrix:
    """e raised to every element."""
    _check_matrix(x, 'x')
    return Matrix._wrap(x.rows, x.columns, _elementwise(np.exp, x._grid))


# === Reductions ===

def _reduce(x: Matrix, axis: Axis, reducer, name: str) -> Matrix | float:
    _check_matrix(x, 'x')
    a = x._as_2d()
    if axis is None:
        return reducer(x._grid)
    if axis == 'column':
        grid = np.array([reducer(a[:, c]) for c in range(x.columns)], dtype=x.dtype)
        return Matrix._wrap(1, x.columns, grid)
    if axis == 'row':
        grid = np.array([reducer(a[r]) for r in range(x.rows)], dtype=x.dtype)
        return Matrix._wrap(x.rows, 1, grid)
    raise ValidationError(f"{name}: axis must be 'column', 'row' or None, got {axis!r}")


def sum(x: Matrix, axis: Axis = 'column') -> Matrix | float:
    """
    Sum of elements.

    Args:
        x: Input matrix
        axis: 'column' (1 x columns Matrix of column sums), 'row'
            (rows x 1 Matrix of row sums) or None (scalar)

    Raises:
        ValidationError: If axis is not one of the above
    """
    return _reduce(x, axis, lambda v: float(np.add.reduce(v)), 'sum')


def asum(x: Matrix, axis: Axis = 'column') -> Matrix | float:
    """Sum of absolute values (BLAS asum); `axis` as for sum()."""
    return _reduce(x, axis, kernels.asum, 'asum')


# === Products ===

def dot(
    x: Matrix | ArrayLike,
    y: Matrix | ArrayLike,
    backend: BackendChoice = 'cpu',
) -> Matrix | NDArray[np.floating[Any]]:
    """
    Matrix product.

    Matrix · Matrix gives a Matrix (gemm); Matrix · vector and
    vector · Matrix give a vector (gemv).

    Args:
        x: Left operand
        y: Right operand
        backend: 'cpu', 'gpu' or 'auto'

    Raises:
        DimensionError: If inner dimensions differ
        ValidationError: If neither operand is a Matrix
    """
    return _dot(x, y, backend, stacklevel=3)


def _dot(x, y, backend: BackendChoice, stacklevel: int):
    # stacklevel counts frames from here up to the user's call site
    if isinstance(x, Matrix) and isinstance(y, Matrix):
        if x.columns != y.rows:
            raise DimensionError(
                f"Matrix({x.rows},{x.columns}) and Matrix({y.rows},{y.columns}) "
                f"not compatible with multiplication"
            )
        impl = _get_backend(backend)
        result = impl.matmul(x._as_2d(), y._as_2d(), stacklevel=stacklevel + 1)
        return Matrix._wrap(x.rows, y.columns, np.ascontiguousarray(result).reshape(-1))

    if isinstance(x, Matrix):
        v = check_vector(y, 'y')
        if x.columns != v.shape[0]:
            raise DimensionError(
                f"Matrix({x.rows},{x.columns}) and Vector({v.shape[0]}) "
                f"not compatible with multiplication"
            )
        impl = _get_backend(backend)
        return impl.matmul(x._as_2d(), v, stacklevel=stacklevel + 1)

    if isinstance(y, Matrix):
        v = check_vector(x, 'x')
        if v.shape[0] != y.rows:
            raise DimensionError(
                f"Vector({v.shape[0]}) and Matrix({y.rows},{y.columns}) "
                f"not compatible with multiplication"
            )
        impl = _get_backend(backend)
        return impl.vecmat(v, y._as_2d(), stacklevel=stacklevel + 1)

    raise ValidationError(
        f"dot: expected at least one Matrix operand, got "
        f"{type(x).__name__} and {type(y).__name__}"
    )


def inv(x: Matrix, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Matrix inverse (LAPACK getrf + getri on the CPU backend).

    Warns:
        RuntimeWarning: If the matrix is invertible but ill-conditioned

    Raises:
        DimensionError: If x is not square
        ValidationError: If x contains NaN or Inf
        SingularMatrixError: If x is singular
    """
    _check_matrix(x, 'x')
    return _inverse(x, backend, 'x', stacklevel=3)


def _inverse(x: Matrix, backend: BackendChoice, name: str, stacklevel: int) -> Matrix:
    _check_square(x, name)
    check_finite(x._grid, name)
    impl = _get_backend(backend)
    result = impl.inv(x._as_2d(), matrix_name=name, stacklevel=stacklevel + 1)
    return Matrix._wrap(x.rows, x.columns, np.ascontiguousarray(result).reshape(-1))


def div(x: Matrix, y: Matrix, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Right division x · inv(y).

    Raises:
        DimensionError: If y is not square or x.columns != y.rows
        SingularMatrixError: If y is singular
    """
    return _div(x, y, backend, stacklevel=3)


def _div(x: Matrix, y: Matrix, backend: BackendChoice, stacklevel: int) -> Matrix:
    _check_matrix(x, 'x')
    _check_matrix(y, 'y')
    _check_square(y, 'y')
    if x.columns != y.rows:
        raise DimensionError(
            f"Matrix({x.rows},{x.columns}) and Matrix({y.rows},{y.columns}) "
            f"not compatible with division"
        )
    y_inv = _inverse(y, backend, 'y', stacklevel=stacklevel + 1)
    return _dot(x, y_inv, backend, stacklevel=stacklevel + 1)


def transpose(x: Matrix) -> Matrix:
    """New matrix with rows and columns swapped."""
    _check_matrix(x, 'x')
    # A 1 x n or n x 1 transpose is already C-contiguous, so copy explicitly
    grid = x._as_2d().T.copy(order='C').reshape(-1)
    return Matrix._wrap(x.columns, x.rows, grid)
