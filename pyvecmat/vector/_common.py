"""
Shared helpers for the vector kernels.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.validation import (
    check_vector,
    check_same_length,
    check_not_empty,
    common_dtype,
)


Vector = NDArray[np.floating[Any]]


def as_vector(x: ArrayLike, name: str = 'x') -> Vector:
    """Validate a single vector operand."""
    return check_vector(x, name)


def as_nonempty_vector(x: ArrayLike, name: str = 'x') -> Vector:
    """Validate a vector operand for a reduction that needs a value."""
    v = check_vector(x, name)
    check_not_empty(v, name)
    return v


def binary_operands(
    x: ArrayLike,
    y: ArrayLike,
    operation: str,
) -> tuple[Vector, Vector]:
    """
    Validate two equal-length vector operands and cast them to a common dtype.

    Raises:
        DimensionError: If the lengths differ
    """
    xv = check_vector(x, 'x')
    yv = check_vector(y, 'y')
    check_same_length(xv, yv, operation)
    dtype = common_dtype(xv, yv)
    return xv.astype(dtype, copy=False), yv.astype(dtype, copy=False)


def _scalar_operand(s: Any, dtype: np.dtype, name: str) -> np.floating[Any]:
    value = np.asarray(s)
    if value.dtype.kind not in 'iuf':
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(s).__name__}"
        )
    return dtype.type(value)


def vector_or_scalar_operands(
    x: ArrayLike | float,
    y: ArrayLike | float,
    operation: str,
) -> tuple[Vector | np.floating[Any], Vector | np.floating[Any]]:
    """
    Validate operands where either side may be a scalar.

    A scalar is applied to every element of the other operand and takes
    its dtype, so a float32 vector stays float32. Two vectors go through
    binary_operands().

    Raises:
        ValidationError: If both operands are scalars
        DimensionError: If two vectors differ in length
    """
    x_scalar = np.ndim(x) == 0
    y_scalar = np.ndim(y) == 0
    if x_scalar and y_scalar:
        raise ValidationError(f"{operation}: expected at least one vector operand")
    if y_scalar:
        xv = check_vector(x, 'x')
        return xv, _scalar_operand(y, xv.dtype, 'y')
    if x_scalar:
        yv = check_vector(y, 'y')
        return _scalar_operand(x, yv.dtype, 'x'), yv
    return binary_operands(x, y, operation)


def elementwise(kernel: Callable[..., Vector], *operands: Vector) -> Vector:
    """
    Apply a vectorized kernel, returning a newly allocated array.

    Floating-point exceptions are not reported: domain errors come back as
    NaN/inf in the result, as they do from the native vector library.
    """
    with np.errstate(all='ignore'):
        return kernel(*operands)
