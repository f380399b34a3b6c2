"""
Input validation utilities for pyvecmat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently broadcasting,
truncating or padding operands.

Design principles:
    - No silent type coercion (except np.asarray on array-likes and
      promotion of integer data to float64)
    - Only float32 and float64 reach the native routines
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyvecmat.core.exceptions import ValidationError, DimensionError


SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float32/float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float32 or float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    # float16 and longdouble have no BLAS kernels
    if result.dtype not in SUPPORTED_DTYPES:
        result = result.astype(np.float64)

    return result


def check_vector(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a contiguous 1D float array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        C-contiguous 1D array

    Raises:
        ValidationError: If input is not numeric
        DimensionError: If input is not 1-dimensional
    """
    result = check_array(array, name)
    check_1d(result, name)
    return np.ascontiguousarray(result)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_same_length(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    """
    Verify two vectors have the same length.

    Args:
        x: First vector
        y: Second vector
        operation: Operation name for the error message

    Raises:
        DimensionError: If lengths differ
    """
    if x.shape[0] != y.shape[0]:
        raise DimensionError(
            f"Vector({x.shape[0]}) and Vector({y.shape[0]}) not compatible "
            f"with {operation}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        ValidationError: If array is empty
    """
    if array.size == 0:
        raise ValidationError(f"{name}: requires at least 1 element, got 0")


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def common_dtype(*arrays: NDArray[np.floating[Any]]) -> np.dtype:
    """Result dtype for a binary operation (float32 only if every operand is)."""
    return np.result_type(*arrays)
