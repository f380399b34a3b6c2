"""
Arithmetic on vectors.

Reductions (sum, mean, extrema) and element-wise binary operations on
1D float32/float64 arrays. Binary operations require operands of equal
length; nothing is broadcast, truncated or padded. The exception is a
scalar operand to add, sub, mul, div, mod or remainder, which is applied
to every element. Every function returns a newly allocated result and
leaves its inputs untouched.

Note: sum, max, min and pow shadow the builtins inside this module.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pyvecmat.core.compute import linalg
from pyvecmat.vector._common import (
    Vector,
    as_vector,
    as_nonempty_vector,
    binary_operands,
    vector_or_scalar_operands,
    elementwise,
)


# ═══════════════════════════════════════════════════════════════════════
# Reductions
# ═══════════════════════════════════════════════════════════════════════


def sum(x: ArrayLike) -> float:
    """
    Sum elements of a vector.

    Returns:
        ∑ x[i]; 0.0 for an empty vector
    """
    v = as_vector(x)
    return float(np.add.reduce(v))


def asum(x: ArrayLike) -> float:
    """
    Sum the absolute values of a vector (BLAS asum).

    Returns:
        ∑ |x[i]|; 0.0 for an empty vector
    """
    return linalg.asum(as_vector(x))


def max(x: ArrayLike) -> float:
    """
    Maximum value of a vector.

    Raises:
        ValidationError: If x is empty
    """
    v = as_nonempty_vector(x)
    return float(np.max(v))


def argmax(x: ArrayLike) -> int:
    """
    Index of the maximum value (first occurrence).

    Raises:
        ValidationError: If x is empty
    """
    v = as_nonempty_vector(x)
    return int(np.argmax(v))


def min(x: ArrayLike) -> float:
    """
    Minimum value of a vector.

    Raises:
        ValidationError: If x is empty
    """
    v = as_nonempty_vector(x)
    return float(np.min(v))


def argmin(x: ArrayLike) -> int:
    """
    Index of the minimum value (first occurrence).

    Raises:
        ValidationError: If x is empty
    """
    v = as_nonempty_vector(x)
    return int(np.argmin(v))


def mean(x: ArrayLike) -> float:
    """Mean value: (1/n) ∑ x[i]."""
    v = as_nonempty_vector(x)
    return float(np.mean(v))


def meamg(x: ArrayLike) -> float:
    """Mean magnitude: (1/n) ∑ |x[i]|."""
    v = as_nonempty_vector(x)
    return linalg.asum(v) / v.shape[0]


def measq(x: ArrayLike) -> float:
    """Mean square value: (1/n) ∑ x[i]²."""
    v = as_nonempty_vector(x)
    return linalg.dot(v, v) / v.shape[0]


# ═══════════════════════════════════════════════════════════════════════
# Element-wise binary operations
# ═══════════════════════════════════════════════════════════════════════


def add(x: ArrayLike | float, y: ArrayLike | float) -> Vector:
    """
    Element-wise addition (BLAS axpy for two vectors).

    Either operand may be a scalar, which is added to every element.

    Raises:
        DimensionError: If len(x) != len(y)
    """
    xv, yv = vector_or_scalar_operands(x, y, "element-wise addition")
    if np.ndim(xv) == 0 or np.ndim(yv) == 0:
        return elementwise(np.add, xv, yv)
    return linalg.axpy(1.0, xv, yv)


def sub(x: ArrayLike | float, y: ArrayLike | float) -> Vector:
    """
    Element-wise subtraction x - y (BLAS axpy for two vectors).

    Either operand may be a scalar.

    Raises:
        DimensionError: If len(x) != len(y)
    """
    xv, yv = vector_or_scalar_operands(x, y, "element-wise subtraction")
    if np.ndim(xv) == 0 or np.ndim(yv) == 0:
        return elementwise(np.subtract, xv, yv)
    return linalg.axpy(-1.0, yv, xv)


def mul(x: ArrayLike | float, y: ArrayLike | float) -> Vector:
    """Element-wise multiplication; either operand may be a scalar."""
    xv, yv = vector_or_scalar_operands(x, y, "element-wise multiplication")
    return elementwise(np.multiply, xv, yv)


def div(x: ArrayLike | float, y: ArrayLike | float) -> Vector:
    """
    Element-wise division; either operand may be a scalar.

    Division by zero yields ±inf or NaN.
    """
    xv, yv = vector_or_scalar_operands(x, y, "element-wise division")
    return elementwise(np.divide, xv, yv)


def mod(x: ArrayLike | float, y: ArrayLike | float) -> Vector:
    """
    Element-wise floating-point modulo, C fmod semantics.

    The result has the sign of x and magnitude less than |y|. Either
    operand may be a scalar.
    """
    xv, yv = vector_or_scalar_operands(x, y, "element-wise modulo")
    return elementwise(np.fmod, xv, yv)


def _ieee_remainder(x: Vector, y: Vector) -> Vector:
    # fmod by 2|y| is exact, then fold into [-|y|/2, |y|/2] with ties to even
    p = np.abs(y)
    half = 0.5 * p
    a = np.abs(np.fmod(x, p + p))
    first = a > half
    a = np.where(first, a - p, a)
    a = np.where(first & (a >= half), a - p, a)
    return np.where(np.signbit(x), -a, a).astype(x.dtype, copy=False)


def remainder(x: ArrayLike | float, y: ArrayLike | float) -> Vector:
    """
    Element-wise IEEE remainder.

    r = x - n*y where n is x/y rounded to the nearest integer, ties to even,
    so |r| <= |y|/2. Either operand may be a scalar.
    """
    xv, yv = vector_or_scalar_operands(x, y, "element-wise remainder")
    return elementwise(_ieee_remainder, xv, yv)


def pow(x: ArrayLike, y: ArrayLike | float) -> Vector:
    """
    Element-wise power.

    Args:
        x: Base vector
        y: Scalar exponent, or a vector of exponents of the same length
    """
    if np.ndim(y) == 0:
        xv = as_vector(x)
        return elementwise(np.power, xv, xv.dtype.type(y))
    xv, yv = binary_operands(x, y, "element-wise power")
    return elementwise(np.power, xv, yv)


def sqrt(x: ArrayLike) -> Vector:
    """Element-wise square root; negative input yields NaN."""
    return elementwise(np.sqrt, as_vector(x))


# ═══════════════════════════════════════════════════════════════════════
# Products and distances
# ═══════════════════════════════════════════════════════════════════════


def dot(x: ArrayLike, y: ArrayLike) -> float:
    """
    Dot product ∑ x[i]·y[i] (BLAS dot).

    Raises:
        DimensionError: If len(x) != len(y)
    """
    xv, yv = binary_operands(x, y, "dot product")
    return linalg.dot(xv, yv)


def dist(x: ArrayLike, y: ArrayLike) -> float:
    """
    Euclidean distance √(∑ (x[i] - y[i])²).

    Raises:
        DimensionError: If len(x) != len(y)
    """
    xv, yv = binary_operands(x, y, "Euclidean distance")
    d = linalg.axpy(-1.0, yv, xv)
    return float(np.sqrt(linalg.dot(d, d)))


def concat(*vectors: ArrayLike) -> Vector:
    """
    Concatenate any number of vectors.

    Returns:
        New vector of length ∑ len(v); float32 only if every input is
    """
    if not vectors:
        return np.empty(0, dtype=np.float64)
    parts = [as_vector(v, f"vectors[{i}]") for i, v in enumerate(vectors)]
    return np.concatenate(parts)
