"""
Auxiliary element-wise functions: rounding, sign manipulation, clamping.

Note: abs and round shadow the builtins inside this module.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.vector._common import (
    Vector,
    as_vector,
    binary_operands,
    elementwise,
)


def abs(x: ArrayLike) -> Vector:
    """|x| element-wise."""
    return elementwise(np.fabs, as_vector(x))


def ceil(x: ArrayLike) -> Vector:
    return elementwise(np.ceil, as_vector(x))


def floor(x: ArrayLike) -> Vector:
    return elementwise(np.floor, as_vector(x))


def round(x: ArrayLike) -> Vector:
    """Round to the nearest integer, ties to even (2.5 -> 2.0, 3.5 -> 4.0)."""
    return elementwise(np.rint, as_vector(x))


def trunc(x: ArrayLike) -> Vector:
    """Integer part, rounding toward zero."""
    return elementwise(np.trunc, as_vector(x))


def neg(x: ArrayLike) -> Vector:
    """-x element-wise."""
    return elementwise(np.negative, as_vector(x))


def rec(x: ArrayLike) -> Vector:
    """Reciprocal 1/x; 1/0 yields inf."""
    v = as_vector(x)
    return elementwise(np.divide, v.dtype.type(1.0), v)


def clip(x: ArrayLike, low: float, high: float) -> Vector:
    """
    Clamp every element into [low, high].

    Raises:
        ValidationError: If low > high
    """
    if low > high:
        raise ValidationError(f"clip: low ({low}) must not exceed high ({high})")
    v = as_vector(x)
    return elementwise(np.clip, v, v.dtype.type(low), v.dtype.type(high))


def copysign(sign: ArrayLike, magnitude: ArrayLike) -> Vector:
    """
    Values with the magnitude of `magnitude` and the sign of `sign`.

    Raises:
        DimensionError: If the lengths differ
    """
    s, m = binary_operands(sign, magnitude, "element-wise copysign")
    return elementwise(np.copysign, m, s)


def threshold(x: ArrayLike, low: float) -> Vector:
    """max(x[i], low) element-wise."""
    v = as_vector(x)
    return elementwise(np.maximum, v, v.dtype.type(low))
