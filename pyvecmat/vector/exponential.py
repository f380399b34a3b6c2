"""
Exponential and logarithmic functions on vectors.

All functions are element-wise, preserve the input dtype and return a
newly allocated vector. Out-of-domain input (log of a negative number)
yields NaN, log(0) yields -inf.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pyvecmat.vector._common import Vector, as_vector, elementwise


def exp(x: ArrayLike) -> Vector:
    """e^x."""
    return elementwise(np.exp, as_vector(x))


def exp2(x: ArrayLike) -> Vector:
    """2^x."""
    return elementwise(np.exp2, as_vector(x))


def log(x: ArrayLike) -> Vector:
    """Natural logarithm."""
    return elementwise(np.log, as_vector(x))


def log2(x: ArrayLike) -> Vector:
    """Base-2 logarithm."""
    return elementwise(np.log2, as_vector(x))


def log10(x: ArrayLike) -> Vector:
    """Base-10 logarithm."""
    return elementwise(np.log10, as_vector(x))


def _logb(v: Vector) -> Vector:
    _, e = np.frexp(v)
    out = (e - 1).astype(v.dtype)
    out = np.where(v == 0, -np.inf, out)
    out = np.where(np.isinf(v), np.inf, out)
    out = np.where(np.isnan(v), np.nan, out)
    return out.astype(v.dtype, copy=False)


def logb(x: ArrayLike) -> Vector:
    """
    Unbiased binary exponent, floor(log2|x|).

    Exact for subnormals; logb(±0) = -inf, logb(±inf) = inf.
    """
    return elementwise(_logb, as_vector(x))
