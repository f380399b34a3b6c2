"""
Trigonometric and hyperbolic functions on vectors.

Element-wise, dtype preserving, newly allocated. Angles are in radians
unless stated otherwise.
"""

from __future__ import annotations

from typing import NamedTuple
import numpy as np
from numpy.typing import ArrayLike

from pyvecmat.vector._common import Vector, as_vector, elementwise


class SinCos(NamedTuple):
    """Joint sine and cosine of the same input."""
    sin: Vector
    cos: Vector


def sincos(x: ArrayLike) -> SinCos:
    """
    Sine and cosine in a single call.

    Returns:
        SinCos(sin=sin(x), cos=cos(x))
    """
    v = as_vector(x)
    return SinCos(sin=elementwise(np.sin, v), cos=elementwise(np.cos, v))


def sin(x: ArrayLike) -> Vector:
    return elementwise(np.sin, as_vector(x))


def cos(x: ArrayLike) -> Vector:
    return elementwise(np.cos, as_vector(x))


def tan(x: ArrayLike) -> Vector:
    return elementwise(np.tan, as_vector(x))


def asin(x: ArrayLike) -> Vector:
    """Arcsine; NaN outside [-1, 1]."""
    return elementwise(np.arcsin, as_vector(x))


def acos(x: ArrayLike) -> Vector:
    """Arccosine; NaN outside [-1, 1]."""
    return elementwise(np.arccos, as_vector(x))


def atan(x: ArrayLike) -> Vector:
    return elementwise(np.arctan, as_vector(x))


def rad2deg(x: ArrayLike) -> Vector:
    """Radians to degrees."""
    return elementwise(np.rad2deg, as_vector(x))


def deg2rad(x: ArrayLike) -> Vector:
    """Degrees to radians."""
    return elementwise(np.deg2rad, as_vector(x))


# Hyperbolic

def sinh(x: ArrayLike) -> Vector:
    return elementwise(np.sinh, as_vector(x))


def cosh(x: ArrayLike) -> Vector:
    return elementwise(np.cosh, as_vector(x))


def tanh(x: ArrayLike) -> Vector:
    return elementwise(np.tanh, as_vector(x))


def asinh(x: ArrayLike) -> Vector:
    return elementwise(np.arcsinh, as_vector(x))


def acosh(x: ArrayLike) -> Vector:
    """Inverse hyperbolic cosine; NaN below 1."""
    return elementwise(np.arccosh, as_vector(x))


def atanh(x: ArrayLike) -> Vector:
    """Inverse hyperbolic tangent; ±inf at ±1, NaN outside [-1, 1]."""
    return elementwise(np.arctanh, as_vector(x))
