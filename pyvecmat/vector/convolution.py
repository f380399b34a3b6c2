"""
Convolution and correlation of 1D signals.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pyvecmat.core.exceptions import DimensionError
from pyvecmat.vector._common import Vector, as_nonempty_vector


def conv(x: ArrayLike, k: ArrayLike) -> Vector:
    """
    Full linear convolution of a signal with a kernel.

    Args:
        x: Signal
        k: Kernel, no longer than the signal

    Returns:
        Vector of length len(x) + len(k) - 1

    Raises:
        DimensionError: If the kernel is longer than the signal
    """
    xv = as_nonempty_vector(x, 'x')
    kv = as_nonempty_vector(k, 'k')
    if xv.shape[0] < kv.shape[0]:
        raise DimensionError(
            f"conv: signal x ({xv.shape[0]}) must have at least as many "
            f"elements as kernel k ({kv.shape[0]})"
        )
    dtype = np.result_type(xv, kv)
    return np.convolve(xv.astype(dtype, copy=False), kv.astype(dtype, copy=False), mode='full')


def xcorr(x: ArrayLike, y: ArrayLike | None = None) -> Vector:
    """
    Cross-correlation of x with y, or auto-correlation of x.

    y is zero-padded at the end to the length n of x. The result has
    length 2n - 1; entry i holds the correlation at lag i - (n - 1),
    r[lag] = ∑_j x[j + lag] · y[j].

    Raises:
        DimensionError: If y is longer than x
    """
    xv = as_nonempty_vector(x, 'x')
    if y is None:
        return np.correlate(xv, xv, mode='full')

    yv = as_nonempty_vector(y, 'y')
    n = xv.shape[0]
    if n < yv.shape[0]:
        raise DimensionError(
            f"xcorr: x ({n}) must have at least as many elements as y ({yv.shape[0]})"
        )
    dtype = np.result_type(xv, yv)
    y_padded = np.zeros(n, dtype=dtype)
    y_padded[:yv.shape[0]] = yv
    return np.correlate(xv.astype(dtype, copy=False), y_padded, mode='full')
