"""
Vector operations.

Element-wise and reducing operations on 1D float32/float64 arrays,
backed by NumPy's vectorized kernels and BLAS level-1 routines.

Public API:
    arithmetic     - sum, asum, max, argmax, min, argmin, mean, meamg,
                     measq, add, sub, mul, div, mod, remainder, pow, sqrt,
                     dot, dist, concat
    exponential    - exp, exp2, log, log2, log10, logb
    trigonometric  - sin, cos, tan, asin, acos, atan, sincos, rad2deg,
                     deg2rad, sinh, cosh, tanh, asinh, acosh, atanh
    auxiliary      - abs, ceil, floor, round, trunc, neg, rec, clip,
                     copysign, threshold
    convolution    - conv, xcorr
"""

from pyvecmat.vector.arithmetic import (
    sum,
    asum,
    max,
    argmax,
    min,
    argmin,
    mean,
    meamg,
    measq,
    add,
    sub,
    mul,
    div,
    mod,
    remainder,
    pow,
    sqrt,
    dot,
    dist,
    concat,
)
from pyvecmat.vector.exponential import exp, exp2, log, log2, log10, logb
from pyvecmat.vector.trigonometric import (
    SinCos,
    sincos,
    sin,
    cos,
    tan,
    asin,
    acos,
    atan,
    rad2deg,
    deg2rad,
    sinh,
    cosh,
    tanh,
    asinh,
    acosh,
    atanh,
)
from pyvecmat.vector.auxiliary import (
    abs,
    ceil,
    floor,
    round,
    trunc,
    neg,
    rec,
    clip,
    copysign,
    threshold,
)
from pyvecmat.vector.convolution import conv, xcorr

__all__ = [
    # Arithmetic
    "sum",
    "asum",
    "max",
    "argmax",
    "min",
    "argmin",
    "mean",
    "meamg",
    "measq",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "remainder",
    "pow",
    "sqrt",
    "dot",
    "dist",
    "concat",
    # Exponential
    "exp",
    "exp2",
    "log",
    "log2",
    "log10",
    "logb",
    # Trigonometric / hyperbolic
    "SinCos",
    "sincos",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "rad2deg",
    "deg2rad",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    # Auxiliary
    "abs",
    "ceil",
    "floor",
    "round",
    "trunc",
    "neg",
    "rec",
    "clip",
    "copysign",
    "threshold",
    # Convolution
    "conv",
    "xcorr",
]
