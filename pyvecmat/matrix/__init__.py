"""
Matrices and the linear algebra defined on them.

Public API:
    Matrix                          - row-major float32/float64 container
    add, sub, mul, elmul, pow, exp  - element-wise / scalar operations
    sum, asum                       - reductions by column, row or whole
    dot, div, inv, transpose        - products, right division, inverse

Example:
    >>> from pyvecmat.matrix import Matrix, inv
    >>> m = Matrix.from_rows([[4.0, 7.0], [2.0, 6.0]])
    >>> print(m @ inv(m))
"""

from pyvecmat.matrix.matrix import Matrix
from pyvecmat.matrix.linalg import (
    add,
    sub,
    mul,
    elmul,
    pow,
    exp,
    sum,
    asum,
    dot,
    div,
    inv,
    transpose,
)

__all__ = [
    "Matrix",
    "add",
    "sub",
    "mul",
    "elmul",
    "pow",
    "exp",
    "sum",
    "asum",
    "dot",
    "div",
    "inv",
    "transpose",
]
