"""
pyvecmat: BLAS/LAPACK-backed vector and matrix arithmetic for Python.

Fast element-wise kernels on 1D float32/float64 arrays and a value-semantic
Matrix type, with optional GPU acceleration for matrix products and
inversion.

Submodules:
    vector: Element-wise, reducing and convolution operations on vectors
    matrix: Matrix container and linear algebra
"""

__version__ = "0.1.0"

from pyvecmat import vector
from pyvecmat import matrix
from pyvecmat.matrix import Matrix
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "vector",
    "matrix",
    "Matrix",
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
