"""
Core infrastructure for pyvecmat.

Shared abstractions used by the vector and matrix submodules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection, precision, BLAS/LAPACK kernels
"""

from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
