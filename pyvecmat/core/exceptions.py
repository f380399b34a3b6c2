"""
Exception hierarchy for pyvecmat.

All exceptions inherit from PyVecMatError to allow catching any
library-specific error.

Design principles:
    - Shape problems are detected before any native routine is called
    - Native failure codes are checked after the call and raised, never ignored
    - Error messages carry the actual shapes/lengths involved
"""


class PyVecMatError(Exception):
    """Base exception for all pyvecmat errors."""
    pass


class ValidationError(PyVecMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    data, empty input where a value is required, or invalid parameters.
    """
    pass


class DimensionError(ValidationError, ValueError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when operand lengths or matrix shapes are not compatible with
    the requested operation. Never raised after partial computation.
    """
    pass


class NumericalError(PyVecMatError):
    """
    Numerical computation failed.

    Base class for errors reported by the underlying BLAS/LAPACK routines.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when LU factorization finds an exactly zero pivot, so the
    inverse does not exist.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (the matrix order)
        pivot: 1-based index of the zero pivot reported by LAPACK
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        pivot: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
        self.pivot = pivot
