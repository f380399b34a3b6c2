"""Matrix backends."""

from pyvecmat.matrix.backends.cpu import CPUMatrixBackend, ILL_CONDITIONED_DIGITS
from pyvecmat.matrix.backends.gpu import GPUMatrixBackend

__all__ = [
    "CPUMatrixBackend",
    "GPUMatrixBackend",
    "ILL_CONDITIONED_DIGITS",
]
