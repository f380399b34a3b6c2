"""
Tests for the PyTorch matrix backend against the CPU reference.

Skipped if no GPU (CUDA or MPS) is available.
"""

import numpy as np
import pytest

from pyvecmat import Matrix
from pyvecmat.core.compute.device import detect_gpu
from pyvecmat.core.compute.tolerances import GPU_FP32
from pyvecmat.core.exceptions import SingularMatrixError
from pyvecmat.matrix import linalg
from pyvecmat.matrix.backends import GPUMatrixBackend

GPU = detect_gpu()

pytestmark = pytest.mark.skipif(
    GPU is None,
    reason="No GPU available (need CUDA or MPS)"
)


@pytest.fixture
def square(rng):
    return Matrix.from_array(rng.standard_normal((32, 32)) + 32 * np.eye(32))


class TestGPUProducts:

    def test_matmul_vs_cpu(self, rng):
        x = Matrix.from_array(rng.standard_normal((50, 20)))
        y = Matrix.from_array(rng.standard_normal((20, 30)))
        gpu = linalg.dot(x, y, backend='gpu')
        cpu = linalg.dot(x, y, backend='cpu')
        assert gpu.shape == (50, 30)
        assert gpu.dtype == np.float64
        assert gpu.allclose(cpu, rtol=GPU_FP32.rtol, atol=GPU_FP32.atol)

    def test_matrix_vector_vs_cpu(self, square, rng):
        v = rng.standard_normal(32)
        np.testing.assert_allclose(
            linalg.dot(square, v, backend='gpu'),
            linalg.dot(square, v),
            rtol=GPU_FP32.rtol, atol=GPU_FP32.atol,
        )

    def test_vector_matrix_vs_cpu(self, square, rng):
        v = rng.standard_normal(32)
        np.testing.assert_allclose(
            linalg.dot(v, square, backend='gpu'),
            linalg.dot(v, square),
            rtol=GPU_FP32.rtol, atol=GPU_FP32.atol,
        )

    def test_auto_selects_gpu(self):
        m = Matrix.identity(4)
        assert linalg.dot(m, m, backend='auto') == m


class TestGPUInverse:

    def test_inv_vs_cpu(self, square):
        gpu = linalg.inv(square, backend='gpu')
        assert gpu.allclose(linalg.inv(square), rtol=GPU_FP32.rtol, atol=GPU_FP32.atol)

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            linalg.inv(Matrix.zeros(3, 3), backend='gpu')

    def test_float32(self, square):
        m = Matrix.from_array(square.to_numpy().astype(np.float32))
        backend = GPUMatrixBackend(GPU)
        result = backend.inv(m.to_numpy())
        assert result.dtype == np.float32
        assert backend.name == 'gpu_torch_fp32'
