"""
Tests for auxiliary element-wise functions and convolution.
"""

import numpy as np
import pytest

from pyvecmat import vector
from pyvecmat.core.exceptions import DimensionError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Rounding and sign
# ═══════════════════════════════════════════════════════════════════════


class TestRounding:

    def test_abs(self):
        np.testing.assert_array_equal(vector.abs([-1.5, 0.0, 2.0]), [1.5, 0.0, 2.0])

    def test_ceil_floor_trunc(self):
        x = [-1.5, -0.5, 0.5, 1.5]
        np.testing.assert_array_equal(vector.ceil(x), [-1.0, -0.0, 1.0, 2.0])
        np.testing.assert_array_equal(vector.floor(x), [-2.0, -1.0, 0.0, 1.0])
        np.testing.assert_array_equal(vector.trunc(x), [-1.0, -0.0, 0.0, 1.0])

    def test_round_ties_to_even(self):
        np.testing.assert_array_equal(
            vector.round([0.5, 1.5, 2.5, 3.5, -2.5, 2.6]),
            [0.0, 2.0, 2.0, 4.0, -2.0, 3.0],
        )

    def test_neg(self):
        np.testing.assert_array_equal(vector.neg([1.0, -2.0]), [-1.0, 2.0])

    def test_rec(self):
        result = vector.rec([2.0, 0.0, -4.0])
        np.testing.assert_array_equal(result, [0.5, np.inf, -0.25])

    def test_rec_float32(self):
        x = np.array([2.0], dtype=np.float32)
        assert vector.rec(x).dtype == np.float32

    def test_copysign(self):
        np.testing.assert_array_equal(
            vector.copysign([-1.0, 1.0, -0.0], [2.0, -3.0, 4.0]), [-2.0, 3.0, -4.0]
        )

    def test_copysign_length_mismatch(self):
        with pytest.raises(DimensionError):
            vector.copysign([1.0], [1.0, 2.0])


class TestClamping:

    def test_clip(self):
        np.testing.assert_array_equal(
            vector.clip([-5.0, 0.5, 5.0], -1.0, 1.0), [-1.0, 0.5, 1.0]
        )

    def test_clip_low_above_high(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            vector.clip([1.0], 2.0, 1.0)

    def test_threshold(self):
        np.testing.assert_array_equal(
            vector.threshold([-1.0, 0.0, 3.0], 0.5), [0.5, 0.5, 3.0]
        )

    def test_inputs_not_modified(self):
        x = np.array([-5.0, 5.0])
        vector.clip(x, 0.0, 1.0)
        vector.threshold(x, 0.0)
        np.testing.assert_array_equal(x, [-5.0, 5.0])


# ═══════════════════════════════════════════════════════════════════════
# Convolution / correlation
# ═══════════════════════════════════════════════════════════════════════


class TestConvolution:

    def test_conv(self):
        np.testing.assert_allclose(
            vector.conv([1.0, 2.0, 3.0], [0.0, 1.0, 0.5]), [0.0, 1.0, 2.5, 4.0, 1.5]
        )

    def test_conv_length(self, rng):
        x = rng.standard_normal(10)
        k = rng.standard_normal(3)
        assert vector.conv(x, k).shape == (12,)

    def test_conv_kernel_longer_than_signal(self):
        with pytest.raises(DimensionError, match="at least as many"):
            vector.conv([1.0], [1.0, 2.0])

    def test_conv_empty_rejected(self):
        with pytest.raises(ValidationError):
            vector.conv([], [])

    def test_autocorrelation(self):
        np.testing.assert_allclose(
            vector.xcorr([1.0, 2.0, 3.0]), [3.0, 8.0, 14.0, 8.0, 3.0]
        )

    def test_autocorrelation_peak_at_zero_lag(self, rng):
        x = rng.standard_normal(20)
        r = vector.xcorr(x)
        assert vector.argmax(r) == 19
        np.testing.assert_allclose(r[19], vector.dot(x, x), rtol=1e-12)

    def test_cross_correlation_pads_shorter(self):
        np.testing.assert_allclose(
            vector.xcorr([1.0, 2.0, 3.0], [1.0, 1.0]), [0.0, 1.0, 3.0, 5.0, 3.0]
        )

    def test_cross_correlation_y_longer(self):
        with pytest.raises(DimensionError):
            vector.xcorr([1.0], [1.0, 2.0])
