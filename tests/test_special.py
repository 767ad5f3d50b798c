'''
Author: Ryuk
Date: 2026-03-08 10:20:11
LastEditors: Ryuk
LastEditTime: 2026-03-08 11:03:57
Description: First create
'''

import numpy as np
import pytest
from scipy.special import hyp1f1 as scipy_hyp1f1

from signal_processing.errors import InvalidParameterError
from signal_processing.utils.special import DEFAULT_TRUNCATION_ORDER, hyp1f1, hyp1f1_series


class TestHyp1f1:
    def test_truncation_order(self):
        assert DEFAULT_TRUNCATION_ORDER == 100

    @pytest.mark.parametrize("a", [-1.5, -0.5, 0.0, 0.25, 1.0, 3.0])
    def test_zero_argument(self, a):
        assert hyp1f1(a, 1, 0.0) == 1.0
        np.testing.assert_array_equal(hyp1f1(a, 1, np.zeros(4)), np.ones(4))

    @pytest.mark.parametrize("b", [0.5, 1.0, 2.5])
    def test_zero_a(self, b):
        z = np.array([-40.0, -3.0, 0.0, 2.0, 10.0])
        np.testing.assert_array_equal(hyp1f1(0.0, b, z), np.ones_like(z))
        np.testing.assert_array_equal(hyp1f1_series(0.0, b, z), np.ones_like(z))

    @pytest.mark.parametrize("a", [-1.5, -1.0, -0.5, 0.005, 0.495, 0.995])
    def test_matches_scipy_on_gain_range(self, a):
        # 增益公式中的自变量为 -vk, 0 <= vk < 40
        z = -np.linspace(0.0, 40.0, 81)
        np.testing.assert_allclose(hyp1f1(a, 1, z), scipy_hyp1f1(a, 1, z), rtol=1e-8)

    def test_positive_argument(self):
        z = np.linspace(0.0, 5.0, 11)
        np.testing.assert_allclose(hyp1f1(0.7, 2.0, z), scipy_hyp1f1(0.7, 2.0, z), rtol=1e-10)

    def test_raw_series_small_argument(self):
        z = np.linspace(-5.0, 5.0, 21)
        np.testing.assert_allclose(hyp1f1_series(-0.5, 1, z), scipy_hyp1f1(-0.5, 1, z), rtol=1e-9)

    def test_keeps_shape(self):
        z = -np.arange(6.0).reshape(2, 3)
        out = hyp1f1(0.5, 1, z)
        assert out.shape == (2, 3)
        assert np.ndim(hyp1f1(0.5, 1, -2.0)) == 0

    def test_polynomial_case(self):
        # M(-1, 1, z) = 1 - z
        z = np.array([-3.0, -0.5, 0.0, 1.5])
        np.testing.assert_allclose(hyp1f1(-1.0, 1, z), 1 - z, rtol=1e-12)

    @pytest.mark.parametrize("b", [0, -1, -3])
    def test_invalid_b(self, b):
        with pytest.raises(InvalidParameterError):
            hyp1f1(0.5, b, np.ones(3))
