'''
Author: Ryuk
Date: 2026-02-18 12:53:55
LastEditors: Ryuk
LastEditTime: 2026-03-07 18:12:30
Description: First create
'''

import logging
import warnings

import numpy as np
from scipy.special import gamma, i0e

from ..base import BaseSpectralGainEstimator
from ..errors import InvalidParameterError, NumericDegeneracyWarning
from ..utils.special import DEFAULT_TRUNCATION_ORDER, hyp1f1

logger = logging.getLogger(__name__)

EPS = 1e-12


def weuclid_constant(p):
    """
    CC = gamma((p+3)/2) / gamma(p/2+1)
    """
    return gamma((p + 3) / 2) / gamma(p / 2 + 1)


class BesselWeuclidGain:
    """
    p = -1 时的闭式解:
        hw = CC * sqrt(vk) / (gammak * exp(-vk/2) * I0(vk/2))
    exp(-x) * I0(x) 直接用 i0e(x)，避免 I0 溢出
    """

    p = -1.0

    def __init__(self):
        self.CC = weuclid_constant(self.p)

    def __call__(self, vk, gammak):
        denom = gammak * i0e(vk / 2.0)
        return self.CC * np.sqrt(vk) / np.maximum(denom, EPS)


class HypergeometricWeuclidGain:
    """
    通用情况，使用合流超几何函数:
        numer = CC * sqrt(vk) * M(-(p+1)/2, 1, -vk)
        denom = gammak * M(-p/2, 1, -vk)
    """

    def __init__(self, p, truncation_order=DEFAULT_TRUNCATION_ORDER):
        self.p = p
        self.truncation_order = truncation_order
        self.CC = weuclid_constant(p)

    def __call__(self, vk, gammak):
        numer = self.CC * np.sqrt(vk) * hyp1f1(-(self.p + 1) / 2, 1, -vk, self.truncation_order)
        denom = gammak * hyp1f1(-self.p / 2, 1, -vk, self.truncation_order)
        return numer / np.maximum(denom, EPS)


def build_weuclid_gain(p, truncation_order=DEFAULT_TRUNCATION_ORDER):
    if p <= -2:
        raise InvalidParameterError("p must be greater than -2, got {}".format(p))
    if p == -1:
        return BesselWeuclidGain()
    return HypergeometricWeuclidGain(p, truncation_order)


class STSAWeuclidSpectralGainEstimator(BaseSpectralGainEstimator):
    """
        Loizou, P. (2005). Speech enhancement based on perceptually motivated
        Bayesian estimators of the speech magnitude spectrum. IEEE Trans. on Speech
        and Audio Processing, 13(5), 857-869.
    """
    def __init__(self, p=-1.0, truncation_order=DEFAULT_TRUNCATION_ORDER, spu=False):
        super().__init__()
        self.p = p
        # 增益公式在构造时选定，不在逐帧循环中判断
        self.gain_fn = build_weuclid_gain(p, truncation_order)
        # 保留该开关以兼容接口，增益公式中未使用
        self.spu = spu

    def compute_gain(self, gammak, ksi):
        vk = ksi * gammak / (1 + ksi)
        with np.errstate(over="ignore", invalid="ignore"):
            hw = self.gain_fn(vk, gammak)

        bad = ~np.isfinite(hw)
        if np.any(bad):
            warnings.warn(
                "{} non-finite gain bins replaced by 0 (p={})".format(int(np.count_nonzero(bad)), self.p),
                NumericDegeneracyWarning
            )
            hw = np.where(bad, 0.0, hw)
        return hw
