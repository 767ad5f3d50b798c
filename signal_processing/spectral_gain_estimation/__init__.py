'''
Author: Ryuk
Date: 2026-02-19 13:52:27
LastEditors: Ryuk
LastEditTime: 2026-03-07 18:13:02
Description: First create
'''

from .stsa_weuclid import (
    BesselWeuclidGain,
    HypergeometricWeuclidGain,
    STSAWeuclidSpectralGainEstimator,
    build_weuclid_gain,
    weuclid_constant
)

__all__ = [
    'BesselWeuclidGain',
    'HypergeometricWeuclidGain',
    'STSAWeuclidSpectralGainEstimator',
    'build_weuclid_gain',
    'weuclid_constant'
]
