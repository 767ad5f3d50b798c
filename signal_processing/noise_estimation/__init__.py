'''
Author: Ryuk
Date: 2026-02-15 16:36:51
LastEditors: Ryuk
LastEditTime: 2026-03-03 09:42:10
Description: First create
'''


from .vad_noise import VADNoiseEstimator

__all__ = [
    'VADNoiseEstimator'
]
