'''
Author: Ryuk
Date: 2026-03-03 16:20:48
LastEditors: Ryuk
LastEditTime: 2026-03-03 16:37:02
Description: First create
'''

import numpy as np


def llr_statistic(gammak, ksi):
    """
    对数似然比的近似: mean(gammak * ksi / (1 + ksi) - log(1 + ksi))
    """
    log_sigma_k = gammak * ksi / (1 + ksi) - np.log1p(ksi)
    return float(np.mean(log_sigma_k))


class LLRVoiceActivityDetector:
    """
    Sohn, J., Kim, N. S. and Sung, W. (1999). A statistical model-based voice
    activity detector. IEEE Signal Processing Letters, 6(1), 1-3.

    统计量低于阈值判为噪声，否则为语音
    """

    def __init__(self, eta=0.15):
        self.eta = eta          # VAD 阈值

    def __call__(self, gammak, ksi):
        vad_decision = llr_statistic(gammak, ksi)
        return vad_decision >= self.eta, vad_decision
