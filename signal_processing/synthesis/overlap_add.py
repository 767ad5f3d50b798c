'''
Author: Ryuk
Date: 2026-03-04 10:03:19
LastEditors: Ryuk
LastEditTime: 2026-03-05 16:20:41
Description: First create
'''

import numpy as np


class OverlapAddSynthesizer:
    """
    逆变换 + 重叠相加

    每帧输出恰好 hop 个点；未输出的 frame_len - hop 个点作为尾部
    保留到下一帧叠加。50% 重叠时即 "上一帧后半 + 本帧前半"。
    """

    def __init__(self, frame_len, hop, scale=1.0):
        self.frame_len = frame_len
        self.hop = hop
        self.overlap_len = frame_len - hop
        self.scale = scale
        self.reset()

    def reset(self):
        self.x_old = np.zeros(self.overlap_len)

    def synthesize(self, spectrum):
        # 只取实部，舍弃数值误差带来的虚部
        xi_w = np.real(np.fft.ifft(spectrum))[:self.frame_len] * self.scale
        xi_w[:self.overlap_len] += self.x_old

        out = xi_w[:self.hop].copy()
        self.x_old = xi_w[self.hop:].copy()
        return out
