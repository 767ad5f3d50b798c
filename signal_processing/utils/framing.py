'''
Author: Ryuk
Date: 2026-03-02 11:02:17
LastEditors: Ryuk
LastEditTime: 2026-03-05 15:41:08
Description: First create
'''

import logging

import numpy as np
from scipy.signal import get_window

from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


def frame_length_from_ms(frame_len_ms, sample_rate):
    """
    帧长(ms) -> 采样点数，奇数时加一保证为偶数
    """
    frame_len = int(frame_len_ms * sample_rate / 1000)
    if frame_len % 2 == 1:
        frame_len += 1
    return frame_len


class _FrameSequence:
    # 每次 iter() 都返回新的生成器，可以重复遍历
    def __init__(self, segmenter, signal):
        self._segmenter = segmenter
        self._signal = signal

    def __len__(self):
        return self._segmenter.num_frames(len(self._signal))

    def __iter__(self):
        for n in range(len(self)):
            yield self._segmenter.frame(self._signal, n)


class FrameSegmenter:
    """
    分帧与加窗

    第 n 帧覆盖 [n*hop, n*hop + frame_len)，分析窗按欧氏范数归一化，
    使各帧的频谱幅度与窗能量无关。
    """

    def __init__(self, frame_len, overlap_percent=50, window="hamming"):
        if frame_len <= 0 or frame_len % 2 != 0:
            raise InvalidParameterError("frame_len must be a positive even integer, got {}".format(frame_len))
        if not 0 <= overlap_percent < 100:
            raise InvalidParameterError("overlap_percent must lie in [0, 100), got {}".format(overlap_percent))

        self.frame_len = frame_len
        self.overlap_percent = overlap_percent
        self.overlap_len = int(frame_len * overlap_percent / 100)
        self.hop = frame_len - self.overlap_len

        # 周期 Hamming 窗在 50% 重叠下满足 COLA
        win = get_window(window, frame_len)
        self.win = win / np.linalg.norm(win)
        self.synthesis_scale = self._compute_synthesis_scale()

    def _compute_synthesis_scale(self):
        # 重叠位置上各帧窗函数之和，COLA 成立时为常数
        win_sum = np.zeros(self.hop)
        for start in range(0, self.frame_len, self.hop):
            seg = self.win[start:start + self.hop]
            win_sum[:len(seg)] += seg

        mean = win_sum.mean()
        if np.max(np.abs(win_sum - mean)) > 1e-6 * mean:
            logger.warning(
                "Window is not COLA for frame_len={}, hop={}: overlap-add ripple {:.3g}".format(
                    self.frame_len, self.hop, np.ptp(win_sum) / mean)
            )
        return 1.0 / mean

    def num_frames(self, num_samples):
        """
        Nframes = floor(L/hop) - 1, capped so that the last frame stays inside
        the signal (only binds for overlaps above 50%).
        """
        n = num_samples // self.hop - 1
        if num_samples >= self.frame_len:
            n = min(n, (num_samples - self.frame_len) // self.hop + 1)
        else:
            n = 0
        return max(n, 0)

    def output_length(self, num_samples):
        return self.num_frames(num_samples) * self.hop

    def truncated_samples(self, num_samples):
        """
        末尾未被任何帧覆盖而被丢弃的采样点数
        """
        n = self.num_frames(num_samples)
        if n == 0:
            return num_samples
        covered = (n - 1) * self.hop + self.frame_len
        return max(num_samples - covered, 0)

    def frame(self, signal, n):
        start = n * self.hop
        return signal[start:start + self.frame_len] * self.win

    def frames(self, signal):
        return _FrameSequence(self, np.asarray(signal, dtype=np.float64))
