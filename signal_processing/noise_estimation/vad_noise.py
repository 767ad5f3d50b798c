'''
Author: Ryuk
Date: 2026-03-03 09:41:22
LastEditors: Ryuk
LastEditTime: 2026-03-06 14:02:51
Description: First create
'''

import logging

import numpy as np

from ..base import BaseNoiseEstimator
from ..errors import InsufficientDataError

logger = logging.getLogger(__name__)


class VADNoiseEstimator(BaseNoiseEstimator):
    """
    VAD 门控的递归平滑噪声估计：
    先用起始若干帧（假设为纯噪声）初始化，之后只在噪声帧上更新
        N = mu * N + (1 - mu) * |Y|^2
    语音帧上噪声谱保持冻结。
    """

    def __init__(self, n_fft, mu=0.98, n_init_frames=6, win=None):
        super().__init__()
        self.n_fft = n_fft
        self.mu = mu                    # 噪声平滑因子
        self.n_init_frames = n_init_frames
        self.win = win                  # 初始化时使用的分析窗

        self.noise_psd = None

    @property
    def initialized(self):
        return self.noise_psd is not None

    def check_signal(self, num_samples, frame_len):
        need = self.n_init_frames * frame_len
        if num_samples < need:
            raise InsufficientDataError(
                "noise initialisation needs {} samples ({} frames of {}), got {}".format(
                    need, self.n_init_frames, frame_len, num_samples)
            )

    def initialize(self, signal, frame_len, windowed=True):
        """
        前 n_init_frames 个不重叠帧的平均幅度谱，再取平方
        """
        signal = np.asarray(signal, dtype=np.float64)
        self.check_signal(len(signal), frame_len)

        win = self.win if self.win is not None else np.hamming(frame_len)
        noise_mag = np.zeros(self.n_fft)
        for i in range(self.n_init_frames):
            start = i * frame_len
            n_frame = signal[start:start + frame_len]
            if windowed:
                n_frame = n_frame * win
            noise_mag += np.abs(np.fft.fft(n_frame, self.n_fft))
        noise_mag /= self.n_init_frames

        self.noise_psd = noise_mag ** 2
        logger.debug("Noise spectrum initialised from {} frames, mean power {:.4g}".format(
            self.n_init_frames, self.noise_psd.mean()))
        return self.noise_psd.copy()

    def update(self, frame_psd):
        if not self.initialized:
            raise RuntimeError("update() called before initialize()")
        self.noise_psd = self.mu * self.noise_psd + (1 - self.mu) * frame_psd
        return self.noise_psd

    def estimate_noise(self, frame_psd, is_speech=False):
        """
        参数:
            frame_psd: 当前帧功率谱
            is_speech: VAD 判决，为 True 时噪声谱冻结
        """
        if not is_speech:
            self.update(frame_psd)
        elif not self.initialized:
            raise RuntimeError("estimate_noise() called before initialize()")
        return self.noise_psd.copy()

    def reset(self):
        self.noise_psd = None
