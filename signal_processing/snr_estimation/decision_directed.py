'''
Author: Ryuk
Date: 2026-03-03 14:18:06
LastEditors: Ryuk
LastEditTime: 2026-03-07 10:55:39
Description: First create
'''

import logging

import numpy as np

logger = logging.getLogger(__name__)

EPS = 1e-12


def posterior_snr(frame_psd, noise_psd, ceiling=40.0):
    """
    验后信噪比 gammak = min(|Y|^2 / N, ceiling)，上限防止后续增益公式溢出
    """
    return np.minimum(frame_psd / np.maximum(noise_psd, EPS), ceiling)


def decision_directed_snr(gammak, noise_psd, prev_signal_power, is_first_frame,
                          smoothing=0.98, floor_db=-25.0):
    """
    Decision-directed a-priori SNR (Ephraim & Malah, 1984).

    The first frame has no enhanced estimate yet and is not floored; every
    later frame is floored at 10^(floor_db/10).
    """
    inst = np.maximum(gammak - 1, 0)
    if is_first_frame:
        return smoothing + (1 - smoothing) * inst

    ksi = smoothing * prev_signal_power / np.maximum(noise_psd, EPS) + (1 - smoothing) * inst
    return np.maximum(ksi, 10 ** (floor_db / 10))


class DecisionDirectedSNREstimator:
    """
    带状态的验前信噪比估计器

    每帧先 estimate()，得到增益后再 commit() 本帧增强后的功率谱，
    下一帧的 ksi 依赖上一帧 commit 的结果。
    """

    def __init__(self, aa=0.98, ksi_min_db=-25.0, gamma_max=40.0):
        self.aa = aa                    # Decision-Directed 因子
        self.ksi_min_db = ksi_min_db
        self.ksi_min = 10 ** (ksi_min_db / 10)
        self.gamma_max = gamma_max
        self.reset()

    def reset(self):
        self.xk_prev = None             # 上一帧纯净信号功率
        self._pending = False
        self.num_frames = 0
        self.gamma_clamped = 0
        self.ksi_clamped = 0

    @property
    def prev_signal_power(self):
        return self.xk_prev

    @property
    def is_first_frame(self):
        return self.num_frames == 0

    def estimate(self, frame_psd, noise_psd):
        if self._pending:
            raise RuntimeError("estimate() called again before commit() of the previous frame")

        raw_gamma = frame_psd / np.maximum(noise_psd, EPS)
        gammak = np.minimum(raw_gamma, self.gamma_max)
        ksi = decision_directed_snr(gammak, noise_psd, self.xk_prev, self.is_first_frame,
                                    smoothing=self.aa, floor_db=self.ksi_min_db)

        # 截断属于正常的数值稳定手段，只记录不报错
        n_gamma = int(np.count_nonzero(raw_gamma > self.gamma_max))
        n_ksi = 0 if self.is_first_frame else int(np.count_nonzero(ksi <= self.ksi_min))
        if n_gamma or n_ksi:
            logger.debug("frame {}: {} bins clamped at gamma_max, {} bins at ksi_min".format(
                self.num_frames, n_gamma, n_ksi))
        self.gamma_clamped += n_gamma
        self.ksi_clamped += n_ksi

        self._pending = True
        return gammak, ksi

    def commit(self, enhanced_psd):
        if not self._pending:
            raise RuntimeError("commit() called without a preceding estimate()")
        self.xk_prev = np.asarray(enhanced_psd, dtype=np.float64).copy()
        self._pending = False
        self.num_frames += 1
