'''
Author: Ryuk
Date: 2026-03-05 17:10:24
LastEditors: Ryuk
LastEditTime: 2026-03-08 17:20:09
Description: First create
'''

import logging
from collections import namedtuple

import numpy as np
from tqdm import tqdm

from ..base import BaseDenoiser
from ..errors import InvalidParameterError
from ..noise_estimation import VADNoiseEstimator
from ..snr_estimation import DecisionDirectedSNREstimator
from ..spectral_gain_estimation import STSAWeuclidSpectralGainEstimator
from ..synthesis import OverlapAddSynthesizer
from ..utils import FrameSegmenter, frame_length_from_ms
from ..vad import LLRVoiceActivityDetector

logger = logging.getLogger(__name__)


FrameResult = namedtuple(
    "FrameResult",
    ["output", "gain", "gammak", "ksi", "vad_decision", "is_speech", "noise_psd"]
)

# 跨帧保留的全部状态
EnhancerState = namedtuple(
    "EnhancerState",
    ["noise_psd", "prev_signal_power", "overlap_tail", "frame_index"]
)


class STSAWeuclidDenoiser(BaseDenoiser):
    """
    Weighted-Euclidean Bayesian STSA enhancer.

    Frames are processed strictly in order: every stage carries state into
    the next frame (noise spectrum, previous enhanced power, overlap tail).
    """

    def __init__(self, segmenter, noise_estimator, spectral_gain, snr_estimator=None,
                 vad=None, synthesizer=None, show_progress=False):
        super().__init__(noise_estimator, spectral_gain)
        self.segmenter = segmenter
        self.frame_len = segmenter.frame_len
        self.hop = segmenter.hop
        self.n_fft = segmenter.frame_len

        assert noise_estimator.n_fft == self.n_fft

        self.snr_estimator = snr_estimator or DecisionDirectedSNREstimator()
        self.vad = vad or LLRVoiceActivityDetector()
        self.synthesizer = synthesizer or OverlapAddSynthesizer(
            self.frame_len, self.hop, scale=segmenter.synthesis_scale)
        self.show_progress = show_progress

        self.frame_index = 0

    @classmethod
    def from_config(cls, cfg, sample_rate=None):
        sample_rate = sample_rate or cfg.INPUT.SAMPLE_RATE
        frame_len = frame_length_from_ms(cfg.INPUT.FRAME_LEN_MS, sample_rate)
        segmenter = FrameSegmenter(frame_len, cfg.INPUT.OVERLAP_PERCENT, cfg.INPUT.WINDOW)

        noise_estimator = VADNoiseEstimator(
            n_fft=frame_len,
            mu=cfg.NOISE.SMOOTHING,
            n_init_frames=cfg.NOISE.INIT_FRAMES,
            win=segmenter.win
        )
        spectral_gain = STSAWeuclidSpectralGainEstimator(
            p=cfg.ESTIMATOR.P,
            truncation_order=cfg.ESTIMATOR.HYP_TRUNCATION_ORDER,
            spu=cfg.ESTIMATOR.SPEECH_PRESENCE_UNCERTAINTY
        )
        snr_estimator = DecisionDirectedSNREstimator(
            aa=cfg.ESTIMATOR.APRIORI_SMOOTHING,
            ksi_min_db=cfg.ESTIMATOR.APRIORI_FLOOR_DB,
            gamma_max=cfg.ESTIMATOR.POSTERIOR_CEILING
        )
        vad = LLRVoiceActivityDetector(eta=cfg.VAD.THRESHOLD)
        return cls(segmenter, noise_estimator, spectral_gain, snr_estimator, vad,
                   show_progress=cfg.PROGRESS)

    @property
    def state(self):
        noise_psd = self.noise_estimator.noise_psd
        prev = self.snr_estimator.prev_signal_power
        return EnhancerState(
            noise_psd=None if noise_psd is None else noise_psd.copy(),
            prev_signal_power=None if prev is None else prev.copy(),
            overlap_tail=self.synthesizer.x_old.copy(),
            frame_index=self.frame_index
        )

    def reset(self):
        self.noise_estimator.reset()
        self.snr_estimator.reset()
        self.synthesizer.reset()
        self.frame_index = 0

    def process_frame(self, frame):
        """
        核心方法：处理一帧已加窗的时域信号

        参数:
            frame (ndarray): 长度为 frame_len、已乘分析窗的信号
        返回:
            FrameResult: 本帧输出的 hop 个点及中间量
        """
        # 1. FFT
        spec = np.fft.fft(frame, self.n_fft)
        sig2 = np.abs(spec) ** 2

        # 2. 验后/验前信噪比
        gammak, ksi = self.snr_estimator.estimate(sig2, self.noise_estimator.noise_psd)

        # 3. VAD，噪声帧上更新噪声谱
        is_speech, vad_decision = self.vad(gammak, ksi)
        noise_psd = self.noise_estimator.estimate_noise(sig2, is_speech)

        # 4. 计算并应用增益
        gain = self.spectral_gain.compute_gain(gammak, ksi)
        enhanced_spec = self._apply_gain(spec, gain)
        self.snr_estimator.commit(np.abs(enhanced_spec) ** 2)

        # 5. 重叠相加
        output = self.synthesizer.synthesize(enhanced_spec)
        self.frame_index += 1

        return FrameResult(output, gain, gammak, ksi, vad_decision, is_speech, noise_psd)

    def process(self, signal, return_frames=False):
        """
        批处理方法：处理整段音频信号，输出 Nframes * hop 个点
        """
        signal = np.asarray(signal, dtype=np.float64)
        if signal.ndim != 1:
            raise InvalidParameterError("expected a 1-D signal, got shape {}".format(signal.shape))
        # 所有前置检查在修改状态之前完成
        self.noise_estimator.check_signal(len(signal), self.frame_len)

        self.reset()
        self.noise_estimator.initialize(signal, self.frame_len, windowed=True)

        frames = self.segmenter.frames(signal)
        n_frames = len(frames)
        x_final = np.zeros(n_frames * self.hop)
        results = []
        n_speech = 0

        for n, frame in enumerate(tqdm(frames, total=n_frames, disable=not self.show_progress)):
            result = self.process_frame(frame)
            x_final[n * self.hop:(n + 1) * self.hop] = result.output
            n_speech += int(result.is_speech)
            if return_frames:
                results.append(result)

        truncated = self.segmenter.truncated_samples(len(signal))
        logger.info(
            "Processed {} frames (frame_len={}, hop={}), speech frames {:.1%}, "
            "{} trailing samples dropped".format(
                n_frames, self.frame_len, self.hop, n_speech / max(n_frames, 1), truncated)
        )
        if self.snr_estimator.gamma_clamped or self.snr_estimator.ksi_clamped:
            logger.info("Clamped bins: {} at gamma_max, {} at ksi_min".format(
                self.snr_estimator.gamma_clamped, self.snr_estimator.ksi_clamped))

        if return_frames:
            return x_final, results
        return x_final
