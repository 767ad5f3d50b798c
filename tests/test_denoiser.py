'''
Author: Ryuk
Date: 2026-03-09 11:40:07
LastEditors: Ryuk
LastEditTime: 2026-03-09 20:02:33
Description: First create
'''

import numpy as np
import pytest

from signal_processing.base import BaseSpectralGainEstimator
from signal_processing.denoisers import STSAWeuclidDenoiser
from signal_processing.errors import InsufficientDataError, InvalidParameterError
from signal_processing.noise_estimation import VADNoiseEstimator
from signal_processing.utils import FrameSegmenter

KSI_MIN = 10 ** (-25 / 10)


class UnityGain(BaseSpectralGainEstimator):
    def compute_gain(self, gammak, ksi):
        return np.ones_like(gammak)


def build_unity_denoiser():
    seg = FrameSegmenter(160, 50)
    return STSAWeuclidDenoiser(seg, VADNoiseEstimator(160, win=seg.win), UnityGain())


class TestOutputLength:
    @pytest.mark.parametrize("num_samples", [960, 4001, 8000, 12345])
    def test_length(self, cfg, rng, num_samples):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        out = denoiser.process(0.1 * rng.standard_normal(num_samples))
        hop = denoiser.hop
        assert hop == 80
        assert len(out) == (num_samples // hop - 1) * hop

    def test_insufficient_data(self, cfg):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        with pytest.raises(InsufficientDataError):
            denoiser.process(np.zeros(6 * 160 - 1))
        assert denoiser.state.frame_index == 0
        assert denoiser.state.noise_psd is None

    def test_rejects_multichannel(self, cfg):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        with pytest.raises(InvalidParameterError):
            denoiser.process(np.zeros((2, 8000)))

    def test_invalid_p_from_config(self, cfg):
        cfg.ESTIMATOR.P = -2.0
        with pytest.raises(InvalidParameterError):
            STSAWeuclidDenoiser.from_config(cfg)


class TestUnityGain:
    def test_sine_reconstruction(self, sine):
        denoiser = build_unity_denoiser()
        out = denoiser.process(sine)
        assert len(out) == 99 * 80
        assert np.max(np.abs(out[80:] - sine[80:len(out)])) < 1e-6


class TestNoiseOnly:
    def test_vad_and_noise_convergence(self, cfg, white_noise):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        out, frames = denoiser.process(white_noise, return_frames=True)

        n_init = cfg.NOISE.INIT_FRAMES
        speech = np.array([f.is_speech for f in frames[n_init:]])
        assert np.mean(~speech) >= 0.95

        # 单位范数窗下白噪声每个频点的功率等于方差
        means = np.array([f.noise_psd.mean() for f in frames])
        changes = np.abs(np.diff(means[20:])) / means[20:-1]
        assert np.all(changes < 0.02)
        assert np.mean(changes) < 0.01
        assert means[-1] == pytest.approx(0.01, rel=0.1)

    def test_output_is_attenuated(self, cfg, white_noise):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        out = denoiser.process(white_noise)
        assert np.std(out[1600:]) < 0.5 * np.std(white_noise)


class TestSNRBounds:
    def test_floor_and_ceiling(self, cfg, noisy_speech):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        _, frames = denoiser.process(noisy_speech, return_frames=True)

        for f in frames:
            assert np.all(f.gammak <= 40.0)
            assert np.all(np.isfinite(f.gain))
            assert np.all(f.gain >= 0)
        for f in frames[1:]:
            assert np.all(f.ksi >= KSI_MIN)

    def test_speech_frames_detected(self, cfg, noisy_speech):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        _, frames = denoiser.process(noisy_speech, return_frames=True)
        hop = denoiser.hop
        # 0.6s - 0.9s 处于语音段内
        speech = [f.is_speech for f in frames[int(0.6 * 8000) // hop:int(0.9 * 8000) // hop]]
        assert np.mean(speech) > 0.9

    def test_noise_frozen_during_speech(self, cfg, noisy_speech):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        _, frames = denoiser.process(noisy_speech, return_frames=True)
        for prev, cur in zip(frames, frames[1:]):
            if cur.is_speech:
                np.testing.assert_array_equal(cur.noise_psd, prev.noise_psd)


class TestState:
    def test_state_threading(self, cfg, noisy_speech):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        out = denoiser.process(noisy_speech)
        state = denoiser.state
        assert state.frame_index == len(out) // denoiser.hop
        assert state.overlap_tail.shape == (denoiser.segmenter.overlap_len,)
        assert state.prev_signal_power.shape == (denoiser.n_fft,)

    def test_repeatable(self, cfg, noisy_speech):
        denoiser = STSAWeuclidDenoiser.from_config(cfg)
        a = denoiser.process(noisy_speech)
        b = denoiser.process(noisy_speech)
        np.testing.assert_array_equal(a, b)
        np.testing.assert_array_equal(denoiser.denoise(noisy_speech), a)

    @pytest.mark.parametrize("p", [-1.0, -0.5, 0.5])
    def test_gain_variants_run(self, cfg, noisy_speech, p):
        cfg.ESTIMATOR.P = p
        out = STSAWeuclidDenoiser.from_config(cfg).process(noisy_speech)
        assert np.all(np.isfinite(out))
