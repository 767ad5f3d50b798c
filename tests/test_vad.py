'''
Author: Ryuk
Date: 2026-03-08 16:20:03
LastEditors: Ryuk
LastEditTime: 2026-03-08 16:31:47
Description: First create
'''

import numpy as np
import pytest

from signal_processing.vad import LLRVoiceActivityDetector, llr_statistic


class TestLLRVad:
    def test_statistic(self):
        gammak = np.array([1.0, 4.0])
        ksi = np.array([1.0, 3.0])
        expected = np.mean(gammak * ksi / (1 + ksi) - np.log(1 + ksi))
        assert llr_statistic(gammak, ksi) == pytest.approx(expected)

    def test_noise_frame(self):
        vad = LLRVoiceActivityDetector()
        is_speech, stat = vad(np.ones(160), np.full(160, 0.01))
        assert not is_speech
        assert stat < 0.15

    def test_speech_frame(self):
        vad = LLRVoiceActivityDetector()
        is_speech, stat = vad(np.full(160, 40.0), np.full(160, 10.0))
        assert is_speech
        assert stat == pytest.approx(40 * 10 / 11 - np.log(11))

    def test_threshold_is_tunable(self):
        gammak, ksi = np.full(4, 2.0), np.full(4, 1.0)
        stat = llr_statistic(gammak, ksi)
        assert LLRVoiceActivityDetector(eta=stat - 1e-6)(gammak, ksi)[0]
        assert not LLRVoiceActivityDetector(eta=stat + 1e-6)(gammak, ksi)[0]
