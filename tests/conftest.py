'''
Author: Ryuk
Date: 2026-03-08 10:02:44
LastEditors: Ryuk
LastEditTime: 2026-03-09 20:15:31
Description: First create
'''

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

import numpy as np
import pytest

from weuclid.config import get_cfg


FS = 8000


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def sine():
    # 1 秒 8kHz 正弦
    t = np.arange(FS) / FS
    return 0.5 * np.sin(2 * np.pi * 440 * t)


@pytest.fixture
def white_noise(rng):
    return 0.1 * rng.standard_normal(3 * FS)


@pytest.fixture
def noisy_speech(rng):
    # 前 0.5 秒纯噪声，之后是间断的谐波"语音"
    t = np.arange(2 * FS) / FS
    speech = sum(np.sin(2 * np.pi * f * t) / k for k, f in enumerate([200, 400, 600, 800], start=1))
    gate = ((t > 0.5) & (t < 1.0)) | ((t > 1.3) & (t < 1.8))
    return 0.3 * speech * gate + 0.02 * rng.standard_normal(len(t))


@pytest.fixture
def cfg():
    cfg = get_cfg()
    cfg.INPUT.SAMPLE_RATE = FS
    return cfg
