# encoding: utf-8
"""
@author:  Ryuk
@contact: jeryuklau@gmail.com
"""

import logging

import librosa
import numpy as np
from scipy.linalg import solve_toeplitz, toeplitz

logger = logging.getLogger(__name__)

EPS = 1e-10


def lpc(frame, order):
    """
    Autocorrelation-method LPC (Levinson-Durbin through solve_toeplitz).

    Args:
        frame (np.ndarray): windowed analysis frame
        order (int): prediction order
    Returns:
        a (np.ndarray): inverse filter [1, -alpha_1, ..., -alpha_order]
        r (np.ndarray): autocorrelation at lags 0..order
        err (float): prediction error power
    """
    frame = np.asarray(frame, dtype=np.float64)
    if order >= len(frame):
        raise ValueError("order {} must be smaller than the frame length {}".format(order, len(frame)))

    full = np.correlate(frame, frame, mode="full")
    mid = len(frame) - 1
    r = full[mid:mid + order + 1]

    alpha = solve_toeplitz((r[:order], r[:order]), r[1:order + 1])
    a = np.concatenate(([1.0], -alpha))
    err = float(np.dot(a, r))
    return a, r, err


def itakura_saito(clean, enhanced, sample_rate, frame_len_ms=30, overlap_percent=75,
                  order=None, max_value=100.0):
    """
    Frame-wise Itakura-Saito distance between the LPC spectra of `clean` and
    `enhanced`:
        d = (a_e R_c a_e^T) / err_e + log(err_e / err_c) - 1
    Frames where either signal is silent are skipped.

    Returns:
        np.ndarray of per-frame distances, each clipped to `max_value`.
    """
    clean = np.asarray(clean, dtype=np.float64)
    enhanced = np.asarray(enhanced, dtype=np.float64)
    n = min(len(clean), len(enhanced))
    clean, enhanced = clean[:n], enhanced[:n]

    if order is None:
        order = 10 if sample_rate < 10000 else 16
    frame_len = int(round(frame_len_ms * sample_rate / 1000))
    hop = max(int(frame_len * (100 - overlap_percent) / 100), 1)
    if n < frame_len:
        raise ValueError("signals shorter than one analysis frame ({} < {})".format(n, frame_len))

    win = np.hanning(frame_len)
    clean_frames = librosa.util.frame(clean, frame_length=frame_len, hop_length=hop)
    enhanced_frames = librosa.util.frame(enhanced, frame_length=frame_len, hop_length=hop)

    distortion = []
    for i in range(clean_frames.shape[1]):
        c = clean_frames[:, i] * win
        e = enhanced_frames[:, i] * win
        if np.dot(c, c) < EPS or np.dot(e, e) < EPS:
            continue

        a_c, r_c, err_c = lpc(c, order)
        a_e, _, err_e = lpc(e, order)

        numerator = a_e @ toeplitz(r_c) @ a_e
        d = numerator / err_e + np.log(err_e / err_c) - 1
        distortion.append(min(d, max_value))

    logger.debug("Itakura-Saito over {} of {} frames".format(len(distortion), clean_frames.shape[1]))
    return np.asarray(distortion)


def mean_itakura_saito(clean, enhanced, sample_rate, keep=0.95, **kwargs):
    """
    Mean over the lowest `keep` fraction of frame distances, discarding the
    outlier frames at the top.
    """
    distortion = np.sort(itakura_saito(clean, enhanced, sample_rate, **kwargs))
    if len(distortion) == 0:
        return 0.0
    n = max(int(round(len(distortion) * keep)), 1)
    return float(np.mean(distortion[:n]))
