'''
Author: Ryuk
Date: 2026-03-02 10:25:31
LastEditors: Ryuk
LastEditTime: 2026-03-05 15:42:10
Description: First create
'''

from .framing import FrameSegmenter, frame_length_from_ms
from .special import DEFAULT_TRUNCATION_ORDER, hyp1f1, hyp1f1_series

__all__ = [
    'DEFAULT_TRUNCATION_ORDER',
    'FrameSegmenter',
    'frame_length_from_ms',
    'hyp1f1',
    'hyp1f1_series'
]
