# encoding: utf-8
"""
@author:  Ryuk
@contact: jeryuklau@gmail.com
"""

from .config import CfgNode, get_cfg, setup_cfg

__all__ = [
    'CfgNode',
    'get_cfg',
    'setup_cfg'
]
