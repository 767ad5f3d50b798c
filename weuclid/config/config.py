# encoding: utf-8
"""
@author:  Ryuk
@contact: jeryuklau@gmail.com
"""

from yacs.config import CfgNode

from .defaults import _C


def get_cfg():
    """
    Get a copy of the default config.
    Returns:
        a CfgNode instance.
    """
    return _C.clone()


def setup_cfg(config_file="", opts=None):
    """
    Build a frozen config from the defaults, an optional YAML file and a list
    of command-line overrides such as ["ESTIMATOR.P", "0.5"].
    """
    cfg = get_cfg()
    if config_file:
        cfg.merge_from_file(config_file)
    if opts:
        cfg.merge_from_list(opts)
    cfg.freeze()
    return cfg
