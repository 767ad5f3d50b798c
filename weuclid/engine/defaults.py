# -*- coding: utf-8 -*-
"""
This file contains components with some default boilerplate logic user may need
to enhance wav files: argument parsing, logging setup, a predictor that wraps
the denoiser and file level helpers.
"""

import argparse
import logging
import os

import librosa
import numpy as np
import soundfile as sf

from signal_processing.denoisers import STSAWeuclidDenoiser
from weuclid.utils.logger import setup_logger

__all__ = ["default_argument_parser", "default_setup", "DefaultPredictor", "enhance_file"]

logger = logging.getLogger(__name__)


def default_argument_parser():
    """
    Create a parser with some common arguments used by weuclid users.
    Returns:
        argparse.ArgumentParser:
    """
    parser = argparse.ArgumentParser(description="weuclid speech enhancement")
    parser.add_argument("--config-file", default="", metavar="FILE", help="path to config file")
    parser.add_argument("--input", required=True, metavar="WAV", help="noisy wav file")
    parser.add_argument("--output", required=True, metavar="WAV", help="where to write the enhanced wav")
    parser.add_argument(
        "opts",
        help="Modify config options using the command-line",
        default=None,
        nargs=argparse.REMAINDER,
    )
    return parser


def default_setup(cfg, args):
    """
    Perform some basic common setups at the beginning of a job, including:
    1. Set up the weuclid logger
    2. Log the command line arguments and the config
    3. Backup the config to the output directory
    Args:
        cfg (CfgNode): the full config to be used
        args (argparse.NameSpace): the command line arguments to be logged
    """
    output_dir = cfg.OUTPUT_DIR
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    logger = setup_logger(output_dir or None)

    logger.info("Command line arguments: " + str(args))
    if hasattr(args, "config_file") and args.config_file != "":
        with open(args.config_file, "r") as f:
            logger.info("Contents of args.config_file={}:\n{}".format(args.config_file, f.read()))

    logger.info("Running with full config:\n{}".format(cfg))
    if output_dir:
        path = os.path.join(output_dir, "config.yaml")
        with open(path, "w") as f:
            f.write(cfg.dump())
        logger.info("Full config saved to {}".format(os.path.abspath(path)))
    return logger


class DefaultPredictor:
    """
    Create a simple end-to-end predictor with the given config.
    The predictor takes a mono waveform in float, builds a fresh denoiser for
    its sample rate and returns the enhanced waveform.
    Examples:
    ::
        pred = DefaultPredictor(cfg)
        enhanced = pred(noisy, 8000)
    """

    def __init__(self, cfg):
        self.cfg = cfg.clone()

    def build_denoiser(self, sample_rate=None):
        return STSAWeuclidDenoiser.from_config(self.cfg, sample_rate)

    def __call__(self, waveform, sample_rate=None):
        """
        Args:
            waveform (np.ndarray): 1-D noisy signal
            sample_rate (int): falls back to cfg.INPUT.SAMPLE_RATE
        Returns:
            enhanced (np.ndarray): Nframes * hop samples
        """
        denoiser = self.build_denoiser(sample_rate)
        return denoiser.process(waveform)


def enhance_file(cfg, infile, outfile):
    """
    Read `infile` at its native rate, enhance it and write `outfile`.
    Returns the sample rate of the written file.
    """
    x, sr = librosa.load(infile, sr=None, mono=True)
    logger.info("Loaded {} ({} samples @ {} Hz)".format(infile, len(x), sr))

    enhanced = DefaultPredictor(cfg)(x, sr)

    sf.write(outfile, np.clip(enhanced, -1, 1), sr, subtype=cfg.OUTPUT.SUBTYPE)
    logger.info("Enhanced wav saved to {}".format(outfile))
    return sr
