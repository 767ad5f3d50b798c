# encoding: utf-8
"""
@author:  Ryuk
@contact: jeryuklau@gmail.com
"""

import functools
import logging
import os
import sys


@functools.lru_cache()  # so that calling setup_logger multiple times won't add many handlers
def setup_logger(output=None, *, name="weuclid", abbrev_name=None, level=logging.INFO):
    """
    Initialize the weuclid logger and set its verbosity level.
    The signal_processing package logs under its own name and is attached to
    the same handlers.
    Args:
        output (str): a file name or a directory to save log. If None, will not save log file.
            If ends with ".txt" or ".log", assumed to be a file name.
            Otherwise, logs will be saved to `output/log.txt`.
        name (str): the root module name of this logger
        abbrev_name (str): an abbreviation of the module, to avoid long names in logs.
    Returns:
        logging.Logger: a logger
    """
    if abbrev_name is None:
        abbrev_name = "we" if name == "weuclid" else name

    plain_formatter = logging.Formatter(
        "[%(asctime)s] %(name)s %(levelname)s: %(message)s", datefmt="%m/%d %H:%M:%S"
    )
    formatter = logging.Formatter(
        "[%(asctime)s %(name)s]: %(message)s".replace("%(name)s", abbrev_name), datefmt="%m/%d %H:%M:%S"
    )

    handlers = []
    ch = logging.StreamHandler(stream=sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    handlers.append(ch)

    # file logging
    if output is not None:
        if output.endswith(".txt") or output.endswith(".log"):
            filename = output
        else:
            filename = os.path.join(output, "log.txt")
        dirname = os.path.dirname(filename)
        if dirname:
            os.makedirs(dirname, exist_ok=True)

        fh = logging.FileHandler(filename, mode="a")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(plain_formatter)
        handlers.append(fh)

    for logger_name in (name, "signal_processing"):
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        for handler in handlers:
            logger.addHandler(handler)

    return logging.getLogger(name)
