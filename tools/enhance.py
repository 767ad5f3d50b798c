# encoding: utf-8
"""
@author:  Ryuk
@contact: jeryuklau@gmail.com
"""

import sys

sys.path.append('.')

from weuclid.config import setup_cfg
from weuclid.engine import default_argument_parser, default_setup, enhance_file


def main(args):
    cfg = setup_cfg(args.config_file, args.opts)
    logger = default_setup(cfg, args)
    sr = enhance_file(cfg, args.input, args.output)
    logger.info("Done, {} written at {} Hz".format(args.output, sr))


if __name__ == "__main__":
    args = default_argument_parser().parse_args()
    print("Command Line Args:", args)
    main(args)
