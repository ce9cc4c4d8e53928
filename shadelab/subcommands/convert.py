#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/convert.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.shared.logger import ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.logic.convert.engine import run


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ShadelabArgumentParser(
        prog="shadelab convert",
        description="shadelab convert: convert a hex color to rgba, hsl, hsv or hex",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="3, 6 or 8 digit hex color (with or without #)",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        dest="to_format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        choices=c.CONVERT_FORMATS,
        help="target format",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show the source hex next to the result",
    )
    parser.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="print without terminal colors",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    run(args)


if __name__ == "__main__":
    main()
