#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/contrast.py

import argparse
import sys

from shadelab.shared.logger import ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.truecolor import ensure_truecolor
from shadelab.logic.contrast.engine import run


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ShadelabArgumentParser(
        prog="shadelab contrast",
        description="shadelab contrast: WCAG contrast ratio between two hex colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="foreground hex color",
    )
    parser.add_argument(
        "-bg",
        "--background",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="background hex color",
    )
    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()
