#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/shades.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.shared.logger import ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.truecolor import ensure_truecolor
from shadelab.logic.shades.engine import run


def get_shades_parser() -> argparse.ArgumentParser:
    """Create argument parser for shades command."""
    parser = ShadelabArgumentParser(
        prog="shadelab shades",
        description="shadelab shades: generate 19 tints and shades from a base color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="6-digit base hex color (with or without #)",
    )
    parser.add_argument(
        "-f",
        "--format",
        default="hex",
        type=INPUT_HANDLERS["color_format"],
        choices=c.COLOR_FORMATS,
        help="output format for every shade (default: hex)",
    )
    parser.add_argument(
        "-m",
        "--multipliers",
        type=INPUT_HANDLERS["multipliers"],
        default=None,
        help=f"{len(c.SHADE_KEYS)} comma separated multipliers in shade order\n"
             f"({', '.join(c.SHADE_KEYS)})",
    )
    parser.add_argument(
        "-s",
        "--shade",
        type=INPUT_HANDLERS["shade"],
        default=None,
        help=f"shade that receives --opacity (default: {c.IDENTITY_SHADE})",
    )
    parser.add_argument(
        "-o",
        "--opacity",
        type=INPUT_HANDLERS["float_0_1"],
        default=None,
        help="opacity (0 to 1) applied to the selected shade",
    )
    parser.add_argument(
        "-bg",
        "--background",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="show the contrast ratio of every shade against this hex color",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the palette as JSON",
    )
    parser.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars",
    )
    return parser


def main() -> None:
    """Main entry point for shades command."""
    parser = get_shades_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()
