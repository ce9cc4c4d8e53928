#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/convert/engine.py

import argparse

from shadelab.core import config as c
from shadelab.core import conversions as conv
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    colored = not getattr(args, "plain", False)
    rgba = conv.hex_to_rgba(args.hex)
    out = render_convert_info(rgba, args.to_format, colored)

    if args.verbose:
        src = render_convert_info(rgba, "hex", colored)
        arrow = f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}" if colored else "->"
        print(f"{src} {arrow} {out}")
    else:
        print(out)
