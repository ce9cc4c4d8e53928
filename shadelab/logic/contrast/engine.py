#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/contrast/engine.py

import argparse

from shadelab.core import conversions as conv
from shadelab.core.contrast import contrast_ratio, get_wcag_levels
from .renderer import render_contrast_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the contrast command"""
    foreground = conv.hex_to_rgba(args.foreground)
    background = conv.hex_to_rgba(args.background)

    ratio = contrast_ratio(foreground, background)
    render_contrast_info(foreground, background, ratio, get_wcag_levels(ratio))
