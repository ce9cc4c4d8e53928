#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/shades/engine.py

import argparse

from shadelab.core import conversions as conv
from shadelab.core.contrast import contrast_ratio
from .resolver import resolve_shades_input
from .renderer import render_shades, render_shades_json


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the shades command"""
    generator = resolve_shades_input(args)
    palette = generator.shades_map(args.format)

    contrast = None
    if getattr(args, "background", None):
        background = conv.hex_to_rgba(args.background)
        contrast = {
            key: contrast_ratio(option.value, background)
            for key, option in generator.shades.items()
        }

    if getattr(args, "json", False):
        render_shades_json(palette, contrast)
    else:
        render_shades(generator, palette, contrast, hide_bars=getattr(args, "hide_bars", False))
