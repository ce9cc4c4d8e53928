#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/convert/renderer.py

from shadelab.core import config as c
from shadelab.core import conversions as conv
from shadelab.core.models import Rgba


def render_convert_info(rgba: Rgba, fmt: str, colored: bool = True) -> str:
    """Composes Rgba into a formatted output string."""
    def bold(t): return f"{c.BOLD_WHITE}{t}{c.RESET}" if colored else str(t)

    maps = {
        "hex": lambda: conv.rgba_to_hex(rgba, True, rgba.a != 1),
        "rgba": lambda: conv.format_rgba(rgba),
        "hsl": lambda: conv.format_hsl(rgba),
        "hsv": lambda: conv.format_hsv(rgba),
    }

    return bold(maps[fmt]()) if fmt in maps else ""
