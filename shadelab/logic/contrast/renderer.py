#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/contrast/renderer.py

from shadelab.core import config as c
from shadelab.core import conversions as conv
from shadelab.core.models import Rgba
from shadelab.shared.preview import print_color_block


def render_contrast_info(foreground: Rgba, background: Rgba, ratio: float, levels: dict) -> None:
    print()
    print_color_block(foreground, f"{c.BOLD_WHITE}foreground{c.RESET}", conv.rgba_to_hex(foreground, True))
    print_color_block(background, f"{c.BOLD_WHITE}background{c.RESET}", conv.rgba_to_hex(background, True))
    print()
    print(f"   {c.BOLD_WHITE}contrast ratio{c.RESET} : {c.MSG_BOLD_COLORS['info']}{ratio:.2f}:1{c.RESET}")
    for level, result in levels.items():
        color = c.MSG_COLORS['success'] if result == "Pass" else c.MSG_COLORS['error']
        print(f"   {level:<14} : {color}{result}{c.RESET}")
    print()
