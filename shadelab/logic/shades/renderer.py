#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/shades/renderer.py

import json
from typing import Dict, Optional

from shadelab.core import config as c
from shadelab.core.generator import ShadeGenerator
from shadelab.shared.preview import print_color_block


def render_shades(
    generator: ShadeGenerator,
    palette: Dict[str, str],
    contrast: Optional[Dict[str, float]] = None,
    hide_bars: bool = False,
) -> None:
    """Print every shade with its color bar and formatted value."""
    print()
    for key, text in palette.items():
        color = c.BOLD_WHITE if key == c.IDENTITY_SHADE else c.MSG_BOLD_COLORS['info']
        label = f"{color}shade{key:>13}{c.RESET}"
        print_color_block(generator.shades[key].value, label, text, hide_bar=hide_bars, end="")
        if contrast is not None:
            print(f"  {c.MSG_COLORS['info']}{contrast[key]:.2f}:1{c.RESET}", end="")
        print()
    print()


def render_shades_json(palette: Dict[str, str], contrast: Optional[Dict[str, float]] = None) -> None:
    if contrast is None:
        print(json.dumps(palette, indent=2))
        return
    data = {key: {"value": text, "contrast": contrast[key]} for key, text in palette.items()}
    print(json.dumps(data, indent=2))
