#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/__init__.py

__version__ = "0.1.0"

from shadelab.core.models import Rgba, Hsl, Hsv, ShadeOption
from shadelab.core.conversions import (
    hex_opacity_to_alpha,
    hex_to_rgba,
    parse_dec_alpha,
    dec_to_hex,
    rgba_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    is_hex_color,
    format_rgba,
    format_hsl,
)
from shadelab.core.contrast import contrast_ratio
from shadelab.core.generator import ShadeGenerator, generate_shade

__all__ = [
    "__version__",
    "Rgba",
    "Hsl",
    "Hsv",
    "ShadeOption",
    "hex_opacity_to_alpha",
    "hex_to_rgba",
    "parse_dec_alpha",
    "dec_to_hex",
    "rgba_to_hex",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "is_hex_color",
    "format_rgba",
    "format_hsl",
    "contrast_ratio",
    "ShadeGenerator",
    "generate_shade",
]
