#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/conversions.py

import functools
import re
from typing import Optional

from . import config as c
from .models import Rgba, Hsl, Hsv
from shadelab.shared.clamping import _clamp01, _clamp255
from shadelab.shared.formatting import format_colorspace
from shadelab.shared.rounding import round_half_up


def _strip_hash(color: str) -> str:
    return color[1:] if color.startswith("#") else color


def hex_opacity_to_alpha(hex_alpha: str) -> float:
    """Convert a 2-digit hex alpha ('80') to a 0-1 alpha with 2 decimals."""
    return round_half_up(int(hex_alpha, c.HEX_RADIX) / c.RGB_MAX, c.ALPHA_DECIMALS)


def hex_to_rgba(hex_code: Optional[str]) -> Rgba:
    """
    Convert '#RGB', '#RRGGBB' or '#RRGGBBAA' (hash optional) to Rgba.

    Unrecognized input is not an error: it yields opaque black.
    """
    default = Rgba(0, 0, 0, 1)
    if not hex_code:
        return default
    h = _strip_hash(str(hex_code))
    try:
        if len(h) == c.HEX_SHORT_LEN:
            r, g, b = (int(ch * 2, c.HEX_RADIX) for ch in h)
            return Rgba(r, g, b, 1)
        if len(h) == c.HEX_LONG_LEN:
            r, g, b = (int(h[i : i + 2], c.HEX_RADIX) for i in (0, 2, 4))
            return Rgba(r, g, b, 1)
        if len(h) == c.HEX_ALPHA_LEN:
            r, g, b = (int(h[i : i + 2], c.HEX_RADIX) for i in (0, 2, 4))
            return Rgba(r, g, b, hex_opacity_to_alpha(h[6:8]))
    except ValueError:
        return default
    return default


def parse_dec_alpha(dec_alpha: float) -> float:
    """Clamp a decimal alpha into [0, 1]."""
    return _clamp01(dec_alpha)


def dec_to_hex(value: float, is_alpha: bool = False) -> str:
    """Render a channel (or an alpha, if is_alpha) as 2 lowercase hex digits."""
    v = parse_dec_alpha(value) * c.RGB_MAX if is_alpha else value
    return f"{round_half_up(_clamp255(v)):02x}"


def rgba_to_hex(rgba: Rgba, with_hash: bool = False, with_alpha: bool = False) -> str:
    """Convert Rgba to an uppercase hex string.

    The alpha pair is appended only when requested and the alpha is truthy,
    so a None or 0 alpha never produces the 8-digit form.
    """
    r, g, b, a = rgba
    hex_color = f"{dec_to_hex(r)}{dec_to_hex(g)}{dec_to_hex(b)}"
    if with_alpha and a:
        hex_color += dec_to_hex(a, True)
    if with_hash:
        hex_color = f"#{hex_color}"
    return hex_color.upper()


def _hue_degrees(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    """Six-region hue formula shared by HSL and HSV, before rounding."""
    if delta == 0:
        h = 0.0
    elif r == cmax:
        h = (g - b) / delta
    elif g == cmax:
        h = c.HUE_GREEN_OFFSET + (b - r) / delta
    else:
        h = c.HUE_BLUE_OFFSET + (r - g) / delta
    h = min(h * c.HUE_SECTOR, c.HUE_MAX)
    if h < 0:
        h += c.HUE_MAX
    return h


def rgb_to_hsl(rgba: Rgba) -> Hsl:
    """Convert RGB to HSL (integer degrees and percentages)."""
    r_f, g_f, b_f = rgba[0] / c.RGB_MAX, rgba[1] / c.RGB_MAX, rgba[2] / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin

    h = _hue_degrees(r_f, g_f, b_f, cmax, delta)
    L = (cmin + cmax) / c.DIV_2

    if delta == 0:
        s = 0.0
    elif L <= 0.5:
        s = delta / (cmax + cmin)
    else:
        s = delta / (c.DIV_2 - cmax - cmin)

    return Hsl(round_half_up(h), round_half_up(s * c.PERCENT), round_half_up(L * c.PERCENT))


def rgb_to_hsv(rgba: Rgba) -> Hsv:
    """Convert RGB to HSV.

    Works on the raw 0-255 channels; only s and v are scaled to percent.
    """
    r, g, b = rgba[0], rgba[1], rgba[2]
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin

    s = 0.0 if cmax == 0 else ((delta / cmax) * c.PERMILLE) / 10
    h = _hue_degrees(r, g, b, cmax, delta)
    v = ((cmax / c.RGB_MAX) * c.PERMILLE) / 10

    return Hsv(round_half_up(h), round_half_up(s), round_half_up(v))


def is_hex_color(color: Optional[str], strict: bool = True) -> bool:
    """
    Check a hex color string.

    The pattern admits 3, 4, 6 and 8 digits, but only a 6-digit color
    (hash optional) passes the final length check.
    """
    if not isinstance(color, str):
        return False
    if strict:
        matched = re.match(c.HEX_COLOR_REGEX_STRICT, color, re.IGNORECASE)
    else:
        matched = re.search(c.HEX_COLOR_REGEX_LOOSE, color, re.IGNORECASE)
    return matched is not None and len(_strip_hash(color)) == c.HEX_LONG_LEN


def format_rgba(rgba: Rgba) -> str:
    """'rgb(r, g, b)' for opaque colors, 'rgba(r, g, b, a)' otherwise."""
    r, g, b, a = rgba
    if a is None or a == 1:
        return format_colorspace("rgb", r, g, b)
    return format_colorspace("rgba", r, g, b, a)


def format_hsl(rgba: Rgba) -> str:
    return format_colorspace("hsl", *rgb_to_hsl(rgba))


def format_hsv(rgba: Rgba) -> str:
    return format_colorspace("hsv", *rgb_to_hsv(rgba))


def _srgb_to_linear(color_comp: int) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
