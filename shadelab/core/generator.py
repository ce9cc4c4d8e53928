#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/generator.py

from typing import Dict, Mapping, Optional, Union

from . import config as c
from . import conversions as conv
from .models import Rgba, Hsv, ShadeOption
from shadelab.shared.rounding import round_half_up

ShadeKey = Union[str, int]


def generate_shade(base: Rgba, shade: ShadeKey, multiplier: float) -> Rgba:
    """
    Derive one palette entry from a base color.

    Keys above 100 darken toward black (channel * multiplier), keys below 100
    lighten toward white (channel + (255 - channel) * multiplier). Key 100
    is the base itself and ignores the multiplier. Alpha is carried over.
    """
    level = int(shade)
    r, g, b, a = base

    if level > int(c.IDENTITY_SHADE):
        return Rgba(
            round_half_up(r * multiplier),
            round_half_up(g * multiplier),
            round_half_up(b * multiplier),
            a,
        )
    if level < int(c.IDENTITY_SHADE):
        return Rgba(
            round_half_up(r + (c.RGB_MAX - r) * multiplier),
            round_half_up(g + (c.RGB_MAX - g) * multiplier),
            round_half_up(b + (c.RGB_MAX - b) * multiplier),
            a,
        )
    return base


class ShadeGenerator:
    """
    A 19-entry tint/shade palette derived from one base color.

    Configuration methods return the generator so calls can be chained:

        ShadeGenerator().hue("#336699").shade("500").hex()  # '#1F3D5C'

    The no-argument readers (hsv, rgba, hsl, hex) and opacity act on the
    shade selected by the last shade() call; each also takes an explicit
    `shade` keyword.
    """

    def __init__(self, multipliers: Optional[Mapping[ShadeKey, float]] = None):
        self.base_color = Rgba(0, 0, 0, 1)
        self.shades: Dict[str, ShadeOption] = {
            key: ShadeOption(multiplier=c.DEFAULT_MULTIPLIERS[key], value=Rgba(0, 0, 0, 1))
            for key in c.SHADE_KEYS
        }
        self.current_shade = c.IDENTITY_SHADE
        if multipliers is not None:
            self.config(multipliers)

    def _key(self, shade: ShadeKey) -> str:
        key = str(shade)
        if key not in self.shades:
            raise ValueError(f"unknown shade: '{shade}' (expected one of {', '.join(c.SHADE_KEYS)})")
        return key

    def config(self, multipliers: Mapping[ShadeKey, float]) -> "ShadeGenerator":
        """Replace every multiplier. Values are not regenerated until the next hue()."""
        table = {str(k): v for k, v in multipliers.items()}
        missing = [key for key in c.SHADE_KEYS if key not in table]
        if missing:
            raise ValueError(f"missing multipliers for shades: {', '.join(missing)}")

        for key, option in self.shades.items():
            option.multiplier = float(table[key])
        return self

    def hue(self, color: str) -> "ShadeGenerator":
        """Set the base color from a 6-digit hex string and rebuild the palette."""
        if not conv.is_hex_color(color):
            raise ValueError(f"invalid hue color: '{color}'")

        self.base_color = conv.hex_to_rgba(color)
        self.generate_shades()
        return self

    def shade(self, shade: ShadeKey) -> "ShadeGenerator":
        self.current_shade = self._key(shade)
        return self

    def generate_shade(self, shade: ShadeKey) -> Rgba:
        key = self._key(shade)
        return generate_shade(self.base_color, key, self.shades[key].multiplier)

    def generate_shades(self) -> None:
        for key, option in self.shades.items():
            option.value = self.generate_shade(key)

    def opacity(self, amount: float, shade: Optional[ShadeKey] = None) -> "ShadeGenerator":
        """Set the alpha of one entry (the current shade by default)."""
        key = self.current_shade if shade is None else self._key(shade)
        alpha = round_half_up(conv.parse_dec_alpha(amount), c.ALPHA_DECIMALS)

        option = self.shades[key]
        option.value = option.value._replace(a=alpha)
        return self

    def shade_value(self, shade: ShadeKey) -> Rgba:
        return self.shades[self._key(shade)].value

    def current_shade_value(self) -> Rgba:
        return self.shades[self.current_shade].value

    def _resolve(self, color: Optional[Rgba], shade: Optional[ShadeKey]) -> Rgba:
        if color is not None:
            return Rgba(*color)
        if shade is not None:
            return self.shade_value(shade)
        return self.current_shade_value()

    def shades_map(self, color_format: str) -> Dict[str, str]:
        """Render every entry, in table order, as 'rgba', 'hsl' or 'hex'."""
        if color_format not in c.COLOR_FORMATS:
            raise ValueError(
                f"unknown color format: '{color_format}' (expected one of {', '.join(c.COLOR_FORMATS)})"
            )
        render = getattr(self, color_format)
        return {key: render(option.value) for key, option in self.shades.items()}

    def hsv(self, shade: Optional[ShadeKey] = None) -> Hsv:
        return conv.rgb_to_hsv(self._resolve(None, shade))

    def rgba(self, color: Optional[Rgba] = None, shade: Optional[ShadeKey] = None) -> str:
        return conv.format_rgba(self._resolve(color, shade))

    def hsl(self, color: Optional[Rgba] = None, shade: Optional[ShadeKey] = None) -> str:
        return conv.format_hsl(self._resolve(color, shade))

    def hex(self, color: Optional[Rgba] = None, shade: Optional[ShadeKey] = None) -> str:
        value = self._resolve(color, shade)
        return conv.rgba_to_hex(value, True, value.a != 1)
