#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/luminance.py

from .conversions import _srgb_to_linear
from .models import Rgba
from . import config as c


def get_luminance(rgba: Rgba) -> float:
    r, g, b = rgba[0], rgba[1], rgba[2]
    return (
        c.LUMA_R * _srgb_to_linear(r) +
        c.LUMA_G * _srgb_to_linear(g) +
        c.LUMA_B * _srgb_to_linear(b)
    )
