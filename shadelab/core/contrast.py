#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/contrast.py

from . import config as c
from .luminance import get_luminance
from .models import Rgba
from shadelab.shared.rounding import round_half_up


def contrast_ratio(foreground: Rgba, background: Rgba) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors, to 2 decimals.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
    Argument order does not matter.
    """
    y1 = get_luminance(foreground)
    y2 = get_luminance(background)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    ratio = (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)
    scale = 10 ** c.CONTRAST_DECIMALS
    return round_half_up(ratio * scale) / scale


def get_wcag_levels(ratio: float) -> dict:
    """Grade a contrast ratio against the WCAG 2.1 AA/AAA thresholds."""
    return {
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
    }
