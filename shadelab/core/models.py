#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/models.py

from dataclasses import dataclass
from typing import NamedTuple, Optional


class Rgba(NamedTuple):
    """8-bit RGB channels with an optional alpha.

    An alpha of None means "opaque, render no alpha channel", which is not
    the same thing as an explicit alpha of 1.
    """
    r: int
    g: int
    b: int
    a: Optional[float] = None


class Hsl(NamedTuple):
    h: int
    s: int
    l: int


class Hsv(NamedTuple):
    h: int
    s: int
    v: int


@dataclass
class ShadeOption:
    """One row of the shade table: its multiplier and the cached color."""
    multiplier: float
    value: Rgba
