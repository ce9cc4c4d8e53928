#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/rounding.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """
    Round half away from zero to `ndigits` decimals.

    The float is converted exactly (Decimal(0.615) is 0.61499999...), so a
    value that merely prints as a tie rounds the way its binary value says.
    Returns an int when ndigits is 0, a float otherwise.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)
