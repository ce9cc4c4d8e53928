#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/preview.py

import re

from shadelab.core import config as c
from shadelab.core.models import Rgba


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def print_color_block(rgba: Rgba, title: str = "color", value: str = "", hide_bar: bool = False, end: str = "\n") -> None:
    r, g, b = rgba[0], rgba[1], rgba[2]
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)
    bar = "" if hide_bar else f"\033[48;2;{r};{g};{b}m                {c.RESET}  "

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {bar}{c.BOLD_WHITE}{value}{c.RESET}", end=end)
