#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/formatting.py


def format_number(value) -> str:
    """Render a number without a trailing '.0' when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        r, g, b = args[:3]
        return f"rgb({format_number(r)}, {format_number(g)}, {format_number(b)})"
    elif fmt == 'rgba':
        r, g, b, a = args
        return f"rgba({format_number(r)}, {format_number(g)}, {format_number(b)}, {format_number(a)})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h}deg, {s}%, {l}%)"
    elif fmt == 'hsv':
        h, s, v = args
        return f"hsv({h}deg, {s}%, {v}%)"

    return ""
