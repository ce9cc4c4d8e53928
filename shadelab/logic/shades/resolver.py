#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/shades/resolver.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.core.generator import ShadeGenerator
from shadelab.shared.logger import log


def resolve_shades_input(args: argparse.Namespace) -> ShadeGenerator:
    """Build a generator from CLI arguments, exiting on invalid input."""
    generator = ShadeGenerator()

    try:
        if getattr(args, "multipliers", None):
            generator.config(args.multipliers)
        generator.hue(args.hex)
    except ValueError as exc:
        log("error", str(exc))
        log("info", "the base color must be a 6-digit hex code, e.g. -H 336699")
        sys.exit(2)

    shade = getattr(args, "shade", None)
    if getattr(args, "opacity", None) is not None:
        generator.shade(shade or c.IDENTITY_SHADE).opacity(args.opacity)
    elif shade:
        log("warning", "-s/--shade has no effect without -o/--opacity")

    return generator
