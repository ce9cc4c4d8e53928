#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/command_registry.py

from . import (
    shades,
    convert,
    contrast,
)

SUBCOMMANDS = {
    'shades': shades,
    'convert': convert,
    'contrast': contrast,
}
