#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
CONTRAST_DECIMALS = 2              # Contrast ratios are reported with 2 decimals

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HUE_GREEN_OFFSET = 2.0             # Sector offset when green is the max channel
HUE_BLUE_OFFSET = 4.0              # Sector offset when blue is the max channel
PERCENT = 100.0                    # Fraction to percentage
PERMILLE = 1000.0                  # Intermediate scale used by the HSV percentages
ALPHA_DECIMALS = 2                 # Alpha values are kept with 2 decimals

# sRGB Transfer Function Constants (Source: WCAG 2.0 relative luminance definition)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.03928        # Threshold for switching from linear to non-linear sRGB

# Hex Parsing
HEX_RADIX = 16
HEX_SHORT_LEN = 3                  # '#RGB'
HEX_LONG_LEN = 6                   # '#RRGGBB'
HEX_ALPHA_LEN = 8                  # '#RRGGBBAA'

# Strict patterns match the whole string, loose patterns search inside it
HEX_COLOR_REGEX_STRICT = r"^#?([0-9a-f]{3,4}|[0-9a-f]{4}(?:[0-9a-f]{2}){1,2})$"
HEX_COLOR_REGEX_LOOSE = r"#?([0-9a-f]{3}|[0-9a-f]{4}(?:[0-9a-f]{2}){0,2})\b"


# ==========================================
# Shade Table
# ==========================================

# Tints below the identity key, shades above it
IDENTITY_SHADE = "100"

SHADE_KEYS = [
    "10", "20", "30", "40", "50", "60", "70", "80", "90",
    "100",
    "200", "300", "400", "500", "600", "700", "800", "900", "1000",
]

DEFAULT_MULTIPLIERS = {
    "10": 0.9,
    "20": 0.8,
    "30": 0.7,
    "40": 0.6,
    "50": 0.5,
    "60": 0.4,
    "70": 0.3,
    "80": 0.2,
    "90": 0.1,
    "100": 0.0,
    "200": 0.9,
    "300": 0.8,
    "400": 0.7,
    "500": 0.6,
    "600": 0.5,
    "700": 0.4,
    "800": 0.3,
    "900": 0.2,
    "1000": 0.1,
}

# Output formats accepted by ShadeGenerator.shades_map
COLOR_FORMATS = ["rgba", "hsl", "hex"]

# Output formats accepted by the 'convert' command
CONVERT_FORMATS = ["rgba", "hsl", "hsv", "hex"]


# ==========================================
# CLI UI & Data Structures
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
