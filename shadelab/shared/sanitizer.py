#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/sanitizer.py

import argparse
import re

from shadelab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a hex argument into '#' followed by uppercase digits.
    Only 3, 6 and 8 digit forms survive; anything else becomes "".
    """
    if value is None:
        return ""
    # Remove hash symbol and spaces, convert to uppercase
    s = str(value).replace("#", "").replace(" ", "").upper()

    # Reject rather than repair: a stray character means a typo
    if not re.fullmatch(r"[0-9A-F]+", s):
        return ""
    if len(s) not in (c.HEX_SHORT_LEN, c.HEX_LONG_LEN, c.HEX_ALPHA_LEN):
        return ""
    return f"#{s}"


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    handling multiple decimal points by keeping only the first one encountered.
    """
    if value is None:
        return None

    s = str(value)

    is_negative = s.strip().startswith("-")

    # Regex [0-9\.] extracts only numeric digits and literal dot (.) characters
    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False

    # Reconstruct the float string ensuring only a single decimal point is kept
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    # Return None if string is empty or just a lonely dot
    if not clean_str or clean_str == '.':
        return None

    try:
        val = float(clean_str)
        if is_negative:
            val = -val
        return val
    except ValueError:
        return None


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up format names.
    """
    if value is None:
        return ""
    # Remove spaces and convert to lowercase
    s = str(value).replace(" ", "").lower()
    # Regex [a-z] extracts strictly english alphabet characters
    extracted = "".join(re.findall(r"[a-z]", s))
    return extracted


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = normalize_hex(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., format names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_shade_key(v: str) -> str:
    """Validator for shade keys ('10' ... '1000')."""
    digits = "".join(re.findall(r"[0-9]", str(v)))
    key = str(int(digits)) if digits else ""
    if key not in c.SHADE_KEYS:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid shade: '{raw}' (choose from {', '.join(c.SHADE_KEYS)})"
        )
    return key


def handle_multipliers(v: str) -> dict:
    """
    Validator for a comma separated list of 19 multipliers, in shade order.
    Each value is clamped to [0, 1].
    """
    parts = [p for p in str(v).split(",") if p.strip()]
    if len(parts) != len(c.SHADE_KEYS):
        raise argparse.ArgumentTypeError(
            f"expected {len(c.SHADE_KEYS)} comma separated multipliers, got {len(parts)}"
        )

    table = {}
    for key, part in zip(c.SHADE_KEYS, parts):
        val = _extract_signed_float(part)
        if val is None:
            raw = _sanitize_for_log(part)
            raise argparse.ArgumentTypeError(f"invalid multiplier for shade {key}: '{raw}'")
        table[key] = max(0.0, min(1.0, val))
    return table


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "hex": handle_hex,
    "shade": handle_shade_key,
    "multipliers": handle_multipliers,
    "to_format": handle_string_clean,
    "color_format": handle_string_clean,
    "float_0_1": handle_float_range(0.0, 1.0),
}
