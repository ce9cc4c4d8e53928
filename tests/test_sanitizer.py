import argparse

import pytest

from shadelab.core import config as c
from shadelab.shared.sanitizer import INPUT_HANDLERS, normalize_hex


def test_normalize_hex() -> None:
    assert normalize_hex("336699") == "#336699"
    assert normalize_hex(" #abc ") == "#ABC"
    assert normalize_hex("#33669980") == "#33669980"
    assert normalize_hex("#1234") == ""
    assert normalize_hex("12x456") == ""
    assert normalize_hex(None) == ""


def test_hex_handler_raises_argument_error() -> None:
    assert INPUT_HANDLERS["hex"]("1f3d5c") == "#1F3D5C"
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["hex"]("12345")


def test_shade_handler() -> None:
    assert INPUT_HANDLERS["shade"]("500") == "500"
    assert INPUT_HANDLERS["shade"]("0500") == "500"
    for bad in ("150", "abc", ""):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["shade"](bad)


def test_multipliers_handler_maps_shade_order() -> None:
    raw = ",".join(str(c.DEFAULT_MULTIPLIERS[k]) for k in c.SHADE_KEYS)
    assert INPUT_HANDLERS["multipliers"](raw) == c.DEFAULT_MULTIPLIERS


def test_multipliers_handler_clamps_values() -> None:
    raw = ",".join(["1.5"] + ["0.5"] * (len(c.SHADE_KEYS) - 1))
    table = INPUT_HANDLERS["multipliers"](raw)
    assert table["10"] == 1.0
    assert table["1000"] == 0.5


def test_multipliers_handler_requires_all_values() -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["multipliers"]("0.9,0.8")
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["multipliers"](",".join(["x"] * len(c.SHADE_KEYS)))


def test_float_range_handler_clamps() -> None:
    assert INPUT_HANDLERS["float_0_1"]("2") == 1.0
    assert INPUT_HANDLERS["float_0_1"]("0.25") == 0.25
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["float_0_1"]("half")
