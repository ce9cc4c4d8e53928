import pytest

from shadelab.core import config as c
from shadelab.core.generator import ShadeGenerator, generate_shade
from shadelab.core.models import Rgba, Hsv

TINT_KEYS = ["100", "90", "80", "70", "60", "50", "40", "30", "20", "10"]
SHADE_KEYS = ["100", "200", "300", "400", "500", "600", "700", "800", "900", "1000"]


@pytest.fixture
def generator() -> ShadeGenerator:
    return ShadeGenerator().hue("#336699")


def test_initial_state_is_black_with_default_table() -> None:
    gen = ShadeGenerator()
    assert gen.base_color == Rgba(0, 0, 0, 1)
    assert gen.current_shade == "100"
    assert list(gen.shades) == c.SHADE_KEYS
    assert {k: o.multiplier for k, o in gen.shades.items()} == c.DEFAULT_MULTIPLIERS
    assert gen.hex() == "#000000"


def test_default_multiplier_table_values() -> None:
    assert c.DEFAULT_MULTIPLIERS["10"] == 0.9
    assert c.DEFAULT_MULTIPLIERS["90"] == 0.1
    assert c.DEFAULT_MULTIPLIERS["100"] == 0
    assert c.DEFAULT_MULTIPLIERS["200"] == 0.9
    assert c.DEFAULT_MULTIPLIERS["1000"] == 0.1


def test_darkened_shade_to_hex(generator) -> None:
    assert generator.base_color == Rgba(51, 102, 153, 1)
    assert generator.shade("500").hex() == "#1F3D5C"


def test_white_tint_stays_white() -> None:
    assert ShadeGenerator().hue("#FFFFFF").shade("90").rgba() == "rgb(255, 255, 255)"


def test_hue_without_hash_is_accepted() -> None:
    assert ShadeGenerator().hue("336699").hex() == "#336699"


@pytest.mark.parametrize("bad", ["#FFF", "#33669980", "blue", "", None, "#GGGGGG"])
def test_hue_rejects_anything_but_six_digit_hex(bad) -> None:
    gen = ShadeGenerator()
    with pytest.raises(ValueError):
        gen.hue(bad)
    assert gen.base_color == Rgba(0, 0, 0, 1)


def test_identity_shade_is_base_color_for_any_multiplier(generator) -> None:
    table = {key: 0.37 for key in c.SHADE_KEYS}
    generator.config(table).hue("#336699")
    assert generator.generate_shade("100") == generator.base_color
    assert generate_shade(Rgba(9, 8, 7, 0.3), "100", 0.99) == Rgba(9, 8, 7, 0.3)


def test_shades_darken_monotonically(generator) -> None:
    values = [generator.shades[key].value for key in SHADE_KEYS]
    for channel in range(3):
        series = [v[channel] for v in values]
        assert series == sorted(series, reverse=True)


def test_tints_lighten_monotonically(generator) -> None:
    values = [generator.shades[key].value for key in TINT_KEYS]
    for channel in range(3):
        series = [v[channel] for v in values]
        assert series == sorted(series)


def test_generate_shade_formulas() -> None:
    base = Rgba(100, 100, 100, 0.5)
    assert generate_shade(base, "200", 0.5) == Rgba(50, 50, 50, 0.5)
    # 100 + 155 * 0.5 = 177.5 rounds up
    assert generate_shade(base, "50", 0.5) == Rgba(178, 178, 178, 0.5)
    assert generate_shade(base, 1000, 0.0) == Rgba(0, 0, 0, 0.5)
    assert generate_shade(base, 10, 1.0) == Rgba(255, 255, 255, 0.5)


def test_shades_map_hex(generator) -> None:
    palette = generator.shades_map("hex")
    assert list(palette) == c.SHADE_KEYS
    assert palette["100"] == "#336699"
    assert palette["500"] == "#1F3D5C"
    assert palette["1000"] == "#050A0F"
    assert palette["10"] == "#EBF0F5"


def test_shades_map_rgba_and_hsl(generator) -> None:
    assert generator.shades_map("rgba")["200"] == "rgb(46, 92, 138)"
    assert generator.shades_map("hsl")["100"] == "hsl(210deg, 50%, 40%)"


def test_shades_map_rejects_unknown_format(generator) -> None:
    with pytest.raises(ValueError):
        generator.shades_map("cmyk")


def test_config_does_not_regenerate_until_hue(generator) -> None:
    before = generator.shades["500"].value
    table = dict(c.DEFAULT_MULTIPLIERS)
    table["500"] = 0.0
    generator.config(table)
    assert generator.shades["500"].multiplier == 0.0
    assert generator.shades["500"].value == before

    generator.hue("#336699")
    assert generator.shades["500"].value == Rgba(0, 0, 0, 1)


def test_config_accepts_integer_keys() -> None:
    gen = ShadeGenerator({int(k): v for k, v in c.DEFAULT_MULTIPLIERS.items()})
    assert gen.shades["300"].multiplier == 0.8


def test_config_requires_every_key(generator) -> None:
    partial = dict(c.DEFAULT_MULTIPLIERS)
    del partial["700"]
    partial["10"] = 0.0
    with pytest.raises(ValueError, match="700"):
        generator.config(partial)
    assert generator.shades["10"].multiplier == 0.9


def test_opacity_only_touches_selected_shade(generator) -> None:
    generator.shade("200").opacity(0.5)
    assert generator.shades["200"].value.a == 0.5
    assert generator.shades["300"].value.a == 1
    assert generator.current_shade_value() == Rgba(46, 92, 138, 0.5)


def test_opacity_clamps_and_rounds(generator) -> None:
    assert generator.opacity(1.5).current_shade_value().a == 1
    assert generator.opacity(-3).current_shade_value().a == 0
    assert generator.opacity(0.456).current_shade_value().a == 0.46


def test_opacity_with_explicit_shade_keeps_cursor(generator) -> None:
    generator.opacity(0.25, shade="700")
    assert generator.current_shade == "100"
    assert generator.shade_value("700").a == 0.25
    assert generator.current_shade_value().a == 1


def test_hex_and_rgba_render_alpha(generator) -> None:
    generator.shade("500").opacity(0.5)
    assert generator.hex() == "#1F3D5C80"
    assert generator.rgba() == "rgba(31, 61, 92, 0.5)"


def test_hue_resets_opacity_overrides(generator) -> None:
    generator.shade("500").opacity(0.5)
    generator.hue("#336699")
    assert generator.current_shade_value().a == 1


def test_readers_follow_cursor_or_explicit_shade(generator) -> None:
    assert generator.hsl() == "hsl(210deg, 50%, 40%)"
    assert generator.hsv() == Hsv(210, 67, 60)
    assert generator.hex(shade="500") == "#1F3D5C"
    assert generator.current_shade == "100"


def test_readers_accept_color_override(generator) -> None:
    assert generator.hex(Rgba(255, 0, 0, 1)) == "#FF0000"
    assert generator.rgba(Rgba(255, 0, 0)) == "rgb(255, 0, 0)"
    assert generator.hsl(Rgba(255, 0, 0)) == "hsl(0deg, 100%, 50%)"


def test_shade_validates_key(generator) -> None:
    assert generator.shade(500).current_shade == "500"
    with pytest.raises(ValueError):
        generator.shade("150")


def test_instances_are_independent() -> None:
    a = ShadeGenerator().hue("#336699")
    b = ShadeGenerator().hue("#FF0000")
    a.shade("200").opacity(0.1)
    assert b.shades["200"].value.a == 1
    assert a.base_color != b.base_color
