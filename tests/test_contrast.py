import pytest

from shadelab.core.models import Rgba
from shadelab.core.contrast import contrast_ratio, get_wcag_levels
from shadelab.core.luminance import get_luminance

BLACK = Rgba(0, 0, 0, 1)
WHITE = Rgba(255, 255, 255, 1)


def test_luminance_extremes() -> None:
    assert get_luminance(BLACK) == 0.0
    assert get_luminance(WHITE) == pytest.approx(1.0)


def test_black_on_white_is_maximum_contrast() -> None:
    assert contrast_ratio(BLACK, WHITE) == 21.0


def test_same_color_has_no_contrast() -> None:
    assert contrast_ratio(Rgba(51, 102, 153), Rgba(51, 102, 153)) == 1.0


@pytest.mark.parametrize(
    "a, b",
    [
        (Rgba(51, 102, 153), WHITE),
        (Rgba(255, 0, 0), Rgba(0, 0, 255)),
        (Rgba(119, 119, 119), BLACK),
    ],
)
def test_contrast_ratio_is_symmetric(a, b) -> None:
    assert contrast_ratio(a, b) == contrast_ratio(b, a)


def test_grey_on_white_rounds_to_two_decimals() -> None:
    assert contrast_ratio(Rgba(119, 119, 119), WHITE) == 4.48


def test_alpha_does_not_affect_contrast() -> None:
    assert contrast_ratio(Rgba(0, 0, 0, 0.2), WHITE) == 21.0


def test_wcag_levels() -> None:
    assert get_wcag_levels(21.0) == {"AA-Large": "Pass", "AA": "Pass", "AAA-Large": "Pass", "AAA": "Pass"}
    assert get_wcag_levels(4.48) == {"AA-Large": "Pass", "AA": "Fail", "AAA-Large": "Fail", "AAA": "Fail"}
    assert get_wcag_levels(1.0)["AA-Large"] == "Fail"
