import math

import pytest

from boardview.fonts import (
    choose_font,
    font_candidates,
    large_font_scale_factor,
    scaled_font_size,
)

DEFAULTS = ["Liberation Sans", "DejaVu Sans", "Arial", "Helvetica", ""]


def test_candidates_without_custom():
    assert font_candidates("") == DEFAULTS


def test_candidates_with_custom_first():
    assert font_candidates("Mono") == ["Mono"] + DEFAULTS


def test_scaled_font_size_identity_at_100():
    assert scaled_font_size(20, 100) == 20


def test_scaled_font_size_proportional():
    assert scaled_font_size(20, 200) == pytest.approx(2 * scaled_font_size(20, 100))


def test_small_font_capped_at_eight():
    assert large_font_scale_factor(1.0) == 8.0


@pytest.mark.parametrize("size", [15.0, 20.0, 30.0])
def test_medium_fonts_fill_the_atlas_budget(size):
    large = size * large_font_scale_factor(size)
    assert large**2 + size**2 + (size / 2) ** 2 == pytest.approx(72.0 * 72.0)


def test_huge_font_uses_minimum_budget():
    size = 100.0
    assert size * large_font_scale_factor(size) == pytest.approx(1.0)


def test_factor_never_exceeds_cap():
    for size in (0.5, 2.0, 10.0, 60.0):
        factor = large_font_scale_factor(size)
        assert 0 < factor <= 8.0
        assert not math.isnan(factor)


def test_choose_font_skips_missing_and_non_ttf():
    paths = {"Liberation Sans": "fonts/liberation.otf", "DejaVu Sans": "fonts/dejavu.ttf"}
    assert choose_font("Custom", paths.get) == ("DejaVu Sans", "fonts/dejavu.ttf")


def test_choose_font_prefers_custom():
    paths = {"Custom": "c.ttf", "Arial": "a.ttf"}
    assert choose_font("Custom", paths.get) == ("Custom", "c.ttf")


def test_choose_font_system_default():
    paths = {"": "default.TTF"}
    assert choose_font("", paths.get) == ("", "default.TTF")


def test_choose_font_none_found():
    assert choose_font("Custom", lambda name: None) is None