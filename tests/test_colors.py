import pytest

from boardview.colors import ColorScheme, byte4swap


def test_byte4swap_reverses_bytes():
    assert byte4swap(0x11223344) == 0x44332211


@pytest.mark.parametrize("value", [0, 0xFFFFFFFF, 0x000000FF, 0x2A2A2AFF, 0x12345678])
def test_byte4swap_is_an_involution(value):
    assert byte4swap(byte4swap(value)) == value


def test_byte4swap_keeps_32_bits():
    assert byte4swap(0x1_000000FF) == byte4swap(0x000000FF)


def test_defaults_from_header():
    scheme = ColorScheme()
    assert scheme.board_fill_color == 0xFFDDDDDD
    assert scheme.pin_halo_color == 0x8822FF22
    assert scheme.or_mask_pins == 0


def test_dark_theme_board_colors():
    scheme = ColorScheme()
    scheme.theme_set_style("dark")
    assert scheme.background_color == byte4swap(0x000000FF)
    assert scheme.board_outline_color == byte4swap(0xCC2222FF)
    assert scheme.pin_ground_color == byte4swap(0x0300C3FF)
    assert scheme.pin_net_web_os_color == byte4swap(0x8888FF88)


def test_dark_theme_style_colors():
    scheme = ColorScheme()
    scheme.theme_set_style("dark")
    assert scheme.style_colors["Text"] == (0.90, 0.90, 0.90, 1.00)
    assert scheme.style_colors["WindowBg"] == (0.00, 0.00, 0.00, 0.70)
    assert scheme.window_border_size == 0.0


def test_light_theme_board_colors():
    scheme = ColorScheme()
    scheme.theme_set_style("light")
    assert scheme.background_color == byte4swap(0xFFFFFFFF)
    assert scheme.part_fill_color == byte4swap(0xFFFFFF77)
    assert scheme.pin_halo_color == byte4swap(0x22FF2288)
    assert scheme.style_colors["Text"] == (0.00, 0.00, 0.00, 1.00)


def test_unknown_theme_falls_back_to_light():
    light = ColorScheme()
    light.theme_set_style("light")
    other = ColorScheme()
    other.theme_set_style("solarized")
    assert other == light


def test_switching_themes_replaces_everything():
    scheme = ColorScheme()
    scheme.theme_set_style("dark")
    scheme.theme_set_style("light")
    fresh = ColorScheme()
    fresh.theme_set_style("light")
    assert scheme == fresh