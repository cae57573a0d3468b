import pytest

from boardview import dpi as dpi_module
from boardview.config import (
    FZ_KEY_WORDS,
    Config,
    parse_bool,
    parse_float,
    parse_hex,
    parse_int,
    parse_str,
)


@pytest.fixture(autouse=True)
def unset_dpi():
    saved = dpi_module.get_dpi()
    dpi_module.set_dpi(0)
    yield
    dpi_module.set_dpi(saved)


def _key_text(words):
    return ", ".join(f"0x{w:08x}" for w in words)


def test_parse_helpers_fall_back_to_default():
    assert parse_str({}, "a", "dflt") == "dflt"
    assert parse_int({}, "a", 7) == 7
    assert parse_float({}, "a", 2.5) == 2.5
    assert parse_bool({}, "a", True) is True
    assert parse_hex({}, "a", 0xAB) == 0xAB


def test_parse_helpers_read_values():
    values = {"s": "text", "i": "42", "f": "1.5", "b": "false", "h": "0xff"}
    assert parse_str(values, "s", "") == "text"
    assert parse_int(values, "i", 0) == 42
    assert parse_float(values, "f", 0.0) == 1.5
    assert parse_bool(values, "b", True) is False
    assert parse_hex(values, "h", 0) == 0xFF


def test_unreadable_values_use_default():
    values = {"i": "abc", "b": "maybe", "h": "zz"}
    assert parse_int(values, "i", 9) == 9
    assert parse_bool(values, "b", True) is True
    assert parse_hex(values, "h", 5) == 5


def test_defaults_after_reading_empty_config():
    cfg = Config()
    cfg.read_from_config({})
    assert cfg.dpi == 100
    assert cfg.window_x == 1100
    assert cfg.pin_shape_circle is True


@pytest.mark.parametrize("given, expected", [("20", 50), ("900", 400)])
def test_dpi_is_clamped(given, expected):
    cfg = Config()
    cfg.read_from_config({"dpi": given})
    assert cfg.dpi == expected


def test_dpi_not_read_when_already_set_externally():
    dpi_module.set_dpi(150)
    cfg = Config()
    cfg.read_from_config({"dpi": "300"})
    assert cfg.dpi == Config().dpi


def test_no_pin_shape_falls_back_to_square():
    cfg = Config()
    cfg.read_from_config({"pinShapeSquare": "false", "pinShapeCircle": "false"})
    assert cfg.pin_shape_square is True


def test_slow_cpu_already_set_is_kept():
    cfg = Config(slow_cpu=True)
    cfg.read_from_config({"slowCPU": "false"})
    assert cfg.slow_cpu is True


def test_write_stores_values():
    cfg = Config(window_x=1234, show_fps=True, font_name="Mono")
    values = {}
    cfg.write_to_config(values)
    assert values["windowX"] == "1234"
    assert values["showFPS"] == "true"
    assert values["fontName"] == "Mono"


def test_write_then_read_round_trip():
    original = Config(
        window_x=1500,
        window_y=900,
        dpi=120,
        font_size=18.5,
        font_name="Sans",
        zoom_factor=0.75,
        pin_halo=True,
        pin_halo_diameter=1.5,
        show_pins=False,
        flip_mode=1,
        annotation_box_size=12,
    )
    original.set_fz_key(_key_text(range(100, 100 + FZ_KEY_WORDS)))
    values = {}
    original.write_to_config(values)
    restored = Config()
    restored.read_from_config(values)
    assert restored == original


def test_fz_key_is_decoded():
    words = [0x10000000 + i for i in range(FZ_KEY_WORDS)]
    cfg = Config()
    text = _key_text(words)
    cfg.set_fz_key(text)
    assert cfg.fz_key == words
    assert cfg.fz_key_str == text


def test_short_fz_key_is_stored_but_not_decoded():
    cfg = Config()
    cfg.set_fz_key("0x12345678")
    assert cfg.fz_key_str == "0x12345678"
    assert cfg.fz_key == [0] * FZ_KEY_WORDS


def test_none_fz_key_changes_nothing():
    cfg = Config(fz_key_str="kept")
    cfg.set_fz_key(None)
    assert cfg.fz_key_str == "kept"