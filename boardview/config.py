"""Program settings and helpers to read them from a key/value mapping."""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field

from .dpi import get_dpi

FZ_KEY_WORDS = 44

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_HEX_AT_RE = re.compile(r"0[xX][0-9a-fA-F]+|[0-9a-fA-F]+")
_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}
_LLONG_MAX = (1 << 63) - 1


def parse_str(values: Mapping[str, str], key: str, default: str | None) -> str | None:
    """Return the string stored under key, or default when absent."""
    value = values.get(key)
    return default if value is None else str(value)


def parse_int(values: Mapping[str, str], key: str, default: int) -> int:
    """Return the leading integer stored under key, or default."""
    value = values.get(key)
    if value is None:
        return default
    match = _INT_RE.match(str(value))
    return int(match.group(1)) if match else default


def parse_float(values: Mapping[str, str], key: str, default: float) -> float:
    """Return the leading number stored under key as a float, or default."""
    value = values.get(key)
    if value is None:
        return float(default)
    match = _FLOAT_RE.match(str(value))
    return float(match.group(1)) if match else float(default)


def parse_bool(values: Mapping[str, str], key: str, default: bool) -> bool:
    """Return the boolean stored under key, or default when absent or unreadable."""
    value = values.get(key)
    if value is None:
        return default
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return default


def parse_hex(values: Mapping[str, str], key: str, default: int) -> int:
    """Return the hexadecimal number stored under key, or default."""
    value = values.get(key)
    if value is None:
        return default
    try:
        return int(str(value).strip(), 16)
    except ValueError:
        return default


def _write_int(values: MutableMapping[str, str], key: str, value: int) -> None:
    values[key] = str(int(value))


def _write_float(values: MutableMapping[str, str], key: str, value: float) -> None:
    values[key] = repr(float(value))


def _write_bool(values: MutableMapping[str, str], key: str, value: bool) -> None:
    values[key] = "true" if value else "false"


def _write_str(values: MutableMapping[str, str], key: str, value: str) -> None:
    values[key] = value


def _parse_hex_prefix(text: str, pos: int) -> tuple[int, int]:
    """Parse a hex number at pos the way strtoll(base 16) does; return (value, end)."""
    match = _HEX_AT_RE.match(text, pos)
    if not match:
        return 0, pos
    token = match.group(0)
    digits = token[2:] if token[:2].lower() == "0x" else token
    return min(int(digits, 16), _LLONG_MAX), match.end()


def _on_windows() -> bool:
    return sys.platform.startswith("win")


@dataclass
class Config:
    """Program-wide preferences."""

    window_x: int = 1200
    window_y: int = 700
    dpi: int = 100
    font_size: float = 20.0
    font_name: str = ""
    zoom_factor: float = 0.5
    part_zoom_scale_out_factor: float = 3.0
    zoom_modifier: int = 5
    pan_factor: int = 30
    pan_modifier: int = 5
    flip_mode: int = 0

    annotation_box_offset: int = 8
    annotation_box_size: int = 20

    pin_a1_threshold: int = 3
    net_web_thickness: int = 2

    pin_size_threshold_low: float = 0.0
    pin_shape_square: bool = False
    pin_shape_circle: bool = True
    pin_select_masks: bool = True
    slow_cpu: bool = False
    show_fps: bool = False
    show_net_web: bool = True
    show_info_panel: bool = True
    info_panel_width: int = 300
    show_pins: bool = True
    show_annotations: bool = True
    show_background_image: bool = True
    pin_halo: bool = False
    pin_halo_diameter: float = 1.1
    pin_halo_thickness: float = 4.0
    fill_parts: bool = True
    board_fill: bool = True
    show_part_name: bool = True
    show_pin_name: bool = True
    board_fill_spacing: int = 3
    show_position: bool = True

    info_panel_center_zoom_nets: bool = True
    info_panel_select_parts_on_net: bool = True
    center_zoom_search_results: bool = True

    pdf_software_path: str = ""

    fz_key_str: str = ""
    fz_key: list[int] = field(default_factory=lambda: [0] * FZ_KEY_WORDS)

    def set_fz_key(self, keytext: str | None) -> None:
        """Store the FZ decoding key text and decode its 32-bit hex words.

        The words are only decoded when the text is longer than 440 characters,
        which is the shortest a full 44-word key can be.
        """
        if keytext is None:
            return
        self.fz_key_str = keytext
        limit = len(keytext)
        if limit <= 440:
            return
        pos = 0
        index = 0
        while pos < limit and index < FZ_KEY_WORDS:
            found = keytext.find("0", pos)
            pos = limit if found < 0 else found
            value, pos = _parse_hex_prefix(keytext, pos)
            self.fz_key[index] = value & 0xFFFFFFFF
            index += 1

    def read_from_config(self, values: Mapping[str, str]) -> None:
        """Load settings from values, falling back to built-in defaults."""
        if get_dpi() == 0:
            self.dpi = parse_int(values, "dpi", 100)
        self.dpi = max(50, min(400, self.dpi))

        self.window_x = parse_int(values, "windowX", 1100)
        self.window_y = parse_int(values, "windowY", 700)

        self.font_size = parse_float(values, "fontSize", 20)
        self.font_name = parse_str(values, "fontName", "")
        self.pin_size_threshold_low = parse_float(values, "pinSizeThresholdLow", 0)
        self.pin_shape_square = parse_bool(values, "pinShapeSquare", False)
        self.pin_shape_circle = parse_bool(values, "pinShapeCircle", True)
        if not self.pin_shape_circle and not self.pin_shape_square:
            self.pin_shape_square = True

        self.pin_halo = parse_bool(values, "pinHalo", True)
        self.pin_halo_diameter = parse_float(values, "pinHaloDiameter", 1.25)
        self.pin_halo_thickness = parse_float(values, "pinHaloThickness", 2.0)
        self.pin_select_masks = parse_bool(values, "pinSelectMasks", True)

        self.pin_a1_threshold = parse_int(values, "pinA1threshold", 3)

        self.show_fps = parse_bool(values, "showFPS", False)
        self.show_info_panel = parse_bool(values, "showInfoPanel", True)
        self.info_panel_select_parts_on_net = parse_bool(values, "infoPanelSelectPartsOnNet", True)
        self.info_panel_center_zoom_nets = parse_bool(values, "infoPanelCenterZoomNets", True)
        self.part_zoom_scale_out_factor = parse_float(values, "partZoomScaleOutFactor", 3.0)

        self.info_panel_width = parse_int(values, "infoPanelWidth", 350)
        self.show_pins = parse_bool(values, "showPins", True)
        self.show_position = parse_bool(values, "showPosition", True)
        self.show_net_web = parse_bool(values, "showNetWeb", True)
        self.show_annotations = parse_bool(values, "showAnnotations", True)
        self.show_background_image = parse_bool(values, "showBackgroundImage", True)
        self.fill_parts = parse_bool(values, "fillParts", True)
        self.show_part_name = parse_bool(values, "showPartName", True)
        self.show_pin_name = parse_bool(values, "showPinName", True)
        self.center_zoom_search_results = parse_bool(values, "centerZoomSearchResults", True)
        self.flip_mode = parse_int(values, "flipMode", 0)

        self.board_fill = parse_bool(values, "boardFill", True)
        self.board_fill_spacing = parse_int(values, "boardFillSpacing", 3)

        self.zoom_factor = parse_float(values, "zoomFactor", 0.5)
        self.zoom_modifier = parse_int(values, "zoomModifier", 5)
        self.pan_factor = parse_int(values, "panFactor", 30)
        self.pan_modifier = parse_int(values, "panModifier", 5)
        self.annotation_box_size = parse_int(values, "annotationBoxSize", 15)
        self.annotation_box_offset = parse_int(values, "annotationBoxOffset", 8)
        self.net_web_thickness = parse_int(values, "netWebThickness", 2)

        if _on_windows():
            self.pdf_software_path = parse_str(values, "pdfSoftwarePath", "SumatraPDF.exe")

        # A slow-CPU flag already set (e.g. from the command line) is kept.
        self.slow_cpu = self.slow_cpu or parse_bool(values, "slowCPU", False)

        self.set_fz_key(parse_str(values, "FZKey", ""))

    def write_to_config(self, values: MutableMapping[str, str]) -> None:
        """Store every setting into values."""
        _write_int(values, "dpi", self.dpi)
        _write_int(values, "windowX", self.window_x)
        _write_int(values, "windowY", self.window_y)

        _write_float(values, "fontSize", self.font_size)
        _write_str(values, "fontName", self.font_name)
        _write_float(values, "pinSizeThresholdLow", self.pin_size_threshold_low)
        _write_bool(values, "pinShapeSquare", self.pin_shape_square)
        _write_bool(values, "pinShapeCircle", self.pin_shape_circle)

        _write_bool(values, "pinHalo", self.pin_halo)
        _write_float(values, "pinHaloDiameter", self.pin_halo_diameter)
        _write_float(values, "pinHaloThickness", self.pin_halo_thickness)
        _write_bool(values, "pinSelectMasks", self.pin_select_masks)

        _write_int(values, "pinA1threshold", self.pin_a1_threshold)

        _write_bool(values, "showFPS", self.show_fps)
        _write_bool(values, "showInfoPanel", self.show_info_panel)
        _write_bool(values, "infoPanelSelectPartsOnNet", self.info_panel_select_parts_on_net)
        _write_bool(values, "infoPanelCenterZoomNets", self.info_panel_center_zoom_nets)
        _write_float(values, "partZoomScaleOutFactor", self.part_zoom_scale_out_factor)

        _write_int(values, "infoPanelWidth", self.info_panel_width)
        _write_bool(values, "showPins", self.show_pins)
        _write_bool(values, "showPosition", self.show_position)
        _write_bool(values, "showNetWeb", self.show_net_web)
        _write_bool(values, "showAnnotations", self.show_annotations)
        _write_bool(values, "showBackgroundImage", self.show_background_image)
        _write_bool(values, "fillParts", self.fill_parts)
        _write_bool(values, "showPartName", self.show_part_name)
        _write_bool(values, "showPinName", self.show_pin_name)
        _write_bool(values, "centerZoomSearchResults", self.center_zoom_search_results)
        _write_int(values, "flipMode", self.flip_mode)

        _write_bool(values, "boardFill", self.board_fill)
        _write_int(values, "boardFillSpacing", self.board_fill_spacing)

        _write_float(values, "zoomFactor", self.zoom_factor)
        _write_int(values, "zoomModifier", self.zoom_modifier)
        _write_int(values, "panFactor", self.pan_factor)
        _write_int(values, "panModifier", self.pan_modifier)
        _write_int(values, "annotationBoxSize", self.annotation_box_size)
        _write_int(values, "annotationBoxOffset", self.annotation_box_offset)
        _write_int(values, "netWebThickness", self.net_web_thickness)

        if _on_windows():
            _write_str(values, "pdfSoftwarePath", self.pdf_software_path)

        _write_bool(values, "slowCPU", self.slow_cpu)
        _write_str(values, "FZKey", self.fz_key_str)