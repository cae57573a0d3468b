"""Loading and saving a colour scheme through a key/value mapping.

Colours are stored in the configuration in human-readable RGBA order and
kept in the scheme in ABGR order, so every value is byte-swapped on the way
in and out.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping

from .colors import ColorScheme, byte4swap
from .config import parse_hex, parse_str

_ATTRIBUTES: dict[str, str] = {
    "backgroundColor": "background_color",
    "boardFillColor": "board_fill_color",
    "boardOutlineColor": "board_outline_color",
    "partHullColor": "part_hull_color",
    "partOutlineColor": "part_outline_color",
    "partFillColor": "part_fill_color",
    "partTextColor": "part_text_color",
    "partHighlightedColor": "part_highlighted_color",
    "partHighlightedFillColor": "part_highlighted_fill_color",
    "partHighlightedTextColor": "part_highlighted_text_color",
    "partHighlightedTextBackgroundColor": "part_highlighted_text_background_color",
    "pinDefaultColor": "pin_default_color",
    "pinDefaultTextColor": "pin_default_text_color",
    "pinTextBackgroundColor": "pin_text_background_color",
    "pinGroundColor": "pin_ground_color",
    "pinNotConnectedColor": "pin_not_connected_color",
    "pinTestPadColor": "pin_test_pad_color",
    "pinTestPadFillColor": "pin_test_pad_fill_color",
    "pinA1PadColor": "pin_a1_pad_color",
    "pinSelectedColor": "pin_selected_color",
    "pinSelectedFillColor": "pin_selected_fill_color",
    "pinSelectedTextColor": "pin_selected_text_color",
    "pinSameNetColor": "pin_same_net_color",
    "pinSameNetFillColor": "pin_same_net_fill_color",
    "pinSameNetTextColor": "pin_same_net_text_color",
    "pinHaloColor": "pin_halo_color",
    "pinNetWebColor": "pin_net_web_color",
    "pinNetWebOSColor": "pin_net_web_os_color",
    "annotationPartAliasColor": "annotation_part_alias_color",
    "annotationBoxColor": "annotation_box_color",
    "annotationStalkColor": "annotation_stalk_color",
    "annotationPopupBackgroundColor": "annotation_popup_background_color",
    "annotationPopupTextColor": "annotation_popup_text_color",
    "selectedMaskPins": "selected_mask_pins",
    "selectedMaskParts": "selected_mask_parts",
    "selectedMaskOutline": "selected_mask_outline",
    "orMaskPins": "or_mask_pins",
    "orMaskParts": "or_mask_parts",
    "orMaskOutline": "or_mask_outline",
}

# The net-web colour for the other side is written but never read back.
READ_KEYS: tuple[str, ...] = (
    "backgroundColor",
    "boardFillColor",
    "partHullColor",
    "partOutlineColor",
    "partFillColor",
    "partTextColor",
    "partHighlightedColor",
    "partHighlightedFillColor",
    "partHighlightedTextColor",
    "partHighlightedTextBackgroundColor",
    "boardOutlineColor",
    "pinDefaultColor",
    "pinDefaultTextColor",
    "pinTextBackgroundColor",
    "pinGroundColor",
    "pinNotConnectedColor",
    "pinTestPadColor",
    "pinTestPadFillColor",
    "pinA1PadColor",
    "pinSelectedTextColor",
    "pinSelectedFillColor",
    "pinSelectedColor",
    "pinSameNetTextColor",
    "pinSameNetFillColor",
    "pinSameNetColor",
    "pinHaloColor",
    "pinNetWebColor",
    "annotationPartAliasColor",
    "annotationBoxColor",
    "annotationStalkColor",
    "annotationPopupBackgroundColor",
    "annotationPopupTextColor",
    "selectedMaskPins",
    "selectedMaskParts",
    "selectedMaskOutline",
    "orMaskPins",
    "orMaskParts",
    "orMaskOutline",
)

# The part alias colour is read but never written.
WRITE_KEYS: tuple[str, ...] = (
    "backgroundColor",
    "boardFillColor",
    "boardOutlineColor",
    "partOutlineColor",
    "partHullColor",
    "partFillColor",
    "partTextColor",
    "partHighlightedColor",
    "partHighlightedFillColor",
    "partHighlightedTextColor",
    "partHighlightedTextBackgroundColor",
    "pinDefaultColor",
    "pinDefaultTextColor",
    "pinTextBackgroundColor",
    "pinGroundColor",
    "pinNotConnectedColor",
    "pinTestPadColor",
    "pinTestPadFillColor",
    "pinA1PadColor",
    "pinSelectedColor",
    "pinSelectedTextColor",
    "pinSelectedFillColor",
    "pinSameNetColor",
    "pinSameNetTextColor",
    "pinSameNetFillColor",
    "pinHaloColor",
    "pinNetWebColor",
    "pinNetWebOSColor",
    "annotationPopupTextColor",
    "annotationPopupBackgroundColor",
    "annotationBoxColor",
    "annotationStalkColor",
    "selectedMaskOutline",
    "selectedMaskParts",
    "selectedMaskPins",
    "orMaskPins",
    "orMaskParts",
    "orMaskOutline",
)


def read_colors_from_config(scheme: ColorScheme, values: Mapping[str, str]) -> None:
    """Apply the configured base theme, then any per-colour overrides."""
    scheme.theme_set_style(parse_str(values, "colorTheme", "light") or "")
    for key in READ_KEYS:
        attribute = _ATTRIBUTES[key]
        current = getattr(scheme, attribute)
        setattr(scheme, attribute, byte4swap(parse_hex(values, key, byte4swap(current))))


def write_colors_to_config(scheme: ColorScheme, values: MutableMapping[str, str]) -> None:
    """Store the scheme's colours into values as RGBA hexadecimal strings."""
    for key in WRITE_KEYS:
        values[key] = f"0x{byte4swap(getattr(scheme, _ATTRIBUTES[key])):08x}"