"""Colour scheme of the board view, with its light and dark base themes."""

from __future__ import annotations

from dataclasses import dataclass, field

RGBA = tuple[float, float, float, float]


def byte4swap(x: int) -> int:
    """Reverse the byte order of a 32-bit value (RGBA <-> ABGR)."""
    x &= 0xFFFFFFFF
    return (
        ((x & 0x000000FF) << 24)
        | ((x & 0x0000FF00) << 8)
        | ((x & 0x00FF0000) >> 8)
        | ((x & 0xFF000000) >> 24)
    )


# Board colours per theme, written as RGBA and stored swapped (ABGR).
_DARK_COLORS: dict[str, int] = {
    "background_color": 0x000000FF,
    "board_fill_color": 0x2A2A2AFF,
    "board_outline_color": 0xCC2222FF,
    "part_hull_color": 0x80808080,
    "part_outline_color": 0x999999FF,
    "part_fill_color": 0x111111FF,
    "part_text_color": 0x80808080,
    "part_highlighted_color": 0xFFFFFFFF,
    "part_highlighted_fill_color": 0x333333FF,
    "part_highlighted_text_color": 0x000000FF,
    "part_highlighted_text_background_color": 0xCCCC22FF,
    "pin_default_color": 0x4040FFFF,
    "pin_default_text_color": 0xCCCCCCFF,
    "pin_text_background_color": 0xFFFFFF80,
    "pin_ground_color": 0x0300C3FF,
    "pin_not_connected_color": 0xAAAAAAFF,
    "pin_test_pad_color": 0x888888FF,
    "pin_test_pad_fill_color": 0x6C5B1FFF,
    "pin_a1_pad_color": 0xDD0000FF,
    "pin_selected_color": 0x00FF00FF,
    "pin_selected_fill_color": 0x8888FFFF,
    "pin_selected_text_color": 0xFFFFFFFF,
    "pin_same_net_color": 0x0000FFFF,
    "pin_same_net_fill_color": 0x9999FFFF,
    "pin_same_net_text_color": 0x111111FF,
    "pin_halo_color": 0xFFFFFF88,
    "pin_net_web_color": 0xFF888888,
    "pin_net_web_os_color": 0x8888FF88,
    "annotation_part_alias_color": 0xFFFF00FF,
    "annotation_box_color": 0xCCCC88FF,
    "annotation_stalk_color": 0xAAAAAAFF,
    "annotation_popup_background_color": 0x888888FF,
    "annotation_popup_text_color": 0xFFFFFFFF,
    "selected_mask_pins": 0xFFFFFFFF,
    "selected_mask_parts": 0xFFFFFFFF,
    "selected_mask_outline": 0xFFFFFFFF,
    "or_mask_pins": 0x0,
    "or_mask_parts": 0x0,
    "or_mask_outline": 0x0,
}

_LIGHT_COLORS: dict[str, int] = {
    "background_color": 0xFFFFFFFF,
    "board_fill_color": 0xDDDDDDFF,
    "part_hull_color": 0x80808080,
    "part_outline_color": 0x444444FF,
    "part_fill_color": 0xFFFFFF77,
    "part_text_color": 0x80808080,
    "part_highlighted_color": 0xFF0000FF,
    "part_highlighted_fill_color": 0xF0F0F0FF,
    "part_highlighted_text_color": 0xFF3030FF,
    "part_highlighted_text_background_color": 0xFFFF00FF,
    "board_outline_color": 0x444444FF,
    "pin_default_color": 0x22AA33FF,
    "pin_default_text_color": 0x666688FF,
    "pin_text_background_color": 0xFFFFFF80,
    "pin_ground_color": 0x2222AAFF,
    "pin_not_connected_color": 0xAAAAAAFF,
    "pin_test_pad_color": 0x888888FF,
    "pin_test_pad_fill_color": 0xD6C68DFF,
    "pin_a1_pad_color": 0xDD0000FF,
    "pin_selected_color": 0x00000000,
    "pin_selected_fill_color": 0x8888FFFF,
    "pin_selected_text_color": 0xFFFFFFFF,
    "pin_same_net_color": 0x888888FF,
    "pin_same_net_fill_color": 0x9999FFFF,
    "pin_same_net_text_color": 0x111111FF,
    "pin_halo_color": 0x22FF2288,
    "pin_net_web_color": 0xFF0000AA,
    "pin_net_web_os_color": 0x0000FF33,
    "annotation_part_alias_color": 0xFFFF00FF,
    "annotation_box_color": 0xFF0000AA,
    "annotation_stalk_color": 0x000000FF,
    "annotation_popup_background_color": 0xEEEEEEFF,
    "annotation_popup_text_color": 0x000000FF,
    "selected_mask_pins": 0xFFFFFFFF,
    "selected_mask_parts": 0xFFFFFFFF,
    "selected_mask_outline": 0xFFFFFFFF,
    "or_mask_pins": 0x0,
    "or_mask_parts": 0x0,
    "or_mask_outline": 0x0,
}

# Widget style colours per theme, keyed by widget element name.
_DARK_STYLE: dict[str, RGBA] = {
    "Text": (0.90, 0.90, 0.90, 1.00),
    "TextDisabled": (0.60, 0.60, 0.60, 1.00),
    "WindowBg": (0.00, 0.00, 0.00, 0.70),
    "ChildBg": (0.00, 0.00, 0.00, 0.00),
    "PopupBg": (0.05, 0.05, 0.10, 0.90),
    "Border": (0.70, 0.70, 0.70, 0.65),
    "BorderShadow": (0.00, 0.00, 0.00, 0.00),
    "FrameBg": (0.30, 0.30, 0.30, 1.00),
    "FrameBgHovered": (0.90, 0.80, 0.80, 0.40),
    "FrameBgActive": (0.90, 0.65, 0.65, 0.45),
    "TitleBg": (0.27, 0.27, 0.54, 0.83),
    "TitleBgCollapsed": (0.40, 0.40, 0.80, 0.20),
    "TitleBgActive": (0.32, 0.32, 0.63, 0.87),
    "MenuBarBg": (0.40, 0.40, 0.55, 0.80),
    "ScrollbarBg": (0.20, 0.25, 0.30, 0.60),
    "ScrollbarGrab": (0.40, 0.40, 0.80, 0.30),
    "ScrollbarGrabHovered": (0.40, 0.40, 0.80, 0.40),
    "ScrollbarGrabActive": (0.80, 0.50, 0.50, 0.40),
    "CheckMark": (0.90, 0.90, 0.90, 0.50),
    "SliderGrab": (1.00, 1.00, 1.00, 0.30),
    "SliderGrabActive": (0.80, 0.50, 0.50, 1.00),
    "Button": (0.67, 0.40, 0.40, 0.60),
    "ButtonHovered": (0.67, 0.40, 0.40, 1.00),
    "ButtonActive": (0.80, 0.50, 0.50, 1.00),
    "Header": (0.40, 0.40, 0.90, 0.45),
    "HeaderHovered": (0.45, 0.45, 0.90, 0.80),
    "HeaderActive": (0.53, 0.53, 0.87, 0.80),
    "Separator": (0.50, 0.50, 0.50, 1.00),
    "SeparatorHovered": (0.70, 0.60, 0.60, 1.00),
    "SeparatorActive": (0.90, 0.70, 0.70, 1.00),
    "ResizeGrip": (1.00, 1.00, 1.00, 0.30),
    "ResizeGripHovered": (1.00, 1.00, 1.00, 0.60),
    "ResizeGripActive": (1.00, 1.00, 1.00, 0.90),
    "PlotLines": (1.00, 1.00, 1.00, 1.00),
    "PlotLinesHovered": (0.90, 0.70, 0.00, 1.00),
    "PlotHistogram": (0.90, 0.70, 0.00, 1.00),
    "PlotHistogramHovered": (1.00, 0.60, 0.00, 1.00),
    "TextSelectedBg": (0.00, 0.00, 1.00, 0.35),
    "ModalWindowDimBg": (0.20, 0.20, 0.20, 0.35),
    "TableRowBg": (0.05, 0.05, 0.10, 0.90),
    "TableRowBgAlt": (0.10, 0.10, 0.20, 0.90),
}

_LIGHT_STYLE: dict[str, RGBA] = {
    "Text": (0.00, 0.00, 0.00, 1.00),
    "TextDisabled": (0.60, 0.60, 0.60, 1.00),
    "PopupBg": (0.94, 0.94, 0.94, 1.00),
    "WindowBg": (0.94, 0.94, 0.94, 1.00),
    "ChildBg": (0.00, 0.00, 0.00, 0.00),
    "Border": (0.00, 0.00, 0.00, 0.39),
    "BorderShadow": (1.00, 1.00, 1.00, 0.10),
    "FrameBg": (1.00, 1.00, 1.00, 1.00),
    "FrameBgHovered": (0.26, 0.59, 0.98, 0.40),
    "FrameBgActive": (0.26, 0.59, 0.98, 0.67),
    "TitleBg": (0.96, 0.96, 0.96, 1.00),
    "TitleBgCollapsed": (1.00, 1.00, 1.00, 0.51),
    "TitleBgActive": (0.82, 0.82, 0.82, 1.00),
    "MenuBarBg": (0.82, 0.82, 0.82, 1.00),
    "ScrollbarBg": (0.98, 0.98, 0.98, 0.53),
    "ScrollbarGrab": (0.69, 0.69, 0.69, 0.80),
    "ScrollbarGrabHovered": (0.49, 0.49, 0.49, 0.80),
    "ScrollbarGrabActive": (0.49, 0.49, 0.49, 1.00),
    "CheckMark": (0.26, 0.59, 0.98, 1.00),
    "SliderGrab": (0.26, 0.59, 0.98, 0.78),
    "SliderGrabActive": (0.26, 0.59, 0.98, 1.00),
    "Button": (0.26, 0.59, 0.98, 0.40),
    "ButtonHovered": (0.26, 0.59, 0.98, 1.00),
    "ButtonActive": (0.06, 0.53, 0.98, 1.00),
    "Header": (0.26, 0.59, 0.98, 0.31),
    "HeaderHovered": (0.26, 0.59, 0.98, 0.80),
    "HeaderActive": (0.26, 0.59, 0.98, 1.00),
    "Separator": (0.39, 0.39, 0.39, 1.00),
    "SeparatorHovered": (0.26, 0.59, 0.98, 0.78),
    "SeparatorActive": (0.26, 0.59, 0.98, 1.00),
    "ResizeGrip": (1.00, 1.00, 1.00, 0.00),
    "ResizeGripHovered": (0.26, 0.59, 0.98, 0.67),
    "ResizeGripActive": (0.26, 0.59, 0.98, 0.95),
    "PlotLines": (0.39, 0.39, 0.39, 1.00),
    "PlotLinesHovered": (1.00, 0.43, 0.35, 1.00),
    "PlotHistogram": (0.90, 0.70, 0.00, 1.00),
    "PlotHistogramHovered": (1.00, 0.60, 0.00, 1.00),
    "TextSelectedBg": (0.26, 0.59, 0.98, 0.35),
    "ModalWindowDimBg": (0.20, 0.20, 0.20, 0.35),
    "TableRowBg": (0.94, 0.94, 0.94, 1.00),
    "TableRowBgAlt": (0.82, 0.82, 0.82, 1.00),
}


@dataclass
class ColorScheme:
    """Board colours, packed as 32-bit ABGR values, plus widget style colours."""

    background_color: int = 0xFFFFFFFF
    board_fill_color: int = 0xFFDDDDDD
    part_outline_color: int = 0xFF444444
    part_hull_color: int = 0x80808080
    part_fill_color: int = 0xFFFFFFFF
    part_text_color: int = 0x80808080
    part_highlighted_color: int = 0xFF0000EE
    part_highlighted_fill_color: int = 0xF4F0F0FF
    part_highlighted_text_color: int = 0xFF808000
    part_highlighted_text_background_color: int = 0xFF00EEEE
    board_outline_color: int = 0xFF00FFFF

    pin_default_color: int = 0xFF0000FF
    pin_default_text_color: int = 0xFFCC0000
    pin_text_background_color: int = 0xFFFFFF80
    pin_ground_color: int = 0xFF0000BB
    pin_not_connected_color: int = 0xFFFF0000
    pin_test_pad_color: int = 0xFF888888
    pin_test_pad_fill_color: int = 0xFF8DC6D6
    pin_a1_pad_color: int = 0xFFDD0000

    pin_selected_color: int = 0x00000000
    pin_selected_fill_color: int = 0xFFFF8888
    pin_selected_text_color: int = 0xFFFFFFFF

    pin_same_net_color: int = 0xFFAA4040
    pin_same_net_fill_color: int = 0xFFFF9999
    pin_same_net_text_color: int = 0xFF111111

    pin_halo_color: int = 0x8822FF22
    pin_net_web_color: int = 0xFF0000FF
    pin_net_web_os_color: int = 0x0000FF22

    annotation_part_alias_color: int = 0xCC00FFFF
    annotation_box_color: int = 0xAA0000FF
    annotation_stalk_color: int = 0xFF000000
    annotation_popup_background_color: int = 0xFFEEEEEE
    annotation_popup_text_color: int = 0xFF000000

    selected_mask_pins: int = 0xFFFFFFFF
    selected_mask_parts: int = 0xFFFFFFFF
    selected_mask_outline: int = 0xFFFFFFFF

    or_mask_pins: int = 0x00000000
    or_mask_parts: int = 0x00000000
    or_mask_outline: int = 0x00000000

    window_border_size: float = 1.0
    style_colors: dict[str, RGBA] = field(default_factory=dict)

    def theme_set_style(self, name: str) -> None:
        """Apply the "dark" theme, or the light theme for any other name."""
        dark = name == "dark"
        self.window_border_size = 0.0
        self.style_colors = dict(_DARK_STYLE if dark else _LIGHT_STYLE)
        for attribute, rgba in (_DARK_COLORS if dark else _LIGHT_COLORS).items():
            setattr(self, attribute, byte4swap(rgba))