"""Choice of the user interface font and of its sizes."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Optional

log = logging.getLogger(__name__)

DEFAULT_FONTS = ("Liberation Sans", "DejaVu Sans", "Arial", "Helvetica", "")
"""Fonts tried in turn; the empty name stands for the system default font."""

MAX_LARGE_FONT_SCALE = 8.0
_MAX_GLYPH_SIZE = 72.0


def font_candidates(custom_font: str) -> list[str]:
    """Return the font names to try, the custom font first when given."""
    names = list(DEFAULT_FONTS)
    if custom_font:
        names.insert(0, custom_font)
    return names


def scaled_font_size(font_size: float, dpi: int) -> float:
    """Scale a font size by a DPI percentage."""
    return (font_size * dpi) / 100


def large_font_scale_factor(font_size: float) -> float:
    """Return how much larger the zoomed-text font may be.

    The normal, large and half-size fonts together must fit in the glyph
    atlas, so the large font is limited in size, and never more than eight
    times the normal one.
    """
    max_square = _MAX_GLYPH_SIZE**2 - font_size**2 - (font_size / 2.0) ** 2
    max_square = max(max_square, 1.0)
    return min(MAX_LARGE_FONT_SCALE, math.sqrt(max_square) / font_size)


def choose_font(
    custom_font: str, locate: Callable[[str], Optional[str]]
) -> Optional[tuple[str, str]]:
    """Return (name, path) of the first usable font, or None.

    locate maps a font name to its file path, or to None or "" when absent.
    Only TrueType (.ttf) files are usable.
    """
    for name in font_candidates(custom_font):
        path = locate(name)
        if not path:
            log.warning("Cannot load font %s: not found", name)
            continue
        if str(path).lower().endswith(".ttf"):
            log.info("Loaded font: %s", name)
            return name, str(path)
        log.warning(
            "Cannot load font %s: file name %s does not have .ttf extension", name, path
        )
    return None