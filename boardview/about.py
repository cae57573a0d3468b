"""Text helpers for the About dialog."""

from __future__ import annotations

import re

_LONE_NEWLINE = re.compile(r"(?<!\n)\n(?!\n)")


def remove_single_line_feed(text: str) -> str:
    """Turn lone line feeds into spaces, keeping runs of two or more intact.

    This unwraps hard-wrapped paragraphs while keeping paragraph breaks.
    """
    return _LONE_NEWLINE.sub(" ", text)