"""Background pictures attached to a board file, one per board side."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .config import parse_bool, parse_float, parse_int, parse_str
from .image import Image, ImageLoadError, TextureLoader

log = logging.getLogger(__name__)

_BOOL_TEXT = {True: "true", False: "false"}


class Side(Enum):
    """Side of the board being shown."""

    TOP = "Top"
    BOTTOM = "Bottom"


def _read_image(values: Mapping[str, str], prefix: str, config_dir: Path) -> Image:
    filename = parse_str(values, f"{prefix}ImageFile", "")
    return Image(
        file=config_dir / filename if filename else None,
        offset_x=parse_int(values, f"{prefix}ImageOffsetX", 0),
        offset_y=parse_int(values, f"{prefix}ImageOffsetY", 0),
        scaling_x=parse_float(values, f"{prefix}ImageScalingX", 1.0),
        scaling_y=parse_float(values, f"{prefix}ImageScalingY", 1.0),
        mirror_x=parse_bool(values, f"{prefix}ImageMirrorX", False),
        mirror_y=parse_bool(values, f"{prefix}ImageMirrorY", False),
        transparency=parse_float(values, f"{prefix}ImageTransparency", 0.0),
    )


def _write_image(
    values: MutableMapping[str, str], prefix: str, image: Image, config_dir: Path
) -> None:
    if image.file:
        try:
            relative = os.path.relpath(Path(image.file).resolve(), config_dir)
        except ValueError as exc:
            log.error("Error writing %s image path: %s", prefix.lower(), exc)
        else:
            values[f"{prefix}ImageFile"] = Path(relative).as_posix()
    values[f"{prefix}ImageOffsetX"] = str(int(image.offset_x))
    values[f"{prefix}ImageOffsetY"] = str(int(image.offset_y))
    values[f"{prefix}ImageScalingX"] = repr(float(image.scaling_x))
    values[f"{prefix}ImageScalingY"] = repr(float(image.scaling_y))
    values[f"{prefix}ImageMirrorX"] = _BOOL_TEXT[bool(image.mirror_x)]
    values[f"{prefix}ImageMirrorY"] = _BOOL_TEXT[bool(image.mirror_y)]
    values[f"{prefix}ImageTransparency"] = repr(float(image.transparency))


@dataclass
class BackgroundImage:
    """Top and bottom pictures; the one shown follows the current side."""

    side: Side = Side.TOP
    top_image: Image = field(default_factory=Image)
    bottom_image: Image = field(default_factory=Image)
    config_dir: Optional[Path] = None
    enabled: bool = True
    error: str = ""

    def load_from_config(self, values: MutableMapping[str, str], config_dir: Path) -> None:
        """Read both pictures' settings, picture paths being relative to
        config_dir, then write the settings back in normalised form.

        Textures are not loaded here; call reload() for that.
        """
        config_dir = Path(config_dir).resolve()
        self.config_dir = config_dir
        self.top_image = _read_image(values, "Top", config_dir)
        self.bottom_image = _read_image(values, "Bottom", config_dir)
        self.write_to_config(values, config_dir)

    def write_to_config(
        self, values: MutableMapping[str, str], config_dir: Optional[Path]
    ) -> None:
        """Store both pictures' settings, with paths relative to config_dir.

        Nothing is written when config_dir is None.
        """
        if config_dir is None:
            return
        config_dir = Path(config_dir).resolve()
        _write_image(values, "Top", self.top_image, config_dir)
        _write_image(values, "Bottom", self.bottom_image, config_dir)

    def reload(self, loader: TextureLoader) -> str:
        """Load both pictures again; return the error text, empty on success."""
        messages = []
        for image in (self.top_image, self.bottom_image):
            try:
                image.reload(loader)
            except ImageLoadError as exc:
                messages.append(str(exc))
            else:
                messages.append("")
        top_error, bottom_error = messages
        self.error = top_error + ("\n" if top_error else "") + bottom_error
        return self.error

    def selected_image(self) -> Image:
        """Return the picture for the side being shown."""
        return self.top_image if self.side is Side.TOP else self.bottom_image

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (x0, y0, x1, y1) of the picture being shown."""
        return self.selected_image().bounds()