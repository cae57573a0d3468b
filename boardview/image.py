"""A background picture drawn under the board, with its placement."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

UV = tuple[float, float]

TextureLoader = Callable[[Path], tuple[int, int, int]]
"""Loads a picture file and returns (texture id, width, height)."""


class ImageLoadError(Exception):
    """A picture file could not be loaded."""


@dataclass
class Image:
    """A picture file placed with an offset, scaling and mirroring."""

    file: Optional[Path] = None
    texture: int = 0
    width: int = 0
    height: int = 0
    offset_x: int = 0
    offset_y: int = 0
    scaling_x: float = 1.0
    scaling_y: float = 1.0
    mirror_x: bool = False
    mirror_y: bool = False
    transparency: float = 0.0

    def reload(self, loader: TextureLoader) -> None:
        """Drop the current texture and load the file again with loader.

        Nothing is loaded when no file is set. Raises ImageLoadError when the
        loader fails.
        """
        self.texture = 0
        if not self.file:
            return
        path = Path(self.file)
        try:
            texture, width, height = loader(path)
        except ImageLoadError:
            raise
        except (OSError, ValueError) as exc:
            raise ImageLoadError(f"{path}: {exc}") from exc
        self.texture, self.width, self.height = texture, width, height

    def transform_relative_coordinates(self, rotation: int) -> tuple[UV, UV, UV, UV]:
        """Return texture coordinates of the top-left, top-right, bottom-right
        and bottom-left corners for a board rotated rotation quarter turns."""
        lo_u, hi_u = (1.0, 0.0) if self.mirror_x else (0.0, 1.0)
        lo_v, hi_v = (0.0, 1.0) if self.mirror_y else (1.0, 0.0)
        if rotation in (0, 2):
            return ((lo_u, lo_v), (hi_u, lo_v), (hi_u, hi_v), (lo_u, hi_v))
        return ((lo_u, lo_v), (lo_u, hi_v), (hi_u, hi_v), (hi_u, lo_v))

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (x0, y0, x1, y1) of the picture in board coordinates."""
        return (
            float(self.offset_x),
            float(self.offset_y),
            self.offset_x + self.width * self.scaling_x,
            self.offset_y + self.height * self.scaling_y,
        )