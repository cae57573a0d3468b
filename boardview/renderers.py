"""Choice of a rendering back end with fallback to the others."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Optional, Protocol


class Renderer(Enum):
    """Known rendering back ends; DEFAULT marks the end of the list."""

    OPENGL1 = 1
    OPENGL3 = 2
    DEFAULT = 3


PREFERRED = Renderer.OPENGL3


class RendererInstance(Protocol):
    def init(self) -> bool: ...


def next_renderer(renderer: Renderer) -> Renderer:
    """Return the renderer after renderer, wrapping DEFAULT to the first one."""
    if renderer is Renderer.DEFAULT:
        return Renderer.OPENGL1
    return Renderer(renderer.value + 1)


def renderer_from_int(n: int) -> Renderer:
    """Map a number to a renderer; numbers past the list give DEFAULT.

    Raises ValueError for numbers below the first renderer.
    """
    if n > Renderer.DEFAULT.value:
        print(f"Unknown renderer specified: {n}", file=sys.stderr)
        return Renderer.DEFAULT
    try:
        return Renderer(n)
    except ValueError:
        raise ValueError(f"Unknown renderer specified: {n}") from None


def init_best_renderer(
    preferred: Renderer,
    factory: Callable[[Renderer], Optional[RendererInstance]],
) -> Optional[RendererInstance]:
    """Initialise preferred, or the following renderers in turn.

    factory builds an instance for a renderer (or None when it is unavailable);
    the first instance whose init() succeeds is returned, or None if all fail.
    """
    renderer = preferred
    while True:
        instance = None if renderer is Renderer.DEFAULT else factory(renderer)
        initialized = instance is not None and bool(instance.init())
        renderer = next_renderer(renderer)
        if initialized:
            return instance
        if renderer is preferred:
            return None