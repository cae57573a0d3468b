"""Scaling of pixel sizes by a process-wide DPI percentage."""

_dpi = 0


def dpif(x: float) -> float:
    """Scale a float size by the current DPI percentage."""
    return (x * _dpi) / 100.0


def dpi(x: int) -> int:
    """Scale an integer size by the current DPI percentage, truncating toward zero."""
    product = int(x) * _dpi
    quotient = abs(product) // 100
    return quotient if product >= 0 else -quotient


def set_dpi(value: int) -> None:
    """Set the DPI percentage used by dpi() and dpif()."""
    global _dpi
    _dpi = int(value)


def get_dpi() -> int:
    """Return the current DPI percentage (0 when never set)."""
    return _dpi