"""Locale-independent fixed-point number formatting.

All numeric text in the generated markup goes through this module so
that coordinates always use ``.`` as decimal separator, never carry
grouping separators, and always show exactly ``precision`` fractional
digits::

    format_point(Point(1, -0.5))     -> "(1.00, -0.50)"
    format_scalar(2.0, precision=3)  -> "2.000"
"""

from __future__ import annotations

from tikz_export.geometry.primitives import PointLike, as_point

DEFAULT_PRECISION = 2


def clamp_precision(precision: int) -> int:
    """Negative precisions collapse to 0."""
    return max(0, int(precision))


def format_scalar(value: float, precision: int = DEFAULT_PRECISION) -> str:
    # ``f`` presentation ignores the process locale (unlike ``n``).
    return f"{float(value):.{clamp_precision(precision)}f}"


def format_point(point: PointLike, precision: int = DEFAULT_PRECISION) -> str:
    """Render ``point`` as ``"(X, Y)"``."""
    p = as_point(point)
    return f"({format_scalar(p.x, precision)}, {format_scalar(p.y, precision)})"
