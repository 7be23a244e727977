"""Primitive -> TikZ coordinate body.

The body is the part of a drawing command after the verb and options::

    \\draw[thick] (0.00, 0.00) -- (1.00, 1.00);
                  ^^^^^^^^^^^^^^^^^^^^^^^^^^^^ body

Every converter is a pure function of the primitive and the precision.
Degenerate input (empty path, empty rectangle, polygon with fewer than
2 points, non-positive radius) yields ``""`` so that the emitter writes
nothing at all.

Subpath closing:
    Each ``MoveTo`` after the first closes the *previous* subpath with
    ``-- cycle``, whether or not the caller meant it to be closed.  The
    final subpath is left open.  This matches the painter-path exporter
    the markup was designed around; open multi-subpath polylines should
    be drawn as separate ``polyline`` calls instead.
"""

from __future__ import annotations

import logging

from tikz_export.geometry.primitives import (
    Circle,
    CubicCurveTo,
    Line,
    LineTo,
    MoveTo,
    Path,
    Polygon,
    Primitive,
    Rectangle,
)
from tikz_export.markup.formatter import (
    DEFAULT_PRECISION,
    format_point,
    format_scalar,
)

logger = logging.getLogger(__name__)

SUBPATH_INDENT = "    "
CYCLE = " -- cycle"


# ---------------------------------------------------------------------------
# Per-primitive converters
# ---------------------------------------------------------------------------


def path_body(path: Path, precision: int = DEFAULT_PRECISION) -> str:
    """Convert a multi-subpath path to newline-joined subpath text.

    Parameters
    ----------
    path : Path
        Segments to convert.
    precision : int
        Fractional digits per coordinate.

    Returns
    -------
    str
        One line per subpath; all but the first indented by four
        spaces, all but the last ending in ``-- cycle``.
    """
    completed: list[str] = []
    current = ""

    for seg in path.segments:
        if isinstance(seg, MoveTo):
            if current:
                completed.append(current + CYCLE)
            indent = SUBPATH_INDENT if completed else ""
            current = indent + format_point(seg.point, precision)
        elif isinstance(seg, LineTo):
            current += " -- " + format_point(seg.point, precision)
        elif isinstance(seg, CubicCurveTo):
            current += (
                " .. controls " + format_point(seg.control1, precision)
                + " and " + format_point(seg.control2, precision)
                + " .. " + format_point(seg.end, precision)
            )
        else:
            logger.warning("Unsupported path segment: %s; skipped", type(seg).__name__)

    if current:
        completed.append(current)

    return "\n".join(completed)


def rectangle_body(rect: Rectangle, precision: int = DEFAULT_PRECISION) -> str:
    if rect.is_empty:
        return ""
    return (
        format_point(rect.top_left, precision)
        + " rectangle "
        + format_point(rect.bottom_right, precision)
    )


def line_body(line: Line, precision: int = DEFAULT_PRECISION) -> str:
    return format_point(line.p, precision) + " -- " + format_point(line.q, precision)


def circle_body(circle: Circle, precision: int = DEFAULT_PRECISION) -> str:
    if not circle.radius > 0:
        return ""
    return (
        format_point(circle.center, precision)
        + f" circle ({format_scalar(circle.radius, precision)}cm)"
    )


def polygon_body(polygon: Polygon, precision: int = DEFAULT_PRECISION) -> str:
    if len(polygon.points) < 2:
        return ""
    body = " -- ".join(format_point(p, precision) for p in polygon.points)
    if polygon.closed:
        body += CYCLE
    return body


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def to_markup_body(primitive: Primitive, precision: int = DEFAULT_PRECISION) -> str:
    """Coordinate body for any supported primitive (``""`` if degenerate)."""
    if isinstance(primitive, Path):
        return path_body(primitive, precision)
    elif isinstance(primitive, Rectangle):
        return rectangle_body(primitive, precision)
    elif isinstance(primitive, Line):
        return line_body(primitive, precision)
    elif isinstance(primitive, Circle):
        return circle_body(primitive, precision)
    elif isinstance(primitive, Polygon):
        return polygon_body(primitive, precision)

    logger.warning("Unsupported primitive: %s", type(primitive).__name__)
    return ""
