"""
TikZ Export Package.

Converts in-memory vector primitives (paths with line and cubic
segments, rectangles, lines, circles, polygons) into PGF/TikZ markup.
Write-only: nothing is rendered or parsed.

Subpackages:
    geometry: Caller-owned primitives and element-stream reassembly
    markup: Number formatting, color registry, body conversion, emission
    configs: Export configuration loading and validation
    utils: Logging setup and atomic file writes
"""

from tikz_export.geometry.primitives import (
    Circle,
    CubicCurveTo,
    Line,
    LineTo,
    MoveTo,
    Path,
    PathBuilder,
    Point,
    Polygon,
    Rectangle,
    polyline,
)
from tikz_export.markup.colors import Color, ColorRegistry
from tikz_export.markup.emitter import Verb
from tikz_export.picture import TikzPicture, open_picture

__all__ = [
    "Circle",
    "Color",
    "ColorRegistry",
    "CubicCurveTo",
    "Line",
    "LineTo",
    "MoveTo",
    "Path",
    "PathBuilder",
    "Point",
    "Polygon",
    "Rectangle",
    "TikzPicture",
    "Verb",
    "open_picture",
    "polyline",
]
