"""
Geometry module.

Immutable, caller-owned primitives read by the markup converter, plus
reassembly of painter-style element streams into atomic segments.
"""

from tikz_export.geometry.elements import (
    CurveState,
    ElementKind,
    PathElement,
    path_from_elements,
    segments_from_elements,
)
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
    Primitive,
    Rectangle,
    Segment,
    as_point,
    polyline,
)

__all__ = [
    "Circle",
    "CubicCurveTo",
    "CurveState",
    "ElementKind",
    "Line",
    "LineTo",
    "MoveTo",
    "Path",
    "PathBuilder",
    "PathElement",
    "Point",
    "Polygon",
    "Primitive",
    "Rectangle",
    "Segment",
    "as_point",
    "path_from_elements",
    "polyline",
    "segments_from_elements",
]
