"""Geometric primitives -- the read-only input vocabulary of the exporter.

Every primitive is an immutable, slotted dataclass.  Coordinates are
plain floats in whatever unit the caller draws in; the exporter never
transforms, simplifies or intersects them, it only reads them.

Paths
-----
A *Path* is an ordered sequence of segments.  Each ``MoveTo`` starts a
new subpath, so a non-empty path is one or more subpaths, each beginning
with exactly one ``MoveTo``.  A cubic segment is atomic: it carries both
control points and the end point.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import Iterable, Union

# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point.

    Parameters
    ----------
    x, y : float
        Coordinates in caller units.
    """

    x: float
    y: float


PointLike = Union[Point, tuple[float, float]]
"""Anything accepted where a point is expected."""


def as_point(value: PointLike) -> Point:
    """Coerce an ``(x, y)`` tuple (or a ``Point``) to a ``Point``."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Segment(ABC):
    """Base class for all path segments."""

    pass


@dataclass(frozen=True, slots=True)
class MoveTo(Segment):
    """Start a new subpath at ``point``."""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo(Segment):
    """Straight segment from the current position to ``point``."""

    point: Point


@dataclass(frozen=True, slots=True)
class CubicCurveTo(Segment):
    """Cubic Bezier segment from the current position to ``end``.

    Parameters
    ----------
    control1, control2 : Point
        The two control points shaping the curve.
    end : Point
        End point of the curve.
    """

    control1: Point
    control2: Point
    end: Point


# ---------------------------------------------------------------------------
# Path
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Path:
    """Ordered segment sequence, possibly several disjoint subpaths.

    Parameters
    ----------
    segments : tuple[Segment, ...]
        Segments in drawing order.  Must be empty or start with ``MoveTo``.
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        if self.segments and not isinstance(self.segments[0], MoveTo):
            raise ValueError(
                "Path must start with MoveTo, got "
                f"{type(self.segments[0]).__name__}"
            )

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def subpath_count(self) -> int:
        return sum(1 for s in self.segments if isinstance(s, MoveTo))


class PathBuilder:
    """Fluent helper to assemble a :class:`Path`.

    Example::

        path = (
            PathBuilder()
            .move_to(0, 0)
            .line_to(1, 0)
            .cubic_to((1, 1), (0, 1), (0, 0.5))
            .build()
        )
    """

    def __init__(self) -> None:
        self._segments: list[Segment] = []
        self._subpath_start: Point | None = None

    def move_to(self, x: float, y: float) -> PathBuilder:
        p = Point(float(x), float(y))
        self._segments.append(MoveTo(p))
        self._subpath_start = p
        return self

    def line_to(self, x: float, y: float) -> PathBuilder:
        self._require_subpath("line_to")
        self._segments.append(LineTo(Point(float(x), float(y))))
        return self

    def cubic_to(
        self,
        control1: PointLike,
        control2: PointLike,
        end: PointLike,
    ) -> PathBuilder:
        self._require_subpath("cubic_to")
        self._segments.append(
            CubicCurveTo(as_point(control1), as_point(control2), as_point(end))
        )
        return self

    def close_subpath(self) -> PathBuilder:
        """Draw a line back to the start of the current subpath."""
        self._require_subpath("close_subpath")
        self._segments.append(LineTo(self._subpath_start))
        return self

    def build(self) -> Path:
        return Path(tuple(self._segments))

    def _require_subpath(self, op: str) -> None:
        if self._subpath_start is None:
            raise ValueError(f"{op}() called before move_to()")


# ---------------------------------------------------------------------------
# Simple shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle given by two opposite corners.

    Corners may be supplied in any order; ``top_left`` and
    ``bottom_right`` are normalised (min/max per axis, +Y down as in
    image coordinates).  A rectangle without a positive width and height
    (zero or NaN) is *empty* and produces no markup.
    """

    corner1: Point
    corner2: Point

    @classmethod
    def from_corners(cls, a: PointLike, b: PointLike) -> Rectangle:
        return cls(as_point(a), as_point(b))

    @property
    def top_left(self) -> Point:
        return Point(
            min(self.corner1.x, self.corner2.x),
            min(self.corner1.y, self.corner2.y),
        )

    @property
    def bottom_right(self) -> Point:
        return Point(
            max(self.corner1.x, self.corner2.x),
            max(self.corner1.y, self.corner2.y),
        )

    @property
    def width(self) -> float:
        return abs(self.corner2.x - self.corner1.x)

    @property
    def height(self) -> float:
        return abs(self.corner2.y - self.corner1.y)

    @property
    def is_empty(self) -> bool:
        return not (self.width > 0 and self.height > 0)


@dataclass(frozen=True, slots=True)
class Line:
    """Straight line from ``p`` to ``q``."""

    p: Point
    q: Point


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle around ``center``; degenerate unless ``radius > 0`` (NaN included)."""

    center: Point
    radius: float


@dataclass(frozen=True, slots=True)
class Polygon:
    """Ordered vertex list, optionally closed.

    Parameters
    ----------
    points : tuple[Point, ...]
        Vertices in drawing order.  Fewer than 2 is degenerate.
    closed : bool
        Close with ``-- cycle`` instead of repeating the first vertex.
    """

    points: tuple[Point, ...] = field(default_factory=tuple)
    closed: bool = False

    @classmethod
    def from_points(
        cls, points: Iterable[PointLike], closed: bool = False,
    ) -> Polygon:
        return cls(tuple(as_point(p) for p in points), closed)


def polyline(points: Iterable[PointLike]) -> Polygon:
    """Open polygon through ``points``."""
    return Polygon.from_points(points, closed=False)


Primitive = Union[Path, Rectangle, Line, Circle, Polygon]
"""Everything the converter turns into a markup body."""
