"""Reassemble painter-style element streams into path segments.

Painter paths (Qt's ``QPainterPath`` and friends) expose a cubic curve
as three consecutive elements rather than one segment::

    CURVE_TO   (x, y)   first control point
    CURVE_DATA (x, y)   second control point
    CURVE_DATA (x, y)   end point

The reassembly is an explicit three-state machine (``CurveState``).  An
element that does not fit the current state is an invalid transition:
it is logged and skipped, never silently absorbed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from tikz_export.geometry.primitives import (
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    Point,
    Segment,
)

logger = logging.getLogger(__name__)


class ElementKind(str, Enum):
    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    CURVE_TO = "curve_to"
    CURVE_DATA = "curve_data"


class CurveState(Enum):
    """Progress through a three-element cubic curve."""

    NONE = 0
    SAW_CONTROL1 = 1
    SAW_CONTROL2 = 2


@dataclass(frozen=True, slots=True)
class PathElement:
    """One low-level path event."""

    kind: ElementKind
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


def segments_from_elements(elements: Iterable[PathElement]) -> list[Segment]:
    """Convert an element stream to atomic segments.

    Parameters
    ----------
    elements : Iterable[PathElement]
        Low-level events in drawing order.

    Returns
    -------
    list[Segment]
        Segments starting with ``MoveTo`` (or empty).  Invalid elements
        are dropped with a warning.
    """
    segments: list[Segment] = []
    state = CurveState.NONE
    control1: Point | None = None
    control2: Point | None = None

    for index, element in enumerate(elements):
        kind = element.kind

        if state is not CurveState.NONE and kind is not ElementKind.CURVE_DATA:
            logger.warning(
                "Element %d (%s) interrupts a pending curve; "
                "dropping the partial curve",
                index, kind,
            )
            state = CurveState.NONE

        if kind is ElementKind.MOVE_TO:
            segments.append(MoveTo(element.point))
            continue

        if not segments:
            logger.warning(
                "Element %d (%s) precedes the first move_to; skipped",
                index, kind,
            )
            continue

        if kind is ElementKind.LINE_TO:
            segments.append(LineTo(element.point))
        elif kind is ElementKind.CURVE_TO:
            control1 = element.point
            state = CurveState.SAW_CONTROL1
        elif kind is ElementKind.CURVE_DATA:
            if state is CurveState.SAW_CONTROL1:
                control2 = element.point
                state = CurveState.SAW_CONTROL2
            elif state is CurveState.SAW_CONTROL2:
                segments.append(CubicCurveTo(control1, control2, element.point))
                state = CurveState.NONE
            else:
                logger.warning(
                    "Element %d: curve_data without a preceding curve_to; "
                    "skipped",
                    index,
                )
        else:
            logger.warning("Element %d: unknown kind %r; skipped", index, kind)

    if state is not CurveState.NONE:
        logger.warning("Element stream ended inside a curve; partial curve dropped")

    return segments


def path_from_elements(elements: Iterable[PathElement]) -> Path:
    """Build a :class:`Path` from a painter-style element stream."""
    return Path(tuple(segments_from_elements(elements)))
