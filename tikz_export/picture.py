"""TikZ picture session -- sequencing over an append-only text sink.

A ``TikzPicture`` owns exactly one sink for its whole lifetime and one
color registry.  The sink is bound at construction (or via
:meth:`TikzPicture.bind`); there is no setter, so a picture is either
fully bound or an inert no-op.

Typical use::

    buf = io.StringIO()
    pic = TikzPicture.bind(buf, precision=2)
    pic.begin()
    col = pic.register_color(Color(100, 200, 0))
    pic.draw(path, options=f"draw={col}, thick")
    with pic.scope("dashed"):
        pic.clip(Rectangle.from_corners((0, 0), (4, 3)))
        pic.circle((2, 1.5), 1.0)
    pic.end()

Error handling:
    Drawing calls never raise.  Degenerate geometry and unbound sinks
    produce no output; malformed segments are logged and skipped.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from pathlib import Path as FilePath
from typing import Iterable, Iterator, Protocol

from tikz_export.configs.loader import ExportConfig
from tikz_export.geometry.primitives import (
    Circle,
    Line,
    PointLike,
    Primitive,
    Rectangle,
    as_point,
    polyline,
)
from tikz_export.markup.colors import Color, ColorRegistry
from tikz_export.markup.converter import to_markup_body
from tikz_export.markup.emitter import Verb, emit_command
from tikz_export.markup.formatter import (
    DEFAULT_PRECISION,
    clamp_precision,
    format_scalar,
)
from tikz_export.utils.fs import atomic_write_text

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Append-only text destination (files, ``StringIO``, ...)."""

    def write(self, text: str) -> object: ...


class TikzPicture:
    """Write PGF/TikZ drawing commands to a bound sink.

    Parameters
    ----------
    sink : TextSink | None
        Output destination.  ``None`` makes every call a silent no-op.
    precision : int
        Fractional digits for all numbers; negative values clamp to 0.
    picture_options : str
        Options used by ``begin()`` when it is called without any.
    """

    def __init__(
        self,
        sink: TextSink | None = None,
        precision: int = DEFAULT_PRECISION,
        picture_options: str = "",
    ) -> None:
        self._sink = sink
        self._picture_options = picture_options
        self._precision = clamp_precision(precision)
        self._write = sink.write if sink is not None else None
        self._colors = ColorRegistry(self._write, self._precision)
        self._commands = 0
        self._scope_depth = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def bind(cls, sink: TextSink, precision: int = DEFAULT_PRECISION) -> TikzPicture:
        """Return a picture bound to ``sink`` for its whole lifetime."""
        return cls(sink, precision)

    @classmethod
    def from_config(cls, sink: TextSink, config: ExportConfig) -> TikzPicture:
        """Bind with the config's precision and default picture options."""
        return cls(sink, config.precision, config.picture_options)

    @property
    def is_bound(self) -> bool:
        return self._sink is not None

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def colors(self) -> ColorRegistry:
        return self._colors

    @property
    def commands_emitted(self) -> int:
        return self._commands

    # ------------------------------------------------------------------
    # Environment / structure
    # ------------------------------------------------------------------

    def begin(self, options: str | None = None) -> None:
        """Open the picture; ``None`` uses the session's default options."""
        if options is None:
            options = self._picture_options
        self._environment("begin", "tikzpicture", options)

    def end(self) -> None:
        self._environment("end", "tikzpicture")
        if self._scope_depth:
            logger.warning("Picture ended with %d open scope(s)", self._scope_depth)
        logger.debug("Picture ended after %d command(s)", self._commands)

    def begin_scope(self, options: str = "") -> None:
        if self._environment("begin", "scope", options):
            self._scope_depth += 1

    def end_scope(self) -> None:
        if self._environment("end", "scope"):
            self._scope_depth = max(0, self._scope_depth - 1)

    @contextmanager
    def scope(self, options: str = "") -> Iterator[TikzPicture]:
        """``begin_scope`` / ``end_scope`` pair around a block."""
        self.begin_scope(options)
        try:
            yield self
        finally:
            self.end_scope()

    def newline(self, count: int = 1) -> None:
        if self._write is None or count <= 0:
            return
        self._write("\n" * count)

    def comment(self, text: str) -> None:
        """Write ``% text``."""
        if self._write is None:
            return
        self._write(f"% {text}\n")

    # ------------------------------------------------------------------
    # Raw output
    # ------------------------------------------------------------------

    def write(self, text: str) -> TikzPicture:
        """Append ``text`` verbatim (full control over the output)."""
        if self._write is not None and text:
            self._write(text)
        return self

    def write_number(self, value: float | int) -> TikzPicture:
        """Append a number; floats use the session precision."""
        if self._write is None:
            return self
        if isinstance(value, int) and not isinstance(value, bool):
            self._write(str(value))
        else:
            self._write(format_scalar(value, self._precision))
        return self

    # ------------------------------------------------------------------
    # Colors
    # ------------------------------------------------------------------

    def register_color(self, color: Color) -> str:
        """Name usable in options; defines the color on first use."""
        return self._colors.register(color)

    # ------------------------------------------------------------------
    # Drawing verbs
    # ------------------------------------------------------------------

    def path(self, primitive: Primitive, options: str = "") -> None:
        self._emit(Verb.PATH, primitive, options)

    def draw(self, primitive: Primitive, options: str = "") -> None:
        self._emit(Verb.DRAW, primitive, options)

    def fill(self, primitive: Primitive, options: str = "") -> None:
        self._emit(Verb.FILL, primitive, options)

    def clip(self, primitive: Primitive, options: str = "") -> None:
        """Clip subsequent drawing in the current scope."""
        self._emit(Verb.CLIP, primitive, options)

    # ------------------------------------------------------------------
    # Convenience shapes
    # ------------------------------------------------------------------

    def rectangle(self, rect: Rectangle, options: str = "") -> None:
        self._emit(Verb.PATH, rect, options)

    def line(self, p: PointLike, q: PointLike, options: str = "") -> None:
        self._emit(Verb.DRAW, Line(as_point(p), as_point(q)), options)

    def polyline(self, points: Iterable[PointLike], options: str = "") -> None:
        self._emit(Verb.DRAW, polyline(points), options)

    def circle(self, center: PointLike, radius: float, options: str = "") -> None:
        self._emit(Verb.DRAW, Circle(as_point(center), float(radius)), options)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _emit(self, verb: Verb, primitive: Primitive, options: str) -> None:
        if self._write is None:
            return
        body = to_markup_body(primitive, self._precision)
        if emit_command(self._write, verb, options, body):
            self._commands += 1

    def _environment(self, action: str, name: str, options: str = "") -> bool:
        if self._write is None:
            return False
        opts = f"[{options}]" if options else ""
        self._write(f"\\{action}{{{name}}}{opts}\n")
        return True


@contextmanager
def open_picture(
    path: str | FilePath,
    precision: int = DEFAULT_PRECISION,
    options: str | None = None,
    config: ExportConfig | None = None,
) -> Iterator[TikzPicture]:
    """Build a complete ``tikzpicture`` and write it to ``path`` atomically.

    When ``config`` is given its precision and picture options replace
    ``precision`` and the default ``options``; an explicit ``options``
    still wins.  The file is written only if the block completes; an
    exception inside the block leaves any existing file untouched.
    """
    buf = StringIO()
    if config is not None:
        picture = TikzPicture.from_config(buf, config)
    else:
        picture = TikzPicture.bind(buf, precision)
    picture.begin(options)
    yield picture
    picture.end()
    atomic_write_text(path, buf.getvalue())
    logger.info("Wrote %s (%d command(s))", path, picture.commands_emitted)
