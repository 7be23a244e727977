"""Colors and the per-document color registry.

TikZ only knows a handful of named colors.  Arbitrary colors must be
declared once per document with ``\\definecolor`` and then referenced by
name.  Names may not contain digits, so the registry derives one from
the 24-bit hex value with every decimal digit mapped to a letter::

    Color(100, 200, 0).hex_name   -> "64c800"
    canonical_name(...)           -> "cwucyqq"

The mapping is a bijection on hex strings, so distinct RGB triples get
distinct names and equal triples always get the same name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from tikz_export.markup.formatter import DEFAULT_PRECISION, format_scalar

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Color value
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Color:
    """RGB color with 8-bit channels.

    Parameters
    ----------
    red, green, blue : int
        Channel values in [0, 255].
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for ch, val in [("red", self.red), ("green", self.green), ("blue", self.blue)]:
            if isinstance(val, bool) or not isinstance(val, int) or not 0 <= val <= 255:
                raise ValueError(f"Color {ch} must be an int in [0, 255], got {val!r}")

    @classmethod
    def from_float(cls, red: float, green: float, blue: float) -> Color:
        """Build from fractional channels in [0, 1]."""
        channels = []
        for ch, val in [("red", red), ("green", green), ("blue", blue)]:
            if not 0.0 <= val <= 1.0:
                raise ValueError(f"Color {ch} must be in [0, 1], got {val}")
            channels.append(int(round(val * 255)))
        return cls(*channels)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``"#rrggbb"`` or ``"rrggbb"``."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got {text!r}")
        value = int(digits, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def red_f(self) -> float:
        return self.red / 255.0

    @property
    def green_f(self) -> float:
        return self.green / 255.0

    @property
    def blue_f(self) -> float:
        return self.blue / 255.0

    @property
    def hex_name(self) -> str:
        """Six lowercase hex digits, no ``#``."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"


PALETTE: dict[Color, str] = {
    Color(255, 0, 0): "red",
    Color(0, 255, 0): "green",
    Color(0, 0, 255): "blue",
    Color(0, 0, 0): "black",
    Color(255, 255, 255): "white",
    Color(0, 255, 255): "cyan",
    Color(255, 0, 255): "magenta",
    Color(255, 255, 0): "yellow",
}
"""Colors TikZ knows by name; these are never defined."""

_DIGIT_TO_LETTER = str.maketrans("0123456789", "qrstuvwxyz")


def canonical_name(color: Color) -> str:
    """Digit-free markup identifier for ``color``."""
    named = PALETTE.get(color)
    if named is not None:
        return named
    return "c" + color.hex_name.lower().translate(_DIGIT_TO_LETTER)


def definition_line(name: str, color: Color, precision: int = DEFAULT_PRECISION) -> str:
    rgb = ", ".join(
        format_scalar(v, precision) for v in (color.red_f, color.green_f, color.blue_f)
    )
    return f"\\definecolor{{{name}}}{{rgb}}{{{rgb}}}\n"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ColorRegistry:
    """Per-document mapping of colors to defined names.

    Parameters
    ----------
    write : Callable[[str], object] | None
        Where ``\\definecolor`` lines go.  ``None`` records names without
        emitting anything (unbound document).
    precision : int
        Fractional digits for the RGB components.

    Notes
    -----
    The registry only grows.  Create one per output document so that two
    documents never share definitions.
    """

    def __init__(
        self,
        write: Callable[[str], object] | None = None,
        precision: int = DEFAULT_PRECISION,
    ) -> None:
        self._write = write
        self._precision = precision
        self._defined: dict[str, Color] = {}

    def register(self, color: Color) -> str:
        """Return the name for ``color``, defining it on first use."""
        if color in PALETTE:
            return PALETTE[color]

        name = canonical_name(color)
        if name in self._defined:
            return name

        if self._write is not None:
            self._write(definition_line(name, color, self._precision))
        self._defined[name] = color
        logger.debug("Defined color %s as #%s", name, color.hex_name)
        return name

    def names(self) -> list[str]:
        """Defined names in registration order."""
        return list(self._defined)

    def __contains__(self, name: object) -> bool:
        return name in self._defined

    def __len__(self) -> int:
        return len(self._defined)
