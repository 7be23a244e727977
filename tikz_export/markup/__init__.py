"""
Markup module.

Number formatting, color naming, primitive-to-body conversion and
command emission for PGF/TikZ output.
"""

from tikz_export.markup.colors import PALETTE, Color, ColorRegistry, canonical_name
from tikz_export.markup.converter import to_markup_body
from tikz_export.markup.emitter import Verb, emit_command, format_command
from tikz_export.markup.formatter import format_point, format_scalar

__all__ = [
    "PALETTE",
    "Color",
    "ColorRegistry",
    "Verb",
    "canonical_name",
    "emit_command",
    "format_command",
    "format_point",
    "format_scalar",
    "to_markup_body",
]
