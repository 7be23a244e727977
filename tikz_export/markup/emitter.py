"""Single emission path shared by all drawing verbs.

Verb and geometry are independent: the converter produces a body for
any primitive, and this module wraps it in ``\\<verb>[<options>] ...;``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable


class Verb(str, Enum):
    """TikZ drawing commands."""

    PATH = "path"
    DRAW = "draw"
    FILL = "fill"
    CLIP = "clip"


def format_command(verb: Verb | str, options: str, body: str) -> str:
    """Full command line, or ``""`` when ``body`` is empty.

    Example::

        format_command(Verb.DRAW, "thick", "(0.00, 0.00) -- (1.00, 1.00)")
        -> "\\draw[thick] (0.00, 0.00) -- (1.00, 1.00);\\n"

    Raises
    ------
    ValueError
        If ``verb`` is a string naming no ``Verb``.  This is input
        validation at the API edge; ``TikzPicture`` always passes
        ``Verb`` members, so its drawing calls never raise.
    """
    keyword = Verb(verb).value
    if not body:
        return ""
    opts = f"[{options}]" if options else ""
    return f"\\{keyword}{opts} {body};\n"


def emit_command(
    write: Callable[[str], object] | None,
    verb: Verb | str,
    options: str,
    body: str,
) -> bool:
    """Write one command through ``write``.

    Returns
    -------
    bool
        ``True`` if a command was written, ``False`` for the no-op cases
        (unbound sink or empty body).

    Raises
    ------
    ValueError
        If ``verb`` is a string naming no ``Verb`` (see ``format_command``).
    """
    if write is None:
        return False
    command = format_command(verb, options, body)
    if not command:
        return False
    write(command)
    return True
