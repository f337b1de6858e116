"""Rendering strings."""

from __future__ import annotations

from .escape import Painter
from .options import Options
from .text import has_newline


def export_string(value: str, options: Options, fail_on_newline: bool = False) -> str:
    """Render a string in double quotes, or in backquotes when it needs them.

    A string holding a double quote is put in backquotes. A string holding a
    line feed is put on lines of its own; when ``fail_on_newline`` is set,
    ``"\\n"`` is returned instead so the caller can lay out again.
    """
    paint = Painter(options)
    multiline = has_newline(value)

    if not multiline and '"' not in value:
        return paint.character('"' + value) + paint.character('"')

    if not multiline:
        return paint.character("`" + value) + paint.character("`")

    if fail_on_newline:
        return "\n"

    return "\n" + paint.character("`" + value) + paint.character("`")