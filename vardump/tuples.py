"""Rendering fixed-size heterogeneous sequences."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from .escape import Painter
from .options import Options
from .text import has_newline, visible_length

ExportFunc = Callable[[Any, str, int, int, bool], str]
"""Renders one value: ``(value, indent, last_line_length, current_depth, fail_on_newline)``."""


def _in_one_line(
    items: Sequence[Any],
    indent: str,
    last_line_length: int,
    next_depth: int,
    options: Options,
    export_item: ExportFunc,
    paint: Painter,
) -> str | None:
    parts = []
    for item in items:
        output = export_item(item, indent, last_line_length, next_depth, True)
        if has_newline(output):
            return None
        parts.append(output)
        last_line_length = visible_length(output, options.use_es()) + 2
    return paint.op(", ").join(parts)


def export_tuple(
    items: Sequence[Any],
    indent: str,
    last_line_length: int,
    current_depth: int,
    fail_on_newline: bool,
    options: Options,
    export_item: ExportFunc,
) -> str:
    """Render ``items`` as ``( a, b )``, or one element per line when that does not fit."""
    paint = Painter(options)

    if not items:
        return paint.bracket("( )", current_depth)

    if current_depth >= options.max_depth:
        return (
            paint.bracket("( ", current_depth)
            + paint.op("...")
            + paint.bracket(" )", current_depth)
        )

    next_depth = current_depth + 1

    inner = _in_one_line(
        items, indent, last_line_length + 2, next_depth, options, export_item, paint
    )
    if inner is not None:
        output = paint.bracket("( ", current_depth) + inner + paint.bracket(" )", current_depth)
        if visible_length(output, options.use_es()) <= options.max_line_width:
            return output

    if fail_on_newline:
        return "\n"

    new_indent = indent + "  "
    new_indent_length = visible_length(new_indent, options.use_es())
    lines = [
        export_item(item, new_indent, new_indent_length, next_depth, False) for item in items
    ]
    return (
        paint.bracket("(\n", current_depth)
        + new_indent
        + (paint.op(",\n") + new_indent).join(lines)
        + "\n"
        + indent
        + paint.bracket(")", current_depth)
    )