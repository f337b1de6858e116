"""Rendering escape-sequence settings so that each is shown in its own style."""

from __future__ import annotations

from collections.abc import Sequence

from .escape import Painter
from .mapping import show_all
from .options import Options
from .skip import SkipFunc, skip_items
from .text import visible_length

_CLOSING = " ]"


class _Rollback(Exception):
    """Raised inside a layout attempt when it must start again on separate lines."""


def export_es_value_string(es: str, options: Options) -> str:
    """Show ``es`` quoted with ESC written as ``\\e``, coloured by ``es`` itself."""
    escaped = es.replace("\x1b", "\\e")
    return Painter(options).apply(es, '"' + escaped + '"')


def export_es_value_vector(
    es_list: Sequence[str],
    indent: str,
    last_line_length: int,
    current_depth: int,
    fail_on_newline: bool,
    options: Options,
    show_index: bool = False,
    skip_size: SkipFunc = show_all,
) -> str:
    """Render a list of escape sequences as ``[ "...", ... ]``, splitting lines when needed."""
    paint = Painter(options)
    use_es = options.use_es()

    if not es_list:
        return paint.bracket("[ ]", current_depth)

    if current_depth >= options.max_depth:
        return (
            paint.bracket("[ ", current_depth)
            + paint.op("...")
            + paint.bracket(" ]", current_depth)
        )

    new_indent = indent + "  "

    def fits(output: str) -> bool:
        return (
            last_line_length + visible_length(output, use_es) + len(_CLOSING)
            <= options.max_line_width
        )

    def element(index: int, es: str) -> str:
        prefix = paint.member(str(index)) + paint.op(": ") if show_index else ""
        return prefix + export_es_value_string(es, options)

    def attempt(shifted: bool) -> str:
        output = paint.bracket("[ ", current_depth)
        for position, item in enumerate(skip_items(es_list, skip_size)):
            if position:
                output += paint.op(", ")

            if shifted:
                if item.skip:
                    output += "\n" + new_indent + paint.op("...")
                else:
                    output += "\n" + new_indent + element(item.index, item.value)
                continue

            if item.skip:
                output += paint.op("...")
                if fits(output):
                    continue
                raise _Rollback

            output += element(item.index, item.value)
            if fits(output):
                continue
            if fail_on_newline:
                return "\n"
            raise _Rollback

        if shifted:
            return output + "\n" + indent + paint.bracket("]", current_depth)
        return output + paint.bracket(" ]", current_depth)

    try:
        return attempt(False)
    except _Rollback:
        return attempt(True)