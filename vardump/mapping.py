"""Rendering mappings and multimaps."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple

from .escape import Painter
from .options import Options
from .skip import SkipFunc, skip_items
from .text import has_newline, last_line_length as _last_line_length, visible_length

ExportFunc = Callable[[Any, str, int, int, bool], str]
"""Renders one value: ``(value, indent, last_line_length, current_depth, fail_on_newline)``."""

_CLOSING = " }"


def show_all(index: int, size: Callable[[], int]) -> int:
    """Skip function that visits every item."""
    return 0


class _Entry(NamedTuple):
    key: Any
    value: Any
    multiplicity: int | None


class _Rollback(Exception):
    """Raised inside a layout attempt when it must start again on separate lines."""


def _render(
    entries: list[_Entry],
    indent: str,
    last_line_length: int,
    current_depth: int,
    fail_on_newline: bool,
    options: Options,
    export_key: ExportFunc,
    export_value: ExportFunc,
    shift_indent: bool,
    skip_size: SkipFunc,
) -> str:
    paint = Painter(options)
    use_es = options.use_es()

    if not entries:
        return paint.bracket("{ }", current_depth)

    if current_depth >= options.max_depth:
        return (
            paint.bracket("{ ", current_depth)
            + paint.op("...")
            + paint.bracket(" }", current_depth)
        )

    if shift_indent and fail_on_newline:
        return "\n"

    new_indent = indent + "  "
    next_depth = current_depth + 1

    def key_suffix(entry: _Entry) -> str:
        # The multiplicity sits left of the value, like a member name.
        if entry.multiplicity is None:
            return paint.op(": ")
        return paint.member(f" ({entry.multiplicity})") + paint.op(": ")

    def fits(output: str) -> bool:
        return (
            last_line_length + visible_length(output, use_es) + len(_CLOSING)
            <= options.max_line_width
        )

    def attempt(shifted: bool) -> str:
        output = paint.bracket("{ ", current_depth)
        for position, item in enumerate(skip_items(entries, skip_size)):
            entry: _Entry = item.value
            if position:
                output += paint.op(", ")

            if shifted:
                if item.skip:
                    output += "\n" + new_indent + paint.op("...")
                    continue
                key_string = (
                    "\n"
                    + new_indent
                    + export_key(entry.key, new_indent, len(new_indent), next_depth, False)
                    + key_suffix(entry)
                )
                value_string = export_value(
                    entry.value,
                    new_indent,
                    _last_line_length(key_string, use_es),
                    next_depth,
                    False,
                )
                output += key_string + value_string
                continue

            if item.skip:
                output += paint.op("...")
                if fits(output):
                    continue
                raise _Rollback

            key_string = export_key(
                entry.key,
                indent,
                last_line_length + visible_length(output, use_es),
                next_depth,
                True,
            ) + key_suffix(entry)
            value_string = export_value(
                entry.value,
                indent,
                last_line_length
                + visible_length(output, use_es)
                + visible_length(key_string, use_es),
                next_depth,
                True,
            )
            elem_string = key_string + value_string
            if not has_newline(elem_string):
                output += elem_string
                if fits(output):
                    continue
            raise _Rollback

        if shifted:
            return output + "\n" + indent + paint.bracket("}", current_depth)
        return output + paint.bracket(" }", current_depth)

    if not shift_indent:
        try:
            return attempt(False)
        except _Rollback:
            if fail_on_newline:
                return "\n"
    return attempt(True)


def export_map(
    mapping: Mapping[Any, Any],
    indent: str,
    last_line_length: int,
    current_depth: int,
    fail_on_newline: bool,
    options: Options,
    export_key: ExportFunc,
    export_value: ExportFunc,
    nested: bool = False,
    skip_size: SkipFunc = show_all,
) -> str:
    """Render ``mapping`` as ``{ k: v, ... }``, or one entry per line when needed.

    ``nested`` says that keys or values are containers themselves; entries
    are then always put on separate lines.
    """
    entries = [_Entry(key, value, None) for key, value in mapping.items()]
    return _render(
        entries,
        indent,
        last_line_length,
        current_depth,
        fail_on_newline,
        options,
        export_key,
        export_value,
        nested,
        skip_size,
    )


def export_multimap(
    pairs: Iterable[tuple[Any, Any]],
    indent: str,
    last_line_length: int,
    current_depth: int,
    fail_on_newline: bool,
    options: Options,
    export_key: ExportFunc,
    export_value: ExportFunc,
    skip_size: SkipFunc = show_all,
) -> str:
    """Render key/value pairs whose keys may repeat, one key per line.

    Each distinct key is shown once with its multiplicity; ``export_value``
    receives the list of that key's values in their original order.
    """
    grouped: dict[Any, list[Any]] = {}
    for key, value in pairs:
        grouped.setdefault(key, []).append(value)
    entries = [_Entry(key, values, len(values)) for key, values in grouped.items()]
    return _render(
        entries,
        indent,
        last_line_length,
        current_depth,
        fail_on_newline,
        options,
        export_key,
        export_value,
        True,
        skip_size,
    )