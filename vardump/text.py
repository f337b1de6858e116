"""Measuring rendered text while ignoring escape sequences."""

from __future__ import annotations

_ES_START = "\x1b["
_ES_BODY = frozenset("0123456789;")


def has_newline(s: str) -> bool:
    """Return True if ``s`` contains a line feed."""
    return "\n" in s


def _end_of_es_body(s: str, start: int) -> int:
    """Index of the first character at or after ``start`` that is not part of the parameters."""
    for pos in range(start, len(s)):
        if s[pos] not in _ES_BODY:
            return pos
    return -1


def visible_length(s: str, use_es: bool) -> int:
    """Length of ``s`` as shown on a terminal, skipping escape sequences when in use."""
    if not use_es:
        return len(s)

    length = 0
    first = 0
    while (last := s.find(_ES_START, first)) != -1:
        length += last - first
        es_last = _end_of_es_body(s, last + 2)
        if es_last == -1:
            break
        first = es_last + 1
    length += len(s) - first
    return length


def first_line_length(s: str, use_es: bool) -> int:
    """Visible length of the first line of ``s``."""
    return visible_length(s.split("\n", 1)[0], use_es)


def last_line_length(s: str, use_es: bool, additional_first_line_length: int = 0) -> int:
    """Visible length of the last line of ``s``.

    When ``s`` is a single line, ``additional_first_line_length`` is added,
    since that line continues text already on the screen.
    """
    lf_pos = s.rfind("\n")
    if lf_pos == -1:
        return additional_first_line_length + visible_length(s, use_es)
    return visible_length(s[lf_pos + 1 :], use_es)