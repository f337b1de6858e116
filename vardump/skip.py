"""Iterating over a container while leaving parts of it out."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sized
from itertools import islice
from typing import Any, NamedTuple

STOP = -1
"""Value a skip function returns to end the iteration."""

SkipFunc = Callable[[int, Callable[[], int]], int]

_END = object()


class SkipItem(NamedTuple):
    """One position of a skipping iteration.

    ``skip`` tells the renderer to show an ellipsis instead of ``value``.
    """

    skip: bool
    value: Any
    index: int


def skip_items(items: Iterable[Any], skip_size: SkipFunc) -> Iterator[SkipItem]:
    """Walk ``items``, letting ``skip_size`` decide how far to move at each step.

    ``skip_size(index, size)`` receives the current index and a function that
    returns the number of items. It returns 0 to move to the next item,
    a positive number to jump that many items ahead (the current item is then
    reported as skipped), or ``STOP`` to end the iteration.
    """
    if not isinstance(items, Sized):
        items = list(items)

    cached_size: list[int] = []

    def size() -> int:
        if not cached_size:
            cached_size.append(len(items))
        return cached_size[0]

    iterator = iter(items)
    index = 0
    current = next(iterator, _END)
    while current is not _END:
        yield SkipItem(skip_size(index, size) != 0, current, index)

        step = skip_size(index, size)
        if step < 0:
            return
        if step == 0:
            current = next(iterator, _END)
            index += 1
        else:
            current = next(islice(iterator, step - 1, None), _END)
            index += step