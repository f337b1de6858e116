"""Rendering enumeration members."""

from __future__ import annotations

from collections.abc import Hashable, Mapping

from .escape import Painter
from .options import EsStyle, Options

ES_STYLE_NAMES: dict[EsStyle, str] = {
    EsStyle.NO_ES: "EsStyle.NO_ES",
    EsStyle.BY_SYNTAX: "EsStyle.BY_SYNTAX",
}
"""Registered names of the members of :class:`EsStyle`."""


def export_enum(
    member: Hashable, names: Mapping[Hashable, str], type_name: str, options: Options
) -> str:
    """Render ``member`` by its registered name.

    A member missing from ``names`` is shown as ``<type_name>::?``.
    """
    paint = Painter(options)
    name = names.get(member)
    if name is not None:
        return paint.identifier(name)
    return paint.identifier(type_name + "::") + paint.unsupported("?")