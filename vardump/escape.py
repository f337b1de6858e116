"""Wrapping text in the escape sequences chosen for each kind of token."""

from __future__ import annotations

from .options import Options

RESET = "\x1b[0m"


class Painter:
    """Colours pieces of output according to the current options."""

    def __init__(self, options: Options) -> None:
        self.options = options

    def apply(self, es: str, s: str) -> str:
        """Wrap ``s`` in ``es`` between two resets, or return it unchanged."""
        if self.options.use_es():
            return RESET + es + s + RESET
        return s

    def log(self, s: str) -> str:
        return self.apply(self.options.es_value.log, s)

    def expression(self, s: str) -> str:
        return self.apply(self.options.es_value.expression, s)

    def reserved(self, s: str) -> str:
        return self.apply(self.options.es_value.reserved, s)

    def number(self, s: str) -> str:
        return self.apply(self.options.es_value.number, s)

    def character(self, s: str) -> str:
        return self.apply(self.options.es_value.character, s)

    def op(self, s: str) -> str:
        return self.apply(self.options.es_value.op, s)

    def identifier(self, s: str) -> str:
        return self.apply(self.options.es_value.identifier, s)

    def member(self, s: str) -> str:
        return self.apply(self.options.es_value.member, s)

    def unsupported(self, s: str) -> str:
        return self.apply(self.options.es_value.unsupported, s)

    def bracket(self, s: str, depth: int) -> str:
        """Colour a bracket with the sequence for ``depth``, cycling through the list."""
        brackets = self.options.es_value.bracket_by_depth
        if not brackets:
            return s
        return self.apply(brackets[depth % len(brackets)], s)