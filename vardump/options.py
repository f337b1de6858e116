"""Settings that control how values are rendered."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class EsStyle(enum.Enum):
    """Whether escape sequences are put into the output."""

    NO_ES = "no_es"
    BY_SYNTAX = "by_syntax"


def _default_brackets() -> list[str]:
    return ["\x1b[02m"]


@dataclass
class EsValue:
    """Escape sequences used for each syntactic element of the output."""

    log: str = "\x1b[02m"
    expression: str = "\x1b[36m"
    reserved: str = ""
    number: str = ""
    character: str = ""
    op: str = "\x1b[02m"
    identifier: str = "\x1b[32m"
    member: str = "\x1b[36m"
    unsupported: str = "\x1b[31m"
    bracket_by_depth: list[str] = field(default_factory=_default_brackets)


@dataclass
class Options:
    """Limits and styling used while rendering values.

    ``max_line_width`` is the widest line the renderer aims for,
    ``max_depth`` the deepest level of nesting that is rendered in full and
    ``max_iteration_count`` the largest number of elements shown per container.
    """

    max_line_width: int = 160
    max_depth: int = 4
    max_iteration_count: int = 16
    enable_asterisk: bool = False
    print_expr: bool = True
    es_style: EsStyle = EsStyle.BY_SYNTAX
    es_value: EsValue = field(default_factory=EsValue)

    def use_es(self) -> bool:
        """Return True when escape sequences should be emitted."""
        return self.es_style is not EsStyle.NO_ES