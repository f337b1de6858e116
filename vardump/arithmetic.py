"""Rendering booleans, characters, integers and floating-point numbers."""

from __future__ import annotations

from dataclasses import dataclass

from .escape import Painter
from .options import Options

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class IntStyle:
    """How an integer is written out.

    ``base`` is the radix, ``digits`` the minimum width (0 for none) and
    ``chunk`` the size of the space-separated groups of digits (0 for none).
    With ``space_fill`` the number is padded with spaces instead of zeros,
    and with ``support_negative`` a leading space is kept free for a sign
    when the number exactly fills ``digits``.
    """

    base: int = 16
    digits: int = 0
    chunk: int = 0
    space_fill: bool = False
    support_negative: bool = False

    def __post_init__(self) -> None:
        if not 2 <= self.base <= len(_DIGITS):
            raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {self.base}")
        if self.digits < 0:
            raise ValueError(f"digits must not be negative, got {self.digits}")
        if self.chunk < 0:
            raise ValueError(f"chunk must not be negative, got {self.chunk}")


def export_bool(value: bool, options: Options) -> str:
    """Render a boolean as ``true`` or ``false``."""
    return Painter(options).reserved("true" if value else "false")


def export_char(value: str, options: Options) -> str:
    """Render a single character in single quotes."""
    return Painter(options).character(f"'{value}'")


def _reversed_digits(magnitude: int, base: int) -> str:
    if base == 10:
        return str(magnitude)[::-1]
    chars = []
    while True:
        magnitude, r = divmod(magnitude, base)
        chars.append(_DIGITS[r])
        if magnitude == 0:
            break
    return "".join(chars)


def export_int(value: int, options: Options, int_style: IntStyle | None = None) -> str:
    """Render an integer, formatted according to ``int_style`` when given."""
    paint = Painter(options)
    if int_style is None:
        return paint.number(str(value))

    base = int_style.base
    digits = int_style.digits
    chunk = int_style.chunk
    if base == 10 and digits == 0 and chunk == 0:
        return paint.number(str(value))

    # Built least significant digit first, reversed at the end.
    output = _reversed_digits(abs(value), base)

    add_minus = False
    if int_style.space_fill and value < 0 and (digits == 0 or len(output) < digits):
        output += "-"
        add_minus = True

    if digits > 0 and len(output) < digits:
        output += (" " if int_style.space_fill else "0") * (digits - len(output))

    equal_to_digits = digits > 0 and len(output) == digits
    if chunk > 0:
        output = " ".join(output[begin : begin + chunk] for begin in range(0, len(output), chunk))

    if not add_minus and value < 0:
        output += "-"
    elif int_style.support_negative and equal_to_digits:
        output += " "

    output = output[::-1]

    if base == 10:
        return paint.number(output)
    return paint.number(output) + paint.op(f" _{base}")


def export_float(value: float, options: Options) -> str:
    """Render a floating-point number with six decimal places."""
    return Painter(options).number(f"{value:f}")