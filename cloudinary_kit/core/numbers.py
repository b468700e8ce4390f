from __future__ import annotations
from decimal import Decimal
from typing import Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Render a number as a URL token.
    - ints stay integral: 5 -> "5"
    - floats use the shortest round-trip form, never exponent notation,
      and always keep a fractional part: 2.0 -> "2.0", 1e-07 -> "0.0000001"
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    text = repr(float(value))
    if "e" not in text and "E" not in text:
        return text

    expanded = format(Decimal(text), "f")
    if "." not in expanded:
        expanded += ".0"
    return expanded


def truncate(value: Number) -> str:
    """Dimension tokens drop the fractional part (toward zero)."""
    return str(int(value))
