"""Conversions from binary text to decimal, octal and hexadecimal."""

from __future__ import annotations

_HEX_DIGITS = "0123456789ABCDEF"


def binary_to_decimal(digits: str | int) -> int:
    """Interpret a string (or integer) of 1s and 0s as a binary number.

    Raises ValueError for anything other than binary digits.
    """
    text = str(digits).strip()
    if not text or any(ch not in "01" for ch in text):
        raise ValueError(f"not a binary number: {digits!r}")
    value = 0
    for ch in text:
        value = value * 2 + int(ch)
    return value


def _to_base(value: int, base: int) -> str:
    if value < 0:
        raise ValueError("only non-negative values can be converted")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_HEX_DIGITS[remainder])
    return "".join(reversed(digits))


def to_octal(value: int) -> str:
    """Octal digits of a non-negative integer."""
    return _to_base(value, 8)


def to_hexadecimal(value: int) -> str:
    """Upper-case hexadecimal digits of a non-negative integer."""
    return _to_base(value, 16)