"""Decimal integer parsing and formatting."""

from __future__ import annotations

from pyftls.chars import isdigit, isspace

_LIMIT = 922337203685477580


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse(text: str) -> tuple[int, str]:
    """Parse a leading integer; return the value and the unparsed rest."""
    i = 0
    while i < len(text) and isspace(text[i]):
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        sign = -1 if text[i] == "-" else 1
        i += 1
    result = 0
    while i < len(text) and isdigit(text[i]):
        digit = text[i]
        over = result > _LIMIT
        if sign == 1 and (over or (result == _LIMIT and digit > "7")):
            return -1, ""
        if sign == -1 and (over or (result == _LIMIT and digit > "8")):
            return 0, ""
        result = result * 10 + int(digit)
        i += 1
    return _to_int32(_to_int32(result) * sign), text[i:]


def atoi(text: str) -> int:
    """Convert the leading integer of text, wrapping to a 32-bit int.

    Leading spaces and tabs are skipped. A value past the 64-bit range
    gives -1 when positive and 0 when negative.
    """
    return _parse(text)[0]


def atoi_strict(text: str) -> int:
    """Like atoi, but raise ValueError if anything follows the digits."""
    value, rest = _parse(text)
    if rest:
        raise ValueError(f"invalid integer: {text!r}")
    return value


def capacity(n: int) -> int:
    """Number of characters in the decimal form of n, sign included."""
    digits = 1
    if n < 0:
        digits += 1
        n = -n
    while n >= 10:
        digits += 1
        n //= 10
    return digits


def itoa(n: int) -> str:
    """Decimal form of n."""
    return str(n)