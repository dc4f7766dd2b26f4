"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import overload


def _code(c: str | int) -> int:
    if isinstance(c, int):
        return c
    if isinstance(c, str) and len(c) == 1:
        return ord(c)
    raise ValueError(f"expected a single character or a code point, got {c!r}")


def isalpha(c: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: str | int) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """Return True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def isspace(c: str | int) -> bool:
    """Return True for a blank: a space or a horizontal tab only."""
    return _code(c) in (ord(" "), ord("\t"))


@overload
def tolower(c: str) -> str: ...
@overload
def tolower(c: int) -> int: ...
def tolower(c):
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


@overload
def toupper(c: str) -> str: ...
@overload
def toupper(c: int) -> int: ...
def toupper(c):
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code