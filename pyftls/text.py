"""Searching, slicing, joining, trimming, splitting and mapping strings.

Strings are read up to their first NUL character. Searches return an
offset into the string, or None when nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyftls.strings import strlen

_NUL = "\0"
_TRIM_CHARS = " \n\t"


def _cstr(s: str) -> str:
    return s[:strlen(s)]


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strchr(s: str, c: str) -> int | None:
    """Offset of the first c in s; a NUL c gives the length of s."""
    text = _cstr(s)
    if _single(c) == _NUL:
        return len(text)
    found = text.find(c)
    return None if found < 0 else found


def strrchr(s: str, c: str) -> int | None:
    """Offset of the last c in s; a NUL c gives the length of s."""
    text = _cstr(s)
    if _single(c) == _NUL:
        return len(text)
    found = text.rfind(c)
    return None if found < 0 else found


def strstr(haystack: str, needle: str) -> int | None:
    """Offset of the first occurrence of needle; an empty needle gives 0."""
    found = _cstr(haystack).find(_cstr(needle))
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like strstr, but the match must lie within the first length characters."""
    if length < 0:
        raise ValueError(f"negative length: {length}")
    target = _cstr(needle)
    if not target:
        return 0
    found = _cstr(haystack)[:length].find(target)
    return None if found < 0 else found


def strsub(s: str | None, start: int, length: int) -> str | None:
    """Return length characters of s from start; None for None or length 0."""
    if s is None or length == 0:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(s)
    if start + length > len(text):
        raise IndexError(
            f"substring [{start}:{start + length}] runs past a string of {len(text)}"
        )
    return text[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str:
    """Return s1 followed by s2; None counts as empty."""
    return (_cstr(s1) if s1 is not None else "") + (
        _cstr(s2) if s2 is not None else ""
    )


def strtrim(s: str | None) -> str | None:
    """Strip spaces, newlines and tabs from both ends; None gives None."""
    if s is None:
        return None
    return _cstr(s).strip(_TRIM_CHARS)


def strsplit(s: str | None, c: str) -> list[str] | None:
    """Split s on c, dropping empty pieces; None gives None."""
    if s is None:
        return None
    sep = _single(c)
    text = _cstr(s)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmap(s: str | None, func: Callable[[str], str]) -> str | None:
    """Return a string made of func applied to each character; None gives None."""
    if s is None:
        return None
    return "".join(func(ch) for ch in _cstr(s))


def strmapi(s: str | None, func: Callable[[int, str], str]) -> str | None:
    """Like strmap, but func also receives the character's offset."""
    if s is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(_cstr(s)))


def striter(s: str | None, func: Callable[[str], Any]) -> None:
    """Call func on each character of s."""
    if s is None or func is None:
        return
    for ch in _cstr(s):
        func(ch)


def striteri(s: str | None, func: Callable[[int, str], Any]) -> None:
    """Call func with the offset and value of each character of s."""
    if s is None or func is None:
        return
    for i, ch in enumerate(_cstr(s)):
        func(i, ch)