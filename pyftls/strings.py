"""Operations on NUL-terminated strings.

Every string is read up to its first NUL character, the way a C string
ends there. Functions that would change a buffer return a new string.
"""

from __future__ import annotations

_NUL = "\0"


def _cstr(s: str | None) -> str:
    """The part of s before its first NUL; None reads as empty."""
    if s is None:
        return ""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def strlen(s: str | None) -> int:
    """Number of characters before the first NUL; None has length 0."""
    return len(_cstr(s))


def strdup(s: str) -> str:
    """Return a copy of s."""
    if s is None:
        raise ValueError("cannot duplicate None")
    return _cstr(s)


def strndup(s: str | None, n: int) -> str | None:
    """Return a copy of at most the first n characters of s; None gives None."""
    if s is None:
        return None
    if n < 0:
        raise ValueError(f"negative length: {n}")
    return _cstr(s)[:n]


def strcut(s: str, c: str) -> str:
    """Return s up to, not including, the first c; all of s if c is absent."""
    text = _cstr(s)
    end = text.find(c[:1]) if c else -1
    return text if end < 0 else text[:end]


def strcat(s1: str, s2: str) -> str:
    """Return s2 appended to s1."""
    return _cstr(s1) + _cstr(s2)


def strncat(s1: str, s2: str, n: int) -> str:
    """Return at most n characters of s2 appended to s1."""
    if n < 0:
        raise ValueError(f"negative length: {n}")
    return _cstr(s1) + _cstr(s2)[:n]


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, NUL included.

    Return the resulting string and the length the full concatenation
    would have had. When dst is already longer than size it is left as it
    is and the length returned is len(src) + size.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    head, tail = _cstr(dst), _cstr(src)
    if len(head) > size:
        return head, len(tail) + size
    room = max(0, size - len(head) - 1)
    return head + tail[:room], len(head) + len(tail)


def strcpy(src: str) -> str:
    """Return a copy of src."""
    return _cstr(src)


def strncpy(src: str, length: int) -> str:
    """Return exactly length characters: src cut or padded with NULs."""
    if length < 0:
        raise ValueError(f"negative length: {length}")
    return _cstr(src)[:length].ljust(length, _NUL)


def _difference(a: str, b: str, i: int) -> int:
    x = ord(a[i]) if i < len(a) else 0
    y = ord(b[i]) if i < len(b) else 0
    return x - y


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first pair of unequal characters, or 0 if equal."""
    a, b = _cstr(s1), _cstr(s2)
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return ord(x) - ord(y)
    return _difference(a, b, min(len(a), len(b)))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like strcmp, but look at no more than n characters."""
    if n <= 0:
        return 0
    return strcmp(_cstr(s1)[:n], _cstr(s2)[:n])


def strequ(s1: str | None, s2: str | None) -> bool:
    """True if both strings are equal; two Nones are equal, one None is not."""
    if s1 is None or s2 is None:
        return s1 is None and s2 is None
    return _cstr(s1) == _cstr(s2)


def strnequ(s1: str | None, s2: str | None, n: int) -> bool:
    """True if the first n characters of both strings are equal.

    None and the empty string count as equal to each other; n of 0 is
    always equal.
    """
    if (not _cstr(s1) and not _cstr(s2)) or n == 0:
        return True
    if s1 is None or s2 is None:
        return False
    return _cstr(s1)[:n] == _cstr(s2)[:n]


def strnew(size: int) -> str:
    """Return a buffer of size NUL characters."""
    if size < 0:
        raise ValueError(f"negative size: {size}")
    return _NUL * size


def bubble_sort(s: str) -> str:
    """Return the characters of s in ascending order."""
    return "".join(sorted(_cstr(s)))