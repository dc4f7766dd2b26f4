"""Writing characters, strings and numbers to streams or descriptors."""

from __future__ import annotations

import os
import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: TextIO | None = None) -> None:
    """Write one character."""
    _target(stream).write(c[:1])


def putstr(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is not None:
        _target(stream).write(s)


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is not None:
        _target(stream).write(s + "\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(n))


def putstr_fd(s: str | None, fd: int) -> None:
    """Write a string to a file descriptor; fd -1 or None writes nothing."""
    if fd == -1 or s is None:
        return
    data = s.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]