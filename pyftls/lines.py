"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

DEFAULT_BUFFER_SIZE = 10


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of stream, reading buffer_size units at a time.

    Each line keeps its trailing newline; a last line without one is
    yielded as it is. NUL characters in the input are dropped. Works on
    text and binary streams alike and yields the stream's own type.
    """
    if buffer_size < 1:
        raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
    pending = None
    while chunk := stream.read(buffer_size):
        if pending is None:
            pending = chunk[:0]
            newline = "\n" if isinstance(chunk, str) else b"\n"
            nul = "\0" if isinstance(chunk, str) else b"\0"
        pending += chunk.replace(nul, chunk[:0])
        while (end := pending.find(newline)) >= 0:
            yield pending[:end + 1]
            pending = pending[end + 1:]
    if pending:
        yield pending