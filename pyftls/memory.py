"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from collections.abc import Sequence

ByteSource = bytes | bytearray | memoryview


def _require(buf: object, name: str) -> None:
    if buf is None:
        raise ValueError(f"{name} must not be None")


def _check_range(buf: Sequence[int], n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of size bytes."""
    if size < 0:
        raise ValueError(f"negative size: {size}")
    return bytearray(size)


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first length bytes of buf with the low byte of c."""
    _require(buf, "buf")
    _check_range(buf, length, "buf")
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first length bytes of buf to zero."""
    memset(buf, 0, length)


def memcpy(dst: bytearray, src: ByteSource, n: int) -> bytearray:
    """Copy n bytes from src to the start of dst."""
    _require(dst, "dst")
    _require(src, "src")
    _check_range(src, n, "src")
    _check_range(dst, n, "dst")
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: ByteSource, c: int, n: int) -> int | None:
    """Copy from src to dst up to and including the first byte equal to c.

    At most n bytes are copied. Return the offset in dst just past the
    copied c, or None if c was not among the first n bytes.
    """
    _require(dst, "dst")
    _require(src, "src")
    _check_range(src, n, "src")
    found = bytes(src[:n]).find(c & 0xFF)
    count = n if found < 0 else found + 1
    _check_range(dst, count, "dst")
    dst[:count] = bytes(src[:count])
    return None if found < 0 else count


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes within buf from offset src to offset dst; regions may overlap."""
    _require(buf, "buf")
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"negative length: {n}")
    if max(dst, src) + n > len(buf):
        raise IndexError(f"move of {n} bytes runs past a buffer of {len(buf)}")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: ByteSource, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to c within n bytes, or None."""
    _require(data, "data")
    _check_range(data, n, "data")
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _require(a, "a")
    _require(b, "b")
    _check_range(a, n, "a")
    _check_range(b, n, "b")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0