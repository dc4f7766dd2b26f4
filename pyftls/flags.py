"""Command-line option parsing for the listing command."""

from __future__ import annotations

import enum
from collections.abc import Sequence

FLAG_TYPES = "alRrt"


class Flag(enum.IntFlag):
    """Options that change what is listed and how."""

    RECURSIVE = 0b00001000
    TIME = 0b00010000
    ALL = 0b00100000
    LONG = 0b01000000
    REVERSE = 0b10000000


_OPTIONS = {
    "L": Flag.LONG,
    "a": Flag.ALL,
    "R": Flag.RECURSIVE,
    "r": Flag.REVERSE,
    "t": Flag.TIME,
}


def usage_message(option: str) -> str:
    """The message shown for an unknown option."""
    return f"ls: illegal option -- {option}\nusage: ls [-{FLAG_TYPES}] [file ...]\n"


class UsageError(Exception):
    """An unknown option was given."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(usage_message(option))


def parse_flags(args: Sequence[str]) -> tuple[Flag, list[str]]:
    """Read leading option arguments; return the flags and the operands after them.

    Options end at the first argument that does not start with a dash.
    """
    args = list(args)
    flags = Flag(0)
    index = 0
    while index < len(args) and args[index].startswith("-"):
        for option in args[index][1:]:
            try:
                flags |= _OPTIONS[option]
            except KeyError:
                raise UsageError(option) from None
        index += 1
    return flags, args[index:]