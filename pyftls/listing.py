"""Reading folders and writing their listings."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterable
from typing import TextIO

from pyftls.entries import FileEntry
from pyftls.flags import Flag
from pyftls.sorting import sort_entries

_DOT_ENTRIES = (".", "..")


def is_hidden_root(name: str, flags: Flag) -> bool:
    """True for an operand starting with a dot that is neither '.' nor '..'-like."""
    if Flag.ALL in flags:
        return False
    return name.startswith(".") and name[1:2] not in ("", ".")


def is_hidden(name: str, flags: Flag) -> bool:
    """True for a folder entry that starts with a dot, unless all are shown."""
    return Flag.ALL not in flags and name.startswith(".")


def scan_folder(entry: FileEntry, flags: Flag) -> None:
    """Add the visible entries of the folder at entry.path_name to entry.

    Raises OSError if the folder cannot be opened. Entries whose path
    cannot be examined are left out.
    """
    if not entry.path_name:
        raise FileNotFoundError("no path to read")
    names = [*_DOT_ENTRIES, *os.listdir(entry.path_name)]
    for name in names:
        if is_hidden(name, flags):
            continue
        path = f"{entry.path_name}/{name}"
        try:
            info = os.stat(path)
        except OSError:
            continue
        entry.add(FileEntry(name, path, is_folder=stat.S_ISDIR(info.st_mode)))


def format_listing(entry: FileEntry, show_header: bool) -> str:
    """The listing of entry's children, with a header line if asked for."""
    lines = [f"{entry.path_name}:\n"] if show_header else []
    for child in entry.files:
        mark = "1" if child.is_folder else "0"
        lines.append(f"{child.name:>35}{mark:>10}\n")
    lines.append("\n")
    return "".join(lines)


def format_invalid(entries: Iterable[FileEntry]) -> str:
    """Error lines for every entry that could not be found."""
    return "".join(
        f"ls: {entry.name}: No such file or directory\n"
        for entry in entries
        if entry.is_error
    )


def read_folder(
    entry: FileEntry, flags: Flag, show_header: bool, out: TextIO | None = None
) -> None:
    """Read, sort and write the listing of a folder, descending if recursive.

    A folder that cannot be opened writes nothing.
    """
    out = sys.stdout if out is None else out
    try:
        scan_folder(entry, flags)
    except OSError:
        return
    entry.files = sort_entries(entry.files, Flag.REVERSE in flags)
    out.write(format_listing(entry, show_header))
    if Flag.RECURSIVE in flags:
        for child in entry.nested_folders():
            read_folder(child, flags, show_header, out)
    entry.clear()