"""The listing command."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO

from pyftls.entries import FileEntry
from pyftls.flags import Flag, UsageError, parse_flags, usage_message
from pyftls.listing import format_invalid, is_hidden_root, read_folder
from pyftls.sorting import sort_entries


def collect_operands(operands: Sequence[str]) -> list[FileEntry]:
    """Entries for the named operands, marking those that do not exist."""
    entries = []
    for operand in operands:
        try:
            os.stat(operand)
            missing = False
        except OSError:
            missing = True
        entries.append(FileEntry(operand, operand, is_error=missing))
    return entries


def run(args: Sequence[str], out: TextIO | None = None) -> int:
    """List the folders named in args, or the current one; return the exit status."""
    out = sys.stdout if out is None else out
    try:
        flags, operands = parse_flags(args)
    except UsageError as error:
        out.write(usage_message(error.option))
        return 0
    entries = collect_operands(operands) if operands else [FileEntry(".", ".")]
    entries = sort_entries(entries, Flag.REVERSE in flags)
    out.write(format_invalid(entries))
    show_header = len(entries) > 1 or Flag.RECURSIVE in flags
    for entry in entries:
        if not entry.is_error and not is_hidden_root(entry.name, flags):
            read_folder(entry, flags, show_header, out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command."""
    args = sys.argv[1:] if argv is None else argv
    return run(args, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())