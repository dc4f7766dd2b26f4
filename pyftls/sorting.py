"""Ordering of listing entries by name."""

from __future__ import annotations

from collections.abc import Iterable

from pyftls.entries import FileEntry


def sort_entries(entries: Iterable[FileEntry], reverse: bool = False) -> list[FileEntry]:
    """Return entries ordered by name, by character code; descending if reverse."""
    return sorted(entries, key=lambda entry: entry.name, reverse=reverse)