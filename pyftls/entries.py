"""A file or folder in a listing, with the children read from it."""

from __future__ import annotations

from dataclasses import dataclass, field

_DOT_ENTRIES = (".", "..")


@dataclass
class FileEntry:
    """A named path; for a folder that has been read, its children."""

    name: str
    path_name: str | None = None
    is_folder: bool = False
    is_error: bool = False
    files: list[FileEntry] = field(default_factory=list)

    def add(self, child: FileEntry) -> None:
        """Append a child entry."""
        self.files.append(child)

    def nested_folders(self) -> list[FileEntry]:
        """Children that are folders, leaving out '.' and '..'."""
        return [f for f in self.files if f.is_folder and f.name not in _DOT_ENTRIES]

    def clear(self) -> None:
        """Drop all children, clearing nested folders first."""
        for child in self.nested_folders():
            child.clear()
        self.files = []