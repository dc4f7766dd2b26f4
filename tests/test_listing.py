import io

import pytest

from pyftls.entries import FileEntry
from pyftls.flags import Flag
from pyftls.listing import (
    format_invalid,
    format_listing,
    is_hidden,
    is_hidden_root,
    read_folder,
    scan_folder,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "file.txt").write_text("x")
    (tmp_path / ".hidden").write_text("x")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "inner.txt").write_text("x")
    return tmp_path


@pytest.mark.parametrize("name,expected", [
    (".git", True), (".", False), ("..", False), ("..x", False), ("dir", False), ("", False),
])
def test_is_hidden_root(name, expected):
    assert is_hidden_root(name, Flag(0)) is expected


def test_is_hidden_root_with_all():
    assert is_hidden_root(".git", Flag.ALL) is False


def test_is_hidden():
    assert is_hidden(".", Flag(0)) is True
    assert is_hidden("name", Flag(0)) is False
    assert is_hidden(".x", Flag.ALL) is False


def test_scan_folder_hides_dot_files(tree):
    entry = FileEntry(str(tree), str(tree))
    scan_folder(entry, Flag(0))
    names = {f.name: f.is_folder for f in entry.files}
    assert names == {"file.txt": False, "sub": True}
    assert all(f.path_name == f"{tree}/{f.name}" for f in entry.files)


def test_scan_folder_with_all_includes_dots(tree):
    entry = FileEntry(str(tree), str(tree))
    scan_folder(entry, Flag.ALL)
    names = sorted(f.name for f in entry.files)
    assert names == sorted([".", "..", ".hidden", "file.txt", "sub"])


def test_scan_folder_missing(tmp_path):
    with pytest.raises(OSError):
        scan_folder(FileEntry("x", str(tmp_path / "missing")), Flag(0))


def test_format_listing_pinned():
    entry = FileEntry("d", "d")
    entry.add(FileEntry("a", "d/a"))
    assert format_listing(entry, False) == " " * 34 + "a" + " " * 9 + "0\n\n"


def test_format_listing_header_and_marks():
    entry = FileEntry("d", "some/path")
    entry.add(FileEntry("f", "x"))
    entry.add(FileEntry("g", "y", is_folder=True))
    lines = format_listing(entry, True).split("\n")
    assert lines[0] == "some/path:"
    assert lines[1].endswith("0") and lines[1].strip().startswith("f")
    assert lines[2].endswith("1") and lines[2].strip().startswith("g")
    assert len(lines[1]) == len(lines[2]) == 45


def test_format_invalid():
    entries = [FileEntry("ok"), FileEntry("bad", is_error=True)]
    assert format_invalid(entries) == "ls: bad: No such file or directory\n"


def test_read_folder_sorted_and_cleared(tree):
    entry = FileEntry(str(tree), str(tree))
    out = io.StringIO()
    read_folder(entry, Flag(0), False, out)
    names = [line.split()[0] for line in out.getvalue().splitlines() if line]
    assert names == ["file.txt", "sub"]
    assert entry.files == []


def test_read_folder_reverse(tree):
    out = io.StringIO()
    read_folder(FileEntry(str(tree), str(tree)), Flag.REVERSE, False, out)
    names = [line.split()[0] for line in out.getvalue().splitlines() if line]
    assert names == ["sub", "file.txt"]


def test_read_folder_recursive(tree):
    out = io.StringIO()
    read_folder(FileEntry(str(tree), str(tree)), Flag.RECURSIVE, True, out)
    text = out.getvalue()
    assert text.startswith(f"{tree}:\n")
    assert f"{tree}/sub:\n" in text
    assert "inner.txt" in text


def test_read_folder_unreadable_writes_nothing(tmp_path):
    out = io.StringIO()
    read_folder(FileEntry("m", str(tmp_path / "missing")), Flag(0), True, out)
    assert out.getvalue() == ""