# pyftls

`pyftls` lists the contents of directories in the manner of a minimal `ls`.
Each listing shows one entry per line. The name is right-aligned in a
35-column field, followed by a 10-column field that reads `1` for a
directory and `0` for anything else. Entries are sorted by name, by
character code.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Command line

```
pyftls [-aLRrt] [file ...]
```

With no operands the current directory (`.`) is listed. Everything is
written to standard output and the exit status is always 0.

| Option | Effect |
| ------ | ------ |
| `-a`   | include names beginning with `.`, including `.` and `..` |
| `-R`   | descend into subdirectories recursively (never into `.` or `..`) |
| `-r`   | reverse the sort order |
| `-L`, `-t` | accepted and recorded as flags; they do not change the output |

Options are read from the leading arguments that start with `-`, and may be
combined (`-aR`) or given separately. Any other option letter, `-l`
included, prints

```
ls: illegal option -- X
usage: ls [-alRrt] [file ...]
```

and nothing is listed.

Operands that do not exist are reported first, as
`ls: NAME: No such file or directory`. The remaining operands are listed in
sorted order. Without `-a`, an operand whose name starts with a dot (other
than `.` and names starting with `..`) is skipped. An operand that exists but
cannot be opened as a directory, such as a plain file, produces no output.
A heading line `path:` is printed above each listing when there is more than
one operand, or when `-R` is in effect; every listing ends with a blank line.

## What it does not do

There is no long format and no sorting by modification time: `-L` and `-t`
are parsed but have no effect. Files named as operands are not listed
themselves.

## Library use

The command is built from modules that can be used on their own:

- `pyftls.flags.parse_flags(args)` reads the leading option arguments and
  returns a `Flag` value together with the list of operands after them.
  An unknown option raises `UsageError`, whose message is
  `usage_message(option)`.
- `pyftls.entries.FileEntry` is a dataclass for a file or directory
  (`name`, `path_name`, `is_folder`, `is_error`, `files`), with `add`,
  `nested_folders` and `clear`.
- `pyftls.sorting.sort_entries(entries, reverse)` returns entries ordered by
  name.
- `pyftls.listing` provides `is_hidden_root`, `is_hidden`, `scan_folder`,
  `format_listing`, `format_invalid` and `read_folder`.
- `pyftls.cli.collect_operands(operands)` builds entries for named paths,
  and `pyftls.cli.run(args, out)` runs the whole program, writing to any text
  stream.

```python
import io
from pyftls.cli import run

buf = io.StringIO()
run(["-a", "."], buf)
print(buf.getvalue())
```

## Helpers

The package also carries a set of small general-purpose helpers:

- `pyftls.chars`: ASCII classification (`isalpha`, `isdigit`, `isalnum`,
  `isascii`, `isprint`, `isspace`) and `tolower` / `toupper`.
- `pyftls.numbers`: `atoi`, `atoi_strict` (raises `ValueError` on trailing
  text), `capacity` and `itoa`.
- `pyftls.strings`: operations on NUL-terminated strings such as `strlen`,
  `strdup`, `strcat`, `strlcat`, `strcmp`, `strnequ` and `bubble_sort`.
- `pyftls.text`: searching, slicing, joining, trimming, splitting and mapping
  (`strchr`, `strstr`, `strsub`, `strjoin`, `strtrim`, `strsplit`, `strmap`,
  and others).
- `pyftls.memory`: byte-buffer helpers (`memalloc`, `memset`, `bzero`,
  `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp`).
- `pyftls.linkedlist`: a singly linked `LinkedList` of `Node`s.
- `pyftls.output`: `putchar`, `putstr`, `putendl`, `putnbr` for streams and
  `putstr_fd` for file descriptors.
- `pyftls.lines.read_lines(stream, buffer_size)`: yields the lines of a text
  or binary stream, reading a fixed number of units at a time.