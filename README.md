# strutilkit

This package has three parts:

- small string helpers
- an interactive menu that applies the helpers to a line of text
- a tool that lists a directory's entries with their type, size and
  modification time

No third-party libraries are needed.

## Installation

```
pip install .
```

## String helpers

The helpers are in `strutilkit.strutils`. Each one takes a string and returns
a new string. Character classes follow the C locale (ASCII).

```python
from strutilkit.strutils import (
    reverse, trim, all_upper, all_lower, first_letter_upper, trim_numbers,
)

reverse("abc")                    # "cba"
trim("   hello  ")                # "hello"
all_upper("Hello")                # "HELLO"
all_lower("Hello")                # "hello"
first_letter_upper("hello world") # "Hello World"
trim_numbers("a1b2c3")            # "abc"
```

- `trim` removes leading and trailing spaces, tabs, newlines, vertical
  tabs, form feeds and carriage returns. The same set is exported as
  `C_WHITESPACE`.
- `all_upper` and `all_lower` change ASCII letters only. All other
  characters are left as they are.
- `first_letter_upper` upper-cases the first character of each word.
  Words are separated by whitespace. The rest of each word keeps its case.
- `trim_numbers` removes the ASCII digits `0` to `9`.

## Interactive menu

```
strutilkit-menu
```

The menu first asks for a string. Only the first 99 characters are kept.
It then asks for a choice:

| Key | Action                                   |
|-----|------------------------------------------|
| R   | Reverse the string                       |
| T   | Trim leading and trailing whitespace     |
| U   | Convert to all uppercase                 |
| L   | Convert to all lowercase                 |
| F   | Capitalize the first letter of each word |
| N   | Remove all digits                        |
| E   | Exit                                     |

- Keys are case-insensitive.
- Choices are read one character at a time, and whitespace is skipped.
- An unknown key prints "Invalid choice" and changes nothing.
- Each action works on the result of the one before it.
- After each action, press `C` to go on. Any other key, or the end of input,
  exits.

From code, the same loop runs on any text streams:

```python
import io
from strutilkit.menu import run

out = io.StringIO()
status = run(io.StringIO("hello world\nu\ne\n"), out)  # status == 0
```

`run` returns 1 if no input line could be read, and 0 otherwise.

Single actions are available too:

```python
from strutilkit.menu import Action, apply_action

apply_action(Action.from_key("r"), "abc")   # "cba"
```

Some inputs raise `ValueError`:

- `Action.from_key` raises it for an unknown key.
- `apply_action` raises it for `Action.EXIT`.

## Directory listing

```
strutilkit-filestat
```

The tool asks for a directory path on standard input. It then prints one row
per entry with these columns:

- Type: `d` (directory), `-` (regular file), `l`, `p` (FIFO), `s` (socket),
  `c` (character device), `b` (block device) or `?`. Symbolic links are
  followed, so an entry shows the type of its target.
- Size in bytes.
- Last modified, as `YYYY-MM-DD HH:MM:SS` in local time, or `N/A` if the time
  cannot be converted.
- Name, cut to 255 characters.

If an entry cannot be examined, it is reported on standard error and skipped.
The tool exits with status 1 in these cases:

- the path does not exist
- the path is not a directory
- the path cannot be opened

From code:

```python
from strutilkit.filestat import list_directory, format_table

entries = list_directory(".")
print(format_table(".", entries))
```

- `list_directory` returns a list of `FileProperty` records. Each record has
  the fields `kind`, `size`, `last_modified` and `name`.
- `list_directory` raises `FileNotFoundError` when the path does not exist,
  and `NotADirectoryError` when the path is not a directory.
- `file_type_char(mode)` gives the one-letter type for a stat mode.
- `format_mtime(timestamp)` gives the time string.