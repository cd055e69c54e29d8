"""List the entries of a directory with their type, size and modification time."""

import os
import stat
import sys
import time
from dataclasses import dataclass

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_NAME_MAX = 255

_TYPE_CHARS = {
    stat.S_IFDIR: "d",
    stat.S_IFREG: "-",
    stat.S_IFLNK: "l",
    stat.S_IFIFO: "p",
    stat.S_IFSOCK: "s",
    stat.S_IFCHR: "c",
    stat.S_IFBLK: "b",
}


@dataclass(frozen=True)
class FileProperty:
    """Properties of one directory entry."""

    kind: str
    size: int
    last_modified: str
    name: str


def file_type_char(mode):
    """Return the one-letter type for a stat mode, or '?' if unknown."""
    return _TYPE_CHARS.get(stat.S_IFMT(mode), "?")


def format_mtime(timestamp):
    """Format *timestamp* as local time, or 'N/A' if it cannot be converted."""
    try:
        return time.strftime(_TIME_FORMAT, time.localtime(timestamp))
    except (OverflowError, OSError, ValueError):
        return "N/A"


def list_directory(path):
    """Return a FileProperty for each entry of *path*.

    Raises FileNotFoundError or NotADirectoryError for a bad *path*.
    Entries that cannot be examined are reported on stderr and skipped.
    """
    properties = []
    for name in os.listdir(path):
        try:
            info = os.stat(os.path.join(path, name))
        except OSError as exc:
            print(f"Error getting file status: {exc.strerror}", file=sys.stderr)
            continue
        properties.append(
            FileProperty(
                kind=file_type_char(info.st_mode),
                size=info.st_size,
                last_modified=format_mtime(info.st_mtime),
                name=name[:_NAME_MAX],
            )
        )
    return properties


def format_table(path, properties):
    """Render *properties* as a text table headed by *path*."""
    lines = [
        f"File/Folder Properties in '{path}':",
        f"{'Type':<5} {'Size':<10} {'Last Modified':<20} Name",
        "----- ---------- -------------------- "
        "-----------------------------------------------------",
    ]
    lines.extend(
        f"{p.kind:<5} {p.size:<10} {p.last_modified:<20} {p.name}" for p in properties
    )
    return "\n".join(lines)


def main(argv=None):
    """Ask for a directory on standard input and print its entries."""
    sys.stdout.write("Enter the path to a directory: ")
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        print("Thu muc khong ton tai", file=sys.stderr)
        return 1
    path = line.split("\n", 1)[0]

    try:
        properties = list_directory(path)
    except FileNotFoundError:
        print(f"Error: Directory '{path}' does not exist.", file=sys.stderr)
        return 1
    except NotADirectoryError:
        print(f"Error: '{path}' is not a directory.", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error opening directory: {exc.strerror}", file=sys.stderr)
        return 1

    sys.stdout.write("\n" + format_table(path, properties) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())