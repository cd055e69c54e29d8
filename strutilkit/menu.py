"""Interactive menu that applies string transformations to one line of input."""

import sys
from enum import Enum

from strutilkit.strutils import (
    C_WHITESPACE,
    all_lower,
    all_upper,
    first_letter_upper,
    reverse,
    trim,
    trim_numbers,
)

MAX_INPUT = 99

MENU = (
    "\nWhat would you like to do with this string?\n"
    "Press 'R' to Reverse the string\n"
    "Press 'T' to Trim leading/trailing whitespace\n"
    "Press 'U' to convert to ALL UPPERCASE\n"
    "Press 'L' to convert to ALL lowercase\n"
    "Press 'F' to capitalize First Letter of Each Word\n"
    "Press 'N' to Trim all Numbers\n"
    "Press 'E' to exit\n"
    "Enter your choice: "
)


class Action(Enum):
    """A menu entry, keyed by its letter."""

    REVERSE = "R"
    TRIM = "T"
    UPPER = "U"
    LOWER = "L"
    FIRST_LETTER_UPPER = "F"
    TRIM_NUMBERS = "N"
    EXIT = "E"

    @classmethod
    def from_key(cls, key):
        """Return the action for *key*, ignoring case."""
        try:
            return cls(key.upper())
        except ValueError:
            raise ValueError(f"unknown action key: {key!r}") from None


_TRANSFORMS = {
    Action.REVERSE: reverse,
    Action.TRIM: trim,
    Action.UPPER: all_upper,
    Action.LOWER: all_lower,
    Action.FIRST_LETTER_UPPER: first_letter_upper,
    Action.TRIM_NUMBERS: trim_numbers,
}

_LABELS = {
    Action.TRIM: "trim",
    Action.UPPER: "uppercase",
    Action.LOWER: "lowercase",
    Action.FIRST_LETTER_UPPER: "capitalizing first letters",
    Action.TRIM_NUMBERS: "trimming numbers",
}


def apply_action(action, text):
    """Return *text* transformed by *action*."""
    try:
        transform = _TRANSFORMS[action]
    except KeyError:
        raise ValueError(f"{action} does not transform text") from None
    return transform(text)


def _choices(pending, stream):
    """Yield non-whitespace characters, first from *pending*, then *stream*."""

    def chars():
        yield from pending
        while ch := stream.read(1):
            yield ch

    for ch in chars():
        if ch not in C_WHITESPACE:
            yield ch


def run(stdin, stdout):
    """Run the menu on the given text streams and return the exit status."""
    write = stdout.write
    write("Please enter a string (max 99 characters): ")
    line = stdin.readline()
    if not line:
        write("Error reading input.\n")
        return 1

    head, pending = line[:MAX_INPUT], line[MAX_INPUT:]
    text = head.split("\n", 1)[0]
    choices = _choices(pending, stdin)
    write(f'You entered: "{text}"\n')

    while True:
        write(MENU)
        choice = next(choices, None)
        if choice is None:
            return 0
        try:
            action = Action.from_key(choice)
        except ValueError:
            action = None

        if action is Action.EXIT:
            write("Thank you, Hen gap lai\n")
            return 0
        if action is None:
            write("Invalid choice. No action performed.\n")
        elif action is Action.REVERSE:
            text = apply_action(action, text)
            write(f'Reversed string: "{text}"\n')
        else:
            label = _LABELS[action]
            write(f'Original string before {label}: "{text}"\n')
            text = apply_action(action, text)
            write(f'String after {label}: "{text}"\n')

        write("What to do next? Press 'C' to continue or any Key to exit:")
        choice = next(choices, None)
        if choice is None or choice not in "Cc":
            return 0


def main(argv=None):
    """Run the menu on standard input and output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())