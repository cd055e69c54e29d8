"""Small text transformations using C-locale (ASCII) character classes."""

import string

#: Characters treated as whitespace, as in the C locale.
C_WHITESPACE = " \t\n\v\f\r"

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_DROP_DIGITS = str.maketrans("", "", string.digits)


def reverse(text):
    """Return *text* with its characters in reverse order."""
    return text[::-1]


def trim(text):
    """Return *text* without leading and trailing whitespace."""
    return text.strip(C_WHITESPACE)


def all_upper(text):
    """Return *text* with every ASCII letter in upper case."""
    return text.translate(_TO_UPPER)


def all_lower(text):
    """Return *text* with every ASCII letter in lower case."""
    return text.translate(_TO_LOWER)


def first_letter_upper(text):
    """Upper-case the first character of every whitespace-separated word.

    The remaining characters of each word keep their case.
    """
    chars = []
    new_word = True
    for ch in text:
        if ch in C_WHITESPACE:
            new_word = True
        elif new_word:
            ch = ch.translate(_TO_UPPER)
            new_word = False
        chars.append(ch)
    return "".join(chars)


def trim_numbers(text):
    """Return *text* with every decimal digit removed."""
    return text.translate(_DROP_DIGITS)