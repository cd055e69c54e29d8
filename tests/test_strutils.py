import pytest

from strutilkit.strutils import (
    all_lower,
    all_upper,
    first_letter_upper,
    reverse,
    trim,
    trim_numbers,
)

SAMPLES = [
    "",
    "a",
    "Hello, World",
    "  padded  text \t\n",
    "mixed 123 digits 456",
    "ünïcode ß text",
]


def test_reverse_simple():
    assert reverse("abc") == "cba"


@pytest.mark.parametrize("text", SAMPLES)
def test_reverse_round_trip(text):
    assert reverse(reverse(text)) == text
    assert len(reverse(text)) == len(text)


def test_reverse_empty():
    assert reverse("") == ""


def test_trim_removes_c_whitespace():
    assert trim("  \t\v\fhello there\r\n ") == "hello there"


def test_trim_empty_and_blank():
    assert trim("") == ""
    assert trim(" \t\n ") == ""


def test_trim_keeps_non_ascii_space():
    text = "\u00a0x\u00a0"
    assert trim(text) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_trim_idempotent_and_clean_edges(text):
    result = trim(text)
    assert trim(result) == result
    if result:
        assert not result[0].isspace()
        assert not result[-1].isspace()
    assert result in text


def test_all_upper_ascii():
    assert all_upper("Hello, World 42") == "HELLO, WORLD 42"


def test_all_upper_leaves_non_ascii():
    assert all_upper("ß") == "ß"
    assert all_upper("é") == "é"


@pytest.mark.parametrize("text", SAMPLES)
def test_case_conversions_consistent(text):
    assert all_lower(all_upper(text)) == all_lower(text)
    assert all_upper(all_lower(text)) == all_upper(text)
    assert len(all_upper(text)) == len(text)


def test_all_lower_ascii_only():
    assert all_lower("ABC") == "abc"
    assert all_lower("É") == "É"


def test_first_letter_upper_words():
    assert first_letter_upper("hello world\tfoo") == "Hello World\tFoo"


def test_first_letter_upper_keeps_rest_of_word():
    assert first_letter_upper("mIXed") == "MIXed"


@pytest.mark.parametrize("text", SAMPLES)
def test_first_letter_upper_only_changes_case(text):
    result = first_letter_upper(text)
    assert len(result) == len(text)
    assert all_lower(result) == all_lower(text)


def test_first_letter_upper_digit_starts_word():
    assert first_letter_upper("1abc def") == "1abc Def"


def test_trim_numbers_digits_only():
    assert trim_numbers("0123456789") == ""


@pytest.mark.parametrize("text", ["", "no digits here", "ünïcode"])
def test_trim_numbers_without_digits_is_identity(text):
    assert trim_numbers(text) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_trim_numbers_result_has_no_digits(text):
    result = trim_numbers(text)
    assert not any(ch in "0123456789" for ch in result)
    assert trim_numbers(result) == result