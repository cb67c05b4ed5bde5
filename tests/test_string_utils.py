import pytest

from aoc2024.string_utils import ends_with, split, starts_with, to_int, to_ll, trim


def test_split():
    result = split("a,b,c,d", ",")
    assert result == ["a", "b", "c", "d"]


def test_split_drops_empty_tokens():
    assert split(",a,,b,", ",") == ["a", "b"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [("  hello  ", "hello"), ("\t\nhello\n\t", "hello"), ("hello", "hello"), ("   ", "")],
)
def test_trim(text, expected):
    assert trim(text) == expected


def test_starts_with():
    assert starts_with("hello world", "hello")
    assert not starts_with("hello world", "world")
    assert starts_with("test", "te")
    assert not starts_with("test", "st")
    assert not starts_with("te", "test")


def test_ends_with():
    assert ends_with("hello world", "world")
    assert not ends_with("hello world", "hello")
    assert ends_with("test", "st")
    assert not ends_with("test", "te")
    assert not ends_with("st", "test")


@pytest.mark.parametrize(("text", "expected"), [("123", 123), ("  456  ", 456), ("-789", -789)])
def test_to_int(text, expected):
    assert to_int(text) == expected


def test_to_ll():
    assert to_ll("1234567890123456789") == 1234567890123456789
    assert to_ll("  9223372036854775807  ") == 9223372036854775807


def test_to_int_rejects_non_numbers():
    with pytest.raises(ValueError):
        to_int("abc")


def test_to_int_out_of_range():
    with pytest.raises(OverflowError):
        to_int("9223372036854775807")


def test_to_ll_out_of_range():
    with pytest.raises(OverflowError):
        to_ll("9223372036854775808")