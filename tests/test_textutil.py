import pytest

from cubraycast.textutil import (
    WHITESPACE,
    atoi,
    is_number,
    iter_lines,
    split_fields,
    trim,
)


def test_split_simple():
    assert split_fields("255,0,10", ",") == ["255", "0", "10"]


def test_split_keeps_empty_fields():
    assert split_fields("a,,b", ",") == ["a", "", "b"]
    assert split_fields("a,", ",") == ["a", ""]
    assert split_fields(",a", ",") == ["", "a"]


def test_split_empty_text():
    assert split_fields("", ",") == []


@pytest.mark.parametrize("text", ["1,2,3", ",,", "x", "a,b,", " 1 , 2"])
def test_split_round_trip(text):
    parts = split_fields(text, ",")
    assert ",".join(parts) == text
    assert len(parts) == text.count(",") + 1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("+7", 7),
        ("\t\n 12", 12),
        ("--5", 0),
        ("abc", 0),
        ("", 0),
        ("255", 255),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_trim_both_ends():
    assert trim("  a b \n", " \n") == "a b"


def test_trim_whitespace_set():
    assert trim("\t\v ./tex.xpm \r\n", WHITESPACE) == "./tex.xpm"


def test_trim_none_and_all():
    assert trim(None, " ") == ""
    assert trim("    ", " ") == ""


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("0", True), ("", False), (None, False), ("12a", False), ("-1", False), (" 1", False)],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_iter_lines_keeps_newlines():
    assert list(iter_lines("a\nb")) == ["a\n", "b"]


def test_iter_lines_trailing_newline():
    assert list(iter_lines("a\n")) == ["a\n"]
    assert list(iter_lines("\n\n")) == ["\n", "\n"]


def test_iter_lines_empty():
    assert list(iter_lines("")) == []


@pytest.mark.parametrize("text", ["NO ./a\n\n111\n101\n111", "x", "\nfoo\n", "one\ntwo\nthree\n"])
def test_iter_lines_round_trip(text):
    lines = list(iter_lines(text))
    assert "".join(lines) == text
    assert all(line.count("\n") <= 1 for line in lines)
    assert all("\n" not in line[:-1] for line in lines)