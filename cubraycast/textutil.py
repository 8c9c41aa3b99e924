"""Small text helpers used when reading scene files."""

from __future__ import annotations

from collections.abc import Iterator

WHITESPACE = " \f\n\r\t\v"

_ATOI_SPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def split_fields(text: str, sep: str) -> list[str]:
    """Split on every separator, keeping empty fields; an empty text gives no fields."""
    if not text:
        return []
    return text.split(sep)


def atoi(text: str) -> int:
    """Parse a leading optionally signed decimal integer; 0 when there is none."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and text[pos] in _DIGITS:
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * value


def trim(text: str | None, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    if text is None:
        return ""
    return text.strip(chars) if chars else text


def is_number(text: str | None) -> bool:
    """True when ``text`` is non-empty and made only of ASCII digits."""
    if not text:
        return False
    return all(ch in _DIGITS for ch in text)


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines with their trailing newline; a final unterminated line is yielded as is."""
    start = 0
    while True:
        end = text.find("\n", start)
        if end == -1:
            if start < len(text):
                yield text[start:]
            return
        yield text[start:end + 1]
        start = end + 1