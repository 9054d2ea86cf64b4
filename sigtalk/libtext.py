"""Small text helpers: integer parsing and formatting, splitting, trimming, searching."""

from __future__ import annotations

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_BITS = 32


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the classic ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits gives 0. The
    result wraps around into the signed 32-bit range.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + (ord(char) - ord("0"))
    return _to_int32(sign * value)


def itoa(number: int) -> str:
    """Return the decimal text of ``number``."""
    return str(int(number))


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces.

    An empty separator leaves the text whole: it comes back as a single
    word, or as no words at all when the text is empty.
    """
    if len(separator) > 1:
        raise ValueError("separator must be a single character")
    if not separator:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None
    when there is no match that ends within the limit.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second