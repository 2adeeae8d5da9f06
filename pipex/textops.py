"""Small string helpers used to parse command lines and environment values."""

from __future__ import annotations

import re
from itertools import zip_longest

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_SPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [piece for piece in text.split(sep) if piece]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none."""
    match = _NUMBER.match(text.lstrip(_LEADING_SPACE))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit integer")
    return str(number)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or None when there is none.
    An empty needle matches at index 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return the difference of the first mismatch."""
    pairs = zip_longest(first, second, fillvalue="\0")
    for position, (left, right) in enumerate(pairs):
        if position >= count:
            break
        if left != right:
            return ord(left) - ord(right)
    return 0