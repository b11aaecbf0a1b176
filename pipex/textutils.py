"""Small string helpers used to parse commands and the environment."""

from __future__ import annotations

import re
from collections.abc import Iterable
from itertools import islice, zip_longest

_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def split(s: str, sep: str) -> list[str]:
    """Split *s* on *sep*, dropping empty pieces."""
    return [piece for piece in s.split(sep) if piece]


def env_lookup(env: Iterable[str], word: str) -> str | None:
    """Return the value of the first ``KEY=VALUE`` entry whose text starts with *word*.

    The value is whatever follows *word* and one more character (the ``=``).
    Returns None when no entry matches.
    """
    if not word:
        raise ValueError("word must not be empty")
    for entry in env:
        if entry.startswith(word):
            return entry[len(word) + 1:]
    return None


def atoi(s: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    A sign not followed by a digit, or no digits at all, gives 0.
    """
    match = _ATOI_RE.match(s)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(int(n))


def strtrim(s: str, chars: str) -> str:
    """Remove every character in *chars* from both ends of *s*."""
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* beginning at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* lying wholly within the first *length* characters of *haystack*.

    Returns the index of the match, or None.  An empty needle matches at 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code-point difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(zip_longest(s1, s2, fillvalue="\0"), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError("c must be a single character")


def strchr(s: str, c: str) -> int | None:
    """Index of the first *c* in *s*; a NUL character matches at ``len(s)``."""
    _check_char(c)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return index if index >= 0 else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last *c* in *s*; a NUL character matches at ``len(s)``."""
    _check_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None