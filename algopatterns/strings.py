"""String problems: subsequences, prefixes, palindromes, zigzag and frequency order."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Sequence

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def is_subsequence(s: str, t: str) -> bool:
    """Whether s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest string that every item of strs starts with."""
    if not strs:
        raise ValueError("strs must not be empty")
    prefix: list[str] = []
    for chars in zip(*strs):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def reverse_words(s: str) -> str:
    """Words of s in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def is_palindrome(s: str) -> bool:
    """Whether s reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in s if char in _ALPHANUMERIC]
    return cleaned == cleaned[::-1]


def convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it off row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1:
        return s
    period = 2 * (num_rows - 1)
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for position, char in enumerate(s):
        offset = position % period
        rows[min(offset, period - offset)].append(char)
    return "".join("".join(row) for row in rows)


def frequency_sort(s: str) -> str:
    """Characters of s grouped and ordered by falling frequency.

    Characters that occur equally often appear in falling code-point order.
    """
    counts = sorted(Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(char * count for char, count in counts)