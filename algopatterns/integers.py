"""Bit manipulation and digit problems over integers."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from functools import reduce

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def _as_word(n: int) -> int:
    if not -(1 << (_WORD_BITS - 1)) <= n <= _WORD_MASK:
        raise ValueError("value does not fit in a 32-bit word")
    return n & _WORD_MASK


def count_bits(n: int) -> list[int]:
    """Number of set bits for every integer from 0 to n inclusive."""
    if n < 0:
        raise ValueError("n must not be negative")
    bits = [0]
    for i in range(1, n + 1):
        bits.append(bits[i >> 1] + (i & 1))
    return bits


def hamming_weight(n: int) -> int:
    """Number of set bits in n taken as a 32-bit word."""
    return bin(_as_word(n)).count("1")


def reverse_bits(n: int) -> int:
    """The 32-bit word n with its bit order reversed, as an unsigned value."""
    return int(format(_as_word(n), f"0{_WORD_BITS}b")[::-1], 2)


def single_number(nums: Iterable[int]) -> int:
    """The one value that appears an odd number of times when all others pair up."""
    return reduce(operator.xor, nums, 0)


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits of n reaches 1."""
    slow = fast = n
    while True:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
        if slow == fast:
            return slow == 1