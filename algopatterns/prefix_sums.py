"""Prefix-sum problems: range queries and counting subarray sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate


class NumArray:
    """Immutable array answering inclusive range-sum queries in constant time."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._prefix = list(accumulate(nums, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements from index left to index right inclusive."""
        if not 0 <= left <= right < len(self):
            raise IndexError("range is outside the array")
        return self._prefix[right + 1] - self._prefix[left]


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum equals k."""
    seen = Counter({0: 1})
    running = 0
    total = 0
    for value in nums:
        running += value
        total += seen[running - k]
        seen[running] += 1
    return total


def subarrays_div_by_k(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum is divisible by k."""
    if k == 0:
        raise ZeroDivisionError("k must not be zero")
    seen = Counter({0: 1})
    remainder = 0
    total = 0
    for value in nums:
        remainder = (remainder + value) % k
        total += seen[remainder]
        seen[remainder] += 1
    return total