"""Two-pointer problems over sorted or bounded sequences."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets, each in ascending order, that sum to zero."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        lo, hi = i + 1, n - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total <= 0:
                if total == 0:
                    result.append([first, values[lo], values[hi]])
                lo += 1
                while lo < hi and values[lo] == values[lo - 1]:
                    lo += 1
            if total >= 0:
                hi -= 1
                while hi > lo and values[hi] == values[hi + 1]:
                    hi -= 1
    return result


def max_area(height: Sequence[int]) -> int:
    """Most water held between two of the given vertical lines."""
    best = 0
    lo, hi = 0, len(height) - 1
    while lo < hi:
        best = max(best, min(height[lo], height[hi]) * (hi - lo))
        if height[lo] <= height[hi]:
            lo += 1
        else:
            hi -= 1
    return best


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n items of nums2 into nums1, whose first m items are sorted."""
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must have room for m + n items and nums2 at least n")
    nums1[: m + n] = heapq.merge(nums1[:m], nums2[:n])


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """1-based positions of two items summing to target, or (-1, -1)."""
    lo, hi = 0, len(numbers) - 1
    while lo < hi:
        total = numbers[lo] + numbers[hi]
        if total == target:
            return lo + 1, hi + 1
        if total < target:
            lo += 1
        else:
            hi -= 1
    return -1, -1