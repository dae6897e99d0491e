"""Sliding-window problems with fixed and variable window sizes."""

from __future__ import annotations

import math
from collections.abc import Sequence


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones obtainable by flipping at most k zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    start = 0
    zeros = 0
    best = 0
    for index, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[start] == 0:
                zeros -= 1
            start += 1
        best = max(best, index - start + 1)
    return best


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest subarray whose sum reaches target, or 0."""
    best = math.inf
    window = 0
    start = 0
    for index, value in enumerate(nums):
        window += value
        while window >= target and start <= index:
            best = min(best, index - start + 1)
            window -= nums[start]
            start += 1
    return 0 if best == math.inf else int(best)


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average of any contiguous subarray of length k."""
    if not 0 < k <= len(nums):
        raise ValueError("k must be between 1 and the length of nums")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k