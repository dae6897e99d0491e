"""Array problems: stock trading, majority vote, in-place rearrangements, Kadane."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import accumulate, groupby, pairwise


def _require_items(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("sequence must not be empty")


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from a single buy followed by a single later sell."""
    _require_items(prices)
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Best profit when any number of non-overlapping trades is allowed."""
    _require_items(prices)
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Whether there are indices i < j < k with nums[i] < nums[j] < nums[k]."""
    first = second = math.inf
    for value in nums:
        if value > first and value > second:
            return True
        if first < value < second:
            second = value
        elif value < first:
            first = value
    return False


def majority_element(nums: Sequence[int]) -> int:
    """The element occurring more than half the time (Boyer-Moore vote)."""
    _require_items(nums)
    candidate = nums[0]
    count = 1
    for value in nums[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def zero_filled_subarray(nums: Sequence[int]) -> int:
    """Number of contiguous subarrays made of zeros only."""
    total = 0
    for is_zero, run in groupby(nums, key=lambda value: value == 0):
        if is_zero:
            length = sum(1 for _ in run)
            total += length * (length + 1) // 2
    return total


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    values = list(nums)
    prefix = list(accumulate([1] + values[:-1], lambda a, b: a * b))
    suffix = list(accumulate([1] + values[:0:-1], lambda a, b: a * b))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    unique = [key for key, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def rotate(nums: list[int], k: int) -> None:
    """Rotate the list right by k steps in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    _require_items(nums)
    best = -math.inf
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return int(best)


def max_subarray_sum_circular(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty subarray when the array wraps around."""
    _require_items(nums)
    best_max = -math.inf
    best_min = math.inf
    run_max = run_min = 0
    total = 0
    for value in nums:
        total += value
        run_max = max(run_max + value, value)
        best_max = max(best_max, run_max)
        run_min = min(run_min + value, value)
        best_min = min(best_min, run_min)
    if best_min == total:
        return int(best_max)
    return int(max(best_max, total - best_min))