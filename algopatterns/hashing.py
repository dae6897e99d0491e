"""Hash-table problems and a separate-chaining hash map."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


class HashMap:
    """Integer-to-integer map with a fixed number of chained buckets."""

    BUCKETS = 10000

    def __init__(self) -> None:
        self._buckets: list[list[list[int]]] = [[] for _ in range(self.BUCKETS)]

    def _bucket(self, key: int) -> list[list[int]]:
        return self._buckets[key % self.BUCKETS]

    def put(self, key: int, value: int) -> None:
        """Store value under key, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: int) -> int:
        """The value stored under key, or -1 if there is none."""
        return next((value for stored, value in self._bucket(key) if stored == key), -1)

    def remove(self, key: int) -> None:
        """Drop key if present."""
        bucket = self._bucket(key)
        for index, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[index]
                return


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Whether two equal values sit at most k positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def is_isomorphic(s: str, t: str) -> bool:
    """Whether s maps onto t by a one-to-one character substitution."""
    if len(s) != len(t):
        return False
    return len(set(zip(s, t))) == len(set(s)) == len(set(t))


def max_number_of_balloons(text: str) -> int:
    """How many times the word "balloon" can be spelled from the letters of text."""
    counts = Counter(text)
    return min(counts["b"], counts["a"], counts["l"] // 2, counts["o"] // 2, counts["n"])


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Number of index pairs i < j with nums[i] == nums[j]."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Whether the note can be cut from the magazine's letters, each used once."""
    return not Counter(ransom_note) - Counter(magazine)