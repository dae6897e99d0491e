"""Stack and monotonic-stack problems."""

from __future__ import annotations

import re
from collections.abc import Sequence

_EXPRESSION = re.compile(r"\d+(?:[-+*/]\d+)*")
_OPERATOR = re.compile(r"([-+*/])")
_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def calculate(s: str) -> int:
    """Evaluate an expression of non-negative integers with + - * /.

    Multiplication and division bind tighter than addition and subtraction;
    division truncates toward zero. An empty expression evaluates to 0.
    """
    expr = s.replace(" ", "")
    if not expr:
        return 0
    if not _EXPRESSION.fullmatch(expr):
        raise ValueError(f"malformed expression: {s!r}")
    parts = _OPERATOR.split(expr)
    terms = [int(parts[0])]
    for op, operand in zip(parts[1::2], parts[2::2]):
        value = int(operand)
        if op == "+":
            terms.append(value)
        elif op == "-":
            terms.append(-value)
        elif op == "*":
            terms[-1] *= value
        else:
            if value == 0:
                raise ZeroDivisionError("division by zero in expression")
            terms[-1] = _truncating_div(terms[-1], value)
    return sum(terms)


class MinStack:
    """Stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("stack is empty")

    def push(self, val: int) -> None:
        """Push val onto the stack."""
        lowest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, lowest))

    def pop(self) -> int:
        """Remove and return the top element."""
        self._require_items()
        return self._items.pop()[0]

    def top(self) -> int:
        """The top element."""
        self._require_items()
        return self._items[-1][0]

    def get_min(self) -> int:
        """The smallest element currently on the stack."""
        self._require_items()
        return self._items[-1][1]


class StockSpanner:
    """Reports, for each new price, how many consecutive days it was the highest."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record price and return its span, counting today."""
        span = 1
        while self._stack and self._stack[-1][0] <= price:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly delete pairs of equal adjacent characters."""
    kept: list[str] = []
    for char in s:
        if kept and kept[-1] == char:
            kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def remove_stars(s: str) -> str:
    """Let each '*' delete the closest kept character to its left."""
    kept: list[str] = []
    for char in s:
        if char != "*":
            kept.append(char)
        elif kept:
            kept.pop()
        else:
            raise ValueError("star has no character to remove")
    return "".join(kept)


def is_valid(s: str) -> bool:
    """Whether every bracket is closed by the matching kind in the right order."""
    open_brackets: list[str] = []
    for char in s:
        if char in _OPENERS:
            open_brackets.append(char)
        elif char in _CLOSERS:
            if not open_brackets or open_brackets.pop() != _CLOSERS[char]:
                return False
    return not open_brackets


def find132pattern(nums: Sequence[int]) -> bool:
    """Whether indices i < j < k exist with nums[i] < nums[k] < nums[j]."""
    if len(nums) < 3:
        return False
    lows: list[int | None] = [None] * len(nums)
    lowest = nums[0]
    for index in range(1, len(nums)):
        if nums[index] > lowest:
            lows[index] = lowest
        else:
            lowest = nums[index]
    stack: list[int] = []
    for value, low in zip(reversed(nums), reversed(lows)):
        if low is not None:
            while stack and stack[-1] <= low:
                stack.pop()
            if stack and stack[-1] < value:
                return True
        stack.append(value)
    return False


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a warmer temperature, or 0 when none comes."""
    waits = [0] * len(temperatures)
    stack: list[int] = []
    for index in reversed(range(len(temperatures))):
        while stack and temperatures[stack[-1]] <= temperatures[index]:
            stack.pop()
        if stack:
            waits[index] = stack[-1] - index
        stack.append(index)
    return waits


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of nums1, the next larger value to its right in nums2, or -1."""
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]} does not occur in nums2") from None