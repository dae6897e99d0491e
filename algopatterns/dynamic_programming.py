"""Dynamic programming over stairs, grids and pairs of strings."""

from __future__ import annotations

from collections.abc import Sequence

_Matrix = tuple[tuple[int, int], tuple[int, int]]

_IDENTITY: _Matrix = ((1, 0), (0, 1))
_FIBONACCI_STEP: _Matrix = ((1, 1), (1, 0))


def _mat_mul(a: _Matrix, b: _Matrix) -> _Matrix:
    return (
        (a[0][0] * b[0][0] + a[0][1] * b[1][0], a[0][0] * b[0][1] + a[0][1] * b[1][1]),
        (a[1][0] * b[0][0] + a[1][1] * b[1][0], a[1][0] * b[0][1] + a[1][1] * b[1][1]),
    )


def _mat_pow(matrix: _Matrix, exponent: int) -> _Matrix:
    result = _IDENTITY
    while exponent:
        if exponent & 1:
            result = _mat_mul(result, matrix)
        matrix = _mat_mul(matrix, matrix)
        exponent >>= 1
    return result


def climb_stairs(n: int) -> int:
    """Number of ways to climb n stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n in (0, 1):
        return n
    power = _mat_pow(_FIBONACCI_STEP, n - 1)
    # Multiplying by [[1, 0], [1, 0]] and reading the top-left entry.
    return power[0][0] + power[0][1]


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top when each step taken costs its value."""
    if len(cost) < 2:
        raise ValueError("cost must hold at least two steps")
    before, last = cost[0], cost[1]
    for step in cost[2:]:
        before, last = last, min(before, last) + step
    return min(before, last)


def _require_grid(grid: Sequence[Sequence[int]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right moving right or down."""
    _require_grid(grid)
    row_costs: list[int] = []
    for row in grid:
        current: list[int] = []
        for j, value in enumerate(row):
            if not row_costs and not current:
                current.append(value)
            elif not row_costs:
                current.append(current[-1] + value)
            elif not current:
                current.append(row_costs[j] + value)
            else:
                current.append(min(row_costs[j], current[-1]) + value)
        row_costs = current
    return row_costs[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths across the grid avoiding cells equal to 1."""
    _require_grid(grid)
    above: list[int] = []
    for row in grid:
        current: list[int] = []
        for j, cell in enumerate(row):
            if cell == 1:
                current.append(0)
            elif not above and not current:
                current.append(1)
            elif not above:
                current.append(current[-1])
            elif not current:
                current.append(above[j])
            else:
                current.append(current[-1] + above[j])
        above = current
    return above[-1]


def min_distance(word1: str, word2: str) -> int:
    """Levenshtein distance: fewest inserts, deletes and replacements."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(min(current[j - 1], previous[j], previous[j - 1]) + 1)
        previous = current
    return previous[-1]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence shared by both strings."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest subsequence of s that reads the same both ways."""
    return longest_common_subsequence(s, s[::-1])