"""Problems over two-dimensional grids and matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_FRESH = 1
_ROTTEN = 2
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(column) for column in zip(*matrix[::-1])]


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements in clockwise spiral order starting at the top-left corner."""
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, (len(matrix[0]) - 1) if matrix else -1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        result.extend(matrix[i][right] for i in range(top + 1, bottom + 1))
        if top != bottom:
            result.extend(matrix[bottom][j] for j in range(right - 1, left, -1))
        if left != right:
            result.extend(matrix[i][left] for i in range(bottom, top, -1))
        top, bottom, left, right = top + 1, bottom - 1, left + 1, right - 1
    return result


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left, rot spreading from 2s; -1 if never."""
    cells = [list(row) for row in grid]
    rows = len(cells)
    queue = deque(
        (i, j) for i, row in enumerate(cells) for j, cell in enumerate(row) if cell == _ROTTEN
    )
    minutes = 0
    while queue:
        for _ in range(len(queue)):
            i, j = queue.popleft()
            for di, dj in _STEPS:
                ni, nj = i + di, j + dj
                if 0 <= ni < rows and 0 <= nj < len(cells[ni]) and cells[ni][nj] == _FRESH:
                    cells[ni][nj] = _ROTTEN
                    queue.append((ni, nj))
        if queue:
            minutes += 1
    if any(_FRESH in row for row in cells):
        return -1
    return minutes


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of four-connected groups of land cells ("1") in the grid."""
    land = {
        (i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == "1"
    }
    islands = 0
    while land:
        islands += 1
        pending = [land.pop()]
        while pending:
            i, j = pending.pop()
            for di, dj in _STEPS:
                neighbour = (i + di, j + dj)
                if neighbour in land:
                    land.remove(neighbour)
                    pending.append(neighbour)
    return islands