"""Island counting on rectangular grids."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

_Cell = tuple[int, int]


def _flood(
    grid: Sequence[Sequence[Any]],
    start: _Cell,
    is_land: Callable[[Any], bool],
    seen: set[_Cell],
) -> Iterator[_Cell]:
    """Yield every land cell connected to start that was not seen yet."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    stack = [start]
    while stack:
        i, j = stack.pop()
        if not (0 <= i < rows and 0 <= j < cols):
            continue
        if (i, j) in seen or not is_land(grid[i][j]):
            continue
        seen.add((i, j))
        yield i, j
        stack.extend(((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)))


def _cells(grid: Sequence[Sequence[Any]]) -> Iterator[tuple[_Cell, Any]]:
    width = len(grid[0]) if grid else 0
    for i, row in enumerate(grid):
        for j in range(width):
            yield (i, j), row[j]


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the islands of '1' cells connected horizontally or vertically."""
    seen: set[_Cell] = set()
    islands = 0
    for cell, value in _cells(grid):
        if value == "1" and cell not in seen:
            for _ in _flood(grid, cell, lambda v: v == "1", seen):
                pass
            islands += 1
    return islands


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest island of 1 cells."""
    seen: set[_Cell] = set()
    best = 0
    for cell, value in _cells(grid):
        if value == 1 and cell not in seen:
            area = sum(1 for _ in _flood(grid, cell, lambda v: v != 0, seen))
            best = max(best, area)
    return best