"""Day 10: Hoof It."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = [
    "parse_grid",
    "is_valid",
    "find_reachable_nines",
    "count_distinct_paths",
    "solve_part1",
    "solve_part2",
]

Grid = Sequence[Sequence[int]]
Point = tuple[int, int]

_STEPS: tuple[Point, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
_PEAK = 9
_TRAILHEAD = 0


def parse_grid(lines: Sequence[str]) -> list[list[int]]:
    """Turn each character into its value relative to the digit ``0``."""
    return [[ord(char) - ord("0") for char in line] for line in lines]


def is_valid(r: int, c: int, rows: int, cols: int) -> bool:
    """Whether ``(r, c)`` lies inside a ``rows`` by ``cols`` grid."""
    return 0 <= r < rows and 0 <= c < cols


def _uphill_neighbours(r: int, c: int, grid: Grid) -> Iterator[Point]:
    """Cardinal neighbours exactly one higher than ``(r, c)``."""
    height = grid[r][c]
    rows, cols = len(grid), len(grid[0])
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if is_valid(nr, nc, rows, cols) and grid[nr][nc] == height + 1:
            yield nr, nc


def find_reachable_nines(r: int, c: int, grid: Grid) -> set[Point]:
    """Positions of height 9 reachable from ``(r, c)`` by steps of +1."""
    found: set[Point] = set()
    stack: list[Point] = [(r, c)]
    while stack:
        row, col = stack.pop()
        if grid[row][col] == _PEAK:
            found.add((row, col))
            continue
        stack.extend(_uphill_neighbours(row, col, grid))
    return found


def count_distinct_paths(r: int, c: int, grid: Grid, memo: dict[Point, int]) -> int:
    """Number of distinct trails from ``(r, c)`` to any 9, cached in ``memo``."""
    if (r, c) in memo:
        return memo[(r, c)]
    if grid[r][c] == _PEAK:
        return 1
    total = sum(
        count_distinct_paths(nr, nc, grid, memo)
        for nr, nc in _uphill_neighbours(r, c, grid)
    )
    memo[(r, c)] = total
    return total


def _trailheads(grid: Grid) -> Iterator[Point]:
    for r, row in enumerate(grid):
        for c, height in enumerate(row):
            if height == _TRAILHEAD:
                yield r, c


def solve_part1(lines: Sequence[str]) -> str:
    """Sum of trailhead scores."""
    grid = parse_grid(lines)
    total = sum(len(find_reachable_nines(r, c, grid)) for r, c in _trailheads(grid))
    return str(total)


def solve_part2(lines: Sequence[str]) -> str:
    """Sum of trailhead ratings."""
    grid = parse_grid(lines)
    memo: dict[Point, int] = {}
    total = sum(count_distinct_paths(r, c, grid, memo) for r, c in _trailheads(grid))
    return str(total)