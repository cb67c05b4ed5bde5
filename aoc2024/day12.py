"""Day 12: Garden Groups."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

__all__ = [
    "Region",
    "is_in_bounds",
    "find_region",
    "calculate_perimeter",
    "count_corners",
    "solve_part1",
    "solve_part2",
]

Point = tuple[int, int]

_STEPS: tuple[Point, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class Region:
    """A connected patch of one plant type."""

    plant: str
    cells: list[Point] = field(default_factory=list)
    cell_set: set[Point] = field(default_factory=set)

    @property
    def area(self) -> int:
        return len(self.cells)


def is_in_bounds(point: Point, grid: Sequence[str]) -> bool:
    """Whether ``point`` lies inside the grid."""
    r, c = point
    return 0 <= r < len(grid) and 0 <= c < len(grid[0])


def find_region(r: int, c: int, grid: Sequence[str], visited: set[Point]) -> Region:
    """Flood-fill the region containing ``(r, c)``, marking its cells in ``visited``."""
    region = Region(grid[r][c])
    visited.add((r, c))
    queue: deque[Point] = deque([(r, c)])
    while queue:
        point = queue.popleft()
        region.cells.append(point)
        region.cell_set.add(point)
        pr, pc = point
        for dr, dc in _STEPS:
            nxt = (pr + dr, pc + dc)
            if (
                is_in_bounds(nxt, grid)
                and grid[nxt[0]][nxt[1]] == region.plant
                and nxt not in visited
            ):
                visited.add(nxt)
                queue.append(nxt)
    return region


def calculate_perimeter(region: Region, grid: Sequence[str]) -> int:
    """Number of cell edges that border another region or the grid edge."""
    return sum(
        1
        for r, c in region.cells
        for dr, dc in _STEPS
        if not is_in_bounds((r + dr, c + dc), grid)
        or (r + dr, c + dc) not in region.cell_set
    )


def count_corners(region: Region) -> int:
    """Number of corners of the region, which equals its number of sides."""
    cells = region.cell_set
    total = 0
    for r, c in region.cells:
        for dr, dc in ((-1, -1), (-1, 1), (1, -1), (1, 1)):
            vertical = (r + dr, c) in cells
            horizontal = (r, c + dc) in cells
            diagonal = (r + dr, c + dc) in cells
            if (not vertical and not horizontal) or (vertical and horizontal and not diagonal):
                total += 1
    return total


def _regions(grid: Sequence[str]) -> Iterator[Region]:
    visited: set[Point] = set()
    for r, line in enumerate(grid):
        for c in range(len(line)):
            if (r, c) not in visited:
                yield find_region(r, c, grid, visited)


def _total_price(grid: Sequence[str], metric: Callable[[Region], int]) -> str:
    return str(sum(region.area * metric(region) for region in _regions(grid)))


def solve_part1(lines: Sequence[str]) -> str:
    """Total fence price using area times perimeter."""
    return _total_price(lines, lambda region: calculate_perimeter(region, lines))


def solve_part2(lines: Sequence[str]) -> str:
    """Total fence price using area times number of sides."""
    return _total_price(lines, count_corners)