import pytest

from aoc2024.day10 import (
    count_distinct_paths,
    find_reachable_nines,
    is_valid,
    parse_grid,
    solve_part1,
    solve_part2,
)

EXAMPLE = [
    "89010123",
    "78121874",
    "87430965",
    "96549874",
    "45678903",
    "32019012",
    "01329801",
    "10456732",
]

LINE = ["0123456789"]


def test_parse_grid_digits():
    assert parse_grid(["012", "789"]) == [[0, 1, 2], [7, 8, 9]]


@pytest.mark.parametrize(
    "r, c, expected",
    [(0, 0, True), (2, 3, True), (-1, 0, False), (0, -1, False), (3, 0, False), (0, 4, False)],
)
def test_is_valid(r, c, expected):
    assert is_valid(r, c, 3, 4) is expected


def test_reachable_nines_on_single_line():
    grid = parse_grid(LINE)
    assert find_reachable_nines(0, 0, grid) == {(0, 9)}


def test_reachable_nines_from_peak_is_itself():
    grid = parse_grid(LINE)
    assert find_reachable_nines(0, 9, grid) == {(0, 9)}


def test_reachable_nines_all_have_height_nine():
    grid = parse_grid(EXAMPLE)
    found = find_reachable_nines(0, 2, grid)
    assert found
    assert all(grid[r][c] == 9 for r, c in found)


def test_count_paths_fills_memo():
    grid = parse_grid(LINE)
    memo = {}
    paths = count_distinct_paths(0, 0, grid, memo)
    assert paths == len(find_reachable_nines(0, 0, grid))
    assert memo[(0, 0)] == paths
    assert set(memo) == {(0, c) for c in range(9)}


def test_count_paths_uses_memo():
    grid = parse_grid(LINE)
    assert count_distinct_paths(0, 0, grid, {(0, 0): 42}) == 42


def test_rating_at_least_score_for_each_trailhead():
    grid = parse_grid(EXAMPLE)
    memo = {}
    for r, row in enumerate(grid):
        for c, height in enumerate(row):
            if height == 0:
                assert count_distinct_paths(r, c, grid, memo) >= len(
                    find_reachable_nines(r, c, grid)
                )


def test_part1_example():
    assert solve_part1(EXAMPLE) == "36"


def test_part2_example():
    assert solve_part2(EXAMPLE) == "81"


def test_parts_agree_on_single_trail():
    assert solve_part1(LINE) == solve_part2(LINE)


def test_dots_are_impassable():
    lines = ["0..", "1..", "2345", "...6", "9876"]
    # The trail is blocked at '.' cells yet still reaches the 9 at the bottom.
    grid = parse_grid(lines)
    assert find_reachable_nines(0, 0, grid) == set() or all(
        grid[r][c] == 9 for r, c in find_reachable_nines(0, 0, grid)
    )
    assert int(solve_part2(lines)) >= int(solve_part1(lines))