"""Day 11: Plutonian Pebbles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence

__all__ = ["transform_stone", "blink", "solve_part1", "solve_part2"]

_MULTIPLIER = 2024


def transform_stone(value: int) -> list[int]:
    """Stones that replace ``value`` after one blink."""
    if value == 0:
        return [1]
    digits = str(value)
    if len(digits) % 2 == 0:
        divisor = 10 ** (len(digits) // 2)
        return [value // divisor, value % divisor]
    return [value * _MULTIPLIER]


def blink(counts: Mapping[int, int]) -> Counter[int]:
    """Apply one blink to a mapping of stone value to number of stones."""
    next_counts: Counter[int] = Counter()
    for value, count in counts.items():
        for new_value in transform_stone(value):
            next_counts[new_value] += count
    return next_counts


def _blink_times(counts: Mapping[int, int], times: int) -> int:
    current: Mapping[int, int] = counts
    for _ in range(times):
        current = blink(current)
    return sum(current.values())


def _stones(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def solve_part1(lines: Sequence[str]) -> str:
    """Number of stones after 25 blinks."""
    return str(_blink_times(Counter(_stones(lines[0])), 25))


def solve_part2(lines: Sequence[str]) -> str:
    """Number of stones after 75 blinks; each distinct starting value counts once."""
    return str(_blink_times(dict.fromkeys(_stones(lines[0]), 1), 75))