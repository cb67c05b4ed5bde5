"""Day 14: Restroom Redoubt."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "WIDTH",
    "HEIGHT",
    "Robot",
    "parse_input",
    "simulate_movement",
    "calculate_safety_factor",
    "solve_part1",
    "solve_part2",
]

WIDTH = 101
HEIGHT = 103
_PART1_SECONDS = 100

_ROBOT_LINE = re.compile(
    r"p=\s*([+-]?\d+),\s*([+-]?\d+)\s*v=\s*([+-]?\d+),\s*([+-]?\d+)"
)


@dataclass(frozen=True)
class Robot:
    """Starting position and velocity of one robot."""

    px: int
    py: int
    vx: int
    vy: int


def parse_input(lines: Iterable[str]) -> list[Robot]:
    """Parse ``p=X,Y v=DX,DY`` lines; blank or malformed lines are skipped."""
    robots: list[Robot] = []
    for line in lines:
        if not line:
            continue
        match = _ROBOT_LINE.match(line)
        if match:
            robots.append(Robot(*(int(group) for group in match.groups())))
    return robots


def simulate_movement(
    robot: Robot, seconds: int, width: int, height: int
) -> tuple[int, int]:
    """Position of ``robot`` after ``seconds``, wrapping around the room."""
    x = (robot.px + robot.vx * seconds) % width
    y = (robot.py + robot.vy * seconds) % height
    return x, y


def calculate_safety_factor(
    positions: Iterable[tuple[int, int]], width: int, height: int
) -> int:
    """Product of the robot counts in the four quadrants; mid-lines are ignored."""
    mid_x = width // 2
    mid_y = height // 2
    quadrants = [0, 0, 0, 0]
    for x, y in positions:
        if x == mid_x or y == mid_y:
            continue
        index = (1 if x > mid_x else 0) + (2 if y > mid_y else 0)
        quadrants[index] += 1
    return math.prod(quadrants)


def _positions_at(robots: Sequence[Robot], seconds: int) -> list[tuple[int, int]]:
    return [simulate_movement(robot, seconds, WIDTH, HEIGHT) for robot in robots]


def solve_part1(lines: Sequence[str]) -> str:
    """Safety factor after 100 seconds."""
    robots = parse_input(lines)
    return str(calculate_safety_factor(_positions_at(robots, _PART1_SECONDS), WIDTH, HEIGHT))


def solve_part2(lines: Sequence[str]) -> str:
    """First second, within one full cycle, with the lowest safety factor."""
    robots = parse_input(lines)
    best_time = 0
    lowest: int | None = None
    for seconds in range(1, WIDTH * HEIGHT + 1):
        factor = calculate_safety_factor(_positions_at(robots, seconds), WIDTH, HEIGHT)
        if lowest is None or factor < lowest:
            lowest = factor
            best_time = seconds
    return str(best_time)