"""Day 13: Claw Contraption."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, replace

__all__ = ["Machine", "parse_machines", "solve_machine", "solve_part1", "solve_part2"]

_NUMBER = re.compile(r"\d+")
_PRIZE_OFFSET = 10_000_000_000_000
_COST_A = 3
_COST_B = 1


@dataclass(frozen=True)
class Machine:
    """Button movements and prize location of one claw machine."""

    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int


def _pair(line: str) -> tuple[int, int]:
    numbers = [int(token) for token in _NUMBER.findall(line)]
    if len(numbers) < 2:
        raise ValueError(f"expected two numbers in {line!r}")
    return numbers[0], numbers[1]


def parse_machines(lines: Sequence[str]) -> list[Machine]:
    """Parse blocks of three lines separated by a blank line."""
    machines: list[Machine] = []
    for start in range(0, len(lines) - 2, 4):
        ax, ay = _pair(lines[start])
        bx, by = _pair(lines[start + 1])
        px, py = _pair(lines[start + 2])
        machines.append(Machine(ax, ay, bx, by, px, py))
    return machines


def solve_machine(machine: Machine) -> int | None:
    """Token cost of winning the prize, or None if it cannot be won."""
    m = machine
    det = m.ax * m.by - m.ay * m.bx
    det_a = m.px * m.by - m.py * m.bx
    det_b = m.ax * m.py - m.ay * m.px
    if det == 0 or det_a % det != 0 or det_b % det != 0:
        return None
    presses_a = det_a // det
    presses_b = det_b // det
    if presses_a < 0 or presses_b < 0:
        return None
    return _COST_A * presses_a + _COST_B * presses_b


def _total_cost(machines: Sequence[Machine]) -> str:
    return str(sum(solve_machine(machine) or 0 for machine in machines))


def solve_part1(lines: Sequence[str]) -> str:
    """Fewest tokens to win every winnable prize."""
    return _total_cost(parse_machines(lines))


def solve_part2(lines: Sequence[str]) -> str:
    """As part 1, with each prize moved far along both axes."""
    machines = [
        replace(m, px=m.px + _PRIZE_OFFSET, py=m.py + _PRIZE_OFFSET)
        for m in parse_machines(lines)
    ]
    return _total_cost(machines)