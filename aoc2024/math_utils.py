"""Small integer helpers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

__all__ = ["gcd", "lcm", "gcd_multiple", "lcm_multiple", "abs_diff"]


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; divides first to keep intermediates small."""
    return a // gcd(a, b) * b


def gcd_multiple(numbers: Iterable[int]) -> int:
    """Greatest common divisor of all numbers, or 0 when there are none."""
    return reduce(gcd, numbers, 0) if numbers else 0


def lcm_multiple(numbers: Iterable[int]) -> int:
    """Least common multiple of all numbers, or 0 when there are none."""
    items = list(numbers)
    if not items:
        return 0
    return reduce(lcm, items[1:], items[0])


def abs_diff(a: int, b: int) -> int:
    """Absolute difference of two integers."""
    return a - b if a > b else b - a