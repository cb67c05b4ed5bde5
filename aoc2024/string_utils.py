"""String helpers used when reading puzzle input."""

from __future__ import annotations

import re

__all__ = ["split", "trim", "starts_with", "ends_with", "to_int", "to_ll"]

_WHITESPACE = " \t\n\r\f\v"
_LEADING_INTEGER = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")

_INT_RANGE = (-(2**31), 2**31 - 1)
_LL_RANGE = (-(2**63), 2**63 - 1)


def split(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter, dropping empty tokens."""
    return [token for token in text.split(delimiter) if token]


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip(_WHITESPACE)


def starts_with(text: str, prefix: str) -> bool:
    """Whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Whether ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def _parse_integer(text: str, bounds: tuple[int, int]) -> int:
    match = _LEADING_INTEGER.match(trim(text))
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    low, high = bounds
    if not low <= value <= high:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def to_int(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed value."""
    return _parse_integer(text, _INT_RANGE)


def to_ll(text: str) -> int:
    """Parse the leading integer of ``text`` as a 64-bit signed value."""
    return _parse_integer(text, _LL_RANGE)