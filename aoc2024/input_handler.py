"""Reading puzzle input files."""

from __future__ import annotations

import os

__all__ = ["read_input", "read_input_raw"]


def read_input_raw(filepath: str | os.PathLike[str]) -> str:
    """Return the whole content of a file, unchanged.

    Raises ``OSError`` (e.g. ``FileNotFoundError``) if the file cannot be opened.
    """
    with open(filepath, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_input(filepath: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file without their newline characters.

    A trailing newline at the end of the file does not produce an extra
    empty line.
    """
    lines = read_input_raw(filepath).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines