"""Day 9: Disk Fragmenter."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "FREE",
    "Span",
    "parse_disk_map",
    "calculate_checksum",
    "find_first_free_space",
    "find_last_file_block",
    "find_suitable_free_span",
    "parse_into_spans",
    "solve_part1",
    "solve_part2",
]

FREE = -1


@dataclass
class Span:
    """A run of blocks on the disk; ``file_id`` is ``FREE`` for free space."""

    start: int
    length: int
    file_id: int


def parse_disk_map(disk_map: str) -> list[int]:
    """Expand a disk map into one entry per block: file id, or ``FREE``."""
    disk: list[int] = []
    for index, char in enumerate(disk_map):
        length = int(char)
        if index % 2 == 0:
            disk.extend([index // 2] * length)
        else:
            disk.extend([FREE] * length)
    return disk


def calculate_checksum(disk: Sequence[int]) -> int:
    """Sum of position times file id over all file blocks."""
    return sum(position * block for position, block in enumerate(disk) if block != FREE)


def find_first_free_space(disk: Sequence[int], start_index: int) -> int | None:
    """Index of the first free block at or after ``start_index``, if any."""
    return next(
        (i for i in range(start_index, len(disk)) if disk[i] == FREE),
        None,
    )


def find_last_file_block(disk: Sequence[int], start_index: int) -> int | None:
    """Index of the last file block at or before ``start_index``, if any."""
    return next(
        (i for i in range(start_index, -1, -1) if disk[i] != FREE),
        None,
    )


def find_suitable_free_span(
    free_spans: Sequence[Span], required_length: int, max_position: int
) -> int | None:
    """Index of the leftmost free span that fits and starts before ``max_position``."""
    return next(
        (
            i
            for i, span in enumerate(free_spans)
            if span.length >= required_length and span.start < max_position
        ),
        None,
    )


def parse_into_spans(disk_map: str) -> tuple[list[Span], list[Span]]:
    """Split a disk map into file spans and free spans, both in disk order."""
    file_spans: list[Span] = []
    free_spans: list[Span] = []
    position = 0
    for index, char in enumerate(disk_map):
        length = int(char)
        if index % 2 == 0:
            file_spans.append(Span(position, length, index // 2))
        else:
            free_spans.append(Span(position, length, FREE))
        position += length
    return file_spans, free_spans


def solve_part1(lines: Sequence[str]) -> str:
    """Compact block by block and return the checksum."""
    if not lines:
        return "0"
    disk = parse_disk_map(lines[0])
    if not disk:
        return "0"

    left, right = 0, len(disk) - 1
    while left < right:
        free = find_first_free_space(disk, left)
        block = find_last_file_block(disk, right)
        if free is None or block is None:
            break
        left, right = free, block
        if left < right:
            disk[left], disk[right] = disk[right], disk[left]

    return str(calculate_checksum(disk))


def solve_part2(lines: Sequence[str]) -> str:
    """Move whole files, highest id first, and return the checksum."""
    if not lines or not lines[0]:
        return "0"

    file_spans, free_spans = parse_into_spans(lines[0])

    for file in reversed(file_spans):
        old_start = file.start
        free_index = find_suitable_free_span(free_spans, file.length, old_start)
        if free_index is None:
            continue

        free_span = free_spans[free_index]
        file.start = free_span.start
        free_span.length -= file.length
        free_span.start += file.length
        if free_span.length == 0:
            del free_spans[free_index]

        vacated = Span(old_start + file.length, file.length, FREE)
        insert_at = next(
            (i for i, span in enumerate(free_spans) if span.start > vacated.start),
            len(free_spans),
        )
        free_spans.insert(insert_at, vacated)

    checksum = sum(
        position * file.file_id
        for file in file_spans
        for position in range(file.start, file.start + file.length)
    )
    return str(checksum)