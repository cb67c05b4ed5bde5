"""Day 15: Warehouse Woes."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "Position",
    "Direction",
    "Warehouse",
    "char_to_direction",
    "get_delta",
    "parse_input",
    "try_move_part1",
    "try_move_part2",
    "expand_warehouse",
    "calculate_gps_sum",
    "solve_part1",
    "solve_part2",
]

WALL = "#"
EMPTY = "."
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"
ROBOT = "@"


@dataclass(frozen=True)
class Position:
    """A grid coordinate, ``x`` to the right and ``y`` downwards."""

    x: int
    y: int

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)


class Direction(Enum):
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"


_DELTAS = {
    Direction.UP: Position(0, -1),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
    Direction.RIGHT: Position(1, 0),
}


@dataclass
class Warehouse:
    """The warehouse map, one list of tiles per row, and the robot's position."""

    grid: list[list[str]] = field(default_factory=list)
    robot_pos: Position = Position(0, 0)
    width: int = 0
    height: int = 0

    def tile(self, pos: Position) -> str:
        return self.grid[pos.y][pos.x]

    def put(self, pos: Position, tile: str) -> None:
        self.grid[pos.y][pos.x] = tile


def char_to_direction(char: str) -> Direction | None:
    """Direction for an instruction character, or None for anything else."""
    try:
        return Direction(char)
    except ValueError:
        return None


def get_delta(direction: Direction) -> Position:
    """One step in ``direction``."""
    return _DELTAS[direction]


def parse_input(lines: Sequence[str]) -> tuple[Warehouse, str]:
    """Split input into the warehouse map and the joined move instructions."""
    if not lines:
        raise ValueError("Empty input")

    try:
        separator = list(lines).index("")
    except ValueError:
        separator = len(lines)

    grid = [list(row) for row in lines[:separator]]
    if not grid:
        raise ValueError("Map section is empty")

    robot = next(
        (Position(x, y) for y, row in enumerate(grid) for x, tile in enumerate(row) if tile == ROBOT),
        None,
    )
    if robot is None:
        raise ValueError("Robot (@) not found in warehouse map")

    warehouse = Warehouse(grid=grid, robot_pos=robot, width=len(grid[0]), height=len(grid))
    instructions = "".join(lines[separator + 1:])
    return warehouse, instructions


def _step_robot(warehouse: Warehouse, delta: Position) -> None:
    warehouse.put(warehouse.robot_pos, EMPTY)
    warehouse.robot_pos = warehouse.robot_pos + delta
    warehouse.put(warehouse.robot_pos, ROBOT)


def try_move_part1(warehouse: Warehouse, direction: Direction) -> bool:
    """Move the robot one step, pushing a chain of boxes; False if blocked."""
    delta = get_delta(direction)
    target = warehouse.robot_pos + delta

    if warehouse.tile(target) == WALL:
        return False

    if warehouse.tile(target) == BOX:
        scan = target + delta
        while warehouse.tile(scan) == BOX:
            scan = scan + delta
        if warehouse.tile(scan) == WALL:
            return False
        warehouse.put(scan, BOX)

    _step_robot(warehouse, delta)
    return True


def try_move_part2(warehouse: Warehouse, direction: Direction) -> bool:
    """Move the robot in a widened warehouse, pushing wide boxes; False if blocked."""
    delta = get_delta(direction)
    target = warehouse.robot_pos + delta

    if direction in (Direction.LEFT, Direction.RIGHT):
        scan = target
        while warehouse.tile(scan) in (BOX_LEFT, BOX_RIGHT):
            scan = scan + delta
        end = warehouse.tile(scan)
        if end == WALL:
            return False
        if end == EMPTY:
            row = warehouse.grid[scan.y]
            del row[scan.x]
            row.insert(warehouse.robot_pos.x, EMPTY)
            warehouse.robot_pos = warehouse.robot_pos + delta
            return True

    queue: deque[Position] = deque([target])
    seen: set[Position] = set()
    to_move: list[Position] = []
    while queue:
        current = queue.popleft()
        if current in seen:
            continue
        seen.add(current)
        tile = warehouse.tile(current)
        if tile == WALL:
            return False
        if tile in (BOX_LEFT, BOX_RIGHT):
            to_move.append(current)
            queue.append(current + delta)
            offset = 1 if tile == BOX_LEFT else -1
            queue.append(Position(current.x + offset, current.y))

    boxes = [(pos, warehouse.tile(pos)) for pos in to_move]
    for pos, _ in boxes:
        warehouse.put(pos, EMPTY)
    for pos, tile in boxes:
        warehouse.put(pos + delta, tile)

    _step_robot(warehouse, delta)
    return True


_WIDE_TILES = {BOX: BOX_LEFT + BOX_RIGHT, ROBOT: ROBOT + EMPTY}


def expand_warehouse(warehouse: Warehouse) -> Warehouse:
    """Double every tile horizontally; boxes become ``[]``."""
    grid = [
        list("".join(_WIDE_TILES.get(tile, tile * 2) for tile in row))
        for row in warehouse.grid
    ]
    return Warehouse(
        grid=grid,
        robot_pos=Position(warehouse.robot_pos.x * 2, warehouse.robot_pos.y),
        width=warehouse.width * 2,
        height=warehouse.height,
    )


def calculate_gps_sum(warehouse: Warehouse) -> int:
    """Sum of ``100 * y + x`` over all boxes (left halves for wide boxes)."""
    return sum(
        100 * y + x
        for y, row in enumerate(warehouse.grid)
        for x, tile in enumerate(row)
        if tile in (BOX, BOX_LEFT)
    )


def _directions(instructions: str):
    for char in instructions:
        direction = char_to_direction(char)
        if direction is not None:
            yield direction


def solve_part1(lines: Sequence[str]) -> str:
    """GPS sum after all moves in the warehouse as given."""
    warehouse, instructions = parse_input(lines)
    for direction in _directions(instructions):
        try_move_part1(warehouse, direction)
    return str(calculate_gps_sum(warehouse))


def solve_part2(lines: Sequence[str]) -> str:
    """GPS sum after all moves in the widened warehouse."""
    raw, instructions = parse_input(lines)
    warehouse = expand_warehouse(raw)
    for direction in _directions(instructions):
        try_move_part2(warehouse, direction)
    return str(calculate_gps_sum(warehouse))