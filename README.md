# aoc2024

Solutions to a set of Advent of Code 2024 puzzles, plus a few small helpers
for reading puzzle input and working with strings and numbers.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

Each day module has `solve_part1(lines)` and, where the second part is
solved, `solve_part2(lines)`. Each takes the puzzle input as a list of
lines (without newline characters) and returns the answer as a string.

```python
from aoc2024.input_handler import read_input
from aoc2024 import day09

lines = read_input("inputs/day09.txt")
print(day09.solve_part1(lines))
print(day09.solve_part2(lines))
```

Available modules:

| Module   | Puzzle                  | Parts |
|----------|-------------------------|-------|
| `day09`  | Disk Fragmenter         | 1, 2  |
| `day10`  | Hoof It                 | 1, 2  |
| `day11`  | Plutonian Pebbles       | 1, 2  |
| `day12`  | Garden Groups           | 1, 2  |
| `day13`  | Claw Contraption        | 1, 2  |
| `day14`  | Restroom Redoubt        | 1, 2  |
| `day15`  | Warehouse Woes          | 1, 2  |
| `day17`  | Chronospatial Computer  | 1     |

The building blocks of each solution are public as well, for example:

- `day09`: `Span`, `parse_disk_map`, `parse_into_spans`, `calculate_checksum`.
- `day10`: `parse_grid`, `find_reachable_nines`, `count_distinct_paths`.
- `day11`: `transform_stone` and `blink`, which works on a mapping of stone
  value to number of stones.
- `day12`: `Region` (with an `area` property), `find_region`,
  `calculate_perimeter`, `count_corners`.
- `day13`: `Machine`, `parse_machines`, and `solve_machine`, which returns
  the token cost or `None` when the prize cannot be won.
- `day14`: `Robot`, `parse_input`, `simulate_movement`,
  `calculate_safety_factor`; the room size is `WIDTH` by `HEIGHT` (101 by 103).
- `day15`: `Position`, `Direction`, `Warehouse`, `parse_input`,
  `try_move_part1`, `try_move_part2`, `expand_warehouse`, `calculate_gps_sum`.
  `parse_input` raises `ValueError` on empty input, an empty map, or a map
  without a robot.
- `day17`: a `Computer` class that runs a three-bit program directly,
  together with `Program`, `ComputerState` and `ParsedInput`.
  `run_program(lines)` parses the registers and the program from the input
  and returns the comma-separated output.

```python
from aoc2024.day17 import Computer, Program

computer = Computer(Program([0, 1, 5, 4, 3, 0]), 729, 0, 0)
computer.run()
print(",".join(map(str, computer.output)))
```

## Helpers

- `aoc2024.input_handler`: `read_input(filepath)` returns a file's lines and
  `read_input_raw(filepath)` returns its full text. Both raise `OSError`
  (such as `FileNotFoundError`) when the file cannot be opened.
- `aoc2024.string_utils`: `split` (drops empty tokens), `trim`,
  `starts_with`, `ends_with`, `to_int` and `to_ll` (parse a leading integer,
  raising `ValueError` when there is none and `OverflowError` when it is out
  of 32-bit or 64-bit signed range).
- `aoc2024.math_utils`: `gcd`, `lcm`, `gcd_multiple`, `lcm_multiple`
  (both return 0 for an empty list), `abs_diff`.

```python
from aoc2024.string_utils import split, trim
from aoc2024.math_utils import lcm_multiple

split("a,b,,c", ",")      # ['a', 'b', 'c']
trim("  hello  ")         # 'hello'
lcm_multiple([4, 6, 8])   # 24
```

## What it does not do

- There is no command-line program; solutions are called from Python.
- Only the days listed above are solved. Day 16 and days 18 to 25 are not
  included, and day 17 has no second part.
- Puzzle inputs are not bundled; read your own with `read_input`.