"""Day 17: Chronospatial Computer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from aoc2024.string_utils import to_int, to_ll

__all__ = [
    "ComputerState",
    "Program",
    "ParsedInput",
    "Computer",
    "parse_input",
    "run_program",
    "solve_part1",
]

_REGISTER_PREFIXES = {"Register A:": "a", "Register B:": "b", "Register C:": "c"}
_PROGRAM_PREFIX = "Program:"


def _mod8(value: int) -> int:
    """Remainder modulo 8 whose sign follows the dividend."""
    remainder = abs(value) % 8
    return -remainder if value < 0 else remainder


@dataclass
class ComputerState:
    """Registers and instruction pointer."""

    a: int = 0
    b: int = 0
    c: int = 0
    instruction_pointer: int = 0


@dataclass
class Program:
    """A sequence of 3-bit opcodes and operands."""

    instructions: list[int] = field(default_factory=list)


@dataclass
class ParsedInput:
    """Initial registers and program read from the puzzle input."""

    a: int = 0
    b: int = 0
    c: int = 0
    program: list[int] = field(default_factory=list)


class Computer:
    """The three-register machine."""

    def __init__(self, program: Program, a: int, b: int, c: int) -> None:
        self.program = program
        self.state = ComputerState(a, b, c, 0)
        self.output: list[int] = []

    def resolve_combo(self, operand: int) -> int:
        """Value of a combo operand: literals 0-3, registers for 4-6, else 0."""
        if 0 <= operand <= 3:
            return operand
        return {4: self.state.a, 5: self.state.b, 6: self.state.c}.get(operand, 0)

    def execute_instruction(self) -> None:
        """Execute the instruction at the instruction pointer, if not halted."""
        if self.is_halted():
            return
        state = self.state
        instructions = self.program.instructions
        opcode = instructions[state.instruction_pointer]
        operand = instructions[state.instruction_pointer + 1]

        if opcode == 0:
            state.a >>= self.resolve_combo(operand)
        elif opcode == 1:
            state.b ^= operand
        elif opcode == 2:
            state.b = _mod8(self.resolve_combo(operand))
        elif opcode == 3:
            if state.a != 0:
                state.instruction_pointer = operand
                return
        elif opcode == 4:
            state.b ^= state.c
        elif opcode == 5:
            self.output.append(_mod8(self.resolve_combo(operand)))
        elif opcode == 6:
            state.b = state.a >> self.resolve_combo(operand)
        elif opcode == 7:
            state.c = state.a >> self.resolve_combo(operand)

        state.instruction_pointer += 2

    def is_halted(self) -> bool:
        return self.state.instruction_pointer >= len(self.program.instructions)

    def run(self) -> None:
        """Execute until the instruction pointer leaves the program."""
        while not self.is_halted():
            self.execute_instruction()


def _program_values(text: str) -> list[int]:
    tokens = text.split(",")
    if tokens[-1] == "":
        tokens.pop()
    return [to_int(token) for token in tokens]


def parse_input(lines: Sequence[str]) -> ParsedInput:
    """Read register values and the program from the input lines."""
    parsed = ParsedInput()
    for line in lines:
        for prefix, register in _REGISTER_PREFIXES.items():
            if line.startswith(prefix):
                setattr(parsed, register, to_ll(line[len(prefix):]))
                break
        else:
            if line.startswith(_PROGRAM_PREFIX):
                start = len(_PROGRAM_PREFIX) + 1
                if len(line) < start:
                    raise ValueError(f"program line too short: {line!r}")
                parsed.program.extend(_program_values(line[start:]))
    return parsed


def run_program(lines: Sequence[str]) -> str:
    """Run the parsed program and return its output, comma separated."""
    parsed = parse_input(lines)
    computer = Computer(Program(list(parsed.program)), parsed.a, parsed.b, parsed.c)
    computer.run()
    return ",".join(str(value) for value in computer.output)


def solve_part1(lines: Sequence[str]) -> str:
    """Output of the program with the given registers."""
    return run_program(lines)