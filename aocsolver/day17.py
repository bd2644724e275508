"""The chronospatial computer: run its program or find a self-printing input."""

from __future__ import annotations

from typing import Iterator, Sequence

from .common import to_int
from .intcode import IntCodeComputer
from .parse import parse_int_list, parse_string_list

_REGISTER_PREFIXES = ("Register A: ", "Register B: ", "Register C: ")


def load_computer(text: str) -> IntCodeComputer:
    """Build a computer from the registers and program described in ``text``."""
    sections = parse_string_list(text, "\n\n")
    lines = sections[0].split("\n")
    register = [
        to_int(line.removeprefix(prefix)) for line, prefix in zip(lines, _REGISTER_PREFIXES)
    ]
    if len(register) != 3:
        raise ValueError("three register lines are required")
    program = parse_int_list(sections[1].removeprefix("Program: "), ",")
    return IntCodeComputer(program, register)


def part1(text: str) -> str:
    """The program's output, comma separated."""
    computer = load_computer(text)
    return ",".join(str(value) for value in computer.run())


def _trunc_shift(value: int, shift: int) -> int:
    quotient = abs(value) >> shift
    return quotient if value >= 0 else -quotient


def _trunc_mod8(value: int) -> int:
    remainder = abs(value) % 8
    return remainder if value >= 0 else -remainder


def _outputs(program: Sequence[int], a: int, b: int, c: int) -> Iterator[int]:
    """Run ``program`` lazily, yielding each value as it is output."""
    pointer = 0
    while pointer < len(program):
        op, operand = program[pointer], program[pointer + 1]
        if operand <= 3:
            combo = operand
        elif operand <= 6:
            combo = (a, b, c)[operand - 4]
        else:
            combo = None
        if op in (0, 2, 5, 6, 7) and combo is None:
            raise ValueError(f"invalid combo operand {operand}")
        if op == 0:
            a = _trunc_shift(a, combo)
        elif op == 1:
            b ^= operand
        elif op == 2:
            b = _trunc_mod8(combo)
        elif op == 3:
            if a != 0:
                pointer = operand
                continue
        elif op == 4:
            b ^= c
        elif op == 5:
            yield _trunc_mod8(combo)
        elif op == 6:
            b = _trunc_shift(a, combo)
        elif op == 7:
            c = _trunc_shift(a, combo)
        else:
            raise ValueError(f"unknown opcode {op}")
        pointer += 2


def _prints_itself(program: Sequence[int], a: int, b: int, c: int) -> bool:
    produced = 0
    for index, value in enumerate(_outputs(program, a, b, c)):
        if index >= len(program) or value != program[index]:
            return False
        produced = index + 1
    return produced == len(program)


def part2(text: str, start: int = 15560381, step: int = 16777216) -> int:
    """Lowest register A of ``start``, ``start + step``, ... making the program print itself.

    The search does not stop until such a value is found.
    """
    computer = load_computer(text)
    program = computer.program
    _, b, c = computer.register
    a = start
    while not _prints_itself(program, a, b, c):
        a += step
    return a