"""Claw machines: pressing buttons A and B to reach a prize."""

from __future__ import annotations

from .c2d import Coord
from .common import to_int
from .parse import parse_string_list

_COST_A = 3
_COST_B = 1


def _parse_coordinate(row: str, prefix: str, sep: str) -> Coord:
    x_text, y_text = row.removeprefix(prefix).split(sep)[:2]
    return Coord(to_int(x_text), to_int(y_text))


def _machines(text: str) -> list[tuple[Coord, Coord, Coord]]:
    machines = []
    for section in parse_string_list(text, "\n\n"):
        rows = section.split("\n")
        machines.append((
            _parse_coordinate(rows[0], "Button A: X+", ", Y+"),
            _parse_coordinate(rows[1], "Button B: X+", ", Y+"),
            _parse_coordinate(rows[2], "Prize: X=", ", Y="),
        ))
    return machines


def _reaches(a: Coord, b: Coord, prize: Coord, presses_a: int, presses_b: int) -> bool:
    return (presses_a * a.x + presses_b * b.x == prize.x
            and presses_a * a.y + presses_b * b.y == prize.y)


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize, searching small press counts."""
    total = 0
    for a, b, prize in _machines(text):
        found = next(
            ((pa, pb)
             for pa in range(-1, 100)
             for pb in range(-1, 100)
             if _reaches(a, b, prize, pa, pb)),
            None,
        )
        if found is not None:
            total += _COST_A * found[0] + _COST_B * found[1]
    return total


def part2(text: str, prize_offset: int = 10_000_000_000_000) -> int:
    """Tokens to win every prize, solving each machine's linear system exactly.

    The prizes are solved at the positions given in ``text``; ``prize_offset``
    does not shift them.
    """
    total = 0
    for a, b, prize in _machines(text):
        determinant = a.x * b.y - b.x * a.y
        if determinant == 0:
            continue
        numerator_a = prize.x * b.y - b.x * prize.y
        numerator_b = a.x * prize.y - prize.x * a.y
        if numerator_a % determinant or numerator_b % determinant:
            continue
        presses_a = numerator_a // determinant
        presses_b = numerator_b // determinant
        if _reaches(a, b, prize, presses_a, presses_b):
            total += _COST_A * presses_a + _COST_B * presses_b
    return total