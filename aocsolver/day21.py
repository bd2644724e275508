"""Typing door codes through a chain of robots on directional keypads."""

from __future__ import annotations

from functools import cache
from typing import Mapping

from .c2d import DOWN, LEFT, RIGHT, UP, Coord
from .common import to_int
from .parse import parse_string_list

_HOLE = "-"
_SYMBOLS = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}


def _positions(rows: list[str]) -> dict[str, Coord]:
    return {key: Coord(x, y) for y, row in enumerate(rows) for x, key in enumerate(row)}


NUMERIC_POSITIONS = _positions(["789", "456", "123", "-0A"])
DIRECTIONAL_POSITIONS = _positions(["-^A", "<v>"])

_KEYPADS = {"numeric": NUMERIC_POSITIONS, "directional": DIRECTIONAL_POSITIONS}


def _avoids_hole(start: Coord, moves: list[Coord], hole: Coord) -> bool:
    current = start
    for move in moves:
        current = current + move
        if current == hole:
            return False
    return True


def key_paths(positions: Mapping[str, Coord], start: str, end: str) -> list[str]:
    """Shortest move strings from ``start`` to ``end`` that avoid the gap.

    The horizontal-first path comes before the vertical-first one.
    """
    start_c = positions[start]
    end_c = positions[end]
    hole = positions[_HOLE]
    diff = end_c - start_c
    horizontal = [LEFT if diff.x < 0 else RIGHT] * abs(diff.x)
    vertical = [UP if diff.y < 0 else DOWN] * abs(diff.y)
    candidates = [horizontal + vertical]
    if start_c.x != end_c.x and start_c.y != end_c.y:
        candidates.append(vertical + horizontal)
    return [
        "".join(_SYMBOLS[move] for move in moves)
        for moves in candidates
        if _avoids_hole(start_c, moves, hole)
    ]


@cache
def _cached_paths(keypad: str, start: str, end: str) -> tuple[str, ...]:
    return tuple(key_paths(_KEYPADS[keypad], start, end))


def _sequences(keypad: str, keys: str) -> list[str]:
    sequences: list[str] = []
    previous = "A"
    for index, key in enumerate(keys):
        segments = _cached_paths(keypad, previous, key)
        if index == 0:
            sequences = [segment + "A" for segment in segments]
        else:
            sequences = [
                prefix + segment + "A" for segment in segments for prefix in sequences
            ]
        previous = key
    return sequences


def numeric_sequences(code: str) -> list[str]:
    """Every directional press sequence that types ``code`` on the numeric keypad."""
    return _sequences("numeric", code)


def directional_sequences(sequence: str) -> list[str]:
    """Every directional press sequence that types ``sequence`` on a directional keypad."""
    return _sequences("directional", sequence)


@cache
def min_length(sequence: str, depth: int) -> int:
    """Fewest presses needed to type ``sequence`` through ``depth`` more robots."""
    if depth == 0:
        return len(sequence)
    parts = sequence.split("A")[:-1]
    return sum(
        min(min_length(s, depth - 1) for s in directional_sequences(part + "A"))
        for part in parts
    )


def _complexity(text: str, robots: int) -> int:
    total = 0
    for code in parse_string_list(text, "\n"):
        number = to_int(code.removesuffix("A"))
        shortest = min(min_length(seq, robots) for seq in numeric_sequences(code))
        total += number * shortest
    return total


def part1(text: str) -> int:
    """Sum of code complexities with two robots on directional keypads."""
    return _complexity(text, 2)


def part2(text: str, robots: int = 25) -> int:
    """Sum of code complexities with ``robots`` robots on directional keypads."""
    return _complexity(text, robots)