"""Antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import permutations

from .c2d import Coord
from .parse import parse_rune_grid


def _antennas(grid: list[list[str]]) -> dict[str, list[Coord]]:
    by_frequency: dict[str, list[Coord]] = defaultdict(list)
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != ".":
                by_frequency[char].append(Coord(x, y))
    return by_frequency


def _inside(coord: Coord, width: int, height: int) -> bool:
    return 0 <= coord.x < width and 0 <= coord.y < height


def part1(text: str) -> int:
    """Distinct in-map positions that mirror one antenna over another."""
    grid = parse_rune_grid(text)
    width, height = len(grid[0]), len(grid)
    antinodes: set[Coord] = set()
    for coords in _antennas(grid).values():
        for a1, a2 in permutations(coords, 2):
            for node in (a1 - (a2 - a1), a2 - (a1 - a2)):
                if _inside(node, width, height):
                    antinodes.add(node)
    return len(antinodes)


def part2(text: str) -> int:
    """Distinct positions in line with any antenna pair, antennas included."""
    grid = parse_rune_grid(text)
    width, height = len(grid[0]), len(grid)
    antennas = _antennas(grid)
    antinodes: set[Coord] = set()
    for coords in antennas.values():
        for a1, a2 in permutations(coords, 2):
            for start, diff in ((a1, a2 - a1), (a2, a1 - a2)):
                node = start - diff
                while _inside(node, width, height):
                    antinodes.add(node)
                    node = node - diff
    extra = sum(
        1
        for coords in antennas.values()
        if len(coords) != 1
        for coord in coords
        if coord not in antinodes
    )
    return len(antinodes) + extra