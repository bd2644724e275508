"""Garden plots: fencing prices of connected plant regions."""

from __future__ import annotations

from .c2d import DOWN, LEFT, RIGHT, UP, Coord
from .parse import parse_rune_grid

_SIDE_WALKS = (
    (LEFT, Coord(0, 1)),
    (RIGHT, Coord(0, 1)),
    (UP, Coord(1, 0)),
    (DOWN, Coord(1, 0)),
)


def _regions(grid: list[list[str]]) -> list[set[Coord]]:
    """Connected groups of equal plants, using the four straight neighbours."""
    len_x, len_y = len(grid[0]), len(grid)
    seen: set[Coord] = set()
    regions: list[set[Coord]] = []
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            start = Coord(x, y)
            if start in seen:
                continue
            region = {start}
            stack = [start]
            while stack:
                current = stack.pop()
                for n in current.neighbours(len_x, len_y):
                    if n not in region and n.x < len(grid[n.y]) and grid[n.y][n.x] == plant:
                        region.add(n)
                        stack.append(n)
            seen |= region
            regions.append(region)
    return regions


def _perimeter(region: set[Coord]) -> int:
    return sum(1 for c in region for n in c.all_neighbours() if n not in region)


def _sides(region: set[Coord]) -> int:
    """Number of straight fence sections around ``region``."""
    sides = 0
    for outward, along in _SIDE_WALKS:
        edges = {c for c in region if c + outward not in region}
        sides += sum(1 for c in edges if c - along not in edges)
    return sides


def part1(text: str) -> int:
    """Sum of area times perimeter over all regions."""
    return sum(len(r) * _perimeter(r) for r in _regions(parse_rune_grid(text)))


def part2(text: str) -> int:
    """Sum of area times number of sides over all regions."""
    return sum(len(r) * _sides(r) for r in _regions(parse_rune_grid(text)))